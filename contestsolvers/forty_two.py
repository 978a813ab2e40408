"""Longest chain length over values shifted by 42."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from bisect import bisect_left

_NEG = float("-inf")


class _MaxTree:
    """Point-raise, range-max segment tree."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._t = [_NEG] * (2 * size)

    def raise_to(self, pos: int, value: float) -> None:
        p = pos + self._size
        if self._t[p] > value:
            return
        self._t[p] = value
        while p > 1:
            self._t[p >> 1] = max(self._t[p], self._t[p ^ 1])
            p >>= 1

    def query(self, lo: int, hi: int) -> float:
        res = _NEG
        lo += self._size
        hi += self._size
        while lo < hi:
            if lo & 1:
                res = max(res, self._t[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                res = max(res, self._t[hi])
            lo >>= 1
            hi >>= 1
        return res


def longest_chain(values: Sequence[int]) -> int:
    """Return the largest chain length ``t`` reachable with a nonnegative state."""
    n = len(values)
    shifted = [v - 42 for v in values]
    ordered = sorted(shifted)
    ranks = [bisect_left(ordered, v) for v in shifted]
    size = n + 2
    low = [_MaxTree(size) for _ in range(n + 1)]
    high = [_MaxTree(size) for _ in range(n + 1)]
    best = 0
    for rank in ranks:
        x = ordered[rank]
        if x < 0:
            continue
        dp = [_NEG] * (n + 1)
        dp[1] = x
        for t in range(2, n + 1):
            dp[t] = max(
                low[t - 1].query(0, rank + 1),
                high[t - 1].query(rank, n + 1) + x,
            )
        for t in range(1, n + 1):
            if dp[t] < 0:
                continue
            low[t].raise_to(rank, dp[t])
            high[t].raise_to(rank, dp[t] - x)
            best = max(best, t)
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read n and the values (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    print(longest_chain(nums[1:1 + nums[0]]))
    return 0