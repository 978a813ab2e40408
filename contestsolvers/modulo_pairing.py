"""Minimise the largest pair value (sum modulo M) over a perfect pairing."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def min_max_ugliness(modulus: int, values: Sequence[int]) -> int:
    """Return the minimal possible maximum of (a + b) mod ``modulus`` over pairs."""
    if len(values) % 2:
        raise ValueError("an even number of values is required")
    a = sorted(values)
    total = len(a)
    half = total // 2

    def upper_pairs(m: int):
        upper = a[2 * m:]
        return zip(upper, reversed(upper))

    def feasible(m: int) -> bool:
        return all(x + y >= modulus for x, y in upper_pairs(m))

    lo, hi = -1, half
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if feasible(mid):
            hi = mid
        else:
            lo = mid
    wrapped = max((x + y for x, y in upper_pairs(hi)), default=0)
    lower = a[:2 * hi]
    plain = max((x + y for x, y in zip(lower, reversed(lower))), default=0)
    return max(wrapped - modulus, plain)


def main(argv: Sequence[str] | None = None) -> int:
    """Read N, M and the 2N values (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n, m = nums[0], nums[1]
    print(min_max_ugliness(m, nums[2:2 + 2 * n]))
    return 0