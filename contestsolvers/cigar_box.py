"""Count move sequences that turn the identity into a given permutation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MOD = 998244353


def count_sequences(values: Sequence[int], moves: int) -> int:
    """Count sequences of ``moves`` front/back moves yielding ``values``, mod ``MOD``.

    Each move takes one element and puts it at the front or the back.
    """
    if moves < 0:
        raise ValueError("the number of moves cannot be negative")
    n = len(values)

    fact = [1] * (n + 1)
    for i in range(1, n + 1):
        fact[i] = fact[i - 1] * i % MOD
    inv_fact = [pow(f, MOD - 2, MOD) for f in fact]

    def binom(top: int, r: int) -> int:
        if r < 0 or top < r:
            return 0
        return fact[top] * inv_fact[top - r] % MOD * inv_fact[r] % MOD

    dp = [0] * (n + 2)
    dp[n] = 1
    for _ in range(moves):
        dp = (
            [0]
            + [
                (dp[size + 1] + dp[size] * 2 * (n - size + (size == 1))) % MOD
                for size in range(1, n + 1)
            ]
            + [0]
        )

    run_end = list(range(n))
    for i in reversed(range(n - 1)):
        if values[i + 1] > values[i]:
            run_end[i] = run_end[i + 1]

    total = 0
    for start, end in enumerate(run_end):
        for stop in range(start, end + 1):
            length = stop - start + 1
            total = (total + dp[length] * binom(n - length, start)) % MOD
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, m and the permutation (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n, m = nums[0], nums[1]
    print(count_sequences(nums[2:2 + n], m))
    return 0