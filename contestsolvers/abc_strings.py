"""Count A/B/C strings avoiding ABC, BCA and CAB as substrings."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MOD = 998244353


def count_strings(a: int, b: int, c: int) -> int:
    """Count strings with ``a`` A's, ``b`` B's, ``c`` C's and no forbidden block."""
    if min(a, b, c) < 0:
        raise ValueError("letter counts cannot be negative")
    total = a + b + c

    fact = [1] * (total + 1)
    for i in range(1, total + 1):
        fact[i] = fact[i - 1] * i % MOD
    inv_fact = [1] * (total + 1)
    inv_fact[total] = pow(fact[total], MOD - 2, MOD)
    for i in range(total, 0, -1):
        inv_fact[i - 1] = inv_fact[i] * i % MOD

    def binom(top: int, r: int) -> int:
        if top < 0 or r < 0 or top < r:
            return 0
        return fact[top] * inv_fact[r] % MOD * inv_fact[top - r] % MOD

    def stars(items: int, bins: int) -> int:
        return binom(items + bins - 1, bins - 1)

    def multinomial(x: int, y: int, z: int) -> int:
        return fact[x + y + z] * inv_fact[x] % MOD * inv_fact[y] % MOD * inv_fact[z] % MOD

    answer = multinomial(a, b, c)
    for i in range(1, min(a, b, c) + 1):
        term = stars(total - 3 * i, i) * pow(2, i - 1, MOD) * 3
        term += stars(total - 3 * i - 1, i + 1) * pow(2, i, MOD)
        if i % 2:
            term = -term
        answer = (answer + term * multinomial(a - i, b - i, c - i)) % MOD
    return answer % MOD


def main(argv: Sequence[str] | None = None) -> int:
    """Read A, B and C (from ``argv`` tokens or stdin) and print the count."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    a, b, c = (int(t) for t in tokens[:3])
    print(count_strings(a, b, c))
    return 0