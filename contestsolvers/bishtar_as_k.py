"""Count distinct orders with the pairing rule relative to K, modulo 998244353."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Sequence
from math import factorial

MOD = 998244353


def count_orders(values: Sequence[int], k: int) -> int:
    """Return the count of arrangements of ``values`` modulo ``MOD``."""
    a = sorted(2 * v - k for v in values)
    left, right = 0, len(a) - 1
    slots, ans = 1, 1
    while left <= right:
        if a[left] + a[right] >= 0:
            ans = ans * slots % MOD
            slots += 1
            right -= 1
        else:
            ans = ans * slots % MOD
            slots -= 1
            left += 1
    for run in Counter(a).values():
        ans = ans * pow(factorial(run) % MOD, MOD - 2, MOD) % MOD
    return ans


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, k and the values (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n, k = nums[0], nums[1]
    print(count_orders(nums[2:2 + n], k))
    return 0