"""Bus route length when passengers on both sides vote on the direction."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _travel(start: int, x: Sequence[int], p: list[int], lo: int, hi: int, at: int) -> int:
    total = 0
    while not (x[hi] <= start or x[lo] >= start):
        if p[lo] < p[hi]:
            p[hi] += p[lo]
            if at == lo:
                total += x[hi] - x[lo]
            lo, at = lo + 1, hi
        else:
            p[lo] += p[hi]
            if at == hi:
                total += x[hi] - x[lo]
            hi, at = hi - 1, lo
    return total + abs(x[at] - start)


def total_distance(start: int, positions: Sequence[int], people: Sequence[int]) -> int:
    """Return the distance travelled; ``positions`` must be strictly increasing."""
    if len(positions) != len(people):
        raise ValueError("positions and people must have equal length")
    if not positions:
        raise ValueError("at least one apartment is required")
    counts = list(people)
    last = len(positions) - 1
    first = _travel(start, positions, counts, 0, last, 0)
    second = _travel(start, positions, counts, 0, last, last)
    return max(first, second)


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, s and the (x, p) pairs (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n, s = nums[0], nums[1]
    pairs = nums[2:2 + 2 * n]
    print(total_distance(s, pairs[0::2], pairs[1::2]))
    return 0