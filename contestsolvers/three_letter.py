"""Minimum total cyclic shifting to turn one A/B/C string into another."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_M = 3
_LETTERS = "ABC"


def _codes(text: str) -> list[int]:
    try:
        return [_LETTERS.index(ch) for ch in text]
    except ValueError:
        raise ValueError(f"string must use only A, B and C: {text!r}") from None


def min_operations(s: str, t: str) -> int:
    """Return the minimum cost computed for strings ``s`` and ``t``."""
    if len(s) != len(t):
        raise ValueError("strings must have equal length")
    a = _codes(s)
    b = _codes(t)
    if not a:
        return 0
    c = [a[0] - b[0]]
    for i in range(1, len(a)):
        b[i] += (b[i - 1] // _M) * _M
        if b[i] > b[i - 1] and a[i] < a[i - 1]:
            b[i] -= _M
        elif b[i] < b[i - 1] and a[i] > a[i - 1]:
            b[i] += _M
        c.append(a[i] - b[i])

    def cost(x: int) -> int:
        return sum(abs(ci + x * _M) for ci in c)

    targets = sorted(-ci for ci in c)
    median = targets[len(targets) // 2]
    centre = median // _M
    return min(cost(x) for x in range(centre - 2, centre + 3))


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, s and t (from ``argv`` tokens or stdin) and print the answer."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    print(min_operations(tokens[1], tokens[2]))
    return 0