"""Minimum inversion count of a 0/1-labelled rooted tree flattened parent-first."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Sequence

_INF = 1e18


def _check(parents: Sequence[int], values: Sequence[int]) -> int:
    n = len(values)
    if n == 0:
        raise ValueError("tree must have at least one node")
    if len(parents) != n - 1:
        raise ValueError("expected one parent for every node except the root")
    for child, parent in enumerate(parents, start=2):
        if not 1 <= parent <= n or parent == child:
            raise ValueError(f"invalid parent {parent} for node {child}")
    return n


def inversions_by_union(parents: Sequence[int], values: Sequence[int]) -> int:
    """Greedy merge of groups into their parents, lowest ones/zeros ratio first.

    ``parents`` holds the 1-based parent of nodes 2..n; ``values`` the labels.
    """
    n = _check(parents, values)
    parent_of = [-1] + [p - 1 for p in parents]
    leader = list(range(n))
    ones = [1 if v else 0 for v in values]
    zeros = [0 if v else 1 for v in values]

    def find(x: int) -> int:
        root = x
        while leader[root] != root:
            root = leader[root]
        while leader[x] != root:
            leader[x], x = root, leader[x]
        return root

    def ratio(x: int) -> float:
        return _INF if zeros[x] == 0 else ones[x] / zeros[x]

    heap = [(ratio(i), i) for i in range(n)]
    heapq.heapify(heap)
    visited = [False] * n
    total = 0
    while heap:
        _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        if parent_of[u] != -1:
            target = find(parent_of[u])
            src = find(u)
            total += ones[target] * zeros[src]
            ones[target] += ones[src]
            zeros[target] += zeros[src]
            leader[src] = target
            heapq.heappush(heap, (ratio(target), target))
    return total


class _Block:
    __slots__ = ("zero", "one")

    def __init__(self, zero: int, one: int) -> None:
        self.zero = zero
        self.one = one

    def __lt__(self, other: "_Block") -> bool:
        return self.one * other.zero < self.zero * other.one


def inversions_by_merging(parents: Sequence[int], values: Sequence[int]) -> int:
    """Same answer via small-to-large merging of ordered block sets."""
    n = _check(parents, values)
    children: list[list[int]] = [[] for _ in range(n)]
    for child, parent in enumerate(parents, start=1):
        children[parent - 1].append(child)

    order: list[int] = []
    stack = [0]
    while stack:
        u = stack.pop()
        order.append(u)
        stack.extend(children[u])

    heaps: list[list[_Block]] = [[] for _ in range(n)]
    total = 0
    for u in reversed(order):
        mine = heaps[u]
        for c in children[u]:
            other = heaps[c]
            if len(mine) < len(other):
                mine, other = other, mine
            for block in other:
                heapq.heappush(mine, block)
            heaps[c] = []
        now = _Block(0, 1) if values[u] else _Block(1, 0)
        while mine and not now < mine[0]:
            head = heapq.heappop(mine)
            total += now.one * head.zero
            now.zero += head.zero
            now.one += head.one
        heapq.heappush(mine, now)
        heaps[u] = mine

    ones_seen = 0
    root = heaps[0]
    while root:
        block = heapq.heappop(root)
        total += ones_seen * block.zero
        ones_seen += block.one
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, the parents and the labels (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n = nums[0]
    parents = nums[1:n]
    values = nums[n:2 * n]
    print(inversions_by_union(parents, values))
    return 0