"""Decide whether a blue tree can be rebuilt into a red tree by path swaps."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

_BASE = 10**6
_INF = 10**15


class _MinAddTree:
    """Range-add segment tree with a global minimum and leftmost-biased descent."""

    def __init__(self, size: int) -> None:
        self._n = size
        self._min = [0] * (4 * size)
        self._lazy = [0] * (4 * size)

    @property
    def minimum(self) -> int:
        return self._min[1]

    def _apply(self, node: int, value: int) -> None:
        self._min[node] += value
        self._lazy[node] += value

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._apply(2 * node, pending)
            self._apply(2 * node + 1, pending)
            self._lazy[node] = 0

    def add(self, lo: int, hi: int, value: int) -> None:
        """Add ``value`` to every position in the inclusive range ``lo..hi``."""
        if lo > hi:
            return
        self._add(lo, hi, value, 1, 0, self._n - 1)

    def _add(self, lo: int, hi: int, value: int, node: int, left: int, right: int) -> None:
        if lo <= left and right <= hi:
            self._apply(node, value)
            return
        self._push(node)
        mid = (left + right) // 2
        if lo <= mid:
            self._add(lo, hi, value, 2 * node, left, mid)
        if hi > mid:
            self._add(lo, hi, value, 2 * node + 1, mid + 1, right)
        self._min[node] = min(self._min[2 * node], self._min[2 * node + 1])

    def argmin(self) -> int:
        """Position holding the minimum; ties go to the right half."""
        node, left, right = 1, 0, self._n - 1
        while left < right:
            self._push(node)
            mid = (left + right) // 2
            if self._min[2 * node] < self._min[2 * node + 1]:
                node, right = 2 * node, mid
            else:
                node, left = 2 * node + 1, mid + 1
        return left


class _BlueTree:
    """Heavy-light decomposition of the blue tree rooted at vertex 1."""

    def __init__(self, n: int, edges: Sequence[tuple[int, int]]) -> None:
        if n < 1:
            raise ValueError("the tree needs at least one vertex")
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        adj: list[list[int]] = [[] for _ in range(n + 1)]
        for u, v in edges:
            _check_vertex(u, n)
            _check_vertex(v, n)
            adj[u].append(v)
            adj[v].append(u)

        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[1] = True
        order = [1]
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    order.append(v)
        if len(order) != n:
            raise ValueError("blue edges do not form a tree")

        size = [1] * (n + 1)
        heavy = [0] * (n + 1)
        for u in reversed(order[1:]):
            size[parent[u]] += size[u]
        for u in order:
            children = [v for v in adj[u] if parent[v] == u and v != 1]
            if children:
                heavy[u] = max(children, key=size.__getitem__)

        head = [0] * (n + 1)
        pos = [0] * (n + 1)
        head[1] = 1
        stack = [1]
        counter = 0
        while stack:
            u = stack.pop()
            pos[u] = counter
            counter += 1
            for v in adj[u]:
                if parent[v] == u and v != 1 and v != heavy[u]:
                    head[v] = v
                    stack.append(v)
            if heavy[u]:
                head[heavy[u]] = head[u]
                stack.append(heavy[u])

        self.parent = parent
        self.depth = depth
        self.head = head
        self.pos = pos

    def path_ranges(self, a: int, b: int) -> Iterator[tuple[int, int]]:
        """Inclusive position ranges of the edges on the path from ``a`` to ``b``."""
        head, parent, depth, pos = self.head, self.parent, self.depth, self.pos
        while head[a] != head[b]:
            if depth[head[a]] < depth[head[b]]:
                a, b = b, a
            yield pos[head[a]], pos[a]
            a = parent[head[a]]
        if depth[a] > depth[b]:
            a, b = b, a
        if a != b:
            yield pos[a] + 1, pos[b]


def _check_vertex(v: int, n: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} is outside 1..{n}")


def can_transform(
    n: int,
    blue_edges: Sequence[tuple[int, int]],
    red_edges: Sequence[tuple[int, int]],
) -> bool:
    """Return True if the blue tree can be turned into the red tree."""
    tree = _BlueTree(n, blue_edges)
    if len(red_edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    red = []
    for a, b in red_edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        red.append((a, b))

    seg = _MinAddTree(n)

    def cover(ident: int, sign: int) -> None:
        a, b = red[ident - 1]
        for lo, hi in tree.path_ranges(a, b):
            seg.add(lo, hi, sign * (_BASE + ident))

    for ident in range(1, n):
        cover(ident, 1)
    for _ in range(n - 1):
        while seg.minimum == 0:
            spot = seg.argmin()
            seg.add(spot, spot, _INF)
        low = seg.minimum
        if low >= 2 * _BASE:
            return False
        cover(low - _BASE, -1)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Read n, the blue edges and the red edges (from ``argv`` tokens or stdin)."""
    tokens = list(argv) if argv is not None else sys.stdin.read().split()
    nums = [int(t) for t in tokens]
    n = nums[0]
    flat_blue = nums[1:1 + 2 * (n - 1)]
    flat_red = nums[1 + 2 * (n - 1):1 + 4 * (n - 1)]
    blue = list(zip(flat_blue[0::2], flat_blue[1::2]))
    red = list(zip(flat_red[0::2], flat_red[1::2]))
    print("YES" if can_transform(n, blue, red) else "NO")
    return 0