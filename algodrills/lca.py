"""Cycle detection and lowest common ancestors in undirected trees."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for x, y in edges:
        if not (1 <= x <= n and 1 <= y <= n):
            raise ValueError(f"edge ({x}, {y}) names a node outside 1..{n}")
        adj[x].append(y)
        adj[y].append(x)
    return adj


def has_cycle(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """True when the undirected graph on nodes ``1..n`` contains a cycle.

    Self-loops and repeated edges count as cycles.
    """
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")
    adj = _adjacency(n, edges)
    visited = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, 0, iter(adj[start]))]
        while stack:
            node, parent, nbrs = stack[-1]
            for nbr in nbrs:
                if not visited[nbr]:
                    visited[nbr] = True
                    stack.append((nbr, node, iter(adj[nbr])))
                    break
                if nbr != parent:
                    return True
            else:
                stack.pop()
    return False


def _rooted_tree(
    n: int, edges: Sequence[Sequence[int]], root: int
) -> tuple[list[int], list[int]]:
    """Parent (0 above the root) and depth of every node of a tree on ``1..n``."""
    if n < 1:
        raise ValueError(f"tree needs at least one node, got {n}")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    if not 1 <= root <= n:
        raise ValueError(f"root {root} is outside 1..{n}")
    adj = _adjacency(n, edges)
    parent = [0] * (n + 1)
    depth = [0] * (n + 1)
    seen = {root}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for nbr in adj[node]:
            if nbr not in seen:
                seen.add(nbr)
                parent[nbr] = node
                depth[nbr] = depth[node] + 1
                queue.append(nbr)
    if len(seen) != n:
        raise ValueError("edges do not connect all nodes")
    return parent, depth


class _RootedTree:
    def __init__(self, n: int, edges: Sequence[Sequence[int]], root: int) -> None:
        self._n = n
        self._root = root
        self._parent, self._depth = _rooted_tree(n, edges, root)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self._n:
            raise IndexError(f"node {node} is outside 1..{self._n}")


class ParentPointerLCA(_RootedTree):
    """Lowest common ancestor by climbing parent pointers one step at a time."""

    def __init__(self, n: int, edges: Sequence[Sequence[int]], root: int = 1) -> None:
        super().__init__(n, edges, root)

    def lca(self, u: int, v: int) -> int:
        """Deepest node that is an ancestor of both ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        for _ in range(self._depth[u] - self._depth[v]):
            u = self._parent[u]
        while u != v:
            u = self._parent[u]
            v = self._parent[v]
        return u


class BinaryLiftingLCA(_RootedTree):
    """Lowest common ancestor in logarithmic time using a table of 2^j-th ancestors."""

    def __init__(self, n: int, edges: Sequence[Sequence[int]], root: int = 1) -> None:
        super().__init__(n, edges, root)
        levels = max(1, n.bit_length())
        self._up = [self._parent]
        for _ in range(1, levels):
            prev = self._up[-1]
            self._up.append([prev[prev[node]] for node in range(n + 1)])

    def lca(self, u: int, v: int) -> int:
        """Deepest node that is an ancestor of both ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        diff = self._depth[u] - self._depth[v]
        for j, ancestors in enumerate(self._up):
            if diff >> j & 1:
                u = ancestors[u]
        if u == v:
            return u
        for ancestors in reversed(self._up):
            if ancestors[u] != ancestors[v]:
                u = ancestors[u]
                v = ancestors[v]
        return self._parent[u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        common = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[common]