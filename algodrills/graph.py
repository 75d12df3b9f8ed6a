"""Unweighted graphs: adjacency lists, breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class Graph:
    """Graph on the vertices ``0..v-1`` stored as adjacency lists."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError(f"vertex count must be non-negative, got {v}")
        self._adj: list[list[int]] = [[] for _ in range(v)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise IndexError(f"vertex {node} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, i: int, j: int, undirected: bool = True) -> None:
        """Add an edge from ``i`` to ``j``, and back again when undirected."""
        self._check(i)
        self._check(j)
        self._adj[i].append(j)
        if undirected:
            self._adj[j].append(i)

    def adjacency_lines(self) -> list[str]:
        """One line per vertex in the form ``"i->a,b,"``."""
        return [
            f"{vertex}->" + "".join(f"{nbr}," for nbr in nbrs)
            for vertex, nbrs in enumerate(self._adj)
        ]

    def _bfs_tree(self, source: int) -> tuple[list[int], dict[int, int], dict[int, int]]:
        self._check(source)
        order = []
        parent = {source: source}
        dist = {source: 0}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adj[node]:
                if nbr not in dist:
                    dist[nbr] = dist[node] + 1
                    parent[nbr] = node
                    queue.append(nbr)
        return order, parent, dist

    def bfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in breadth-first order."""
        order, _, _ = self._bfs_tree(source)
        return order

    def dfs(self, source: int) -> list[int]:
        """Vertices reachable from ``source`` in depth-first (preorder) order."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [iter(self._adj[source])]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self._adj[nbr]))
                    break
            else:
                stack.pop()
        return order

    def shortest_distances(self, source: int) -> list[int | None]:
        """Edge count from ``source`` to every vertex; None where unreachable."""
        _, _, dist = self._bfs_tree(source)
        return [dist.get(vertex) for vertex in range(len(self._adj))]

    def shortest_path(self, source: int, dest: int) -> list[int]:
        """A shortest path from ``source`` to ``dest``, both ends included."""
        self._check(dest)
        _, parent, _ = self._bfs_tree(source)
        if dest not in parent:
            raise ValueError(f"vertex {dest} is not reachable from {source}")
        path = [dest]
        while path[-1] != source:
            path.append(parent[path[-1]])
        path.reverse()
        return path


class NamedGraph:
    """Graph whose vertices are identified by names."""

    def __init__(self, names: Iterable[str]) -> None:
        self._adj: dict[str, list[str]] = {name: [] for name in names}

    def _check(self, name: str) -> None:
        if name not in self._adj:
            raise KeyError(name)

    def add_edge(self, x: str, y: str, undirected: bool = False) -> None:
        """Add an edge from ``x`` to ``y``, and back again when undirected."""
        self._check(x)
        self._check(y)
        self._adj[x].append(y)
        if undirected:
            self._adj[y].append(x)

    def adjacency_lines(self) -> list[str]:
        """One line per vertex in the form ``"name -> a, b, "``."""
        return [
            f"{name} -> " + "".join(f"{nbr}, " for nbr in nbrs)
            for name, nbrs in self._adj.items()
        ]