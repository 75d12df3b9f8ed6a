"""Single-source shortest paths: Bellman-Ford and Dijkstra."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(n: int, src: int, edges: Iterable[Sequence[int]]) -> list[int | None]:
    """Distances from ``src`` over directed weighted edges ``(u, v, w)``.

    The result is indexed by node ``0..n``; unreachable nodes hold None.
    Raises :class:`NegativeCycleError` if a reachable negative cycle exists.
    """
    if n < 0:
        raise ValueError(f"node count must be non-negative, got {n}")
    edge_list = [tuple(e) for e in edges]
    for u, v, _ in edge_list:
        if not (0 <= u <= n and 0 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a node outside 0..{n}")
    if not 0 <= src <= n:
        raise ValueError(f"source {src} is outside 0..{n}")
    dist: list[int | None] = [None] * (n + 1)
    dist[src] = 0

    def relax() -> bool:
        changed = False
        for u, v, w in edge_list:
            du = dist[u]
            if du is not None and (dist[v] is None or du + w < dist[v]):
                dist[v] = du + w
                changed = True
        return changed

    for _ in range(n - 1):
        if not relax():
            break
    for u, v, w in edge_list:
        du = dist[u]
        if du is not None and (dist[v] is None or du + w < dist[v]):
            raise NegativeCycleError("negative cycle is reachable from the source")
    return dist


class WeightedGraph:
    """Graph on vertices ``0..v-1`` with non-negative edge weights."""

    def __init__(self, v: int) -> None:
        if v < 0:
            raise ValueError(f"vertex count must be non-negative, got {v}")
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(v)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise IndexError(f"vertex {node} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, x: int, y: int, w: int, undirected: bool = True) -> None:
        """Add an edge of weight ``w`` from ``x`` to ``y``, and back when undirected."""
        self._check(x)
        self._check(y)
        if w < 0:
            raise ValueError(f"edge weight must be non-negative, got {w}")
        self._adj[x].append((w, y))
        if undirected:
            self._adj[y].append((w, x))

    def dijkstra(self, src: int) -> list[int | None]:
        """Distance from ``src`` to every vertex; None where unreachable."""
        self._check(src)
        dist: list[int | None] = [None] * len(self._adj)
        dist[src] = 0
        heap = [(0, src)]
        while heap:
            so_far, node = heapq.heappop(heap)
            if so_far != dist[node]:
                continue
            for weight, nbr in self._adj[node]:
                candidate = so_far + weight
                current = dist[nbr]
                if current is None or candidate < current:
                    dist[nbr] = candidate
                    heapq.heappush(heap, (candidate, nbr))
        return dist

    def shortest_distance(self, src: int, dest: int) -> int:
        """Distance from ``src`` to ``dest``; ValueError if unreachable."""
        self._check(dest)
        result = self.dijkstra(src)[dest]
        if result is None:
            raise ValueError(f"vertex {dest} is not reachable from {src}")
        return result