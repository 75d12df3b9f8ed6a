"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from typing import Iterable, Sequence

from algodrills.dsu import DisjointSet


def kruskal_mst(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest of vertices ``0..n-1``.

    ``edges`` holds ``(x, y, w)`` triples.
    """
    sets = DisjointSet(n)
    total = 0
    for w, x, y in sorted((w, x, y) for x, y, w in edges):
        if sets.unite(x, y):
            total += w
    return total


def prims_mst(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning tree of the component holding vertex 0.

    ``edges`` holds ``(x, y, w)`` triples on vertices ``0..n-1``.
    """
    if n < 1:
        raise ValueError(f"graph needs at least one vertex, got {n}")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for x, y, w in edges:
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"edge ({x}, {y}) names a vertex outside 0..{n - 1}")
        adj[x].append((y, w))
        adj[y].append((x, w))
    visited = [False] * n
    total = 0
    heap = [(0, 0)]
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for nbr, w in adj[node]:
            if not visited[nbr]:
                heapq.heappush(heap, (w, nbr))
    return total