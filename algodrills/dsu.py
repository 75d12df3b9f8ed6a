"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

from typing import Iterable, Sequence


class DisjointSet:
    """Partition of the elements ``0..n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        s1, s2 = self.find(x), self.find(y)
        if s1 == s2:
            return False
        if self._size[s1] < self._size[s2]:
            s1, s2 = s2, s1
        self._parent[s2] = s1
        self._size[s1] += self._size[s2]
        return True

    def connected(self, x: int, y: int) -> bool:
        """True when ``x`` and ``y`` lie in the same set."""
        return self.find(x) == self.find(y)


def connectivity_queries(queries: Iterable[Sequence[int]]) -> list[bool]:
    """Answer ``(op, u, v)`` queries: op 1 joins u and v, any other op asks
    whether they are joined. Returns the answers in order."""
    batch = [tuple(q) for q in queries]
    for _, u, v in batch:
        if u < 0 or v < 0:
            raise ValueError(f"nodes must be non-negative, got ({u}, {v})")
    size = 1 + max((max(u, v) for _, u, v in batch), default=-1)
    sets = DisjointSet(size)
    answers = []
    for op, u, v in batch:
        if op == 1:
            sets.unite(u, v)
        else:
            answers.append(sets.connected(u, v))
    return answers