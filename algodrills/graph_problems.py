"""Graph puzzles: word search, tree eccentricities, BFS checks, word ladders."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field
from string import ascii_lowercase
from typing import Iterable, Sequence

_NEIGHBOURS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    word: str | None = None


class Trie:
    """Prefix tree holding a set of words."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def add_word(self, word: str) -> None:
        """Insert ``word`` into the tree."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.word = word

    def _node(self, prefix: str) -> _TrieNode | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._node(word)
        return node is not None and node.word is not None


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> set[str]:
    """Words spelt by paths of neighbouring cells (eight directions), no cell reused."""
    trie = Trie()
    for word in words:
        trie.add_word(word)
    grid = [list(row) for row in board]
    found: set[str] = set()
    visited: set[tuple[int, int]] = set()

    def walk(node: _TrieNode, i: int, j: int) -> None:
        child = node.children.get(grid[i][j])
        if child is None:
            return
        visited.add((i, j))
        if child.word is not None:
            found.add(child.word)
        for di, dj in _NEIGHBOURS:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(grid) and 0 <= nj < len(grid[ni]) and (ni, nj) not in visited:
                walk(child, ni, nj)
        visited.discard((i, j))

    for i, row in enumerate(grid):
        for j in range(len(row)):
            walk(trie._root, i, j)
    return found


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> defaultdict[int, list[int]]:
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a node outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def tree_distances(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """For each node ``1..n``, the distance to the farthest node reachable from it."""
    adj = _adjacency(n, edges)
    result = []
    for start in range(1, n + 1):
        dist = {start: 0}
        queue = deque([start])
        farthest = 0
        while queue:
            node = queue.popleft()
            farthest = max(farthest, dist[node])
            for nbr in adj[node]:
                if nbr not in dist:
                    dist[nbr] = dist[node] + 1
                    queue.append(nbr)
        result.append(farthest)
    return result


def is_valid_bfs(n: int, sequence: Sequence[int], edges: Sequence[Sequence[int]]) -> bool:
    """True when ``sequence`` is a breadth-first order of the tree starting at node 1."""
    if n < 1:
        raise ValueError(f"tree needs at least one node, got {n}")
    if len(sequence) != n:
        raise ValueError("sequence must list every node exactly once")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adj = _adjacency(n, edges)
    if sequence[0] != 1:
        return False
    visited = {1}
    queue = deque([1])
    pos = 1
    while queue:
        node = queue.popleft()
        fresh = {nbr for nbr in adj[node] if nbr not in visited}
        visited |= fresh
        while fresh:
            candidate = sequence[pos]
            if candidate not in fresh:
                return False
            fresh.remove(candidate)
            queue.append(candidate)
            pos += 1
    return True


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Words in the shortest one-letter-at-a-time chain, or 0 if there is none."""
    remaining = set(word_list)
    frontier = [begin_word]
    level = 0
    while frontier:
        level += 1
        following = []
        for word in frontier:
            if word == end_word:
                return level
            for pos in range(len(word)):
                for letter in ascii_lowercase:
                    candidate = word[:pos] + letter + word[pos + 1:]
                    if candidate in remaining:
                        following.append(candidate)
                        remaining.discard(candidate)
        frontier = following
    return 0