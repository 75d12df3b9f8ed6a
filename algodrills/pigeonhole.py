"""Problems settled by the pigeonhole principle and by counting over tree edges."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence


def divisible_subset(nums: Sequence[int]) -> list[int]:
    """1-based indices of a contiguous run whose sum is divisible by ``len(nums)``.

    Among the ``n + 1`` prefix sums two share a remainder modulo ``n``, so a
    run always exists; the first one found is returned.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("at least one number is required")
    first_seen = {0: 0}
    prefix = 0
    for end, value in enumerate(nums, start=1):
        prefix = (prefix + value) % n
        if prefix in first_seen:
            return list(range(first_seen[prefix] + 1, end + 1))
        first_seen[prefix] = end
    raise RuntimeError("pigeonhole guarantee violated")


def holi_max_distance(n: int, edges: Sequence[tuple[int, int, int]]) -> int:
    """Largest total distance travelled when every node of a weighted tree moves
    to a distinct other node.

    Nodes are numbered ``1..n``; ``edges`` holds ``(u, v, weight)`` triples.
    """
    if n < 1:
        raise ValueError(f"tree needs at least one node, got {n}")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a node outside 1..{n}")
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))

    parent: dict[int, int | None] = {1: None}
    weight_up: dict[int, int] = {}
    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for nbr, w in adjacency[node]:
            if nbr in parent:
                continue
            parent[nbr] = node
            weight_up[nbr] = w
            stack.append(nbr)
    if len(order) != n:
        raise ValueError("edges do not connect all nodes")

    size = dict.fromkeys(order, 1)
    total = 0
    for node in reversed(order):
        up = parent[node]
        if up is None:
            continue
        total += 2 * min(size[node], n - size[node]) * weight_up[node]
        size[up] += size[node]
    return total