"""Dynamic programming classics: frog jumps, knapsack and vacation planning."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence


def _require_stones(heights: Sequence[int]) -> tuple[int, ...]:
    stones = tuple(heights)
    if not stones:
        raise ValueError("at least one stone is required")
    return stones


def frog1(heights: Sequence[int]) -> int:
    """Least total cost to reach the last stone jumping one or two stones at a time."""
    h = _require_stones(heights)
    cost = [0] * len(h)
    for i in range(1, len(h)):
        cost[i] = cost[i - 1] + abs(h[i] - h[i - 1])
        if i >= 2:
            cost[i] = min(cost[i], cost[i - 2] + abs(h[i] - h[i - 2]))
    return cost[-1]


def frog1_memo(heights: Sequence[int]) -> int:
    """Same answer as :func:`frog1`, computed top-down with memoisation."""
    h = _require_stones(heights)

    @lru_cache(maxsize=None)
    def best(i: int) -> int:
        if i == 0:
            return 0
        cost = abs(h[i] - h[i - 1]) + best(i - 1)
        if i >= 2:
            cost = min(cost, abs(h[i] - h[i - 2]) + best(i - 2))
        return cost

    # Warm the cache in order so the recursion never goes deep.
    for i in range(len(h)):
        best(i)
    return best(len(h) - 1)


def frog2(heights: Sequence[int], k: int) -> int:
    """Least total cost to reach the last stone jumping up to ``k`` stones at a time."""
    if k < 1:
        raise ValueError(f"jump length must be at least 1, got {k}")
    h = _require_stones(heights)
    cost = [0] * len(h)
    for i in range(1, len(h)):
        cost[i] = min(
            cost[j] + abs(h[i] - h[j]) for j in range(max(0, i - k), i)
        )
    return cost[-1]


def knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Largest total value of items, given as (weight, value), fitting in ``capacity``."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError(f"item weight must be non-negative, got {weight}")
        if weight == 0:
            if value > 0:
                best = [b + value for b in best]
            continue
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def vacation(days: Iterable[tuple[int, int, int]]) -> int:
    """Most happiness over the days when no activity is done on two days in a row."""
    schedule = iter(days)
    try:
        a, b, c = next(schedule)
    except StopIteration:
        raise ValueError("at least one day is required") from None
    for x, y, z in schedule:
        a, b, c = x + max(b, c), y + max(a, c), z + max(a, b)
    return max(a, b, c)