"""Classic problems solved with bitwise reasoning."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache, reduce
from operator import xor
from typing import Iterator, Sequence

_WORD_BITS = 32


def range_bitwise_and(left: int, right: int) -> int:
    """Bitwise AND of every integer in ``[left, right]``."""
    if left < 0 or right < left:
        raise ValueError("require 0 <= left <= right")
    shift = 0
    while left != right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def count_triplets(nums: Sequence[int]) -> int:
    """Count index triples (i, j, k) whose values AND to zero."""
    pair_ands = Counter(a & b for a in nums for b in nums)
    return sum(
        count
        for value, count in pair_ands.items()
        for num in nums
        if num & value == 0
    )


def matrix_score(grid: Sequence[Sequence[int]]) -> int:
    """Highest sum of row values after toggling any rows and columns."""
    if not grid or not grid[0]:
        raise ValueError("grid must be non-empty")
    rows = [list(row) if row[0] else [b ^ 1 for b in row] for row in grid]
    n, m = len(rows), len(rows[0])
    score = n << (m - 1)
    for j, column in enumerate(zip(*rows)):
        if j == 0:
            continue
        ones = sum(column)
        score += max(ones, n - ones) << (m - j - 1)
    return score


def total_hamming_distance(nums: Sequence[int]) -> int:
    """Sum of Hamming distances over all pairs of 32-bit integers."""
    n = len(nums)
    total = 0
    for bit in range(_WORD_BITS):
        ones = sum(1 for num in nums if (num >> bit) & 1)
        total += ones * (n - ones)
    return total


def tsp(dist: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest tour starting and ending at city 0."""
    n = len(dist)
    if n == 0:
        raise ValueError("distance matrix must be non-empty")
    everyone = (1 << n) - 1

    @lru_cache(maxsize=None)
    def best(visited: int, city: int) -> int:
        if visited == everyone:
            return dist[city][0]
        return min(
            dist[city][nxt] + best(visited | (1 << nxt), nxt)
            for nxt in range(n)
            if not visited & (1 << nxt)
        )

    return best(1, 0)


def unique_number(arr: Sequence[int]) -> int:
    """The one value that appears once when all others appear twice."""
    return reduce(xor, arr, 0)


def unique_pair(arr: Sequence[int]) -> tuple[int, int]:
    """The two values that appear once when all others appear twice.

    The first returned value is the one holding the lowest bit in which the
    two differ.
    """
    combined = unique_number(arr)
    if combined == 0:
        raise ValueError("no two distinct unique values present")
    mask = combined & -combined
    with_bit = reduce(xor, (x for x in arr if x & mask), 0)
    return with_bit, combined ^ with_bit


def unique_among_triples(arr: Sequence[int]) -> int:
    """The one 32-bit value that appears once when all others appear thrice."""
    result = 0
    for bit in range(_WORD_BITS):
        if sum((x >> bit) & 1 for x in arr) % 3:
            result |= 1 << bit
    if result >= 1 << (_WORD_BITS - 1):
        result -= 1 << _WORD_BITS
    return result


def subsequences(s: str) -> Iterator[str]:
    """Yield every subsequence of ``s``, ordered by the bitmask that picks it."""
    for mask in range(1 << len(s)):
        yield "".join(ch for pos, ch in enumerate(s) if mask >> pos & 1)