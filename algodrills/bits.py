"""Single-integer bit manipulation helpers."""

from __future__ import annotations

from typing import Iterable

_WORD_MASK = 0xFFFFFFFF


def _check_position(i: int) -> None:
    if i < 0:
        raise ValueError(f"bit position must be non-negative, got {i}")


def _popcount32(n: int) -> int:
    """Number of set bits in the 32-bit two's complement form of ``n``."""
    return bin(n & _WORD_MASK).count("1")


def is_odd(n: int) -> bool:
    """Return True when the lowest bit of ``n`` is set."""
    return n & 1 == 1


def get_ith_bit(n: int, i: int) -> int:
    """Return bit ``i`` of ``n`` as 0 or 1."""
    _check_position(i)
    return 1 if n & (1 << i) else 0


def clear_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    _check_position(i)
    return n & ~(1 << i)


def set_ith_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set."""
    _check_position(i)
    return n | (1 << i)


def update_ith_bit(n: int, i: int, v: int) -> int:
    """Return ``n`` with bit ``i`` replaced by ``v`` (0 or 1)."""
    if v not in (0, 1):
        raise ValueError(f"bit value must be 0 or 1, got {v}")
    return clear_ith_bit(n, i) | (v << i)


def clear_last_i_bits(n: int, i: int) -> int:
    """Return ``n`` with its lowest ``i`` bits cleared."""
    _check_position(i)
    return n & (-1 << i)


def clear_range(n: int, i: int, j: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` (inclusive) cleared."""
    _check_position(i)
    _check_position(j)
    high = ~0 << (j + 1)
    low = (1 << i) - 1
    return n & (high | low)


def replace_bits(n: int, i: int, j: int, m: int) -> int:
    """Return ``n`` with bits ``i`` through ``j`` replaced by the bits of ``m``."""
    return clear_range(n, i, j) | (m << i)


def count_bits(n: int) -> int:
    """Count the set bits of a positive integer; zero or negative gives 0."""
    if n <= 0:
        return 0
    return bin(n).count("1")


def count_bits_kernighan(n: int) -> int:
    """Count set bits by repeatedly dropping the lowest one."""
    count = 0
    while n > 0:
        n &= n - 1
        count += 1
    return count


def decimal_to_binary(n: int) -> int:
    """Return an integer whose decimal digits spell the binary form of ``n``."""
    if n <= 0:
        return 0
    return int(format(n, "b"))


def hamming_distance(x: int, y: int) -> int:
    """Number of differing bits between two 32-bit integers."""
    return _popcount32(x ^ y)


def longest_consecutive_ones(n: int) -> int:
    """Length of the longest run of set bits in a positive integer."""
    if n <= 0:
        return 0
    return max(len(run) for run in format(n, "b").split("0"))


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_four(n: int) -> bool:
    """Return True when ``n`` is a positive power of four."""
    return is_power_of_two(n) and (n.bit_length() - 1) % 2 == 0


def sort_by_bits(arr: Iterable[int]) -> list[int]:
    """Sort by number of set bits, ties broken by value."""
    return sorted(arr, key=lambda x: (_popcount32(x), x))