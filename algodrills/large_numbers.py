"""Arithmetic on large numbers: digit strings, modular powers and Fibonacci."""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

MOD = 10**9 + 7

Matrix = list[list[int]]

_DIGITS = frozenset("0123456789")
_FIB_STEP = [[1, 1], [1, 0]]
_FIB_SUM_STEP = [[1, 1, 1], [0, 1, 1], [0, 1, 0]]


def _check_digits(number: str) -> None:
    if not number or not set(number) <= _DIGITS:
        raise ValueError(f"not a non-negative decimal number: {number!r}")


def add_numbers(a: str, b: str) -> str:
    """Add two non-negative numbers given as decimal digit strings."""
    _check_digits(a)
    _check_digits(b)
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def big_factorial(n: int) -> str:
    """Decimal digits of ``n!`` computed digit by digit."""
    if n < 0:
        raise ValueError(f"factorial is undefined for {n}")
    digits = [1]  # least significant first
    for factor in range(2, n + 1):
        carry = 0
        for pos, digit in enumerate(digits):
            carry, digits[pos] = divmod(digit * factor + carry, 10)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
    return "".join(str(d) for d in reversed(digits))


def _check_modulus(mod: int) -> None:
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")


def power_mod(a: int, b: int, mod: int = MOD) -> int:
    """``a`` raised to ``b`` modulo ``mod`` by repeated squaring."""
    _check_modulus(mod)
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")
    result = 1
    a %= mod
    while b:
        if b & 1:
            result = result * a % mod
        a = a * a % mod
        b >>= 1
    return result


def multiply_mod(a: int, b: int, mod: int = MOD) -> int:
    """``a * b`` modulo ``mod`` by repeated doubling."""
    _check_modulus(mod)
    if b < 0:
        raise ValueError(f"multiplier must be non-negative, got {b}")
    result = 0
    while b:
        if b & 1:
            result = (result + a) % mod
        a = (a + a) % mod
        b >>= 1
    return result


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> Matrix:
    """Product of two matrices with every entry reduced modulo ``mod``."""
    _check_modulus(mod)
    if not a or len(a[0]) != len(b):
        raise ValueError("matrix shapes do not allow multiplication")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % mod for col in columns] for row in a]


def matrix_power(m: Sequence[Sequence[int]], n: int, mod: int = MOD) -> Matrix:
    """Square matrix ``m`` raised to ``n`` modulo ``mod``."""
    size = len(m)
    if size == 0 or any(len(row) != size for row in m):
        raise ValueError("matrix must be square and non-empty")
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [list(row) for row in m]
    while n:
        if n & 1:
            result = matrix_multiply(result, base, mod)
        base = matrix_multiply(base, base, mod)
        n >>= 1
    return result


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number modulo :data:`MOD`, with F(1) = F(2) = 1."""
    if n < 1:
        raise ValueError(f"Fibonacci index must be at least 1, got {n}")
    if n <= 2:
        return 1
    step = matrix_power(_FIB_STEP, n - 2)
    return (step[0][0] + step[0][1]) % MOD


def fibonacci_sum(n: int) -> int:
    """Sum F(1) + ... + F(n) modulo :data:`MOD`; zero when ``n`` is not positive."""
    if n <= 0:
        return 0
    step = matrix_power(_FIB_SUM_STEP, n - 1)
    return (step[0][0] + step[0][1]) % MOD


def fibonacci_range_sum(n: int, m: int) -> int:
    """Sum F(n) + ... + F(m) modulo :data:`MOD`."""
    return (fibonacci_sum(m) - fibonacci_sum(n - 1)) % MOD