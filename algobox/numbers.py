"""Small integer algorithms."""

from __future__ import annotations

import math
from functools import reduce
from operator import xor
from typing import Iterable

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if result < _INT_MIN or result > _INT_MAX:
        return 0
    return result


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]


def integer_sqrt(x: int) -> int:
    """Floor of the square root of a non-negative ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` up to 1 are returned as is."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def pascal_triangle(n: int) -> list[list[int]]:
    """The first ``n`` rows of Pascal's triangle."""
    if n < 0:
        raise ValueError("number of rows must not be negative")
    rows: list[list[int]] = []
    for i in range(n):
        if i == 0:
            rows.append([1])
            continue
        previous = rows[-1]
        inner = [a + b for a, b in zip(previous, previous[1:])]
        rows.append([1, *inner, 1])
    return rows


def missing_number(nums: Iterable[int]) -> int:
    """The one value of ``0..n`` absent from ``n`` distinct numbers."""
    values = list(nums)
    n = len(values)
    return n * (n + 1) // 2 - sum(values)


def single_number(nums: Iterable[int]) -> int:
    """The value that appears once where every other appears twice."""
    return reduce(xor, nums, 0)