"""Number helpers: primality, integer square root, Pascal's triangle, subsets."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def my_sqrt(x: int) -> int:
    """Return the floor of the square root of ``x``; 0 for negative input."""
    if x < 0:
        return 0
    return math.isqrt(x)


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for i in range(max(num_rows, 0)):
        if i == 0:
            rows.append([1])
        else:
            prev = rows[-1]
            rows.append([1, *(a + b for a, b in zip(prev, prev[1:])), 1])
    return rows


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``nums``, ordered by bitmask, items in input order."""
    return [
        [item for bit, item in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]