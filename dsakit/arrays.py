"""Array algorithms: k-sums, stack scans, water trapping, inversions and more."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import accumulate
from typing import Optional


@dataclass(frozen=True)
class PetrolPump:
    """A pump on a circular route: fuel it gives and distance to the next pump."""

    petrol: int
    distance: int


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple from ``nums`` that sums to ``target``.

    Quadruples are returned in lexicographic order; ``nums`` is left untouched.
    """
    values = sorted(nums)
    n = len(values)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(n):
        for j in range(i + 1, n):
            start, end = j + 1, n - 1
            while start < end:
                total = values[i] + values[j] + values[start] + values[end]
                if total == target:
                    found.add((values[i], values[j], values[start], values[end]))
                    end -= 1
                elif total > target:
                    end -= 1
                else:
                    start += 1
    return [list(quad) for quad in sorted(found)]


def celebrity(matrix: Sequence[Sequence[int]]) -> int:
    """Return the index of the celebrity in an acquaintance matrix, or -1.

    ``matrix[a][b]`` is 1 when person ``a`` knows person ``b``. A celebrity
    knows nobody and is known by everyone else.
    """
    n = len(matrix)
    if n == 0:
        return -1
    candidate = 0
    for person in range(1, n):
        if matrix[candidate][person] == 1:
            candidate = person
    if any(matrix[candidate][other] != 0 for other in range(n)):
        return -1
    known_by = sum(1 for other in range(n) if matrix[other][candidate] == 1)
    return candidate if known_by == n - 1 else -1


def circular_tour(pumps: Sequence[PetrolPump]) -> int:
    """Return the first pump from which the whole circle can be driven, or -1."""
    deficit = 0
    balance = 0
    start = 0
    for i, pump in enumerate(pumps):
        balance += pump.petrol - pump.distance
        if balance < 0:
            deficit += balance
            start = i + 1
            balance = 0
    return start if deficit + balance >= 0 else -1


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) - 1) // 2 + 1
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(arr: Sequence[int]) -> int:
    """Return the number of pairs ``i < j`` with ``arr[i] > arr[j]``."""
    return _sort_and_count(list(arr))[1]


def trap(height: Sequence[int]) -> int:
    """Return the rain water trapped between bars, using two pointers."""
    total = 0
    left_max = right_max = 0
    i, j = 0, len(height) - 1
    while i <= j:
        if height[i] <= height[j]:
            if left_max <= height[i]:
                left_max = height[i]
            else:
                total += left_max - height[i]
            i += 1
        else:
            if right_max <= height[j]:
                right_max = height[j]
            else:
                total += right_max - height[j]
            j -= 1
    return total


def trap_prefix(height: Sequence[int]) -> int:
    """Return the rain water trapped between bars, using prefix and suffix maxima."""
    if not height:
        return 0
    left = list(accumulate(height, max))
    right = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def left_smaller(arr: Sequence[int]) -> list[int]:
    """For each item, return the nearest strictly smaller item to its left, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for value in arr:
        while stack and value <= stack[-1]:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, return how many consecutive days up to it had a price not above it."""
    stack: list[int] = []
    spans: list[int] = []
    for i, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(i + 1 if not stack else i - stack[-1])
        stack.append(i)
    return spans


def subarray_sum(arr: Sequence[int], s: int) -> Optional[tuple[int, int]]:
    """Find a contiguous run of non-negative numbers summing to ``s``.

    Returns the 1-based inclusive bounds of the first run found by a sliding
    window, or None when there is none or ``s`` is zero.
    """
    if s == 0:
        return None
    n = len(arr)
    total = 0
    i = j = 0
    while i < n and j < n:
        if total == s:
            return i + 1, j
        if total < s:
            total += arr[j]
            j += 1
        else:
            total -= arr[i]
            i += 1
    while i < n:
        if total == s:
            return i + 1, j
        total -= arr[i]
        i += 1
    return None


def equilibrium_point(a: Sequence[int]) -> int:
    """Return the 1-based position whose left and right sums are equal, or -1."""
    if len(a) == 1:
        return 1
    left = 0
    right = sum(a)
    for position, value in enumerate(a, start=1):
        right -= value
        if left == right:
            return position
        left += value
    return -1


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first ``k`` items are distinct; return ``k``."""
    if not nums:
        return 0
    i = 0
    for value in nums[1:]:
        if nums[i] != value:
            i += 1
            nums[i] = value
    return i + 1