"""Binary-search style lookups on sorted and unsorted sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Returns -1 if the search finds none. Raises ValueError on empty input.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("find_peak_element() arg is an empty sequence")
    if n == 1:
        return 0
    if n == 2:
        return 0 if nums[0] > nums[1] else 1
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] > nums[mid + 1] and nums[mid] > nums[mid - 1]:
            return mid
        if nums[mid + 1] >= nums[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together."""
    merged = list(heapq.merge(nums1, nums2))
    n = len(merged)
    if n == 0:
        raise ValueError("median of two empty sequences")
    half = n // 2
    if n % 2:
        return float(merged[half])
    return (merged[half - 1] + merged[half]) / 2