"""Searching in arrays and matrices."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from functools import reduce
from operator import xor
from typing import List, Optional, Sequence


def find_duplicate_by_swapping(nums: Sequence[int]) -> Optional[int]:
    """Return a duplicated value of ``nums`` (values in 1..n) by cyclic sorting.

    Returns None when no value repeats. The input is not modified.
    """
    values = list(nums)
    n = len(values)
    if any(not 1 <= value <= n for value in values):
        raise ValueError("values must lie in 1..len(nums)")
    for i in range(n):
        while values[i] != i + 1:
            j = values[i] - 1
            if values[j] == values[i]:
                return values[i]
            values[i], values[j] = values[j], values[i]
    return None


def find_duplicate_by_cycle(nums: Sequence[int]) -> int:
    """Return the duplicate of ``nums`` (n+1 values in 1..n) by cycle detection."""
    n = len(nums) - 1
    if n < 1 or any(not 1 <= value <= n for value in nums):
        raise ValueError("need n+1 values lying in 1..n")
    slow = fast = 0
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    finder = 0
    while True:
        slow = nums[slow]
        finder = nums[finder]
        if slow == finder:
            return slow


def find_duplicate_without_edit(nums: Sequence[int]) -> Optional[int]:
    """Return a duplicate of ``nums`` (n+1 values in 1..n) by bisecting value ranges."""
    if len(nums) < 2:
        return None
    start, end = 1, len(nums) - 1
    while start < end:
        mid = (start + end) // 2
        count = sum(1 for value in nums if start <= value <= mid)
        if count > mid - start + 1:
            end = mid
        else:
            start = mid + 1
    return end


def find_in_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix sorted along rows and columns."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def min_in_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated ascending sequence."""
    if not nums:
        raise ValueError("empty array")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] < nums[right]:
            right = mid
        elif nums[mid] > nums[right]:
            left = mid + 1
        else:
            right -= 1
    return nums[right]


def _partition(values: List[int], start: int, end: int) -> int:
    if start >= end:
        return start
    mid = start + (end - start) // 2
    pivot = values[mid]
    values[end], values[mid] = values[mid], values[end]
    i, j = start, end - 1
    while i <= j:
        while i <= j and values[i] <= pivot:
            i += 1
        while i <= j and values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[i], values[end] = values[end], values[i]
    return i


def least_numbers(nums: Sequence[int], k: int) -> List[int]:
    """Return the ``k`` smallest values of ``nums`` in no particular order.

    An empty list is returned when ``k`` is not in 1..len(nums).
    """
    if k <= 0 or k > len(nums):
        return []
    values = list(nums)
    start, end = 0, len(values) - 1
    index = _partition(values, start, end)
    while index != k - 1:
        if index > k - 1:
            end = index - 1
        else:
            start = index + 1
        index = _partition(values, start, end)
    return values[:k]


def count_occurrences(nums: Sequence[int], target: int) -> int:
    """Count ``target`` in an ascending sequence."""
    return bisect_right(nums, target) - bisect_left(nums, target)


def missing_number_by_sum(nums: Sequence[int]) -> int:
    """Return the value of 0..n missing from the n values of ``nums``."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def missing_number_by_xor(nums: Sequence[int]) -> int:
    """Return the value of 0..n missing from ``nums``, using exclusive or."""
    return reduce(xor, (i ^ value for i, value in enumerate(nums, start=1)), 0)


def index_equal_value(nums: Sequence[int]) -> Optional[int]:
    """Return an index ``i`` with ``nums[i] == i`` in an ascending sequence of
    distinct integers, or None."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = (left + right) // 2
        if nums[middle] == middle:
            return middle
        if nums[middle] > middle:
            right = middle - 1
        else:
            left = middle + 1
    return None