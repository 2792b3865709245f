"""Searching on sorted data: binary search, bounds, sorted matrices, integer roots."""

from __future__ import annotations

from typing import Sequence


def binary_search(arr: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``arr``, or None if absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def lower_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose item is not less than ``target``."""
    low, high = 0, len(arr)
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low


def upper_bound(arr: Sequence[int], target: int) -> int:
    """Return the first index whose item is greater than ``target``."""
    low, high = 0, len(arr)
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] <= target:
            low = mid + 1
        else:
            high = mid
    return low


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return True if ``target`` is in a matrix whose rows and columns are sorted.

    The walk starts at the top-right corner and moves left or down.
    """
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def floor_sqrt(x: int) -> int:
    """Return the largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError(f"floor_sqrt() requires a non-negative number, got {x}")
    if x < 2:
        return x
    low, high, answer = 1, x, 0
    while low <= high:
        mid = low + (high - low) // 2
        if mid <= x // mid:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer