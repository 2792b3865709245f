"""Sliding-window algorithms over sequences of numbers."""

from __future__ import annotations

from collections import deque
from typing import Sequence


def max_sum_window(arr: Sequence[int], k: int) -> int:
    """Return the largest sum of any ``k`` consecutive items of ``arr``."""
    if not 0 < k <= len(arr):
        raise ValueError(f"window size must be between 1 and {len(arr)}, got {k}")
    total = sum(arr[:k])
    best = total
    for entering, leaving in zip(arr[k:], arr):
        total += entering - leaving
        best = max(best, total)
    return best


def sliding_maximum(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive items.

    A window larger than the input yields an empty list.
    """
    if k <= 0:
        raise ValueError(f"window size must be positive, got {k}")
    candidates: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if candidates and candidates[0] <= i - k:
            candidates.popleft()
        while candidates and nums[candidates[-1]] < value:
            candidates.pop()
        candidates.append(i)
        if i >= k - 1:
            result.append(nums[candidates[0]])
    return result


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of ``nums`` summing to at least ``target``.

    Intended for non-negative numbers; returns 0 when no such run exists.
    """
    best: int | None = None
    left = 0
    total = 0
    for right, value in enumerate(nums):
        total += value
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return 0 if best is None else best