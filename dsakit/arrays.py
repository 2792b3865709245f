"""Array algorithms: duplicates, subarray sums, in-place rearrangements, pair lookup."""

from __future__ import annotations

from itertools import pairwise
from typing import MutableSequence, Sequence


def find_duplicate(nums: Sequence[int]) -> int:
    """Return a repeated value using Floyd's cycle detection.

    Values are treated as indices into ``nums``, so every value must be a
    valid index; for the classic input of ``n + 1`` values in ``1..n`` the
    result is the duplicated value.
    """
    if not nums:
        raise ValueError("find_duplicate() requires a non-empty sequence")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane)."""
    if not nums:
        raise ValueError("max_subarray() requires a non-empty sequence")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move zeros to the end in place, keeping the order of other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def reverse_in_place(arr: MutableSequence) -> None:
    """Reverse ``arr`` in place."""
    arr.reverse()


def rotate(nums: MutableSequence, k: int) -> None:
    """Rotate ``nums`` right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair whose values add up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def remove_duplicates(nums: MutableSequence) -> int:
    """Collapse runs of equal neighbours in place and return the new length.

    The first returned-length items of ``nums`` hold the kept values; the
    rest of the sequence is left as it was.
    """
    if not nums:
        return 0
    kept = [nums[0]] + [current for previous, current in pairwise(nums) if current != previous]
    nums[: len(kept)] = kept
    return len(kept)