"""Classic in-place sorting algorithms for mutable sequences."""

from __future__ import annotations

from typing import MutableSequence, Sequence


def bubble_sort(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place by swapping adjacent out-of-order items."""
    for end in range(len(arr) - 1, 0, -1):
        for j in range(end):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]


def _sift_down(arr: MutableSequence, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and arr[left] > arr[largest]:
            largest = left
        if right < size and arr[right] > arr[largest]:
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def heap_sort(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place using a max-heap."""
    size = len(arr)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(arr, size, root)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)


def insertion_sort(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place by inserting each item into the sorted prefix."""
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key


def _merged(left: Sequence, right: Sequence) -> list:
    out = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


def _merge_sorted(items: list) -> list:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merged(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place with a stable top-down merge sort."""
    arr[:] = _merge_sorted(list(arr))


def _partition(arr: MutableSequence, low: int, high: int) -> int:
    pivot = arr[high]
    store = low
    for j in range(low, high):
        if arr[j] < pivot:
            arr[store], arr[j] = arr[j], arr[store]
            store += 1
    arr[store], arr[high] = arr[high], arr[store]
    return store


def quick_sort(arr: MutableSequence) -> None:
    """Sort ``arr`` ascending in place with quicksort (last item as pivot)."""
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(arr, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort non-negative integers ascending in place, least significant digit first."""
    if not arr:
        return
    if min(arr) < 0:
        raise ValueError("radix_sort() only sorts non-negative integers")
    largest = max(arr)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in arr:
            buckets[value // exp % 10].append(value)
        arr[:] = [value for bucket in buckets for value in bucket]
        exp *= 10