"""Simple comparison sorts and a search for an insertion point."""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def recursive_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order.

    Each pass sweeps from the end towards the front and swaps
    out-of-order neighbours, so the smallest remaining value moves forward.
    """
    result = list(values)
    size = len(result)
    for _ in range(size - 1):
        swapped = False
        for i in range(size - 1, 0, -1):
            if result[i] < result[i - 1]:
                result[i], result[i - 1] = result[i - 1], result[i]
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, moving the largest unsorted value to the end each round."""
    result = list(values)
    for last in range(len(result) - 1, 0, -1):
        biggest = max(range(last + 1), key=result.__getitem__)
        result[biggest], result[last] = result[last], result[biggest]
    return result


def insert_position(nums: Sequence[Any], target: Any) -> int:
    """Index of ``target`` in the sorted ``nums``, or where it would be inserted."""
    if not nums:
        raise ValueError("cannot search an empty sequence")
    if target < nums[0]:
        return 0
    if target > nums[-1]:
        return len(nums)
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            if mid + 1 < len(nums) and nums[mid + 1] > target:
                return mid + 1
            left = mid + 1
        else:
            if mid >= 1 and nums[mid - 1] < target:
                return mid
            right = mid - 1
    return 0