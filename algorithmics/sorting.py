"""Comparison sorts, a three-way partition sort and inversion counting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy, swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy, inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy, moving the minimum of the unsorted tail forward."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy using a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition_first_pivot(items: list, low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def _partition_last_pivot(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def _quick_sort_with(values: Iterable[Any], partition) -> list:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = partition(items, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))
    return items


def quick_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy using quicksort with the first element as pivot."""
    return _quick_sort_with(values, _partition_first_pivot)


def lomuto_quick_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy using quicksort with Lomuto partitioning."""
    return _quick_sort_with(values, _partition_last_pivot)


def dutch_flag_sort(values: Iterable[int]) -> list:
    """Return a copy with 0s first, then 1s, then everything else.

    Intended for sequences of 0, 1 and 2; a single pass with three pointers.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _sort_and_count(items: list) -> tuple[list, int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged = []
    cross = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            cross += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, left_count + right_count + cross


def count_inversions(values: Iterable[Any]) -> int:
    """Count pairs (i, j) with i < j and values[i] > values[j]."""
    _, count = _sort_and_count(list(values))
    return count