"""Recursive merge sort and quick sort."""

from __future__ import annotations

from typing import Iterable


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by stable merging."""
    items = list(values)
    _merge_sort(items, 0, len(items) - 1)
    return items


def _merge_sort(items: list[int], start: int, end: int) -> None:
    if end <= start:
        return
    mid = (start + end) // 2
    _merge_sort(items, start, mid)
    _merge_sort(items, mid + 1, end)
    _merge(items, start, mid, end)


def _merge(items: list[int], start: int, mid: int, end: int) -> None:
    left = items[start:mid + 1]
    right = items[mid + 1:end + 1]
    merged: list[int] = []
    x = y = 0
    while x < len(left) and y < len(right):
        if left[x] > right[y]:
            merged.append(right[y])
            y += 1
        else:
            merged.append(left[x])
            x += 1
    merged.extend(left[x:])
    merged.extend(right[y:])
    items[start:end + 1] = merged


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values rearranged by quick sort with the first value as pivot.

    Distinct values come back in ascending order. Values equal to a pivot are
    not kept apart from it, so lists with repeats may come back out of order.
    """
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _quick_sort(items: list[int], start: int, end: int) -> None:
    if start >= end:
        return
    pivot_index = _partition(items, start, end)
    _quick_sort(items, start, pivot_index - 1)
    _quick_sort(items, pivot_index + 1, end)


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[start]
    smaller = sum(1 for value in items[start:end + 1] if value < pivot)
    pivot_index = start + smaller
    items[start] = items[pivot_index]
    items[pivot_index] = pivot
    i, j = start, end
    while i < pivot_index and j > pivot_index:
        if items[i] < pivot:
            i += 1
        elif items[j] > pivot:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index