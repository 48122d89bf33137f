"""Comparison sorts: bubble sort, heap sort, merge sort and quick sort.

Every function takes any iterable of mutually comparable items and returns a
new list in ascending order; the input is left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = ["bubble_sort", "heap_sort", "merge_sort", "quick_sort"]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order items.

    Stops early once a full pass makes no swap.
    """
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def _build_heap(heap: list[Any], size: int) -> None:
    """Turn heap[1..size] into a max-heap by inserting items one at a time."""
    for i in range(1, size + 1):
        item = heap[i]
        child = i
        parent = child // 2
        while parent and item > heap[parent]:
            heap[child] = heap[parent]
            child = parent
            parent = child // 2
        heap[child] = item


def _sift_down(heap: list[Any], size: int) -> None:
    """Restore the max-heap property of heap[1..size] after its root changed."""
    if size < 1:
        return
    pos = 1
    item = heap[pos]
    child = 2 * pos
    while child <= size:
        if child + 1 <= size and heap[child] < heap[child + 1]:
            child += 1
        if item < heap[child]:
            heap[pos] = heap[child]
            pos = child
            child = 2 * pos
        else:
            break
    heap[pos] = item


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a 1-based binary max-heap."""
    heap: list[Any] = [None, *values]
    size = len(heap) - 1
    _build_heap(heap, size)
    for last in range(size, 0, -1):
        heap[1], heap[last] = heap[last], heap[1]
        _sift_down(heap, last - 1)
    return heap[1:]


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging the results."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    """Partition items[low..high] around items[low]; return the pivot's final index."""
    pivot = items[low]
    start, end = low, high
    while start <= end:
        while start <= high and items[start] <= pivot:
            start += 1
        while items[end] > pivot:
            end -= 1
        if start < end:
            items[start], items[end] = items[end], items[start]
    items[low], items[end] = items[end], items[low]
    return end


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items