"""Classic comparison sorts.

Every function takes any iterable, leaves it untouched and returns a new
sorted list.
"""

from collections.abc import Callable, Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "insertion_sort_descending",
    "merge_sort",
    "quick_sort",
]


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort ascending by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - 1 - done):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def selection_sort(items: Iterable[Any]) -> list:
    """Sort ascending by moving the smallest remaining value to the front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def _insertion(items: Iterable[Any], shifts: Callable[[Any, Any], bool]) -> list:
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and shifts(key, result[j]):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort ascending by inserting each value into the sorted prefix."""
    return _insertion(items, lambda key, other: key < other)


def insertion_sort_descending(items: Iterable[Any]) -> list:
    """Sort descending by inserting each value into the sorted prefix."""
    return _insertion(items, lambda key, other: key > other)


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


def merge_sort(items: Iterable[Any]) -> list:
    """Sort ascending by splitting in halves and merging; the sort is stable."""
    result = list(items)
    if len(result) <= 1:
        return result
    # The left half takes the middle element, as with mid = start + (end - start) // 2.
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list, start: int, end: int) -> int:
    pivot = values[end]
    i = start - 1
    for j in range(start, end):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[end] = values[end], values[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list:
    """Sort ascending by partitioning around the last element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            pivot_index = _partition(result, start, end)
            pending.append((start, pivot_index - 1))
            pending.append((pivot_index + 1, end))
    return result