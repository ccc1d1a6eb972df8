"""Linear and binary search over sequences."""

from collections.abc import Sequence
from typing import Any, Optional

__all__ = ["linear_search", "binary_search"]


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to target, or None."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return None


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of target in an ascending sequence, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None