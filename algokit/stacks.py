"""A fixed-capacity stack and a string reverser built on it."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algokit.errors import CapacityError, EmptyError

__all__ = ["BoundedStack", "reverse_string", "DEFAULT_CAPACITY", "REVERSE_CAPACITY"]

DEFAULT_CAPACITY = 5
REVERSE_CAPACITY = 100


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The largest number of values the stack can hold."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Put value on top; raise CapacityError when the stack is full."""
        if self.is_full():
            raise CapacityError(f"stack overflow, cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("stack underflow, nothing to pop")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise EmptyError("stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        """Tell whether another push would overflow."""
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def reverse_string(text: str) -> str:
    """Return text reversed by pushing every character and popping them all.

    Raises CapacityError when text is longer than REVERSE_CAPACITY characters.
    """
    stack = BoundedStack(REVERSE_CAPACITY)
    for char in text:
        stack.push(char)
    reversed_chars = []
    while not stack.is_empty():
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)