"""Unbounded stack and queue built on linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from algokit.errors import EmptyError

__all__ = ["LinkedStack", "LinkedQueue"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


def _render(values: list) -> str:
    if not values:
        return "List is empty."
    return "".join(f"{value} -> " for value in values) + "NULL"


class LinkedStack:
    """A last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; raise EmptyError when empty."""
        if self._top is None:
            raise EmptyError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise EmptyError("stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the values from top to bottom as a chain ending in NULL."""
        return _render(list(self))


class LinkedQueue:
    """A first-in, first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise EmptyError when empty."""
        if self._front is None:
            raise EmptyError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self._front is None:
            raise EmptyError("queue is empty")
        return self._front.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the values from front to rear as a chain ending in NULL."""
        return _render(list(self))