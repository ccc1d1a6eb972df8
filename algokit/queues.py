"""Fixed-capacity queues: a simple linear one and a circular one."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from algokit.errors import CapacityError, EmptyError

__all__ = ["SimpleQueue", "CircularQueue", "DEFAULT_CAPACITY"]

DEFAULT_CAPACITY = 5


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class SimpleQueue:
    """A linear array queue.

    Slots freed by dequeuing are not reused until the queue has been emptied
    completely, so the queue can report full while holding fewer than
    ``capacity`` values.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the queue."""
        return self._capacity

    def enqueue(self, value: Any) -> None:
        """Add value at the rear; raise CapacityError when no slot is left."""
        if self.is_full():
            raise CapacityError(f"queue overflow, cannot add {value!r}")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise EmptyError("queue is empty, nothing to peek")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return not self._slots

    def is_full(self) -> bool:
        """Tell whether the last slot has been used."""
        return len(self._slots) == self._capacity

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """A ring-buffer queue that reuses slots freed by dequeuing."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """The number of slots in the ring."""
        return len(self._buffer)

    def enqueue(self, value: Any) -> None:
        """Add value at the rear; raise CapacityError when the ring is full."""
        if self.is_full():
            raise CapacityError(f"queue overflow, cannot add {value!r}")
        self._buffer[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise EmptyError when empty."""
        if self.is_empty():
            raise EmptyError("queue is empty")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise EmptyError("queue is empty, nothing to peek")
        return self._buffer[self._front]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return self._size == 0

    def is_full(self) -> bool:
        """Tell whether every slot is in use."""
        return self._size == self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from front to rear."""
        for offset in range(self._size):
            yield self._buffer[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size