"""Singly, doubly, circular and multi-linked lists, plus list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

__all__ = [
    "ListNode",
    "from_iterable",
    "to_list",
    "add_two_numbers",
    "has_cycle",
    "CircularList",
    "DoublyLinkedList",
    "Student",
    "MultiLinkedList",
]


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: Optional[ListNode] = field(default=None, repr=False)


def from_iterable(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a singly linked list holding values in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def to_list(head: Optional[ListNode]) -> list:
    """Return the values of a singly linked list in order.

    Raises ValueError if the list loops back on itself.
    """
    if has_cycle(head):
        raise ValueError("linked list contains a cycle")
    return [node.val for node in _walk(head)]


def add_two_numbers(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while first is not None or second is not None or carry:
        total = carry
        if first is not None:
            total += first.val
            first = first.next
        if second is not None:
            total += second.val
            second = second.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops, using Floyd's tortoise and hare."""
    tortoise = hare = head
    while hare is not None and hare.next is not None:
        tortoise = tortoise.next
        hare = hare.next.next
        if tortoise is hare:
            return True
    return False


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head = from_iterable(values)
        if self._head is not None:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = self._head

    def __iter__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.val
            node = node.next
            if node is self._head:
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)


class _DoublyNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_DoublyNode] = None
        self.next: Optional[_DoublyNode] = None


class DoublyLinkedList:
    """A list that can be walked forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoublyNode] = None
        self._tail: Optional[_DoublyNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add value at the end."""
        node = _DoublyNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert_after(self, existing: Any, value: Any) -> None:
        """Insert value right after the first node equal to existing.

        Raises ValueError if no node holds existing.
        """
        anchor = self._head
        while anchor is not None and anchor.value != existing:
            anchor = anchor.next
        if anchor is None:
            raise ValueError(f"{existing!r} is not in the list")
        node = _DoublyNode(value)
        node.prev = anchor
        node.next = anchor.next
        if anchor.next is None:
            self._tail = node
        else:
            anchor.next.prev = node
        anchor.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class Student:
    """A student linked into two chains: one ordered by id, one by age."""

    student_id: int
    age: int
    next_by_id: Optional[Student] = field(default=None, repr=False)
    next_by_age: Optional[Student] = field(default=None, repr=False)


def _insert_sorted(
    head: Optional[Student],
    student: Student,
    key: Callable[[Student], Any],
    link: str,
) -> Student:
    """Insert student into the chain following link, after any equal keys."""
    if head is None or key(student) < key(head):
        setattr(student, link, head)
        return student
    previous = head
    following = getattr(previous, link)
    while following is not None and key(following) <= key(student):
        previous = following
        following = getattr(previous, link)
    setattr(student, link, following)
    setattr(previous, link, student)
    return head


class MultiLinkedList:
    """Students kept in two independent sorted chains over the same nodes."""

    def __init__(self) -> None:
        self._head_by_id: Optional[Student] = None
        self._head_by_age: Optional[Student] = None

    def add(self, student_id: int, age: int) -> Student:
        """Add a student and link it into both chains; return the new node."""
        student = Student(student_id, age)
        self._head_by_id = _insert_sorted(
            self._head_by_id, student, lambda s: s.student_id, "next_by_id"
        )
        self._head_by_age = _insert_sorted(
            self._head_by_age, student, lambda s: s.age, "next_by_age"
        )
        return student

    def by_id(self) -> Iterator[Student]:
        """Yield students in ascending id order."""
        node = self._head_by_id
        while node is not None:
            yield node
            node = node.next_by_id

    def by_age(self) -> Iterator[Student]:
        """Yield students in ascending age order."""
        node = self._head_by_age
        while node is not None:
            yield node
            node = node.next_by_age