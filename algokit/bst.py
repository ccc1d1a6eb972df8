"""An unbalanced binary search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from algokit.errors import EmptyError

__all__ = ["BinarySearchTree"]


class _Node:
    __slots__ = ("value", "left", "right", "parent")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent: Optional[_Node] = None


def _subtree_minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _subtree_maximum(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _next_node(node: _Node) -> Optional[_Node]:
    if node.right is not None:
        return _subtree_minimum(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


def _previous_node(node: _Node) -> Optional[_Node]:
    if node.left is not None:
        return _subtree_maximum(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node, parent = parent, parent.parent
    return parent


class BinarySearchTree:
    """A binary search tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree."""
        node = _Node(value)
        parent: Optional[_Node] = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def _find(self, value: Any) -> Optional[_Node]:
        current = self._root
        while current is not None and value != current.value:
            current = current.left if value < current.value else current.right
        return current

    def _require(self, value: Any) -> _Node:
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        return node

    def search(self, value: Any) -> Optional[Any]:
        """Return the stored value equal to value, or None if absent."""
        node = self._find(value)
        return None if node is None else node.value

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not None

    def minimum(self) -> Any:
        """Return the smallest value; raise EmptyError on an empty tree."""
        if self._root is None:
            raise EmptyError("tree is empty, no minimum")
        return _subtree_minimum(self._root).value

    def maximum(self) -> Any:
        """Return the largest value; raise EmptyError on an empty tree."""
        if self._root is None:
            raise EmptyError("tree is empty, no maximum")
        return _subtree_maximum(self._root).value

    def successor(self, value: Any) -> Optional[Any]:
        """Return the value after value in order, or None if it is the last.

        Raises KeyError if value is not in the tree.
        """
        following = _next_node(self._require(value))
        return None if following is None else following.value

    def predecessor(self, value: Any) -> Optional[Any]:
        """Return the value before value in order, or None if it is the first.

        Raises KeyError if value is not in the tree.
        """
        preceding = _previous_node(self._require(value))
        return None if preceding is None else preceding.value

    def _transplant(self, old: _Node, new: Optional[_Node]) -> None:
        if old.parent is None:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def delete(self, value: Any) -> bool:
        """Remove one node holding value; return whether one was found."""
        target = self._find(value)
        if target is None:
            return False
        if target.left is None:
            self._transplant(target, target.right)
        elif target.right is None:
            self._transplant(target, target.left)
        else:
            heir = _subtree_minimum(target.right)
            if heir is not target.right:
                self._transplant(heir, heir.right)
                heir.right = target.right
                heir.right.parent = heir
            self._transplant(target, heir)
            heir.left = target.left
            heir.left.parent = heir
        self._size -= 1
        return True

    def inorder(self) -> list:
        """Return all values in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        if self._root is None:
            return
        node: Optional[_Node] = _subtree_minimum(self._root)
        while node is not None:
            yield node.value
            node = _next_node(node)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"