"""A red-black tree: a binary search tree kept balanced by node colours."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, Optional

from algokit.errors import EmptyError

__all__ = ["Color", "RedBlackTree"]


class Color(Enum):
    """The colour of a red-black tree node."""

    RED = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name


class _Node:
    __slots__ = ("value", "color", "left", "right", "parent")

    def __init__(self, value: Any, color: Color) -> None:
        self.value = value
        self.color = color
        self.left: _Node = self
        self.right: _Node = self
        self.parent: _Node = self


class RedBlackTree:
    """A self-balancing binary search tree; equal values may be stored twice."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        # One shared black sentinel stands for every leaf and the root's parent.
        self._nil = _Node(None, Color.BLACK)
        self._root = self._nil
        self._size = 0
        for value in values:
            self.insert(value)

    def _left_rotate(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: _Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.right = x
        x.parent = y

    def insert(self, value: Any) -> None:
        """Add value and restore the red-black properties."""
        node = _Node(value, Color.RED)
        node.left = node.right = self._nil
        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_fixup(node)

    def _insert_fixup(self, node: _Node) -> None:
        while node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._left_rotate(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._right_rotate(grandparent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._right_rotate(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._left_rotate(grandparent)
        self._root.color = Color.BLACK

    def _find(self, value: Any) -> _Node:
        current = self._root
        while current is not self._nil and value != current.value:
            current = current.left if value < current.value else current.right
        return current

    def search(self, value: Any) -> Optional[Any]:
        """Return the stored value equal to value, or None if absent."""
        node = self._find(value)
        return None if node is self._nil else node.value

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not self._nil

    def _subtree_minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def minimum(self) -> Any:
        """Return the smallest value; raise EmptyError on an empty tree."""
        if self._root is self._nil:
            raise EmptyError("tree is empty, no minimum")
        return self._subtree_minimum(self._root).value

    def _transplant(self, old: _Node, new: _Node) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def delete(self, value: Any) -> bool:
        """Remove one node holding value; return whether one was found."""
        target = self._find(value)
        if target is self._nil:
            return False
        removed = target
        removed_color = removed.color
        if target.left is self._nil:
            replacement = target.right
            self._transplant(target, target.right)
        elif target.right is self._nil:
            replacement = target.left
            self._transplant(target, target.left)
        else:
            removed = self._subtree_minimum(target.right)
            removed_color = removed.color
            replacement = removed.right
            if removed.parent is target:
                replacement.parent = removed
            else:
                self._transplant(removed, removed.right)
                removed.right = target.right
                removed.right.parent = removed
            self._transplant(target, removed)
            removed.left = target.left
            removed.left.parent = removed
            removed.color = target.color
        if removed_color is Color.BLACK:
            self._delete_fixup(replacement)
        self._size -= 1
        return True

    def _delete_fixup(self, node: _Node) -> None:
        while node is not self._root and node.color is Color.BLACK:
            if node is node.parent.left:
                sibling = node.parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._left_rotate(node.parent)
                    sibling = node.parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._right_rotate(sibling)
                        sibling = node.parent.right
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._left_rotate(node.parent)
                    node = self._root
            else:
                sibling = node.parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    node.parent.color = Color.RED
                    self._right_rotate(node.parent)
                    sibling = node.parent.left
                if sibling.right.color is Color.BLACK and sibling.left.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = node.parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._left_rotate(sibling)
                        sibling = node.parent.left
                    sibling.color = node.parent.color
                    node.parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._right_rotate(node.parent)
                    node = self._root
        node.color = Color.BLACK

    def _nodes(self) -> Iterator[_Node]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not self._nil:
            while node is not self._nil:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node
            node = node.right

    def inorder(self) -> list[tuple[Any, Color]]:
        """Return (value, colour) pairs in ascending order of value."""
        return [(node.value, node.color) for node in self._nodes()]

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def root_color(self) -> Color:
        """Return the colour of the root; an empty tree's root is black."""
        return self._root.color

    def _check_invariants(self) -> int:
        """Verify the red-black properties and return the black height."""
        nil = self._nil
        if nil.color is not Color.BLACK:
            raise ValueError("sentinel is not black")
        if self._root.color is not Color.BLACK:
            raise ValueError("root is not black")

        def walk(node: _Node) -> tuple[int, int]:
            if node is nil:
                return 1, 0
            for child in (node.left, node.right):
                if child is not nil and child.parent is not node:
                    raise ValueError(f"broken parent link below {node.value!r}")
                if node.color is Color.RED and child.color is Color.RED:
                    raise ValueError(f"red node {node.value!r} has a red child")
            left_height, left_count = walk(node.left)
            right_height, right_count = walk(node.right)
            if left_height != right_height:
                raise ValueError(f"unequal black heights below {node.value!r}")
            extra = 1 if node.color is Color.BLACK else 0
            return left_height + extra, left_count + right_count + 1

        height, count = walk(self._root)
        if count != self._size:
            raise ValueError("node count does not match size")
        return height

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"