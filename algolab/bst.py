"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


def _largest(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """A binary search tree; equal values go to the left subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value <= node.value else node.right
        return False

    def delete(self, value: Any) -> None:
        """Remove one occurrence of ``value``; raise KeyError if it is absent.

        A node with two children takes the largest value of its left subtree.
        """
        self._root = self._delete(self._root, value)
        self._size -= 1

    def _delete(self, node: _Node | None, value: Any) -> _Node | None:
        if node is None:
            raise KeyError(value)
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            predecessor = _largest(node.left).value
            node.value = predecessor
            node.left = self._delete(node.left, predecessor)
        return node

    def max(self) -> Any:
        """Return the largest value in the tree."""
        if self._root is None:
            raise ValueError("the tree is empty")
        return _largest(self._root).value

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size