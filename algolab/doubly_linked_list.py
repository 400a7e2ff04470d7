"""A doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class EmptyListError(IndexError):
    """The operation needs at least one node, but the list is empty."""


class NodeNotFoundError(LookupError):
    """No node fits the position the operation asked for."""


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """A chain of nodes linked both to the next and to the previous node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _find(self, target: Any) -> _Node:
        if self._head is None:
            raise EmptyListError("the list is empty")
        node = self._head
        while node is not None:
            if node.value == target:
                return node
            node = node.next
        raise NodeNotFoundError(f"no node holds {target!r}")

    def _link_between(self, value: Any, before: _Node | None, after: _Node | None) -> None:
        node = _Node(value)
        node.prev, node.next = before, after
        if before is None:
            self._head = node
        else:
            before.next = node
        if after is None:
            self._tail = node
        else:
            after.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in a new node at the head of the list."""
        self._link_between(value, None, self._head)

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` in a new node at the tail of the list."""
        self._link_between(value, self._tail, None)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        node = self._find(target)
        self._link_between(value, node, node.next)

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` right before the first node holding ``target``."""
        node = self._find(target)
        self._link_between(value, node.prev, node)

    def delete_first(self) -> Any:
        """Remove the head node and return its value."""
        if self._head is None:
            raise EmptyListError("the list is empty")
        return self._unlink(self._head)

    def delete_last(self) -> Any:
        """Remove the tail node and return its value."""
        if self._tail is None:
            raise EmptyListError("the list is empty")
        return self._unlink(self._tail)

    def delete_after(self, target: Any) -> Any:
        """Remove the node after the first one holding ``target``; return its value."""
        node = self._find(target)
        if node.next is None:
            raise NodeNotFoundError(f"no node follows {target!r}")
        return self._unlink(node.next)

    def delete_before(self, target: Any) -> Any:
        """Remove the node before the first one holding ``target``; return its value."""
        node = self._find(target)
        if node.prev is None:
            raise NodeNotFoundError(f"no node precedes {target!r}")
        return self._unlink(node.prev)