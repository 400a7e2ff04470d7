"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class EmptyListError(IndexError):
    """The operation needs at least one node, but the list is empty."""


class NodeNotFoundError(LookupError):
    """No node fits the position the operation asked for."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class SinglyLinkedList:
    """A chain of nodes, each holding a value and a link to the next node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_at_beginning(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, target: Any) -> _Node:
        if self._head is None:
            raise EmptyListError("the list is empty")
        for node in self._nodes():
            if node.value == target:
                return node
        raise NodeNotFoundError(f"no node holds {target!r}")

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in a new node at the head of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Put ``value`` in a new node at the tail of the list."""
        if self._head is None:
            self.insert_at_beginning(value)
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = _Node(value)
        self._size += 1

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` right after the first node holding ``target``."""
        node = self._find(target)
        node.next = _Node(value, node.next)
        self._size += 1

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` right before the first node holding ``target``."""
        if self._head is None:
            raise EmptyListError("the list is empty")
        if self._head.value == target:
            self.insert_at_beginning(value)
            return
        previous = self._head
        while previous.next is not None:
            if previous.next.value == target:
                previous.next = _Node(value, previous.next)
                self._size += 1
                return
            previous = previous.next
        raise NodeNotFoundError(f"no node holds {target!r}")

    def delete_first(self) -> Any:
        """Remove the head node and return its value."""
        if self._head is None:
            raise EmptyListError("the list is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_last(self) -> Any:
        """Remove the tail node and return its value."""
        if self._head is None:
            raise EmptyListError("the list is empty")
        if self._head.next is None:
            return self.delete_first()
        previous = self._head
        while previous.next.next is not None:
            previous = previous.next
        removed = previous.next
        previous.next = None
        self._size -= 1
        return removed.value

    def delete_after(self, target: Any) -> Any:
        """Remove the node after the first one holding ``target``; return its value."""
        node = self._find(target)
        removed = node.next
        if removed is None:
            raise NodeNotFoundError(f"no node follows {target!r}")
        node.next = removed.next
        self._size -= 1
        return removed.value