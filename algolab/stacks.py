"""Stacks backed by a bounded array and by a chain of linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(OverflowError):
    """A push was attempted on a full stack."""


class StackUnderflowError(IndexError):
    """A value was asked of an empty stack."""


class ArrayStack:
    """A last-in, first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the value on top without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None) -> None:
        self.value = value
        self.next = next


class LinkedStack:
    """An unbounded last-in, first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the value on top."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the value on top without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size