"""Queues: a linear array queue, a circular queue, a bounded deque and a linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueOverflowError(OverflowError):
    """A value was added to a queue with no room for it."""


class QueueUnderflowError(IndexError):
    """A value was taken from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue:
    """A first-in, first-out queue over a fixed array.

    The rear only ever moves forward, so slots freed by dequeuing are not
    reused: at most ``capacity`` values can be enqueued over the queue's life.
    """

    def __init__(self, capacity: int = 100) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) >= self._capacity:
            raise QueueOverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """A first-in, first-out queue over a fixed array whose ends wrap around."""

    def __init__(self, capacity: int = 100) -> None:
        _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        capacity = len(self._slots)
        if self._size == capacity:
            raise QueueOverflowError("queue overflow")
        self._slots[(self._front + self._size) % capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._size == 0:
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % len(self._slots)
        return value

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % capacity]

    def __len__(self) -> int:
        return self._size


class BoundedDeque:
    """A double-ended queue over a fixed array that does not wrap around.

    A value can be pushed at the front only while there are free slots before
    the front, and at either end only while the rear is short of the last slot.
    """

    def __init__(self, capacity: int = 100) -> None:
        _check_capacity(capacity)
        self._slots: list[Any] = [None] * capacity
        self._front = -1
        self._rear = -1

    def _is_empty(self) -> bool:
        return self._front == -1

    def _reset(self) -> None:
        self._front = self._rear = -1

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the front."""
        if self._front == 0:
            raise QueueOverflowError("no room before the front")
        if self._rear == len(self._slots) - 1:
            raise QueueOverflowError("deque overflow")
        if self._is_empty():
            self._front = self._rear = 0
        else:
            self._front -= 1
        self._slots[self._front] = value

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the rear."""
        if self._rear == len(self._slots) - 1:
            raise QueueOverflowError("deque overflow")
        if self._is_empty():
            self._front = self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if self._is_empty():
            raise QueueUnderflowError("deque underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._reset()
        else:
            self._front += 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the value at the rear."""
        if self._is_empty():
            raise QueueUnderflowError("deque underflow")
        value = self._slots[self._rear]
        self._slots[self._rear] = None
        if self._front == self._rear:
            self._reset()
        else:
            self._rear -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        if self._is_empty():
            return iter(())
        return iter(self._slots[self._front:self._rear + 1])

    def __len__(self) -> int:
        return 0 if self._is_empty() else self._rear - self._front + 1


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedQueue:
    """An unbounded first-in, first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueUnderflowError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size