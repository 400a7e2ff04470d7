"""Hash tables of integer keys: open addressing and separate chaining."""

from __future__ import annotations

from collections.abc import Callable, Iterator


class TableFullError(OverflowError):
    """No free slot could be found for a key."""


class _ProbedSlots:
    """Slot storage shared by the open-addressing tables."""

    def __init__(self, capacity: int, offset: Callable[[int], int]) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.slots: list[int | None] = [None] * capacity
        self._offset = offset

    def probe(self, key: int) -> Iterator[int]:
        capacity = len(self.slots)
        start = key % capacity
        for attempt in range(capacity):
            yield (start + self._offset(attempt)) % capacity

    def locate(self, key: int) -> int | None:
        for index in self.probe(key):
            slot = self.slots[index]
            if slot == key:
                return index
            if slot is None:
                return None
        return None

    def insert(self, key: int) -> None:
        for index in self.probe(key):
            if self.slots[index] is None:
                self.slots[index] = key
                return
        raise TableFullError(f"no free slot for {key}")

    def remove(self, key: int) -> None:
        index = self.locate(key)
        if index is not None:
            self.slots[index] = None


class LinearProbingTable:
    """Open addressing that tries slots ``h, h + 1, h + 2, ...``."""

    def __init__(self, capacity: int = 10) -> None:
        self._table = _ProbedSlots(capacity, lambda attempt: attempt)

    def insert(self, key: int) -> None:
        """Store ``key`` in the first free slot along its probe sequence."""
        self._table.insert(key)

    def __contains__(self, key: int) -> bool:
        return self._table.locate(key) is not None

    def remove(self, key: int) -> None:
        """Free the slot holding ``key``; do nothing if it is not found.

        The slot is simply emptied, so a key placed further along the same
        probe sequence may no longer be found.
        """
        self._table.remove(key)

    def slots(self) -> list[int | None]:
        """Return the contents of every slot, ``None`` for an empty one."""
        return list(self._table.slots)


class QuadraticProbingTable:
    """Open addressing that tries slots ``h, h + 1, h + 4, h + 9, ...``."""

    def __init__(self, capacity: int = 10) -> None:
        self._table = _ProbedSlots(capacity, lambda attempt: attempt * attempt)

    def insert(self, key: int) -> None:
        """Store ``key`` in the first free slot along its probe sequence."""
        self._table.insert(key)

    def __contains__(self, key: int) -> bool:
        return self._table.locate(key) is not None

    def remove(self, key: int) -> None:
        """Free the slot holding ``key``; do nothing if it is not found.

        The slot is simply emptied, so a key placed further along the same
        probe sequence may no longer be found.
        """
        self._table.remove(key)

    def slots(self) -> list[int | None]:
        """Return the contents of every slot, ``None`` for an empty one."""
        return list(self._table.slots)


class ChainedHashTable:
    """Separate chaining: each slot holds a list of the keys hashed to it."""

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[int]:
        return self._buckets[key % len(self._buckets)]

    def insert(self, key: int) -> None:
        """Append ``key`` to its bucket."""
        self._bucket(key).append(key)

    def __contains__(self, key: int) -> bool:
        return key in self._bucket(key)

    def remove(self, key: int) -> None:
        """Remove every occurrence of ``key`` from its bucket."""
        bucket = self._bucket(key)
        bucket[:] = [item for item in bucket if item != key]

    def buckets(self) -> list[list[int]]:
        """Return a copy of every bucket's keys, in insertion order."""
        return [list(bucket) for bucket in self._buckets]