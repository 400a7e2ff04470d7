"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first element equal to ``key``, or -1."""
    return next((index for index, item in enumerate(items) if item == key), -1)


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending sequence ``items``, or -1."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if value == key:
            return middle
        if value < key:
            low = middle + 1
        else:
            high = middle - 1
    return -1