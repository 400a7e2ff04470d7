"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list, leaving
the input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    result = list(items)
    n = len(result)
    for done in range(n):
        for i in range(n - done - 1):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for j in range(1, len(result)):
        value = result[j]
        i = j - 1
        while i >= 0 and value <= result[i]:
            result[i + 1] = result[i]
            i -= 1
        result[i + 1] = value
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by compare-and-swap passes over a gap that halves down to 1.

    Passes with a gap of 1 repeat until one makes no swap.
    """
    result = list(items)
    n = len(result)
    gap = n
    swapped = True
    while swapped or gap > 1:
        swapped = False
        gap = (gap + 1) // 2
        for i in range(n - gap):
            if result[i + gap] < result[i]:
                result[i], result[i + gap] = result[i + gap], result[i]
                swapped = True
    return result


def _quick(values: list[Any], left: int, right: int) -> None:
    i, j = left, right
    pivot = values[(left + right) // 2]
    while i <= j:
        while values[i] < pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i <= j:
            values[i], values[j] = values[j], values[i]
            i += 1
            j -= 1
    if left < j:
        _quick(values, left, j)
    if i < right:
        _quick(values, i, right)


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the middle element and recursing."""
    result = list(items)
    if len(result) > 1:
        _quick(result, 0, len(result) - 1)
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def _sift_down(values: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == root:
            return
        values[root], values[largest] = values[largest], values[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    n = len(result)
    for i in reversed(range(n // 2)):
        _sift_down(result, n, i)
    for end in reversed(range(n)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    result = list(items)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(result)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // place) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        place *= 10
    return result