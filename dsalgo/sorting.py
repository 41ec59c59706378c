"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any


def _bubble_swaps(values: list[Any]) -> Iterator[None]:
    """Bubble-sort ``values`` in place, yielding after every swap."""
    n = len(values)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                yield


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeated adjacent swaps."""
    values = list(items)
    deque(_bubble_swaps(values), maxlen=0)
    return values


def bubble_sort_steps(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield a snapshot of the list after each swap made by bubble sort."""
    values = list(items)
    for _ in _bubble_swaps(values):
        yield list(values)


def counting_sort(items: Iterable[int], max_value: int) -> list[int]:
    """Sort integers in the range ``0..max_value`` by counting occurrences."""
    if max_value < 0:
        raise ValueError("max_value must not be negative")
    counts = [0] * (max_value + 1)
    for value in items:
        if not 0 <= value <= max_value:
            raise ValueError(f"value {value} outside range 0..{max_value}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    values = list(items)

    def sift_down(root: int, end: int) -> None:
        while (child := 2 * root + 1) < end:
            if child + 1 < end and values[child] < values[child + 1]:
                child += 1
            if not values[root] < values[child]:
                return
            values[root], values[child] = values[child], values[root]
            root = child

    n = len(values)
    for start in range(n // 2 - 1, -1, -1):
        sift_down(start, n)
    for end in range(n - 1, 0, -1):
        values[0], values[end] = values[end], values[0]
        sift_down(0, end)
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    values = list(items)
    for j in range(1, len(values)):
        key = values[j]
        i = j - 1
        while i >= 0 and values[i] > key:
            values[i + 1] = values[i]
            i -= 1
        values[i + 1] = key
    return values


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
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


def _partition(values: list[Any], low: int, high: int) -> int:
    """Lomuto partition around ``values[high]``; return the pivot's final index."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if pivot > values[j]:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Quicksort with the last element of each range as pivot."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(values, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values


def radix_sort(items: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers in base 10."""
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    if not values:
        return values
    largest = max(values)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // place) % 10].append(value)
        values = [value for bucket in buckets for value in bucket]
        place *= 10
    return values


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining item into place."""
    values = list(items)
    n = len(values)
    for i in range(n - 1):
        smallest = min(range(i, n), key=values.__getitem__)
        values[i], values[smallest] = values[smallest], values[i]
    return values