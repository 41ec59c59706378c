"""Linear, binary and sentinel search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(items: Iterable[Any], target: Any) -> list[int]:
    """Return every index at which ``target`` occurs, in ascending order."""
    return [index for index, value in enumerate(items) if value == target]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def sentinel_search(items: Iterable[Any], target: Any) -> int | None:
    """Return the first index of ``target`` in ``items``, or None."""
    values = list(items)
    values.append(target)
    index = 0
    while values[index] != target:
        index += 1
    return index if index < len(values) - 1 else None