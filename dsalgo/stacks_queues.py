"""Linked stack, queue and double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import Any


class Stack:
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def fifo_order(self) -> list[Any]:
        """Return the values in the order they were pushed, oldest first."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top_first={list(self)!r})"


class Queue:
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Deque:
    """A queue that accepts and gives up values at both ends."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the value at the back."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def concat_queues(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the values of ``first`` front to back, then those of ``second``."""
    return list(chain(first, second))