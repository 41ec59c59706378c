"""Singly, doubly and circular linked lists of arbitrary values.

Positions are 1-based, as in a numbered list of nodes. ``insert_after(0, x)``
puts ``x`` at the front, and ``insert_after(len(lst), x)`` appends it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class _DoubleNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _DoubleNode | None = None
        self.next: _DoubleNode | None = None


def _check_insert_position(position: int, size: int) -> None:
    if not 0 <= position <= size:
        raise IndexError(f"insert position {position} outside 0..{size}")


def _check_node_position(position: int, size: int) -> None:
    if not 1 <= position <= size:
        raise IndexError(f"node position {position} outside 1..{size}")


class SinglyLinkedList:
    """A list of nodes, each linked to the next."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at ``position`` (0 means at the front)."""
        _check_insert_position(position, self._size)
        if position == self._size:
            self.append(value)
            return
        if position == 0:
            self._head = _Node(value, self._head)
        else:
            node = self._node_at(position)
            node.next = _Node(value, node.next)
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_node_position(position, self._size)
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 1)
            node = previous.next
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous = None
        node = self._head
        self._tail = node
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def search(self, value: Any) -> int | None:
        """Return the position of the first node holding ``value``, or None."""
        for position, current in enumerate(self, start=1):
            if current == value:
                return position
        return None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A list of nodes linked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _DoubleNode(value)
        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _DoubleNode:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at ``position`` (0 means at the front)."""
        _check_insert_position(position, self._size)
        if position == self._size:
            self.append(value)
            return
        node = _DoubleNode(value)
        if position == 0:
            node.next = self._head
            self._head.prev = node
            self._head = node
        else:
            before = self._node_at(position)
            after = before.next
            node.prev, node.next = before, after
            before.next = node
            after.prev = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_node_position(position, self._size)
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head

    def __len__(self) -> int:
        return self._size

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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _link_after_tail(self, value: Any) -> _Node:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._tail = self._link_after_tail(value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._link_after_tail(value)

    def _node_at(self, position: int) -> _Node:
        node = self._tail.next
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at ``position`` (0 means at the front)."""
        _check_insert_position(position, self._size)
        if position == 0:
            self.prepend(value)
        elif position == self._size:
            self.append(value)
        else:
            node = self._node_at(position)
            node.next = _Node(value, node.next)
            self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        head = self._tail.next
        if self._size == 1:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        if self._size == 1:
            return self.pop_front()
        tail = self._tail
        previous = self._node_at(self._size - 1)
        previous.next = tail.next
        self._tail = previous
        self._size -= 1
        return tail.value

    def delete(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_node_position(position, self._size)
        if position == 1:
            return self.pop_front()
        if position == self._size:
            return self.pop_back()
        previous = self._node_at(position - 1)
        node = previous.next
        previous.next = node.next
        self._size -= 1
        return node.value

    def delete_after(self, value: Any) -> Any:
        """Remove the node that follows the first node holding ``value``.

        The successor of the last node is the first one. Returns the removed
        value; raises ValueError when ``value`` is not in the list.
        """
        for position, current in enumerate(self, start=1):
            if current == value:
                break
        else:
            raise ValueError(f"{value!r} is not in the list")
        return self.delete(position % self._size + 1)

    def clear(self) -> None:
        """Remove every node."""
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"