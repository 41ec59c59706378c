"""Binary trees, a binary search tree, a range-minimum segment tree and a trie."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from string import ascii_letters
from typing import Any


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def preorder(node: TreeNode | None) -> list[Any]:
    """Values in node, left, right order."""
    return list(_preorder(node))


def inorder(node: TreeNode | None) -> list[Any]:
    """Values in left, node, right order."""
    return list(_inorder(node))


def postorder(node: TreeNode | None) -> list[Any]:
    """Values in left, right, node order."""
    return list(_postorder(node))


class BinarySearchTree:
    """An unbalanced binary search tree that keeps one copy of each value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return preorder(self.root)

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        return postorder(self.root)


class SegmentTree:
    """Answers minimum-over-range queries on a fixed sequence."""

    def __init__(self, values: Sequence[Any]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(items)
        height = (self._size - 1).bit_length()
        self._tree: list[Any] = [None] * (2 * 2**height - 1)
        self._build(items, 0, self._size - 1, 0)

    def _build(self, items: list[Any], start: int, end: int, index: int) -> Any:
        if start == end:
            self._tree[index] = items[start]
        else:
            mid = start + (end - start) // 2
            self._tree[index] = min(
                self._build(items, start, mid, 2 * index + 1),
                self._build(items, mid + 1, end, 2 * index + 2),
            )
        return self._tree[index]

    def _query(self, start: int, end: int, qstart: int, qend: int, index: int) -> Any:
        if qstart <= start and end <= qend:
            return self._tree[index]
        mid = start + (end - start) // 2
        if qend <= mid:
            return self._query(start, mid, qstart, qend, 2 * index + 1)
        if qstart > mid:
            return self._query(mid + 1, end, qstart, qend, 2 * index + 2)
        return min(
            self._query(start, mid, qstart, qend, 2 * index + 1),
            self._query(mid + 1, end, qstart, qend, 2 * index + 2),
        )

    def query(self, start: int, end: int) -> Any:
        """Return the smallest value between indices ``start`` and ``end`` inclusive."""
        if start > end:
            raise ValueError(f"range start {start} is after end {end}")
        if start < 0 or end > self._size - 1:
            raise IndexError(f"range {start}..{end} outside 0..{self._size - 1}")
        return self._query(0, self._size - 1, start, end, 0)

    def __len__(self) -> int:
        return self._size


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


def _normalize(word: str) -> str:
    invalid = [ch for ch in word if ch not in ascii_letters]
    if invalid:
        raise ValueError(f"trie words hold letters only, got {''.join(invalid)!r}")
    return word.lower()


class Trie:
    """A prefix tree of case-insensitive words made of English letters."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _find(self, word: str) -> _TrieNode | None:
        node = self._root
        for ch in _normalize(word):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in _normalize(word):
            node = node.children.setdefault(ch, _TrieNode())
        node.is_word = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_word

    def remove(self, word: str) -> None:
        """Remove ``word``; raise KeyError if it is not in the trie."""
        node = self._find(word)
        if node is None or not node.is_word:
            raise KeyError(word)
        node.is_word = False