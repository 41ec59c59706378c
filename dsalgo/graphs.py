"""Depth-first search over an adjacency matrix and breadth-first search over adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} outside 0..{count - 1}")


def dfs(matrix: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return the vertices in the order a depth-first search from ``start`` visits them.

    ``matrix[i][j] == 1`` means an edge from ``i`` to ``j``. Neighbours are
    tried in ascending order, so the result matches a recursive search.
    """
    size = len(matrix)
    for row in matrix:
        if len(row) != size:
            raise ValueError("the adjacency matrix must be square")
    _check_vertex(start, size)

    def neighbours(vertex: int) -> Iterator[int]:
        return (j for j, edge in enumerate(matrix[vertex]) if edge == 1)

    visited = [False] * size
    order = [start]
    visited[start] = True
    pending = [neighbours(start)]
    while pending:
        for vertex in pending[-1]:
            if not visited[vertex]:
                visited[vertex] = True
                order.append(vertex)
                pending.append(neighbours(vertex))
                break
        else:
            pending.pop()
    return order


class Graph:
    """An undirected graph on vertices ``0..vertices-1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertices)]

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest``; the newest edge is listed first."""
        count = len(self._adjacency)
        _check_vertex(src, count)
        _check_vertex(dest, count)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        _check_vertex(vertex, len(self._adjacency))
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in the order a breadth-first search from ``start`` visits them."""
        _check_vertex(start, len(self._adjacency))
        visited = [False] * len(self._adjacency)
        visited[start] = True
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for vertex in self._adjacency[current]:
                if not visited[vertex]:
                    visited[vertex] = True
                    queue.append(vertex)
        return order

    def __len__(self) -> int:
        return len(self._adjacency)