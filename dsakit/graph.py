"""Undirected graph stored as adjacency lists, with BFS and DFS."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """Undirected graph over the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adj):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbors(self, vertex: int) -> list[int]:
        """Vertices adjacent to ``vertex``, in the order the edges were added."""
        self._check(vertex)
        return list(self._adj[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adj[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adj[start])]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adj[neighbor]))
                    break
            else:
                stack.pop()
        return order

    def __len__(self) -> int:
        return len(self._adj)

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex}: " + " ".join(str(n) for n in neighbors)
            for vertex, neighbors in enumerate(self._adj)
        )