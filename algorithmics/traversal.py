"""Adjacency-list graphs with breadth-first and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import Any


class Graph:
    """A graph stored as adjacency lists of (neighbour, weight) pairs."""

    def __init__(self) -> None:
        self._edges: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(
        self,
        source: Hashable,
        target: Hashable,
        weight: Any = 1,
        bidirectional: bool = True,
    ) -> None:
        """Add an edge from source to target, and back again if bidirectional."""
        self._edges.setdefault(source, []).append((target, weight))
        if bidirectional:
            self._edges.setdefault(target, []).append((source, weight))

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Nodes reached by an edge from node, in insertion order."""
        return [target for target, _ in self._edges.get(node, ())]

    def adjacency(self) -> dict[Hashable, list[tuple[Hashable, Any]]]:
        """A copy of the adjacency lists, keyed by nodes that have outgoing edges."""
        return {node: list(edges) for node, edges in self._edges.items()}

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Nodes reachable from start in breadth-first order."""
        visited = {start}
        order = []
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self.neighbours(node):
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Nodes reachable from start in depth-first preorder."""
        visited = {start}
        order = [start]
        stack = [iter(self.neighbours(start))]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self.neighbours(nbr)))
                    break
            else:
                stack.pop()
        return order