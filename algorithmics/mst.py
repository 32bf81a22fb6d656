"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from algorithmics.disjoint_set import UnionFind


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: Any


def _edge_list(vertex_count: int, edges: Iterable[Any]) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    result = []
    for edge in edges:
        if not isinstance(edge, Edge):
            edge = Edge(*edge)
        for vertex in (edge.source, edge.target):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        result.append(edge)
    return result


def kruskal(vertex_count: int, edges: Iterable[Any]) -> list[Edge]:
    """Return the edges of a minimum spanning tree in the order they were chosen.

    Edges are Edge objects or (source, target, weight) triples. Each returned
    edge has its smaller endpoint first. Raises ValueError when the graph is
    not connected.
    """
    candidates = sorted(_edge_list(vertex_count, edges), key=lambda e: e.weight)
    if vertex_count <= 1:
        return []
    sets = UnionFind(vertex_count)
    tree: list[Edge] = []
    for edge in candidates:
        if not sets.same_set(edge.source, edge.target):
            sets.union(edge.source, edge.target)
            low, high = sorted((edge.source, edge.target))
            tree.append(Edge(low, high, edge.weight))
            if len(tree) == vertex_count - 1:
                return tree
    raise ValueError("graph is not connected; no spanning tree exists")


def kruskal_weight(vertex_count: int, edges: Iterable[Any]) -> Any:
    """Total weight of a minimum spanning forest, by Kruskal's algorithm."""
    candidates = sorted(
        _edge_list(vertex_count, edges),
        key=lambda e: (e.weight, e.source, e.target),
    )
    sets = UnionFind(vertex_count)
    total = 0
    for edge in candidates:
        if not sets.same_set(edge.source, edge.target):
            sets.union(edge.source, edge.target)
            total += edge.weight
    return total


def prim_weight(vertex_count: int, edges: Iterable[Any]) -> Any:
    """Total weight of a minimum spanning tree of the component holding vertex 0."""
    edge_list = _edge_list(vertex_count, edges)
    if vertex_count == 0:
        return 0
    neighbours: list[list[tuple[int, Any]]] = [[] for _ in range(vertex_count)]
    for edge in edge_list:
        neighbours[edge.source].append((edge.target, edge.weight))
        neighbours[edge.target].append((edge.source, edge.weight))

    visited = [False] * vertex_count
    total = 0
    queue: list[tuple[Any, int]] = [(0, 0)]
    while queue:
        weight, vertex = heapq.heappop(queue)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for nbr, w in neighbours[vertex]:
            if not visited[nbr]:
                heapq.heappush(queue, (w, nbr))
    return total


def prim_tree(matrix: Sequence[Sequence[Any]]) -> list[Edge]:
    """Minimum spanning tree of a weight matrix rooted at vertex 0.

    A zero entry means no edge. Returns Edge(parent, vertex, weight) for each
    vertex 1..n-1 in order. Raises ValueError when the graph is not connected.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("weight matrix must be square")
    if n == 0:
        return []
    distance = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    distance[0] = 0
    for _ in range(n):
        vertex = min(
            (v for v in range(n) if not in_tree[v]), key=distance.__getitem__
        )
        if distance[vertex] == math.inf:
            raise ValueError("graph is not connected; no spanning tree exists")
        in_tree[vertex] = True
        for nbr, weight in enumerate(matrix[vertex]):
            if weight and not in_tree[nbr] and weight < distance[nbr]:
                distance[nbr] = weight
                parent[nbr] = vertex
    return [Edge(parent[v], v, matrix[v][parent[v]]) for v in range(1, n)]