"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Hashable, Iterable, Mapping, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int = 0
) -> list[float]:
    """Distances from source to every vertex of a directed graph.

    Unreachable vertices get math.inf. Raises NegativeCycleError when a
    negative cycle can be reached from source.
    """
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} is out of range")
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) has a vertex out of range")

    distance = [math.inf] * vertex_count
    distance[source] = 0

    def relax() -> bool:
        changed = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                changed = True
        return changed

    for _ in range(vertex_count - 1):
        if not relax():
            return distance
    for u, v, weight in edge_list:
        if distance[u] != math.inf and distance[u] + weight < distance[v]:
            raise NegativeCycleError("graph has a negative-weight cycle")
    return distance


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]], source: Hashable
) -> dict[Hashable, float]:
    """Distances from source to every node named in adjacency.

    adjacency maps a node to its (neighbour, weight) pairs; weights must be
    non-negative. Unreachable nodes get math.inf.
    """
    graph = {node: list(edges) for node, edges in adjacency.items()}
    dist: dict[Hashable, float] = {}
    for node, edges in graph.items():
        dist.setdefault(node, math.inf)
        for nbr, weight in edges:
            if weight < 0:
                raise ValueError(f"negative weight {weight} on edge {node!r} -> {nbr!r}")
            dist.setdefault(nbr, math.inf)
    dist[source] = 0

    tie = itertools.count()
    queue = [(0, next(tie), source)]
    done: set[Hashable] = set()
    while queue:
        d, _, node = heapq.heappop(queue)
        if node in done:
            continue
        done.add(node)
        for nbr, weight in graph.get(node, ()):
            candidate = d + weight
            if candidate < dist[nbr]:
                dist[nbr] = candidate
                heapq.heappush(queue, (candidate, next(tie), nbr))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square weight matrix.

    Missing edges are given as math.inf. The input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("weight matrix must be square")
    for k in range(n):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            for j in range(n):
                if row[j] > to_k + through[j]:
                    row[j] = to_k + through[j]
    return dist