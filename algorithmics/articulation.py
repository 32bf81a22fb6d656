"""Articulation points of an undirected graph by Tarjan's algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence


def articulation_points(
    adjacency: Mapping[int, Iterable[int]] | Sequence[Iterable[int]],
    vertex_count: int,
) -> list[int]:
    """Return, in increasing order, the vertices whose removal disconnects the graph.

    Vertices are 0..vertex_count-1; adjacency maps a vertex to its neighbours.
    """
    if not isinstance(adjacency, Mapping):
        adjacency = dict(enumerate(adjacency))
    neighbours: dict[int, list[int]] = {}
    for vertex, nbrs in adjacency.items():
        nbrs = list(nbrs)
        for v in [vertex, *nbrs]:
            if not 0 <= v < vertex_count:
                raise ValueError(f"vertex {v} is out of range")
        neighbours[vertex] = nbrs

    disc = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    children = [0] * vertex_count
    points: set[int] = set()
    time = 0

    for root in range(vertex_count):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = time
        time += 1
        stack = [(root, iter(neighbours.get(root, ())))]
        while stack:
            u, nbrs = stack[-1]
            for v in nbrs:
                if disc[v] == -1:
                    parent[v] = u
                    children[u] += 1
                    disc[v] = low[v] = time
                    time += 1
                    stack.append((v, iter(neighbours.get(v, ()))))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], disc[v])
            else:
                stack.pop()
                if not stack:
                    continue
                p = stack[-1][0]
                low[p] = min(low[p], low[u])
                if parent[p] == -1 and children[p] > 1:
                    points.add(p)
                if parent[p] != -1 and low[u] >= disc[p]:
                    points.add(p)
    return sorted(points)