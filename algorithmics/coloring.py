"""Greedy vertex colouring."""

from __future__ import annotations

from collections.abc import Iterable


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices 0..vertex_count-1 in order with the smallest free colour.

    Returns the number of colours used and each vertex's colour.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
    neighbours: list[list[int]] = [[] for _ in range(vertex_count)]
    for x, y in edges:
        if not (0 <= x < vertex_count and 0 <= y < vertex_count):
            raise ValueError(f"edge ({x}, {y}) has a vertex out of range")
        neighbours[x].append(y)
        neighbours[y].append(x)

    colors = [-1] * vertex_count
    for vertex in range(vertex_count):
        taken = {colors[n] for n in neighbours[vertex] if colors[n] != -1}
        colors[vertex] = next(c for c in range(vertex_count) if c not in taken)
    return (max(colors) + 1 if colors else 0), colors