"""Dynamic programming and exhaustive search problems."""

from __future__ import annotations

import itertools
from collections.abc import Sequence


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Maximum profit of items, each taken whole or not at all, within capacity.

    Returns 0 for a non-positive capacity or no items.
    """
    if len(profits) != len(weights):
        raise ValueError("profits and weights must have the same length")
    if capacity <= 0 or not profits:
        return 0
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        for c in range(capacity, weight - 1, -1):
            best[c] = max(best[c], profit + best[c - weight])
    return best[capacity]


def travelling_salesman(graph: Sequence[Sequence[int]], source: int = 0) -> int:
    """Cost of the cheapest tour that visits every vertex once and returns to source."""
    n = len(graph)
    if n == 0 or any(len(row) != n for row in graph):
        raise ValueError("graph must be a non-empty square matrix")
    if not 0 <= source < n:
        raise ValueError(f"source {source} is out of range")
    others = [v for v in range(n) if v != source]

    def tour_cost(order: tuple[int, ...]) -> int:
        stops = (source, *order, source)
        return sum(graph[a][b] for a, b in zip(stops, stops[1:]))

    return min(tour_cost(order) for order in itertools.permutations(others))