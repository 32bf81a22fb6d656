"""Disjoint-set forest with union by rank and path compression."""

from __future__ import annotations

from collections.abc import Iterable


class UnionFind:
    """A partition of the integers 0..size-1 into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._count = size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"element {item} is out of range")

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def same_set(self, first: int, second: int) -> bool:
        """Whether first and second belong to the same set."""
        return self.find(first) == self.find(second)

    def set_size(self, item: int) -> int:
        """Number of elements in the set holding item."""
        return self._size[self.find(item)]

    def num_sets(self) -> int:
        """Number of disjoint sets currently maintained."""
        return self._count

    def union(self, first: int, second: int) -> None:
        """Merge the sets holding first and second."""
        x, y = self.find(first), self.find(second)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._count -= 1


def process_queries(size: int, commands: Iterable[tuple[str, int, int]]) -> list[bool]:
    """Run (command, x, y) triples over elements 0..size.

    A "union" command merges the two sets; any other command asks whether
    x and y share a set, and its answer is collected in order.
    """
    sets = UnionFind(size + 1)
    answers = []
    for command, x, y in commands:
        if command == "union":
            sets.union(x, y)
        else:
            answers.append(sets.same_set(x, y))
    return answers