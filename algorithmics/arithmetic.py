"""Euclid's greatest common divisor and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Hashable


def gcd(m: int, n: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    Raises ZeroDivisionError when n is zero.
    """
    while m % n != 0:
        m, n = n, m % n
    return abs(n)


def hanoi_moves(
    disks: int,
    source: Hashable = "A",
    helper: Hashable = "B",
    destination: Hashable = "C",
) -> Iterator[tuple[int, Hashable, Hashable]]:
    """Yield (disk, from_peg, to_peg) moves that shift disks from source to destination."""
    if disks < 0:
        raise ValueError(f"number of disks must be non-negative, got {disks}")
    if disks == 0:
        return
    yield from hanoi_moves(disks - 1, source, destination, helper)
    yield (disks, source, destination)
    yield from hanoi_moves(disks - 1, helper, source, destination)