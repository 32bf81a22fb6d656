"""Greedy scheduling and knapsack algorithms."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and a profit."""

    number: int
    deadline: int
    profit: int


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of non-overlapping (start, end) activities, picked by earliest end."""
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Maximum profit from (profit, weight) items when items may be split."""
    pairs = list(items)
    for _, weight in pairs:
        if weight <= 0:
            raise ValueError(f"item weights must be positive, got {weight}")
    pairs.sort(key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    remaining = capacity
    for profit, weight in pairs:
        if weight <= remaining:
            total += profit
            remaining -= weight
        elif remaining > 0:
            total += profit * remaining / weight
            remaining = 0
    return total


def job_sequencing(jobs: Iterable[Job]) -> tuple[list[Job], int]:
    """Schedule jobs in unit slots to maximise profit.

    Each job, most profitable first, takes the latest free slot before its
    deadline. Returns the scheduled jobs in slot order and the total profit.
    """
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    total = 0
    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                total += job.profit
                break
    return [job for job in slots if job is not None], total