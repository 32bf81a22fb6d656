"""Linear and binary search over sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first element equal to key, or None."""
    return next((i for i, v in enumerate(values) if v == key), None)


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element not less than key in a sorted sequence."""
    return bisect.bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element greater than key in a sorted sequence."""
    return bisect.bisect_right(values, key)


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Whether key occurs in a sorted sequence."""
    i = lower_bound(values, key)
    return i < len(values) and values[i] == key


def count_occurrences(values: Sequence[Any], key: Any) -> int:
    """Number of elements equal to key in a sorted sequence."""
    return upper_bound(values, key) - lower_bound(values, key)