"""Array-backed binary max-heaps and heap sort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def heapify(values: list, size: int, index: int) -> None:
    """Sift values[index] down within the first size elements to restore the max-heap order."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_max_heap(values: Iterable[Any]) -> list:
    """Return the elements of values arranged as a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), index)
    return items


def heap_sort(values: Iterable[Any]) -> list:
    """Return a sorted copy of values using heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


class MaxHeap:
    """A max-heap kept in a list; iteration walks the array representation."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index] <= items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def push(self, key: Any) -> None:
        """Add key to the heap."""
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def pop_root(self) -> Any:
        """Remove and return the largest element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return root

    def remove(self, value: Any) -> None:
        """Remove one occurrence of value from the heap."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        parent = (index - 1) // 2
        if index > 0 and self._items[index] > self._items[parent]:
            self._sift_up(index)
        else:
            heapify(self._items, len(self._items), index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))