"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Any


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most capacity items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        """Put item on top of the stack."""
        if self.is_full():
            raise StackOverflow(f"stack is full (capacity {self.capacity})")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflow("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflow("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)