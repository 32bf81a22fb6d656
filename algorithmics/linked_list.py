"""Singly linked lists and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next


def sorted_merge(first: Node | None, second: Node | None) -> Node | None:
    """Merge two sorted lists by relinking their nodes; ties take from second."""
    head = Node(None)
    tail = head
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return head.next


def from_values(values: Iterable[Any]) -> Node | None:
    """Build a linked list holding values in order."""
    head = Node(None)
    tail = head
    for value in values:
        tail.next = Node(value)
        tail = tail.next
    return head.next


def to_values(node: Node | None) -> list:
    """Return the data of a linked list as a Python list."""
    return [] if node is None else list(node)