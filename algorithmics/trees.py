"""Binary trees: traversals, height and an unbalanced binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node with links to its children and its parent."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    parent: TreeNode | None = field(default=None, repr=False)


def _inorder_nodes(node: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def inorder(node: TreeNode | None) -> list:
    """Values in left, root, right order."""
    return [n.value for n in _inorder_nodes(node)]


def preorder(node: TreeNode | None) -> list:
    """Values in root, left, right order."""
    result = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.value)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def postorder(node: TreeNode | None) -> list:
    """Values in left, right, root order."""
    result = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.value)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    result.reverse()
    return result


def _levels(node: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [node] if node is not None else []
    while level:
        yield level
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]


def level_order(node: TreeNode | None) -> list:
    """Values level by level from the root, each level left to right."""
    return [n.value for level in _levels(node) for n in level]


def height(node: TreeNode | None) -> int:
    """Number of nodes on the longest path from node down to a leaf."""
    return sum(1 for _ in _levels(node))


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add value to the tree; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value, parent=node)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value, parent=node)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def inorder(self) -> list:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list:
        """Values in root, left, right order."""
        return preorder(self.root)

    def postorder(self) -> list:
        """Values in left, right, root order."""
        return postorder(self.root)

    def level_order(self) -> list:
        """Values level by level from the root."""
        return level_order(self.root)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return height(self.root)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (n.value for n in _inorder_nodes(self.root))