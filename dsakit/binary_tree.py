"""Unordered binary tree that fills children along its left spine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


class BinaryTree:
    """Binary tree without ordering.

    A new item becomes the left child of the first node on the left spine
    that has no left child, or else its right child.
    """

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, item: Any) -> None:
        new = TreeNode(item)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if node.left is None:
                node.left = new
                return
            if node.right is None:
                node.right = new
                return
            node = node.left

    def search(self, key: Any) -> TreeNode | None:
        """Return the first node in preorder holding ``key``, or None."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.data == key:
                return node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return None

    def inorder(self) -> list[Any]:
        return list(_inorder(self.root))

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None