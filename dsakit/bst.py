"""Binary search tree with insertion, deletion and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.binary_tree import TreeNode


class BinarySearchTree:
    """Binary search tree; equal keys go to the right subtree."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, item: Any) -> None:
        new = TreeNode(item)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if item < node.data:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def search(self, key: Any) -> TreeNode | None:
        node = self.root
        while node is not None and node.data != key:
            node = node.left if key < node.data else node.right
        return node

    def delete(self, key: Any) -> None:
        """Remove the first node found holding ``key``; no-op if absent."""
        self.root = self._delete(self.root, key)

    @classmethod
    def _delete(cls, root: TreeNode | None, key: Any) -> TreeNode | None:
        parent = None
        node = root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return root
        if node.left is not None and node.right is not None:
            largest = node.left
            while largest.right is not None:
                largest = largest.right
            node.data = largest.data
            node.left = cls._delete(node.left, largest.data)
            return root
        child = node.left if node.left is not None else node.right
        if parent is None:
            return child
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return root

    def find_min(self) -> Any | None:
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.data

    def find_max(self) -> Any | None:
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.data

    def _iter_inorder(self) -> Iterator[Any]:
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def _iter_root_first(self, left_first: bool) -> Iterator[Any]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            children = (node.right, node.left) if left_first else (node.left, node.right)
            stack.extend(child for child in children if child is not None)

    def inorder(self) -> list[Any]:
        """Keys in left, root, right order."""
        return list(self._iter_inorder())

    def preorder(self) -> list[Any]:
        """Keys in root, left, right order."""
        return list(self._iter_root_first(left_first=True))

    def postorder(self) -> list[Any]:
        """Keys in left, right, root order."""
        return list(self._iter_root_first(left_first=False))[::-1]

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None