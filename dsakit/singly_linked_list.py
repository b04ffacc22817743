"""Singly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class SinglyLinkedList:
    """Linked list supporting constant-time insertion at both ends."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None

    def is_empty(self) -> bool:
        return self._head is None

    def add_first(self, element: Any) -> None:
        node = _Node(element, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node

    def add_last(self, element: Any) -> None:
        node = _Node(element)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def _find_last(self, element: Any) -> _Node | None:
        found = None
        node = self._head
        while node is not None:
            if node.data == element:
                found = node
            node = node.next
        return found

    def add_after(self, element: Any, value: Any) -> None:
        """Insert ``value`` after the last node holding ``element``."""
        anchor = self._find_last(element)
        if anchor is None:
            raise ValueError(f"element {element!r} does not exist")
        anchor.next = _Node(value, anchor.next)
        if anchor is self._tail:
            self._tail = anchor.next

    def remove_first(self) -> None:
        """Drop the first element; do nothing when empty."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None

    def remove_last(self) -> None:
        """Drop the last element; do nothing when empty."""
        if self._head is None:
            return
        if self._head is self._tail:
            self._head = self._tail = None
            return
        node = self._head
        while node.next is not self._tail:
            node = node.next
        node.next = None
        self._tail = node

    def clear(self) -> None:
        self._head = self._tail = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, element: object) -> bool:
        return self._find_last(element) is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"