"""Stacks backed by a bounded array and by linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """Stack with a fixed maximum size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        value = self._top.data
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack downwards."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next