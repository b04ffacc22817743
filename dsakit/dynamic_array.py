"""A growable array that manages its own capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class DynamicArray(Generic[T]):
    """Array whose capacity doubles whenever an insertion finds it full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    def _make_room(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = max(1, self._capacity * 2)

    def add_first(self, element: T) -> None:
        """Insert ``element`` at the front."""
        self._make_room()
        self._items.insert(0, element)

    def add_last(self, element: T) -> None:
        """Append ``element`` at the end."""
        self._make_room()
        self._items.append(element)

    def remove_first(self) -> T | None:
        """Remove and return the first element; do nothing when empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    def remove_last(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("array is empty")
        return self._items.pop()

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._make_room()
        self._items.insert(index, element)

    def remove_at(self, index: int) -> T | None:
        """Remove and return the element at ``index``; do nothing when empty."""
        if not self._items:
            return None
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items.pop(index)

    def clear(self) -> None:
        """Drop every element while keeping the current capacity."""
        self._items.clear()

    def front(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("array is empty")
        return self._items[-1]

    def capacity(self) -> int:
        return self._capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the number of stored elements."""
        self._capacity = len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return "  ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"