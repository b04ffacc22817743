"""FIFO queues backed by a bounded ring and by linked nodes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 100


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a full bounded queue."""


class ArrayQueue:
    """Queue with a fixed maximum length."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[Any] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError(f"queue is full, cannot add {value!r}")
        self._items.append(value)

    def dequeue(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


@dataclass(slots=True)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """Unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None
        self._length = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        node = _Node(value)
        if self._back is None:
            self._front = self._back = node
        else:
            self._back.next = node
            self._back = node
        self._length += 1

    def dequeue(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        value = self._front.data
        self._front = self._front.next
        if self._front is None:
            self._back = None
        self._length -= 1
        return value

    def front(self) -> Any:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.data

    def back(self) -> Any:
        if self._back is None:
            raise QueueEmptyError("queue is empty")
        return self._back.data

    def clear(self) -> None:
        self._front = self._back = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next