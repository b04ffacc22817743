"""Binary min-heap stored in a list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class MinHeap:
    """Min-heap; iteration yields the elements in their storage order."""

    def __init__(self) -> None:
        self._heap: list[Any] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index:
            parent = (index - 1) // 2
            if not heap[parent] > heap[index]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] < heap[smallest]:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def insert(self, value: Any) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> Any:
        """Remove and return the smallest element; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("heap is empty")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return smallest

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._heap)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._heap)