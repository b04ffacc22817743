"""Hash table with separate chaining keyed by integers."""

from __future__ import annotations

from typing import Any

DEFAULT_SIZE = 10


class HashTable:
    """Fixed number of buckets; each bucket is a list of (key, value) pairs."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._table: list[list[list[Any]]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[list[Any]]:
        return self._table[key % len(self._table)]

    def insert(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def search(self, key: int) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        for entry_key, value in self._bucket(key):
            if entry_key == key:
                return value
        raise KeyError(key)

    def remove(self, key: int) -> None:
        """Remove ``key`` if present; do nothing otherwise."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                return

    def buckets(self) -> list[list[tuple[int, Any]]]:
        """Snapshot of every bucket's entries in insertion order."""
        return [[(k, v) for k, v in bucket] for bucket in self._table]

    def __contains__(self, key: object) -> bool:
        try:
            self.search(key)  # type: ignore[arg-type]
        except (KeyError, TypeError):
            return False
        return True

    def __str__(self) -> str:
        return "\n".join(
            f"{index}: " + " ".join(f"[{k}: {v}]" for k, v in bucket)
            for index, bucket in enumerate(self._table)
        )