"""Hash tables: separate chaining and open addressing with three probe strategies."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class TableFullError(Exception):
    """Raised when an open-addressing probe finds no free slot."""


def int_hash(key: int, capacity: int) -> int:
    """Map an integer key to a bucket index by taking it modulo ``capacity``."""
    return key % capacity


def string_hash(key: str, capacity: int) -> int:
    """Polynomial rolling hash with multiplier 31, reduced modulo ``capacity``."""
    value = 0
    for ch in key:
        value = (value * 31 + ord(ch)) % capacity
    return value


HashFunction = Callable[[Any, int], int]


class ChainedHashTable:
    """A hash table whose buckets are lists of keys (separate chaining)."""

    def __init__(self, capacity: int, hash_function: HashFunction = int_hash) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._hash = hash_function
        self._buckets: list[list[Any]] = [[] for _ in range(capacity)]

    def _bucket(self, key: Any) -> list[Any]:
        return self._buckets[self._hash(key, self.capacity)]

    def insert(self, key: Any) -> None:
        """Append ``key`` to its bucket; duplicates are kept."""
        self._bucket(key).append(key)

    def search(self, key: Any) -> bool:
        return key in self._bucket(key)

    def remove(self, key: Any) -> None:
        """Remove every occurrence of ``key``; absent keys are ignored."""
        bucket = self._bucket(key)
        bucket[:] = [element for element in bucket if element != key]

    def buckets(self) -> list[list[Any]]:
        """Return a copy of every bucket, in index order."""
        return [list(bucket) for bucket in self._buckets]

    def format(self) -> str:
        """Render one ``Index i: a -> b -> NULL`` line per bucket."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            chain = "".join(f"{element} -> " for element in bucket)
            lines.append(f"Index {index}: {chain}NULL")
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        return self.search(key)

    def __repr__(self) -> str:
        return f"ChainedHashTable(capacity={self.capacity}, buckets={self._buckets!r})"


class OpenAddressingTable:
    """A fixed-size table of integer keys resolved by probing for a free slot."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    def _step_probe(self, start: int, step: int) -> Iterator[int]:
        index = start
        while True:
            yield index
            index = (index + step) % self.size
            if index == start:
                return

    def _quadratic_probe(self, start: int) -> Iterator[int]:
        yield start
        i = 1
        while (index := (start + i * i) % self.size) != start:
            yield index
            i += 1

    def _place(self, key: int, indices: Iterator[int]) -> int:
        for index in indices:
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError("Table is full")

    def insert_linear(self, key: int) -> int:
        """Insert with linear probing; return the slot used."""
        return self._place(key, self._step_probe(key % self.size, 1))

    def insert_quadratic(self, key: int) -> int:
        """Insert with quadratic probing; return the slot used."""
        return self._place(key, self._quadratic_probe(key % self.size))

    def insert_double_hash(self, key: int) -> int:
        """Insert with double hashing (step ``1 + key % (size - 1)``); return the slot used."""
        if self.size < 2:
            raise ValueError("double hashing needs a table of at least 2 slots")
        step = 1 + key % (self.size - 1)
        return self._place(key, self._step_probe(key % self.size, step))

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slots; None marks an empty slot."""
        return list(self._slots)

    def format(self) -> str:
        """Render one ``i: key`` or ``i: Empty`` line per slot."""
        return "\n".join(
            f"{index}: {'Empty' if key is None else key}"
            for index, key in enumerate(self._slots)
        )

    def __repr__(self) -> str:
        return f"OpenAddressingTable(size={self.size}, slots={self._slots!r})"