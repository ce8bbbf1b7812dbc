"""Fixed-capacity array with positional insert and delete, plus search helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class ArrayFullError(Exception):
    """Raised when inserting into an array that has no free slot."""


def linear_search(items: Iterable[Any], value: Any) -> bool:
    """Return True if ``value`` occurs anywhere in ``items``."""
    return any(item == value for item in items)


def binary_search(items: Sequence[Any], value: Any) -> int | None:
    """Return the index of ``value`` in the ascending ``items``, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        current = items[mid]
        if current == value:
            return mid
        if current < value:
            low = mid + 1
        else:
            high = mid - 1
    return None


class FixedArray:
    """An array with a fixed capacity whose used part grows and shrinks."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def insert(self, value: Any, index: int = 0) -> None:
        """Insert ``value`` at ``index``, shifting later elements right."""
        if self.is_full():
            raise ArrayFullError("array is full")
        if index < 0 or index > len(self._items):
            raise IndexError(
                f"index must be within 0 and {len(self._items)}"
            )
        self._items.insert(index, value)

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"index must be within 0 and {len(self._items)}"
            )
        return self._items.pop(index)

    def remove(self, value: Any) -> None:
        """Remove the first occurrence of ``value``."""
        self.delete_at(self.index_of(value))

    def index_of(self, value: Any) -> int:
        """Return the index of the first occurrence of ``value``."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the array")

    def binary_search(self, value: Any) -> int | None:
        """Search the (sorted) used part; return the index or None."""
        return binary_search(self._items, value)

    def sort(self, descending: bool = False) -> None:
        """Sort the used part in place."""
        self._items.sort(reverse=descending)

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def format(self) -> str:
        """Render the values as ``Values-> { a, b }``."""
        label = "Values" if len(self._items) > 1 else "Value"
        body = f"{{ {', '.join(str(item) for item in self._items)} }}" if self._items else ""
        return f"{label}-> {body}" if self._items else f"{label} -> "

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return linear_search(self._items, value)

    def __repr__(self) -> str:
        return f"FixedArray(capacity={self.capacity}, items={self._items!r})"