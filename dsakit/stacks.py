"""Bounded (or unbounded) LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A LIFO stack; ``capacity`` of None means no upper bound."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow!")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack underflow!")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty!")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self.capacity is not None and len(self._items) >= self.capacity

    def clear(self) -> None:
        self._items.clear()

    def format(self) -> str:
        """Render bottom to top as ``Values -> { a, b }``."""
        label = "Values" if len(self._items) > 1 else "Value"
        if not self._items:
            return f"{label} -> {{ null }}"
        return f"{label} -> {{ {', '.join(str(item) for item in self._items)} }}"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Stack(capacity={self.capacity}, items={self._items!r})"