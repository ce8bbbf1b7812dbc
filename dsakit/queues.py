"""FIFO queues: a linear array queue, a circular buffer queue and an unbounded queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import islice
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing into a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when dequeuing or peeking an empty queue."""


class LinearQueue:
    """An array queue whose slots are never reused.

    Each enqueue takes the next slot of a buffer of ``capacity`` slots.
    Dequeuing moves the front forward but does not free a slot, so the
    queue reports full once ``capacity`` values have been enqueued in
    total, even if some of them have been dequeued since.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("Queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        value = self._slots[self._front]
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def format(self) -> str:
        """Render front to rear as ``values-> { a, b }``."""
        items = ", ".join(str(item) for item in self)
        return f"values-> {{ {items} }}" if items else "values-> { }"

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return islice(self._slots, self._front, None)

    def __repr__(self) -> str:
        return f"LinearQueue(capacity={self.capacity}, items={list(self)!r})"


class CircularQueue:
    """A bounded queue stored in a ring buffer whose slots are reused."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError("Queue is full!")
        rear = (self._front + self._count) % self.capacity
        self._buffer[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._count -= 1
        self._front = 0 if self._count == 0 else (self._front + 1) % self.capacity
        return value

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty!")
        return self._buffer[self._front]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def format(self) -> str:
        """Render as ``Queue elements: a b c`` or ``Queue is empty!``."""
        if self.is_empty():
            return "Queue is empty!"
        return "Queue elements: " + " ".join(str(item) for item in self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._buffer[(self._front + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularQueue(capacity={self.capacity}, items={list(self)!r})"


class LinkedQueue:
    """An unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("Queue is empty. Cannot dequeue.")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue is empty.")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def format(self) -> str:
        """Render as ``a b c`` or ``Queue is empty.``."""
        if not self._items:
            return "Queue is empty."
        return " ".join(str(item) for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"