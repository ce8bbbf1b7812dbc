"""Priority queues: a sorted list with highest priority first and a min-heap."""

from __future__ import annotations

import heapq
from bisect import insort
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count
from typing import Any

from dsakit.queues import QueueEmptyError


@dataclass(frozen=True)
class PriorityItem:
    """A value paired with its priority."""

    data: Any
    priority: int


class LinkedPriorityQueue:
    """Highest priority comes out first; equal priorities leave in arrival order."""

    def __init__(self) -> None:
        self._items: list[PriorityItem] = []

    def enqueue(self, value: Any, priority: int) -> None:
        insort(self._items, PriorityItem(value, priority), key=lambda item: -item.priority)

    def dequeue(self) -> PriorityItem:
        """Remove and return the highest-priority item."""
        if not self._items:
            raise QueueEmptyError("Priority Queue is empty. Cannot dequeue.")
        return self._items.pop(0)

    def peek(self) -> PriorityItem:
        """Return the highest-priority item without removing it."""
        if not self._items:
            raise QueueEmptyError("Priority Queue is empty.")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def format(self) -> str:
        """Render as ``(data, priority: p) ...`` or ``Priority Queue is empty.``."""
        if not self._items:
            return "Priority Queue is empty."
        return " ".join(f"({item.data}, priority: {item.priority})" for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[PriorityItem]:
        return iter(self._items)


class MinPriorityQueue:
    """A binary min-heap: the smallest priority value comes out first."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, PriorityItem]] = []
        self._sequence = count()

    def push(self, data: Any, priority: int) -> None:
        item = PriorityItem(data, priority)
        heapq.heappush(self._heap, (priority, next(self._sequence), item))

    def pop(self) -> PriorityItem:
        """Remove and return the item with the smallest priority."""
        if not self._heap:
            raise QueueEmptyError("Priority queue is empty!")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> PriorityItem:
        """Return the item with the smallest priority without removing it."""
        if not self._heap:
            raise QueueEmptyError("Priority queue is empty!")
        return self._heap[0][2]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)