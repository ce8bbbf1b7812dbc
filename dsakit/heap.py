"""Array-backed binary max-heap."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class HeapEmptyError(Exception):
    """Raised when reading or removing from an empty heap."""


class MaxHeap:
    """A binary heap whose root is always the largest element."""

    def __init__(self) -> None:
        self._heap: list[Any] = []

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index] <= heap[parent]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def insert(self, value: Any) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def delete_max(self) -> Any:
        """Remove and return the largest element."""
        if not self._heap:
            raise HeapEmptyError("Heap is empty!")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def get_max(self) -> Any:
        """Return the largest element without removing it."""
        if not self._heap:
            raise HeapEmptyError("Heap is empty!")
        return self._heap[0]

    def format(self) -> str:
        """Render the elements in array order, separated by spaces."""
        return " ".join(str(value) for value in self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in array (level) order."""
        return iter(self._heap)

    def __repr__(self) -> str:
        return f"MaxHeap({self._heap!r})"