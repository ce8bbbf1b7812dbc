"""Singly linked list with positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A list node holding ``data`` and a link to the next node."""

    data: Any
    next: Optional[Node] = None


def traverse(head: Optional[Node]) -> Iterator[Any]:
    """Yield the data of every node from ``head`` to the end of the chain."""
    node = head
    while node is not None:
        yield node.data
        node = node.next


def format_values(head: Optional[Node]) -> str:
    """Render a chain of nodes as ``Values-> { a, b, }``."""
    return "Values-> { " + "".join(f"{value}, " for value in traverse(head)) + "}"


class LinkedList:
    """A singly linked list of nodes starting at ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _node_at(self, position: int) -> Node:
        node = self.head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at_head(self, value: Any) -> None:
        self.head = Node(value, self.head)
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        if self.head is None:
            self.insert_at_head(value)
            return
        self._node_at(self._size - 1).next = Node(value)
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (0-based)."""
        if position < 0:
            raise IndexError("Position must be non-negative.")
        if position == 0:
            self.insert_at_head(value)
            return
        if position > self._size:
            raise IndexError("Position out of bounds.")
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self.head is None:
            raise ValueError("List is empty.")
        if self.head.data == value:
            self.head = self.head.next
            self._size -= 1
            return
        node = self.head
        while node.next is not None and node.next.data != value:
            node = node.next
        if node.next is None:
            raise ValueError("Value not found.")
        node.next = node.next.next
        self._size -= 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its data."""
        if self.head is None:
            raise IndexError("List is empty.")
        if position < 0:
            raise IndexError("Position must be non-negative.")
        if position >= self._size:
            raise IndexError("Position out of bounds.")
        if position == 0:
            removed = self.head
            self.head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._size -= 1
        return removed.data

    def clear(self) -> None:
        self.head = None
        self._size = 0

    def format(self) -> str:
        """Render as ``a -> b -> nullptr`` or ``List is empty.``."""
        if self.head is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "nullptr"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return traverse(self.head)

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"