"""Circular singly linked list addressed through its tail node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit.linked_list import Node


class CircularLinkedList:
    """A circular list; the tail's ``next`` is the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _link_new(self, value: Any) -> Node:
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1
        return node

    def insert_at_head(self, value: Any) -> None:
        self._link_new(value)

    def insert_at_tail(self, value: Any) -> None:
        self._tail = self._link_new(value)

    def insert_at(self, value: Any, position: int) -> None:
        """Insert at ``position``; positions past the end append at the tail."""
        if position < 0:
            raise IndexError("Position must be non-negative.")
        if position == 0 or self._tail is None:
            self.insert_at_head(value)
            return
        previous = self._tail.next
        assert previous is not None
        for _ in range(position - 1):
            if previous is self._tail:
                break
            previous = previous.next
            assert previous is not None
        node = Node(value, previous.next)
        previous.next = node
        if previous is self._tail:
            self._tail = node
        self._size += 1

    def _unlink(self, previous: Node, current: Node) -> None:
        if current is self._tail:
            if current.next is current:
                self._tail = None
            else:
                previous.next = current.next
                self._tail = previous
        else:
            previous.next = current.next
        self._size -= 1

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._tail is None:
            raise ValueError("List is empty.")
        previous: Node = self._tail
        current = self._tail.next
        for _ in range(self._size):
            assert current is not None
            if current.data == value:
                self._unlink(previous, current)
                return
            previous, current = current, current.next
        raise ValueError("Value not found.")

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its data."""
        if self._tail is None:
            raise IndexError("List is empty.")
        if position < 0:
            raise IndexError("Position must be non-negative.")
        if position >= self._size:
            raise IndexError("Position out of bounds.")
        previous: Node = self._tail
        current = self._tail.next
        for _ in range(position):
            assert current is not None
            previous, current = current, current.next
        assert current is not None
        self._unlink(previous, current)
        return current.data

    def clear(self) -> None:
        self._tail = None
        self._size = 0

    def format(self) -> str:
        """Render as ``a -> b -> (back to head)`` or ``List is empty.``."""
        if self._tail is None:
            return "List is empty."
        return "".join(f"{value} -> " for value in self) + "(back to head)"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"