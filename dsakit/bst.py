"""Binary trees: node type, depth-first traversals and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node holding ``data`` and links to two children."""

    data: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def in_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data left subtree, then root, then right subtree."""
    if node is None:
        return
    yield from in_order(node.left)
    yield node.data
    yield from in_order(node.right)


def pre_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data root first, then left subtree, then right subtree."""
    if node is None:
        return
    yield node.data
    yield from pre_order(node.left)
    yield from pre_order(node.right)


def post_order(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield data left subtree, then right subtree, then root."""
    if node is None:
        return
    yield from post_order(node.left)
    yield from post_order(node.right)
    yield node.data


class BinarySearchTree:
    """A binary search tree; smaller values go left, larger go right.

    With ``allow_duplicates`` an equal value is placed in the right
    subtree; otherwise inserting a value already present does nothing.
    """

    def __init__(self, values: Iterable[Any] = (), allow_duplicates: bool = False) -> None:
        self.root: Optional[TreeNode] = None
        self.allow_duplicates = allow_duplicates
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            self._size += 1
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            elif value > node.data or self.allow_duplicates:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
            else:
                return
        self._size += 1

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return False if none was found.

        A node with two children takes the value of its in-order
        successor, which is then removed from the right subtree.
        """
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def minimum(self) -> Any:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def in_order(self) -> list[Any]:
        return list(in_order(self.root))

    def pre_order(self) -> list[Any]:
        return list(pre_order(self.root))

    def post_order(self) -> list[Any]:
        return list(post_order(self.root))

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if value < node.data else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()!r})"