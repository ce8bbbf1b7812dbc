"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class AVLNode:
    """An AVL tree node; ``height`` counts nodes on the longest downward path."""

    key: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Return the stored height of ``node``, or 0 for an empty subtree."""
    return node.height if node is not None else 0


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return left height minus right height, or 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right around its left child; return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("cannot rotate right without a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate ``node`` left around its right child; return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("cannot rotate left without a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update_height(node)
    balance = balance_factor(node)

    if balance > 1 and node.left is not None:
        if key < node.left.key:
            return rotate_right(node)
        if key > node.left.key:
            node.left = rotate_left(node.left)
            return rotate_right(node)
    if balance < -1 and node.right is not None:
        if key > node.right.key:
            return rotate_left(node)
        if key < node.right.key:
            node.right = rotate_right(node.right)
            return rotate_left(node)
    return node


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)

    _update_height(node)
    balance = balance_factor(node)

    if balance > 1:
        if balance_factor(node.left) < 0:
            assert node.left is not None
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1:
        if balance_factor(node.right) > 0:
            assert node.right is not None
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


def _in_order(node: Optional[AVLNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _in_order(node.left)
    yield node.key
    yield from _in_order(node.right)


class AVLTree:
    """A binary search tree kept height-balanced by rotations.

    Keys are unique: inserting a key already present leaves the tree unchanged.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if key in self:
            return False
        self.root = _insert(self.root, key)
        self._size += 1
        return True

    def delete(self, key: Any) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self.root = _delete(self.root, key)
        self._size -= 1
        return True

    def in_order(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(_in_order(self.root))

    def height(self) -> int:
        """Return the height of the whole tree (0 when empty)."""
        return height(self.root)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"AVLTree({self.in_order()!r})"