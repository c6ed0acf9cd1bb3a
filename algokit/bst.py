"""Unbalanced binary search tree of distinct keys."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    data: int
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _height(node: Optional[BSTNode]) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _rightmost(node: BSTNode) -> BSTNode:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: BSTNode) -> BSTNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[BSTNode], key: int) -> Optional[BSTNode]:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.is_leaf:
        return None
    elif _height(node.left) > _height(node.right):
        # The taller side gives up its inorder predecessor.
        replacement = _rightmost(node.left)
        node.data = replacement.data
        node.left = _delete(node.left, replacement.data)
    else:
        replacement = _leftmost(node.right)
        node.data = replacement.data
        node.right = _delete(node.right, replacement.data)
    return node


def _walk(node: Optional[BSTNode]) -> Iterator[int]:
    if node is not None:
        yield from _walk(node.left)
        yield node.data
        yield from _walk(node.right)


class BinarySearchTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        if self.root is None:
            self.root = BSTNode(key)
            return True
        node = self.root
        while True:
            if key < node.data:
                if node.left is None:
                    node.left = BSTNode(key)
                    return True
                node = node.left
            elif key > node.data:
                if node.right is None:
                    node.right = BSTNode(key)
                    return True
                node = node.right
            else:
                return False

    def search(self, key: int) -> Optional[BSTNode]:
        """Return the node holding ``key``, or None if it is absent."""
        node = self.root
        while node is not None:
            if key == node.data:
                return node
            node = node.left if key < node.data else node.right
        return None

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present.

        A node with two subtrees takes the value of its inorder predecessor
        when its left subtree is taller, otherwise of its inorder successor.
        """
        if self.search(key) is None:
            return False
        self.root = _delete(self.root, key)
        return True

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self.root)

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_walk(self.root))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __iter__(self) -> Iterator[int]:
        return _walk(self.root)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"