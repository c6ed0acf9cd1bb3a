"""Binary trees built level by level, with traversals and structural counts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from algokit.queues import LinkedQueue
from algokit.stack import LinkedStack

NO_CHILD = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(values: Iterable[int]) -> TreeNode:
    """Build a tree from values given in level order.

    The first value is the root. Then, for every node in the order the
    nodes were created, two values follow: its left and its right child.
    A value of -1 means that child is absent. The root is always created.
    """
    it = iter(values)

    def take(what: str) -> int:
        try:
            return next(it)
        except StopIteration:
            raise ValueError(f"input ended before {what} was given") from None

    root = TreeNode(take("the root value"))
    pending = LinkedQueue()
    pending.enqueue(root)
    while not pending.is_empty():
        node = pending.dequeue()
        left = take(f"the left child of {node.data}")
        if left != NO_CHILD:
            node.left = TreeNode(left)
            pending.enqueue(node.left)
        right = take(f"the right child of {node.data}")
        if right != NO_CHILD:
            node.right = TreeNode(right)
            pending.enqueue(node.right)
    return root


def preorder(node: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    if node is None:
        return []
    return [node.data, *preorder(node.left), *preorder(node.right)]


def inorder(node: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    if node is None:
        return []
    return [*inorder(node.left), node.data, *inorder(node.right)]


def postorder(node: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    if node is None:
        return []
    return [*postorder(node.left), *postorder(node.right), node.data]


def iterative_preorder(node: Optional[TreeNode]) -> list[int]:
    """Preorder traversal using an explicit stack."""
    result: list[int] = []
    stack = LinkedStack()
    while node is not None or not stack.is_empty():
        if node is not None:
            result.append(node.data)
            stack.push(node)
            node = node.left
        else:
            node = stack.pop().right
    return result


def iterative_inorder(node: Optional[TreeNode]) -> list[int]:
    """Inorder traversal using an explicit stack."""
    result: list[int] = []
    stack = LinkedStack()
    while node is not None or not stack.is_empty():
        if node is not None:
            stack.push(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.data)
            node = node.right
    return result


def level_order(node: Optional[TreeNode]) -> list[int]:
    """Values level by level, left to right."""
    if node is None:
        return []
    result = [node.data]
    pending = LinkedQueue()
    pending.enqueue(node)
    while not pending.is_empty():
        current = pending.dequeue()
        for child in (current.left, current.right):
            if child is not None:
                result.append(child.data)
                pending.enqueue(child)
    return result


def height(node: Optional[TreeNode]) -> int:
    """Number of levels; 0 for an empty tree."""
    if node is None:
        return 0
    return max(height(node.left), height(node.right)) + 1


def count(node: Optional[TreeNode]) -> int:
    """Number of nodes."""
    if node is None:
        return 0
    return count(node.left) + count(node.right) + 1


def sum_elements(node: Optional[TreeNode]) -> int:
    """Sum of all node values."""
    if node is None:
        return 0
    return sum_elements(node.left) + sum_elements(node.right) + node.data


def leaf_count(node: Optional[TreeNode]) -> int:
    """Number of nodes with no children."""
    if node is None:
        return 0
    below = leaf_count(node.left) + leaf_count(node.right)
    return below + 1 if node.is_leaf else below


def degree2_count(node: Optional[TreeNode]) -> int:
    """Number of nodes with two children."""
    if node is None:
        return 0
    below = degree2_count(node.left) + degree2_count(node.right)
    return below + 1 if node.left is not None and node.right is not None else below


def internal_count(node: Optional[TreeNode]) -> int:
    """Number of nodes with at least one child."""
    if node is None:
        return 0
    below = internal_count(node.left) + internal_count(node.right)
    return below if node.is_leaf else below + 1


def _join(values: Sequence[int]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a tree from level-order integers and print its traversals and counts."""
    parser = argparse.ArgumentParser(
        prog="binary-tree",
        description=(
            "Build a binary tree from values in level order; -1 marks a missing "
            "child. Values are read from standard input when none are given."
        ),
    )
    parser.add_argument("values", nargs="*", type=int, help="tree values in level order")
    args = parser.parse_args(argv)

    values: list[int] = args.values
    if not values:
        try:
            values = [int(token) for token in sys.stdin.read().split()]
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    try:
        root = build_tree(values)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Preorder traversal -> {_join(preorder(root))}")
    print(f"Inorder traversal -> {_join(inorder(root))}")
    print(f"Postorder traversal -> {_join(postorder(root))}")
    print(f"Iterative preorder traversal -> {_join(iterative_preorder(root))}")
    print(f"Iterative inorder traversal -> {_join(iterative_inorder(root))}")
    print(f"Level order traversal -> {_join(level_order(root))}")
    print(f"Count of nodes -> {count(root)}")
    print(f"Height of tree -> {height(root)}")
    print(f"Sum of elements -> {sum_elements(root)}")
    print(f"Leaf Nodes -> {leaf_count(root)}")
    print(f"Nodes of degree 2 -> {degree2_count(root)}")
    print(f"All internal nodes -> {internal_count(root)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())