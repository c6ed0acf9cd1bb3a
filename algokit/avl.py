"""Self-balancing AVL tree with rotation reporting."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


class Rotation(enum.Enum):
    """The four AVL rotations, named by the path to the imbalance."""

    LL = "LL"
    LR = "LR"
    RR = "RR"
    RL = "RL"


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a leaf has height 1."""

    data: int
    height: int = 1
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _h(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_h(node.left), _h(node.right)) + 1


def _balance(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _h(node.left) - _h(node.right)


def _rotate_ll(p: AVLNode) -> AVLNode:
    pl = p.left
    p.left = pl.right
    pl.right = p
    _update(p)
    _update(pl)
    return pl


def _rotate_rr(p: AVLNode) -> AVLNode:
    pr = p.right
    p.right = pr.left
    pr.left = p
    _update(p)
    _update(pr)
    return pr


def _rotate_lr(p: AVLNode) -> AVLNode:
    pl = p.left
    plr = pl.right
    pl.right = plr.left
    p.left = plr.right
    plr.left = pl
    plr.right = p
    _update(pl)
    _update(p)
    _update(plr)
    return plr


def _rotate_rl(p: AVLNode) -> AVLNode:
    pr = p.right
    prl = pr.left
    pr.left = prl.right
    p.right = prl.left
    prl.right = pr
    prl.left = p
    _update(pr)
    _update(p)
    _update(prl)
    return prl


def _rebalance(node: AVLNode, log: list[Rotation]) -> AVLNode:
    factor = _balance(node)
    if factor == 2:
        if _balance(node.left) >= 0:
            log.append(Rotation.LL)
            return _rotate_ll(node)
        log.append(Rotation.LR)
        return _rotate_lr(node)
    if factor == -2:
        if _balance(node.right) <= 0:
            log.append(Rotation.RR)
            return _rotate_rr(node)
        log.append(Rotation.RL)
        return _rotate_rl(node)
    return node


def _insert(node: Optional[AVLNode], key: int, log: list[Rotation]) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.data:
        node.left = _insert(node.left, key, log)
    elif key > node.data:
        node.right = _insert(node.right, key, log)
    _update(node)
    return _rebalance(node, log)


def _delete(node: Optional[AVLNode], key: int, log: list[Rotation]) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key, log)
    elif key > node.data:
        node.right = _delete(node.right, key, log)
    elif node.is_leaf:
        return None
    elif _h(node.left) > _h(node.right):
        replacement = node.left
        while replacement.right is not None:
            replacement = replacement.right
        node.data = replacement.data
        node.left = _delete(node.left, replacement.data, log)
    else:
        replacement = node.right
        while replacement.left is not None:
            replacement = replacement.left
        node.data = replacement.data
        node.right = _delete(node.right, replacement.data, log)
    _update(node)
    return _rebalance(node, log)


def _inorder(node: Optional[AVLNode]) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: Optional[AVLNode]) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


class AVLTree:
    """An AVL tree of distinct keys.

    Every rotation performed is appended to :attr:`rotations`; insert and
    delete also return the rotations that call caused.
    """

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self.rotations: list[Rotation] = []

    def insert(self, key: int) -> list[Rotation]:
        """Add ``key`` (duplicates are ignored) and rebalance."""
        log: list[Rotation] = []
        self.root = _insert(self.root, key, log)
        self.rotations.extend(log)
        return log

    def delete(self, key: int) -> list[Rotation]:
        """Remove ``key`` if present and rebalance.

        A node with children takes the value of its inorder predecessor when
        its left subtree is taller, otherwise of its inorder successor.
        """
        if key not in self:
            return []
        log: list[Rotation] = []
        self.root = _delete(self.root, key, log)
        self.rotations.extend(log)
        return log

    def inorder(self) -> list[int]:
        """Keys in ascending order."""
        return list(_inorder(self.root))

    def postorder(self) -> list[int]:
        """Keys in left, right, root order."""
        return list(_postorder(self.root))

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _h(self.root)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    def __iter__(self) -> Iterator[int]:
        return _inorder(self.root)

    def __repr__(self) -> str:
        return f"AVLTree({self.inorder()!r})"