"""Bounded and unbounded LIFO stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class ArrayStack:
    """A stack with a fixed capacity.

    Positions for :meth:`peek` count from the top: position 1 is the top
    element, position ``len(stack)`` is the bottom one.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"stack size must be non-negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put ``x`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack overflow")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items.pop()

    def peek(self, index: int) -> Any:
        """Return the element at ``index`` positions from the top (1-based)."""
        if not 1 <= index <= len(self._items):
            raise IndexError(f"invalid stack position {index}")
        return self._items[-index]

    def stack_top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(size={self.size}, top_first={list(self)!r})"


class LinkedStack:
    """A stack with no fixed capacity."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"LinkedStack(top_first={list(self)!r})"