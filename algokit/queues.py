"""FIFO queues: a one-pass array queue, a circular queue and an unbounded queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


class QueueFullError(Exception):
    """Raised when enqueuing into a queue with no free slot."""


class ArrayQueue:
    """A queue over a fixed number of slots that are used only once.

    Each enqueue consumes a slot and dequeuing does not give it back, so
    after ``size`` enqueues the queue is full even if it has been emptied.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 0:
            raise ValueError(f"queue size must be non-negative, got {size}")
        self.size = size
        self._items: deque[Any] = deque()
        self._used = 0

    def enqueue(self, x: Any) -> None:
        """Append ``x`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(x)
        self._used += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._used == self.size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue(size={self.size}, items={list(self)!r})"


class CircularQueue:
    """A ring-buffer queue of ``size`` slots, one of which always stays free.

    It therefore holds at most ``size - 1`` elements, and slots freed by
    dequeuing are reused.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"circular queue size must be at least 1, got {size}")
        self.size = size
        self._items: deque[Any] = deque()

    @property
    def capacity(self) -> int:
        return self.size - 1

    def enqueue(self, x: Any) -> None:
        """Append ``x`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(x)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue(size={self.size}, items={list(self)!r})"


class LinkedQueue:
    """A queue with no fixed capacity."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, x: Any) -> None:
        """Append ``x`` at the rear."""
        self._items.append(x)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue(items={list(self)!r})"