"""Bounded FIFO queue of messages."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

SIZE_QUEUE = 16

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when adding to a full queue."""


class QueueEmptyError(Exception):
    """Raised when removing from an empty queue."""


class MessageQueue(Generic[T]):
    """A ring queue of SIZE_QUEUE slots, one of which is always left free."""

    capacity = SIZE_QUEUE - 1

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def enqueue(self, item: T) -> None:
        """Add an item at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)