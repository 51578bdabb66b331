"""Bounded and unbounded FIFO queues."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class QueueOverflow(OverflowError):
    """Raised when a value is added to a full queue."""


class QueueUnderflow(IndexError):
    """Raised when a value is taken from an empty queue."""


class ArrayQueue:
    """A queue over a fixed number of slots that are never reused.

    Every enqueue consumes one slot, so after ``size`` values have been
    added the queue reports overflow even if some were dequeued.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []
        self._head = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._items) == self.size:
            raise QueueOverflow("Overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._head == len(self._items):
            raise QueueUnderflow("Under flow")
        value = self._items[self._head]
        self._head += 1
        return value

    def __iter__(self) -> Iterator:
        return iter(self._items[self._head:])

    def __len__(self) -> int:
        return len(self._items) - self._head


class CircularQueue:
    """A ring-buffer queue of ``size`` slots holding at most ``size - 1`` values."""

    def __init__(self, size: int = 10) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    @property
    def size(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        following = (self._rear + 1) % self.size
        if following == self._front:
            raise QueueOverflow("Q is overflow")
        self._rear = following
        self._slots[following] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueUnderflow("Q is empty")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def __iter__(self) -> Iterator:
        index = self._front
        while index != self._rear:
            index = (index + 1) % self.size
            yield self._slots[index]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueUnderflow("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)