"""Bounded and unbounded LIFO stacks."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class StackOverflow(OverflowError):
    """Raised when a value is pushed onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when a value is taken from an empty stack."""


class ArrayStack:
    """A stack holding at most ``size`` values."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if self.is_full():
            raise StackOverflow("Stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflow("Stack underflow")
        return self._items.pop()

    def peek(self, pos: int = 1) -> Any:
        """Return the value ``pos`` places from the top, 1 being the top."""
        if pos <= 0 or pos > len(self._items):
            raise IndexError("Invalid position")
        return self._items[-pos]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def __iter__(self) -> Iterator:
        """Iterate from the top to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class LinkedStack:
    """An unbounded stack; initial values are pushed in the order given."""

    def __init__(self, values: Iterable = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("Stack is Empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("Stack is Empty")
        return self._items[-1]

    def __iter__(self) -> Iterator:
        """Iterate from the top to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)