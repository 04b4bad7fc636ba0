"""FIFO queue and LIFO stack adapters."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

__all__ = ["Queue", "Stack"]


class Queue:
    """First-in first-out queue: push at the back, pop from the front."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: deque = deque(items or ())

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def front(self) -> Any:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def back(self) -> Any:
        if not self._items:
            raise IndexError("back of empty queue")
        return self._items[-1]

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def swap(self, other: Queue) -> None:
        self._items, other._items = other._items, self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack:
    """Last-in first-out stack."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list = list(items or ())

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def top(self) -> Any:
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def swap(self, other: Stack) -> None:
        self._items, other._items = other._items, self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"