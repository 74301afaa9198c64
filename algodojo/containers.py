"""Bounded queue, bounded stack and a stack that tracks its minimum."""

from __future__ import annotations

from collections import deque
from typing import Any


class BoundedQueue:
    """A FIFO queue laid out over a fixed number of slots.

    Every enqueue uses up one slot. Slots are only handed back once the
    queue has been drained completely, so the queue counts as full after
    ``capacity`` enqueues since it was last empty, even if some items
    have been dequeued since.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._slots_used = 0

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def is_full(self) -> bool:
        return self._slots_used == self.capacity

    def enqueue(self, item: Any) -> None:
        """Add an item at the back; raise OverflowError when no slot is left."""
        if self.is_full:
            raise OverflowError("queue is full")
        self._items.append(item)
        self._slots_used += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front; raise IndexError when empty."""
        if not self._items:
            raise IndexError("queue is empty")
        item = self._items.popleft()
        if not self._items:
            self._slots_used = 0
        return item


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 100000) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: Any) -> None:
        """Put an item on top; raise OverflowError when the stack is full."""
        if len(self._items) == self.capacity:
            raise OverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items[-1]


class MinStack:
    """A stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._minimums: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: Any) -> None:
        """Put an item on top."""
        self._items.append(item)
        if not self._minimums or item <= self._minimums[-1]:
            self._minimums.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        item = self._items.pop()
        if item == self._minimums[-1]:
            self._minimums.pop()
        return item

    def minimum(self) -> Any:
        """Return the smallest item held; raise IndexError when empty."""
        if not self._minimums:
            raise IndexError("stack is empty")
        return self._minimums[-1]