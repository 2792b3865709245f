"""Queue structures: a fixed-size ring buffer, a two-stack queue and a linked deque."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class CircularQueue:
    """A first-in first-out queue over a fixed-size ring buffer."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def enqueue(self, x) -> None:
        """Add ``x`` at the rear; raise OverflowError when the queue is full."""
        if self._size == self.capacity:
            raise OverflowError("queue is full")
        self._slots[(self._head + self._size) % self.capacity] = x
        self._size += 1

    def dequeue(self):
        """Remove and return the front item."""
        if not self._size:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def peek(self):
        """Return the front item without removing it."""
        if not self._size:
            raise IndexError("peek at empty queue")
        return self._slots[self._head]


class StackQueue:
    """A first-in first-out queue built from two stacks (amortised O(1))."""

    def __init__(self) -> None:
        self._inbox: list = []
        self._outbox: list = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x) -> None:
        """Add ``x`` at the rear."""
        self._inbox.append(x)

    def pop(self):
        """Remove and return the front item."""
        self._refill()
        return self._outbox.pop()

    def peek(self):
        """Return the front item without removing it."""
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._inbox and not self._outbox


@dataclass(eq=False)
class _DequeNode:
    value: Any
    prev: _DequeNode | None = None
    next: _DequeNode | None = None


class LinkedDeque:
    """A double-ended queue on a doubly linked list."""

    def __init__(self) -> None:
        self._front: _DequeNode | None = None
        self._back: _DequeNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def push_front(self, x) -> None:
        """Add ``x`` at the front."""
        node = _DequeNode(x, next=self._front)
        if self._front is not None:
            self._front.prev = node
        else:
            self._back = node
        self._front = node
        self._size += 1

    def push_back(self, x) -> None:
        """Add ``x`` at the back."""
        node = _DequeNode(x, prev=self._back)
        if self._back is not None:
            self._back.next = node
        else:
            self._front = node
        self._back = node
        self._size += 1

    def pop_front(self):
        """Remove and return the front item."""
        node = self._front
        if node is None:
            raise IndexError("pop from empty deque")
        self._front = node.next
        if self._front is not None:
            self._front.prev = None
        else:
            self._back = None
        self._size -= 1
        return node.value

    def pop_back(self):
        """Remove and return the back item."""
        node = self._back
        if node is None:
            raise IndexError("pop from empty deque")
        self._back = node.prev
        if self._back is not None:
            self._back.next = None
        else:
            self._front = None
        self._size -= 1
        return node.value

    def peek_front(self):
        """Return the front item without removing it."""
        if self._front is None:
            raise IndexError("peek at empty deque")
        return self._front.value

    def peek_back(self):
        """Return the back item without removing it."""
        if self._back is None:
            raise IndexError("peek at empty deque")
        return self._back.value