"""Small container types: a queue built on two stacks and a bounded deque."""

from __future__ import annotations

from collections import deque


class TwoStackQueue:
    """A FIFO queue backed by an input stack and an output stack."""

    def __init__(self) -> None:
        self._in: list[int] = []
        self._out: list[int] = []

    def __len__(self) -> int:
        return len(self._in) + len(self._out)

    def _refill(self) -> None:
        if not self._out:
            while self._in:
                self._out.append(self._in.pop())
        if not self._out:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        """Add ``x`` at the back."""
        self._in.append(x)

    def pop(self) -> int:
        """Remove and return the front element."""
        self._refill()
        return self._out.pop()

    def peek(self) -> int:
        """Return the front element without removing it."""
        self._refill()
        return self._out[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._in and not self._out


class CircularDeque:
    """A double-ended queue holding at most ``k`` elements."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError(f"capacity must be non-negative, got {k}")
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        """Add ``value`` at the front; return False if the deque is full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add ``value`` at the back; return False if the deque is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Drop the front element; return False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Drop the back element; return False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """Return the front element."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[0]

    def get_rear(self) -> int:
        """Return the back element."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the deque holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the deque holds ``k`` elements."""
        return len(self._items) >= self._capacity