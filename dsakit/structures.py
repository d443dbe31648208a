"""Container structures: a queue built from stacks, a stack built from queues,
and a timestamped key-value store."""

from __future__ import annotations

import bisect
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class StackQueue(Generic[T]):
    """First-in first-out queue backed by two stacks."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def push(self, x: T) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> T:
        """Remove and return the item at the front of the queue."""
        if not self._outbox:
            if not self._inbox:
                raise IndexError("pop from an empty queue")
            self._outbox.extend(reversed(self._inbox))
            self._inbox.clear()
        return self._outbox.pop()


class QueueStack(Generic[T]):
    """Last-in first-out stack backed by queues."""

    def __init__(self) -> None:
        self._queue: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: T) -> None:
        """Put ``x`` on top of the stack."""
        fresh: deque[T] = deque([x])
        fresh.extend(self._queue)
        self._queue = fresh

    def pop(self) -> T:
        """Remove and return the item on top of the stack."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()


class TimeMap:
    """Key-value store that keeps every value with the timestamp it was set at.

    Timestamps for one key are expected to be set in increasing order.
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[list[int], list[str]]] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        """Record ``value`` for ``key`` at ``timestamp``."""
        times, values = self._entries.setdefault(key, ([], []))
        times.append(timestamp)
        values.append(value)

    def get(self, key: str, timestamp: int) -> str:
        """Return the latest value set at or before ``timestamp``, or ``""``."""
        entry = self._entries.get(key)
        if entry is None:
            return ""
        times, values = entry
        pos = bisect.bisect_right(times, timestamp)
        return values[pos - 1] if pos else ""