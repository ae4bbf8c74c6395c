"""Fixed-capacity ring buffer of integers."""

from __future__ import annotations

from collections.abc import Iterable

from machkit.param import AxisValue

__all__ = ["RingQueue"]


class RingQueue:
    """A circular FIFO of integers; one slot stays free, so it holds ``max_size - 1``."""

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._buffer = [0] * max_size
        self._head = 0
        self._tail = 0

    def __len__(self) -> int:
        if self._head <= self._tail:
            return self._tail - self._head
        return self._tail + (self.max_size - self._head)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return self._head == self._tail

    def available(self) -> int:
        """Number of values that can still be enqueued."""
        return self.max_size - 1 - len(self)

    def enqueue(self, value: int) -> bool:
        """Append ``value``; return False and leave the queue as is when full."""
        next_pos = self._tail + 1
        if next_pos >= self.max_size:
            next_pos = 0
        if next_pos == self._head:
            return False
        self._buffer[self._tail] = value
        self._tail = next_pos
        return True

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        value = self._buffer[self._head]
        self._head = self._head + 1 if self._head + 1 < self.max_size else 0
        return value

    def skip(self, count: int) -> None:
        """Drop ``count`` values from the front when the new head stays behind the tail."""
        if self._head + count < self.max_size:
            new_head = self._head + count
        else:
            new_head = count - (self.max_size - self._head)
        if new_head <= self._tail:
            self._head = new_head

    def enqueue_many(self, values: Iterable[int]) -> int:
        """Append values in order while space lasts; return how many were taken."""
        return sum(1 for value in values if self.enqueue(value))

    def dequeue_many(self, count: int) -> list[int]:
        """Remove and return the ``count`` oldest values."""
        if count > len(self):
            raise IndexError(f"cannot dequeue {count} values from {len(self)}")
        return [self.dequeue() for _ in range(count)]

    def dequeue_values(self, count: int) -> list[AxisValue]:
        """Remove ``count`` acronym/value pairs, each stored as two integers."""
        if 2 * count > len(self):
            raise IndexError(f"cannot dequeue {count} pairs from {len(self)} values")
        pairs = []
        for _ in range(count):
            acronym = chr(self.dequeue())
            pairs.append(AxisValue(acronym, self.dequeue()))
        return pairs