"""A ring queue guarded by a lock that never makes callers wait."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from queue import Empty, Full

from machkit.param import AxisValue
from machkit.ringqueue import RingQueue

__all__ = ["LockedQueue"]


class LockedQueue:
    """Wraps a :class:`RingQueue` so that reads and writes are done under a lock.

    Operations do not wait: with too little room they raise ``queue.Full``,
    with too little data ``queue.Empty``, and while another user holds
    :attr:`lock` they raise ``BlockingIOError``.
    """

    def __init__(self, queue: RingQueue) -> None:
        self.queue = queue
        self.lock = threading.Lock()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        if not self.lock.acquire(blocking=False):
            raise BlockingIOError("queue is locked by another user")
        try:
            yield
        finally:
            self.lock.release()

    def __len__(self) -> int:
        return len(self.queue)

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return self.queue.is_empty()

    def available(self) -> int:
        """Number of values that can still be put."""
        return self.queue.available()

    def skip(self, count: int) -> None:
        """Drop ``count`` values from the front, as the wrapped queue allows."""
        self.queue.skip(count)

    def put(self, value: int) -> None:
        """Append ``value``."""
        if self.queue.available() < 1:
            raise Full
        with self._locked():
            if not self.queue.enqueue(value):
                raise Full

    def get(self) -> int:
        """Remove and return the oldest value."""
        if len(self.queue) < 1:
            raise Empty
        with self._locked():
            return self.queue.dequeue()

    def put_many(self, values: Iterable[int]) -> None:
        """Append all ``values``, or none when they do not all fit."""
        items = list(values)
        if self.queue.available() < len(items):
            raise Full
        with self._locked():
            self.queue.enqueue_many(items)

    def get_many(self, count: int) -> list[int]:
        """Remove and return ``count`` values, or none when fewer are queued."""
        if len(self.queue) < count:
            raise Empty
        with self._locked():
            return self.queue.dequeue_many(count)

    def get_values(self, count: int) -> list[AxisValue]:
        """Remove ``count`` acronym/value pairs, or none when fewer are queued."""
        if len(self.queue) < 2 * count:
            raise Empty
        with self._locked():
            return self.queue.dequeue_values(count)