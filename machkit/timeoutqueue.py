"""Ring queue whose operations wait for room or data up to a timeout."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from machkit.param import AxisValue
from machkit.ringqueue import RingQueue

__all__ = ["TimeoutQueue", "WAIT_FOREVER"]

WAIT_FOREVER = -1


def _wait_time(timeout: float) -> float | None:
    if timeout == WAIT_FOREVER:
        return None
    if timeout < 0:
        raise ValueError("timeout must be non-negative or WAIT_FOREVER")
    return timeout


class TimeoutQueue(RingQueue):
    """A thread-safe ring queue; timeouts are in seconds, 0 means no wait.

    An operation that cannot proceed within its timeout raises TimeoutError.
    """

    def __init__(self, max_size: int) -> None:
        super().__init__(max_size)
        self._cond = threading.Condition(threading.RLock())

    def enqueue(self, value: int) -> bool:
        with self._cond:
            accepted = super().enqueue(value)
            self._cond.notify_all()
            return accepted

    def dequeue(self) -> int:
        with self._cond:
            value = super().dequeue()
            self._cond.notify_all()
            return value

    def skip(self, count: int) -> None:
        with self._cond:
            super().skip(count)
            self._cond.notify_all()

    def _wait_for(self, predicate, timeout: float) -> None:
        if not self._cond.wait_for(predicate, timeout=_wait_time(timeout)):
            raise TimeoutError("queue operation timed out")

    def put(self, value: int, timeout: float) -> None:
        """Append ``value`` once there is room."""
        with self._cond:
            self._wait_for(lambda: self.available() >= 1, timeout)
            self.enqueue(value)

    def get(self, timeout: float) -> int:
        """Remove and return the oldest value once there is one."""
        with self._cond:
            self._wait_for(lambda: len(self) >= 1, timeout)
            return self.dequeue()

    def put_many(self, values: Iterable[int], timeout: float) -> None:
        """Append all ``values`` once there is room for every one of them."""
        items = list(values)
        with self._cond:
            self._wait_for(lambda: self.available() >= len(items), timeout)
            self.enqueue_many(items)

    def get_many(self, count: int, timeout: float) -> list[int]:
        """Remove and return ``count`` values once that many are queued."""
        with self._cond:
            self._wait_for(lambda: len(self) >= count, timeout)
            return self.dequeue_many(count)

    def get_values(self, count: int, timeout: float) -> list[AxisValue]:
        """Remove ``count`` acronym/value pairs once they are all queued."""
        with self._cond:
            self._wait_for(lambda: len(self) >= 2 * count, timeout)
            return self.dequeue_values(count)