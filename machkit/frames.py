"""Frames of integers sent through a locked queue.

A frame is a header of three integers (source, tag, pair count) followed by
that many pairs of integers.
"""

from __future__ import annotations

from collections.abc import Iterable

from machkit.lockedqueue import LockedQueue
from machkit.param import AxisValue
from machkit.paramlist import ParamsList

__all__ = [
    "MAX_FRAME_PAIRS",
    "MAX_STRING_LENGTH",
    "enqueue_basic_frame",
    "enqueue_values_frame",
    "enqueue_params_frame",
    "dequeue_string_frame",
    "enqueue_string_frame",
]

MAX_FRAME_PAIRS = 29
MAX_STRING_LENGTH = 254


def _send(queue: LockedQueue, source: int, tag: int, pairs: list[tuple[int, int]]) -> None:
    frame = [source, tag, len(pairs)]
    for first, second in pairs:
        frame.extend((first, second))
    queue.put_many(frame)


def enqueue_basic_frame(queue: LockedQueue, tag: int, source: int) -> None:
    """Send a frame with no pairs.

    Raises ``queue.Full`` when the frame does not fit.
    """
    _send(queue, source, tag, [])


def enqueue_values_frame(
    queue: LockedQueue, values: Iterable[AxisValue], tag: int, source: int
) -> None:
    """Send acronym/value pairs; at most :data:`MAX_FRAME_PAIRS` are sent."""
    items = list(values)[:MAX_FRAME_PAIRS]
    _send(queue, source, tag, [(ord(v.acronym), v.value) for v in items])


def enqueue_params_frame(
    queue: LockedQueue, params: ParamsList, tag: int, source: int
) -> None:
    """Send the acronyms and values of a parameter list, up to :data:`MAX_FRAME_PAIRS`."""
    items = list(params)[:MAX_FRAME_PAIRS]
    _send(queue, source, tag, [(ord(p.acronym), p.value) for p in items])


def dequeue_string_frame(queue: LockedQueue, length: int) -> str:
    """Read ``length`` pairs and join their values into a string.

    Raises ``queue.Empty`` when fewer pairs are queued.
    """
    return "".join(chr(pair.value) for pair in queue.get_values(length))


def enqueue_string_frame(queue: LockedQueue, text: str, tag: int, source: int) -> None:
    """Send a string, one character per pair, up to :data:`MAX_STRING_LENGTH` characters."""
    _send(queue, source, tag, [(0, ord(ch)) for ch in text[:MAX_STRING_LENGTH]])