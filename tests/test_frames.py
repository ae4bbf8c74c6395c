from queue import Empty, Full

import pytest

from machkit.frames import (
    MAX_FRAME_PAIRS,
    MAX_STRING_LENGTH,
    dequeue_string_frame,
    enqueue_basic_frame,
    enqueue_params_frame,
    enqueue_string_frame,
    enqueue_values_frame,
)
from machkit.lockedqueue import LockedQueue
from machkit.param import AxisValue, Param
from machkit.paramlist import ParamsList
from machkit.ringqueue import RingQueue


def _queue(size=128):
    return LockedQueue(RingQueue(size))


def test_basic_frame_header():
    queue = _queue()
    enqueue_basic_frame(queue, tag=7, source=3)
    assert queue.get_many(3) == [3, 7, 0]
    assert queue.is_empty()


def test_values_frame_round_trip():
    queue = _queue()
    values = [AxisValue("X", 100), AxisValue("Y", -25), AxisValue("Z", 0)]
    enqueue_values_frame(queue, values, tag=2, source=9)
    assert queue.get_many(3) == [9, 2, len(values)]
    assert queue.get_values(len(values)) == values
    assert queue.is_empty()


def test_values_frame_is_capped():
    queue = _queue(256)
    values = [AxisValue(chr(ord("A") + i % 26), i) for i in range(40)]
    enqueue_values_frame(queue, values, tag=1, source=1)
    header = queue.get_many(3)
    assert header[2] == MAX_FRAME_PAIRS
    assert queue.get_values(MAX_FRAME_PAIRS) == values[:MAX_FRAME_PAIRS]
    assert queue.is_empty()


def test_params_frame_carries_values():
    params = ParamsList(4)
    params.insert(Param("X", value=50, lower_limit=-100, upper_limit=100))
    params.insert(Param("F", value=20, lower_limit=0, upper_limit=100))
    queue = _queue()
    enqueue_params_frame(queue, params, tag=4, source=5)
    assert queue.get_many(3) == [5, 4, len(params)]
    assert queue.get_values(len(params)) == params.values()


def test_string_frame_round_trip():
    queue = _queue()
    text = "G01 X10"
    enqueue_string_frame(queue, text, tag=6, source=2)
    assert queue.get_many(3) == [2, 6, len(text)]
    assert dequeue_string_frame(queue, len(text)) == text
    assert queue.is_empty()


def test_string_frame_pairs_start_with_zero():
    queue = _queue()
    enqueue_string_frame(queue, "ab", tag=0, source=0)
    queue.get_many(3)
    assert queue.get_many(4) == [0, ord("a"), 0, ord("b")]


def test_string_frame_is_capped():
    queue = _queue(1024)
    text = "x" * (MAX_STRING_LENGTH + 20)
    enqueue_string_frame(queue, text, tag=1, source=1)
    assert queue.get_many(3)[2] == MAX_STRING_LENGTH
    assert dequeue_string_frame(queue, MAX_STRING_LENGTH) == text[:MAX_STRING_LENGTH]
    assert queue.is_empty()


def test_dequeue_string_frame_too_short_raises():
    queue = _queue()
    queue.put_many([0, ord("a")])
    with pytest.raises(Empty):
        dequeue_string_frame(queue, 2)
    assert len(queue) == 2


def test_frame_that_does_not_fit_raises_and_leaves_queue():
    queue = _queue(6)
    values = [AxisValue("X", 1), AxisValue("Y", 2)]
    with pytest.raises(Full):
        enqueue_values_frame(queue, values, tag=1, source=1)
    assert queue.is_empty()