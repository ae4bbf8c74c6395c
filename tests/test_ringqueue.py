import pytest

from machkit.param import AxisValue
from machkit.ringqueue import RingQueue


def test_capacity_is_one_less_than_size():
    q = RingQueue(4)
    assert [q.enqueue(v) for v in (1, 2, 3)] == [True, True, True]
    assert q.enqueue(4) is False
    assert len(q) == 3
    assert q.available() == 0


def test_fifo_order():
    q = RingQueue(8)
    q.enqueue_many([5, 6, 7])
    assert q.dequeue_many(3) == [5, 6, 7]
    assert q.is_empty()


def test_wraparound_keeps_order():
    q = RingQueue(4)
    collected = []
    for value in range(10):
        assert q.enqueue(value)
        if len(q) == 3:
            collected.append(q.dequeue())
    collected.extend(q.dequeue_many(len(q)))
    assert collected == list(range(10))


def test_len_plus_available_is_constant():
    q = RingQueue(6)
    for value in range(12):
        q.enqueue(value)
        assert len(q) + q.available() == 5
        if value % 3 == 0:
            q.dequeue()
            assert len(q) + q.available() == 5


def test_enqueue_many_stops_when_full():
    q = RingQueue(3)
    assert q.enqueue_many([1, 2, 3, 4]) == 2
    assert q.dequeue_many(2) == [1, 2]


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        RingQueue(3).dequeue()


def test_dequeue_many_too_many_raises_and_keeps_data():
    q = RingQueue(5)
    q.enqueue_many([1, 2])
    with pytest.raises(IndexError):
        q.dequeue_many(3)
    assert len(q) == 2


def test_skip_moves_head():
    q = RingQueue(5)
    q.enqueue_many([1, 2, 3])
    q.skip(2)
    assert q.dequeue() == 3


def test_skip_past_tail_is_ignored():
    q = RingQueue(5)
    q.enqueue_many([1, 2, 3])
    q.skip(4)
    assert len(q) == 3
    assert q.dequeue() == 1


def test_dequeue_values_pairs():
    q = RingQueue(10)
    q.enqueue_many([ord("X"), 10, ord("Y"), -20])
    assert q.dequeue_values(2) == [AxisValue("X", 10), AxisValue("Y", -20)]
    assert q.is_empty()


def test_dequeue_values_needs_two_per_pair():
    q = RingQueue(10)
    q.enqueue_many([ord("X"), 10, ord("Y")])
    with pytest.raises(IndexError):
        q.dequeue_values(2)
    assert len(q) == 3


def test_invalid_size():
    with pytest.raises(ValueError):
        RingQueue(0)