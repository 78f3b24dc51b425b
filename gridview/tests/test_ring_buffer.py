from __future__ import annotations

import pytest

from gridview.ring_buffer import RingBuffer


@pytest.fixture
def rb():
    return RingBuffer(3)


def test_overwrites_oldest(rb):
    for v in range(1, 6):
        rb.append(v)
    assert rb.front == 3
    assert rb.back == 5
    assert [rb[0], rb[1], rb[2]] == [3, 4, 5]
    assert rb[-1] == 5
    assert rb.full


def test_fills_up(rb):
    assert rb.empty
    rb.append("a")
    rb.append("b")
    assert len(rb) == 2
    assert not rb.full
    assert list(rb) == ["a", "b"]


def test_pop_front(rb):
    rb.append(1)
    rb.append(2)
    assert rb.pop_front() == 1
    assert list(rb) == [2]


def test_clear(rb):
    rb.append(1)
    rb.clear()
    assert rb.empty
    assert rb.capacity == 3


def test_empty_reads_raise(rb):
    with pytest.raises(IndexError):
        rb.front
    with pytest.raises(IndexError):
        rb.back
    with pytest.raises(IndexError):
        rb.pop_front()
    with pytest.raises(IndexError):
        rb[0]


def test_index_out_of_range(rb):
    rb.append(1)
    with pytest.raises(IndexError):
        rb[1]
    with pytest.raises(IndexError):
        rb[-2]


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        RingBuffer(capacity)
