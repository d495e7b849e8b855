import pytest

from chartkit.seq import Seq
from chartkit.value_buffer import DEFAULT_CAPACITY, ValueBuffer


def test_buffer_enqueue_dequeue_sequence():
    buffer = ValueBuffer()
    for n in range(1, 9):
        buffer.enqueue(n)
        assert len(buffer) == n
        assert buffer.peek() == 1
        assert buffer.peek_back() == n

    for n in range(1, 9):
        assert buffer.dequeue() == n
        assert len(buffer) == 8 - n
        if n < 8:
            assert buffer.peek() == n + 1
            assert buffer.peek_back() == 8

    assert buffer.peek() == 0
    assert buffer.peek_back() == 0


def test_buffer_clear():
    buffer = ValueBuffer()
    for _ in range(8):
        buffer.enqueue(1)
    assert len(buffer) == 8
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.peek() == 0
    assert buffer.peek_back() == 0
    assert buffer.capacity == DEFAULT_CAPACITY


def test_buffer_to_list():
    buffer = ValueBuffer()
    for n in range(1, 6):
        buffer.enqueue(n)
    assert buffer.to_list() == [1, 2, 3, 4, 5]


def test_buffer_each():
    buffer = ValueBuffer()
    for x in range(1, 17):
        buffer.enqueue(float(x))

    collected = []
    buffer.each(lambda i, v: collected.append((i, v)))

    assert len(collected) == 16
    assert [i for i, _ in collected] == list(range(16))
    assert [v for _, v in collected] == [float(x) for x in range(1, 17)]
    assert collected == list(enumerate(buffer.to_list()))


def test_new_buffer_empty():
    empty = ValueBuffer()
    assert len(empty) == 0
    assert empty.capacity == DEFAULT_CAPACITY == 4
    assert empty.peek() == 0
    assert empty.peek_back() == 0


def test_new_buffer_with_values():
    values = ValueBuffer(1, 2, 3, 4, 5)
    assert len(values) == 5
    assert values.peek() == 1
    assert values.peek_back() == 5


def test_buffer_growth():
    values = ValueBuffer(1, 2, 3, 4, 5)
    for i in range(1 << 10):
        values.enqueue(float(i))
    assert values.peek_back() == (1 << 10) - 1
    assert len(values) == 5 + (1 << 10)


def test_capacity_doubles_when_full():
    buffer = ValueBuffer()
    for n in range(5):
        buffer.enqueue(n)
    assert buffer.capacity == 8


def test_trim_excess():
    buffer = ValueBuffer()
    for n in range(16):
        buffer.enqueue(n)
    assert buffer.capacity == 16
    for _ in range(10):
        buffer.dequeue()
    buffer.trim_excess()
    assert buffer.capacity == 6
    assert buffer.to_list() == [10, 11, 12, 13, 14, 15]


def test_set_capacity_below_contents_raises():
    buffer = ValueBuffer(1, 2, 3)
    with pytest.raises(ValueError):
        buffer.set_capacity(2)


def test_with_capacity():
    buffer = ValueBuffer.with_capacity(10)
    assert buffer.capacity == 10
    assert len(buffer) == 0
    zero = ValueBuffer.with_capacity(0)
    zero.enqueue(3)
    assert zero.capacity == 4
    assert zero.peek() == 3


def test_get_value_and_str():
    buffer = ValueBuffer(1, 2.5, 3)
    buffer.dequeue()
    assert buffer.get_value(0) == 2.5
    assert str(buffer) == "2.5 <= 3"


def test_buffer_as_seq_provider():
    buffer = ValueBuffer(4, 2, 6)
    assert Seq(buffer).sum() == 12
    assert Seq(buffer).max() == 6