import threading
import time

import pytest

from marcduino.fifo import Fifo, FifoEmpty


def test_bytes_come_out_in_order():
    fifo = Fifo(10)
    for value in (5, 200, 0, 255):
        assert fifo.put(value) is True
    assert [fifo.get_nowait() for _ in range(4)] == [5, 200, 0, 255]


def test_put_refuses_when_full():
    fifo = Fifo(3)
    assert all(fifo.put(v) for v in (1, 2, 3))
    assert fifo.put(4) is False
    assert len(fifo) == 3
    assert [fifo.get_nowait() for _ in range(3)] == [1, 2, 3]


def test_wraps_around_buffer_end():
    fifo = Fifo(4)
    received = []
    for value in range(50):
        assert fifo.put(value)
        if value % 3 == 2:
            while fifo:
                received.append(fifo.get_nowait())
    while fifo:
        received.append(fifo.get_nowait())
    assert received == list(range(50))


def test_get_nowait_on_empty_raises():
    fifo = Fifo(2)
    with pytest.raises(FifoEmpty):
        fifo.get_nowait()


def test_available_len_and_bool_track_count():
    fifo = Fifo(5)
    assert fifo.available() is False
    assert not fifo
    assert len(fifo) == 0
    fifo.put(42)
    assert fifo.available() is True
    assert bool(fifo) is True
    assert len(fifo) == 1
    assert fifo.get_nowait() == 42
    assert len(fifo) == 0


def test_get_wait_times_out():
    fifo = Fifo(2)
    with pytest.raises(FifoEmpty):
        fifo.get_wait(timeout=0.05)


def test_get_wait_returns_immediately_when_data_present():
    fifo = Fifo(2)
    fifo.put(9)
    assert fifo.get_wait(timeout=0) == 9


def test_get_wait_receives_from_other_thread():
    fifo = Fifo(8)

    def producer():
        time.sleep(0.05)
        fifo.put(77)

    thread = threading.Thread(target=producer)
    thread.start()
    try:
        assert fifo.get_wait(timeout=5) == 77
    finally:
        thread.join()
    assert len(fifo) == 0


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_put_rejects_out_of_range(value):
    fifo = Fifo(4)
    with pytest.raises(ValueError):
        fifo.put(value)
    assert len(fifo) == 0


def test_put_rejects_non_int():
    with pytest.raises(TypeError):
        Fifo(4).put("a")


@pytest.mark.parametrize("size", [0, -3, 256])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Fifo(size)


def test_full_capacity_255():
    fifo = Fifo(255)
    stored = sum(fifo.put(v) for v in range(256))
    assert stored == 255
    assert len(fifo) == fifo.size