import threading
import time

import pytest

from ostepdemos.pc import END_OF_PRODUCTION, BoundedBuffer, main, run


def test_buffer_is_fifo():
    buffer = BoundedBuffer(3)
    buffer.put(7)
    buffer.put(8)
    assert len(buffer) == 2
    assert buffer.get() == 7
    assert buffer.get() == 8
    assert len(buffer) == 0


@pytest.mark.parametrize("size", [0, -1])
def test_buffer_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        BoundedBuffer(size)


def test_put_blocks_when_full():
    buffer = BoundedBuffer(1)
    buffer.put(1)
    thread = threading.Thread(target=buffer.put, args=(2,))
    thread.start()
    time.sleep(0.1)
    assert thread.is_alive()
    assert buffer.get() == 1
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert buffer.get() == 2


def test_get_blocks_when_empty():
    buffer = BoundedBuffer(2)
    results = []
    thread = threading.Thread(target=lambda: results.append(buffer.get()))
    thread.start()
    time.sleep(0.1)
    assert thread.is_alive()
    assert len(buffer) == 0
    buffer.put(5)
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert results == [5]
    assert len(buffer) == 0


@pytest.mark.parametrize("single_cv,consumers", [(False, 1), (False, 3), (True, 1)])
def test_run_delivers_every_value_once(single_cv, consumers):
    loops = 200
    taken = run(3, loops, consumers, single_cv)
    assert len(taken) == consumers
    assert sorted(v for part in taken for v in part) == list(range(loops))
    for part in taken:
        assert part == sorted(part)
        assert END_OF_PRODUCTION not in part


def test_run_with_no_loops():
    assert run(2, 0, 2) == [[], []]


def test_run_rejects_negative_consumers():
    with pytest.raises(ValueError):
        run(2, 5, -1)


def test_main_usage_error():
    assert main(["1", "2"]) == 1


def test_main_runs():
    assert main(["2", "10", "1"]) == 0
    assert main(["--single-cv", "2", "10", "1"]) == 0