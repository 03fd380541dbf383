"""Tests for the heartbeat buffer."""

import threading

import pytest

from scenebeat import Heartbeat, HeartbeatBuffer


def beat(n):
    return Heartbeat(entity=f"/p/scene{n}.unity", project="Spaceship")


def test_drain_returns_fifo_order():
    buffer = HeartbeatBuffer()
    for n in range(3):
        buffer(beat(n))

    assert [h.entity for h in buffer.drain()] == ["/p/scene0.unity", "/p/scene1.unity", "/p/scene2.unity"]
    assert buffer.size() == 0


def test_drain_partial():
    buffer = HeartbeatBuffer()
    for n in range(5):
        buffer.append(beat(n))

    assert len(buffer.drain(max_items=2)) == 2
    assert buffer.size() == 3
    assert len(buffer.drain(max_items=10)) == 3


def test_full_buffer_drops_oldest(log_records):
    buffer = HeartbeatBuffer(max_size=2)
    for n in range(3):
        buffer.append(beat(n))

    assert [h.entity for h in buffer.drain()] == ["/p/scene1.unity", "/p/scene2.unity"]
    assert buffer.get_stats() == {"buffered": 0, "max_size": 2, "total_received": 3, "total_dropped": 1}
    assert any(r["level"].name == "WARNING" for r in log_records)


def test_invalid_size():
    with pytest.raises(ValueError):
        HeartbeatBuffer(max_size=0)


def test_concurrent_append_and_drain():
    buffer = HeartbeatBuffer(max_size=10000)
    drained = []

    def produce():
        for n in range(500):
            buffer.append(beat(n))

    threads = [threading.Thread(target=produce) for _ in range(4)]
    for thread in threads:
        thread.start()
    while any(t.is_alive() for t in threads):
        drained.extend(buffer.drain())
    for thread in threads:
        thread.join()
    drained.extend(buffer.drain())

    assert len(drained) == 2000
