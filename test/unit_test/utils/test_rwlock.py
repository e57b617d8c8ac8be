"""Tests for the reader/writer lock."""

from __future__ import annotations

import threading

from projectkit.utils.rwlock import ReadWriteLock

TIMEOUT = 5


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    both_inside = threading.Barrier(2, timeout=TIMEOUT)
    errors = []

    def reader():
        with lock.read_locked():
            try:
                both_inside.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(TIMEOUT)

    assert errors == []


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    reader_started = threading.Event()

    def reader():
        reader_started.set()
        with lock.read_locked():
            events.append("read")

    with lock.write_locked():
        thread = threading.Thread(target=reader)
        thread.start()
        reader_started.wait(TIMEOUT)
        thread.join(0.1)
        events.append("write done")
    thread.join(TIMEOUT)

    assert events == ["write done", "read"]


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    events = []
    writer_started = threading.Event()

    def writer():
        writer_started.set()
        with lock.write_locked():
            events.append("write")

    lock.acquire_read()
    thread = threading.Thread(target=writer)
    thread.start()
    writer_started.wait(TIMEOUT)
    thread.join(0.1)
    events.append("read done")
    lock.release_read()
    thread.join(TIMEOUT)

    assert events == ["read done", "write"]


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    events = []

    lock.acquire_read()
    writer = threading.Thread(target=lambda: (lock.acquire_write(), events.append("write"), lock.release_write()))
    writer.start()
    writer.join(0.1)  # writer is now queued behind the first reader

    reader = threading.Thread(target=lambda: (lock.acquire_read(), events.append("read"), lock.release_read()))
    reader.start()
    reader.join(0.1)

    assert events == []
    lock.release_read()
    writer.join(TIMEOUT)
    reader.join(TIMEOUT)

    assert events == ["write", "read"]


def test_lock_released_on_exception():
    lock = ReadWriteLock()

    try:
        with lock.write_locked():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    acquired = threading.Event()
    thread = threading.Thread(target=lambda: (lock.acquire_write(), acquired.set(), lock.release_write()))
    thread.start()
    thread.join(TIMEOUT)

    assert acquired.is_set()
