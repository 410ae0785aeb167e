import threading
import time

import pytest

from reactorkit import current_thread
from reactorkit.sync import CountDownLatch
from reactorkit.thread_pool import ThreadPool


def test_run_without_threads_executes_inline():
    pool = ThreadPool("inline")
    seen = []
    pool.run(lambda: seen.append(threading.get_ident()))
    assert seen == [threading.get_ident()]


def test_tasks_run_on_named_workers():
    names = []
    lock = threading.Lock()
    latch = CountDownLatch(10)

    def task():
        with lock:
            names.append(current_thread.name())
        latch.count_down()

    with ThreadPool("pool") as pool:
        pool.start(2)
        for _ in range(10):
            pool.run(task)
        latch.wait()
        pending = pool.queue_size()
    assert pending == 0
    assert latch.count() == 0
    assert len(names) == 10
    assert set(names) <= {"pool1", "pool2"}


def test_start_twice_raises():
    pool = ThreadPool("twice")
    pool.start(1)
    try:
        with pytest.raises(RuntimeError):
            pool.start(1)
    finally:
        pool.stop()


def test_queue_size_counts_pending_tasks():
    gate = threading.Event()
    started = threading.Event()
    done = CountDownLatch(3)

    def blocker():
        started.set()
        gate.wait(5)
        done.count_down()

    pool = ThreadPool("q")
    pool.start(1)
    try:
        pool.run(blocker)
        assert started.wait(5)
        pool.run(done.count_down)
        pool.run(done.count_down)
        assert pool.queue_size() == 2
        gate.set()
        done.wait()
        assert pool.queue_size() == 0
    finally:
        gate.set()
        pool.stop()


def test_run_after_stop_is_dropped():
    pool = ThreadPool("stopped")
    pool.start(1)
    pool.stop()
    seen = []
    pool.run(lambda: seen.append(1))
    assert seen == []
    assert pool.queue_size() == 0


def test_bounded_queue_blocks_producer():
    gate = threading.Event()
    started = threading.Event()
    done = CountDownLatch(3)

    def blocker():
        started.set()
        gate.wait(5)
        done.count_down()

    pool = ThreadPool("bounded", max_queue_size=1)
    pool.start(1)
    try:
        pool.run(blocker)
        assert started.wait(5)
        pool.run(done.count_down)
        producer = threading.Thread(target=pool.run, args=(done.count_down,))
        producer.start()
        time.sleep(0.1)
        assert producer.is_alive()
        assert pool.queue_size() == 1
        gate.set()
        producer.join(5)
        assert not producer.is_alive()
        done.wait()
    finally:
        gate.set()
        pool.stop()