import threading
import time

from reactorkit.sync import (
    AtomicInteger,
    BlockingQueue,
    BoundedBlockingQueue,
    Condition,
    CountDownLatch,
    MutexLock,
)


def _failure_name(func):
    try:
        func()
    except AssertionError as exc:
        return type(exc).__name__
    return "no error"


def test_atomic_get_and_add_returns_previous():
    a = AtomicInteger(5)
    assert a.get_and_add(3) == 5
    assert a.get() == 8


def test_atomic_add_and_get_returns_new():
    a = AtomicInteger()
    assert a.add_and_get(7) == 7
    assert a.increment_and_get() == 8
    assert a.decrement_and_get() == 7


def test_atomic_get_and_set():
    a = AtomicInteger(2)
    assert a.get_and_set(10) == 2
    assert a.get() == 10


def test_atomic_void_operations():
    a = AtomicInteger()
    a.add(4)
    a.increment()
    a.decrement()
    a.decrement()
    assert a.get() == 3


def test_atomic_concurrent_increments():
    a = AtomicInteger()
    per_thread = 1000
    workers = [
        threading.Thread(target=lambda: [a.increment() for _ in range(per_thread)])
        for _ in range(4)
    ]
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    assert a.get() == 4 * per_thread


def test_mutex_tracks_holder():
    m = MutexLock()
    assert not m.is_locked_by_this_thread()
    with m:
        assert m.is_locked_by_this_thread()
        m.assert_locked()
    assert not m.is_locked_by_this_thread()


def test_mutex_assert_locked_raises_when_not_held():
    m = MutexLock()
    assert m.is_locked_by_this_thread() is False
    assert _failure_name(m.assert_locked) == "AssertionError"
    m.lock()
    held = _failure_name(m.assert_locked)
    m.unlock()
    assert held == "no error"


def test_mutex_held_by_other_thread_is_not_ours():
    m = MutexLock()
    seen = []
    m.lock()
    held_here = m.is_locked_by_this_thread()
    t = threading.Thread(target=lambda: seen.append(m.is_locked_by_this_thread()))
    t.start()
    t.join()
    m.unlock()
    assert held_here is True
    assert seen == [False]


def test_condition_wait_for_seconds_times_out():
    m = MutexLock()
    cond = Condition(m)
    with m:
        assert cond.wait_for_seconds(0.01) is True
        assert m.is_locked_by_this_thread()


def test_condition_notify_wakes_waiter():
    m = MutexLock()
    cond = Condition(m)
    ready = []
    result = []

    def waiter():
        with m:
            ready.append(True)
            while len(result) == 0:
                if cond.wait_for_seconds(5):
                    result.append("timeout")
            result.append("woken")

    t = threading.Thread(target=waiter)
    t.start()
    while not ready:
        time.sleep(0.001)
    with m:
        result.append("signal")
        cond.notify_all()
    t.join()
    assert result == ["signal", "woken"]
    with m:
        late = cond.wait_for_seconds(0.001)
    assert late is True


def test_count_down_latch_releases_waiters():
    latch = CountDownLatch(2)
    done = []

    def waiter():
        latch.wait()
        done.append(latch.count())

    t = threading.Thread(target=waiter)
    t.start()
    latch.count_down()
    assert latch.count() == 1
    latch.count_down()
    t.join(timeout=5)
    assert done == [0]


def test_count_down_latch_zero_does_not_block():
    latch = CountDownLatch(0)
    latch.wait()
    assert latch.count() == 0


def test_blocking_queue_fifo():
    q = BlockingQueue()
    for item in ("a", "b", "c"):
        q.put(item)
    assert len(q) == 3
    assert [q.take(), q.take(), q.take()] == ["a", "b", "c"]
    assert len(q) == 0


def test_blocking_queue_drain_empties():
    q = BlockingQueue()
    q.put(1)
    q.put(2)
    drained = q.drain()
    assert list(drained) == [1, 2]
    assert len(q) == 0
    assert list(q.drain()) == []


def test_blocking_queue_take_blocks_until_put():
    q = BlockingQueue()
    got = []
    t = threading.Thread(target=lambda: got.append(q.take()))
    t.start()
    time.sleep(0.02)
    assert got == []
    assert len(q) == 0
    q.put("x")
    t.join(timeout=5)
    assert got == ["x"]
    assert len(q) == 0


def test_bounded_queue_state():
    q = BoundedBlockingQueue(2)
    assert q.empty()
    assert not q.full()
    assert q.capacity() == 2
    q.put(1)
    q.put(2)
    assert q.full()
    assert len(q) == 2
    assert q.take() == 1
    assert not q.full()


def test_bounded_queue_put_blocks_when_full():
    q = BoundedBlockingQueue(1)
    q.put("first")
    finished = []

    def producer():
        q.put("second")
        finished.append(True)

    t = threading.Thread(target=producer)
    t.start()
    time.sleep(0.02)
    assert finished == []
    assert q.take() == "first"
    t.join(timeout=5)
    assert finished == [True]
    assert q.take() == "second"