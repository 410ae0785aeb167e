"""Synchronisation primitives: atomic counters, mutexes, conditions, latches and queues."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Deque, Generic, TypeVar

from reactorkit import current_thread

T = TypeVar("T")


class AtomicInteger:
    """An integer whose read-modify-write operations are atomic."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            return self._value

    def get_and_set(self, new_value: int) -> int:
        """Store ``new_value`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = new_value
            return old

    def get_and_add(self, x: int) -> int:
        """Add ``x`` and return the previous value."""
        with self._lock:
            old = self._value
            self._value = old + x
            return old

    def add_and_get(self, x: int) -> int:
        """Add ``x`` and return the new value."""
        return self.get_and_add(x) + x

    def increment_and_get(self) -> int:
        return self.add_and_get(1)

    def decrement_and_get(self) -> int:
        return self.add_and_get(-1)

    def add(self, x: int) -> None:
        self.get_and_add(x)

    def increment(self) -> None:
        self.increment_and_get()

    def decrement(self) -> None:
        self.decrement_and_get()


class MutexLock:
    """A non-reentrant mutex that remembers which thread holds it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._holder = 0

    def is_locked_by_this_thread(self) -> bool:
        return self._holder == current_thread.tid()

    def assert_locked(self) -> None:
        """Raise ``AssertionError`` unless the calling thread holds the lock."""
        if not self.is_locked_by_this_thread():
            raise AssertionError("mutex is not held by this thread")

    def lock(self) -> None:
        self._lock.acquire()
        self._holder = current_thread.tid()

    def unlock(self) -> None:
        self._holder = 0
        self._lock.release()

    def __enter__(self) -> MutexLock:
        self.lock()
        return self

    def __exit__(self, *args) -> None:
        self.unlock()


class Condition:
    """A condition variable bound to a :class:`MutexLock`; callers hold the mutex."""

    def __init__(self, mutex: MutexLock) -> None:
        self._mutex = mutex
        self._cond = threading.Condition(mutex._lock)

    def wait(self) -> None:
        self._mutex._holder = 0
        try:
            self._cond.wait()
        finally:
            self._mutex._holder = current_thread.tid()

    def wait_for_seconds(self, seconds: float) -> bool:
        """Wait at most ``seconds``; return True if the wait timed out."""
        self._mutex._holder = 0
        try:
            return not self._cond.wait(max(seconds, 0.0))
        finally:
            self._mutex._holder = current_thread.tid()

    def notify(self) -> None:
        self._cond.notify()

    def notify_all(self) -> None:
        self._cond.notify_all()


class CountDownLatch:
    """Lets threads wait until a counter has been counted down to zero."""

    def __init__(self, count: int) -> None:
        self._mutex = MutexLock()
        self._condition = Condition(self._mutex)
        self._count = count

    def wait(self) -> None:
        with self._mutex:
            while self._count > 0:
                self._condition.wait()

    def count_down(self) -> None:
        with self._mutex:
            self._count -= 1
            if self._count == 0:
                self._condition.notify_all()

    def count(self) -> int:
        with self._mutex:
            return self._count


class BlockingQueue(Generic[T]):
    """An unbounded FIFO queue whose ``take`` blocks while it is empty."""

    def __init__(self) -> None:
        self._mutex = MutexLock()
        self._not_empty = Condition(self._mutex)
        self._queue: Deque[T] = deque()

    def put(self, x: T) -> None:
        with self._mutex:
            self._queue.append(x)
            self._not_empty.notify()

    def take(self) -> T:
        with self._mutex:
            while not self._queue:
                self._not_empty.wait()
            return self._queue.popleft()

    def drain(self) -> Deque[T]:
        """Remove and return every queued element without blocking."""
        with self._mutex:
            result, self._queue = self._queue, deque()
        return result

    def __len__(self) -> int:
        with self._mutex:
            return len(self._queue)


class BoundedBlockingQueue(Generic[T]):
    """A fixed-capacity FIFO queue; ``put`` blocks when full, ``take`` when empty."""

    def __init__(self, max_size: int) -> None:
        self._mutex = MutexLock()
        self._not_empty = Condition(self._mutex)
        self._not_full = Condition(self._mutex)
        self._capacity = max_size
        self._queue: Deque[T] = deque()

    def _is_full(self) -> bool:
        return len(self._queue) >= self._capacity

    def put(self, x: T) -> None:
        with self._mutex:
            while self._is_full():
                self._not_full.wait()
            self._queue.append(x)
            self._not_empty.notify()

    def take(self) -> T:
        with self._mutex:
            while not self._queue:
                self._not_empty.wait()
            front = self._queue.popleft()
            self._not_full.notify()
            return front

    def empty(self) -> bool:
        with self._mutex:
            return not self._queue

    def full(self) -> bool:
        with self._mutex:
            return self._is_full()

    def __len__(self) -> int:
        with self._mutex:
            return len(self._queue)

    def capacity(self) -> int:
        return self._capacity


def _sleep_briefly() -> None:
    time.sleep(0)