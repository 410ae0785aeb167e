"""A fixed-size pool of worker threads fed from a task queue."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Deque

from reactorkit.errors import ReactorError
from reactorkit.sync import Condition, MutexLock
from reactorkit.threads import Thread

Task = Callable[[], None]


class ThreadPool:
    """Runs tasks on a fixed set of named worker threads.

    With no worker threads, ``run`` executes the task in the calling thread.
    A ``max_queue_size`` of 0 means the task queue is unbounded.
    """

    def __init__(self, name: str = "ThreadPool", max_queue_size: int = 0) -> None:
        self._name = name
        self._mutex = MutexLock()
        self._not_empty = Condition(self._mutex)
        self._not_full = Condition(self._mutex)
        self._running = False
        self.max_queue_size = max_queue_size
        self._thread_size = 0
        self._queue: Deque[Task] = deque()
        self._threads: list[Thread] = []

    @property
    def name(self) -> str:
        return self._name

    def start(self, num_threads: int = 4) -> None:
        """Start ``num_threads`` workers named ``<name>1``, ``<name>2``, ..."""
        if self._running:
            raise RuntimeError(f"thread pool {self._name} already running")
        self._running = True
        self._thread_size = num_threads
        for i in range(num_threads):
            worker = Thread(self._run_in_thread, f"{self._name}{i + 1}")
            self._threads.append(worker)
            worker.start()

    def stop(self) -> None:
        """Stop accepting tasks, wake every waiter and join the workers."""
        with self._mutex:
            self._running = False
            self._not_empty.notify_all()
            self._not_full.notify_all()
        for worker in self._threads:
            if not worker.joined():
                worker.join()

    def run(self, task: Task) -> None:
        """Queue ``task``; blocks while the queue is full. Dropped once stopped."""
        if not self._threads:
            task()
            return
        with self._mutex:
            while self._is_full() and self._running:
                self._not_full.wait()
            if not self._running:
                return
            self._queue.append(task)
            self._not_empty.notify()

    def queue_size(self) -> int:
        with self._mutex:
            return len(self._queue)

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args) -> None:
        if self._running:
            self.stop()

    def _is_full(self) -> bool:
        return self.max_queue_size > 0 and len(self._queue) >= self.max_queue_size

    def _take(self) -> Task | None:
        with self._mutex:
            while not self._queue and self._running:
                self._not_empty.wait()
            if not self._queue:
                return None
            task = self._queue.popleft()
            if self.max_queue_size > 0:
                self._not_full.notify()
            return task

    def _run_in_thread(self) -> None:
        try:
            while self._running:
                task = self._take()
                if task is not None:
                    task()
        except ReactorError as ex:
            print(f"exception caught in ThreadPool {self._name}", file=sys.stderr)
            print(f"reason: {ex.message}", file=sys.stderr)
            print(f"stack trace: {ex.stack_trace()}", file=sys.stderr)
            raise
        except Exception as ex:
            print(f"exception caught in ThreadPool {self._name}", file=sys.stderr)
            print(f"reason: {ex}", file=sys.stderr)
            raise
        except BaseException:
            print(f"unknown exception caught in ThreadPool {self._name}", file=sys.stderr)
            raise