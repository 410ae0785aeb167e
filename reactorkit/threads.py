"""Named threads that record their kernel id once started."""

from __future__ import annotations

import sys
import threading
from typing import Callable

from reactorkit import current_thread
from reactorkit.errors import ReactorError
from reactorkit.sync import AtomicInteger, CountDownLatch


class Thread:
    """A thread running ``func``; ``start`` returns once the thread is running."""

    _num_created = AtomicInteger()

    def __init__(self, func: Callable[[], None], name: str = "") -> None:
        self._func = func
        self._name = name
        self._started = False
        self._joined = False
        self._tid = 0
        self._latch = CountDownLatch(1)
        self._thread: threading.Thread | None = None
        num = Thread._num_created.increment_and_get()
        if not self._name:
            self._name = f"Thread{num}"

    def _run_in_thread(self) -> None:
        self._tid = current_thread.tid()
        self._latch.count_down()
        current_thread.set_name(self._name or "reactorThread")
        try:
            self._func()
            current_thread.set_name("finished")
        except ReactorError as ex:
            current_thread.set_name("crashed")
            print(f"exception caught in Thread {self._name}", file=sys.stderr)
            print(f"reason: {ex.message}", file=sys.stderr)
            print(f"stack trace: {ex.stack_trace()}", file=sys.stderr)
            raise
        except Exception as ex:
            current_thread.set_name("crashed")
            print(f"exception caught in Thread {self._name}", file=sys.stderr)
            print(f"reason: {ex}", file=sys.stderr)
            raise
        except BaseException:
            current_thread.set_name("crashed")
            print(f"unknown exception caught in Thread {self._name}", file=sys.stderr)
            raise

    def start(self) -> None:
        """Start the thread and wait until it has recorded its id."""
        if self._started:
            raise RuntimeError(f"thread {self._name} already started")
        self._started = True
        self._thread = threading.Thread(
            target=self._run_in_thread, name=self._name, daemon=True
        )
        try:
            self._thread.start()
        except RuntimeError:
            self._started = False
            self._thread = None
            raise
        self._latch.wait()

    def join(self) -> None:
        if not self._started:
            raise RuntimeError(f"thread {self._name} not started")
        if self._joined:
            raise RuntimeError(f"thread {self._name} already joined")
        self._joined = True
        assert self._thread is not None
        self._thread.join()

    def started(self) -> bool:
        return self._started

    def joined(self) -> bool:
        return self._joined

    def tid(self) -> int:
        """The kernel id of the thread, or 0 before it starts."""
        return self._tid

    def name(self) -> str:
        return self._name

    @classmethod
    def num_created(cls) -> int:
        """How many Thread objects have been constructed."""
        return cls._num_created.get()