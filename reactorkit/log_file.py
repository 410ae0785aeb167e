"""Log files that roll over by size and by day."""

from __future__ import annotations

import contextlib
import threading
import time
from typing import ContextManager

from reactorkit import process_info
from reactorkit.file_util import AppendFile

ROLL_PER_SECONDS = 60 * 60 * 24


def get_log_file_name(basename: str, now: float) -> str:
    """``basename.YYYYmmdd-HHMMSS.hostname.pid.log`` for local time ``now``."""
    stamp = time.strftime(".%Y%m%d-%H%M%S.", time.localtime(int(now)))
    return f"{basename}{stamp}{process_info.hostname()}.{process_info.pid()}.log"


class LogFile:
    """Appends log data to files in the working directory, rolling as needed.

    A new file starts when more than ``roll_size`` bytes have been written to
    the current one, or when a new day (UTC) begins. Every ``check_every_n``
    appends the day and the flush interval are checked.
    """

    def __init__(
        self,
        basename: str,
        roll_size: int,
        thread_safe: bool = True,
        flush_interval: int = 3,
        check_every_n: int = 1024,
    ) -> None:
        if "/" in basename:
            raise ValueError(f"log basename must not contain '/': {basename!r}")
        self._basename = basename
        self._roll_size = roll_size
        self._flush_interval = flush_interval
        self._check_every_n = check_every_n
        self._count = 0
        self._lock: ContextManager[object] = (
            threading.Lock() if thread_safe else contextlib.nullcontext()
        )
        self._start_of_period = 0
        self._last_roll = 0
        self._last_flush = 0
        self._file: AppendFile | None = None
        self._roll_unlocked()

    def append(self, data: bytes) -> None:
        with self._lock:
            self._append_unlocked(data)

    def flush(self) -> None:
        with self._lock:
            assert self._file is not None
            self._file.flush()

    def roll_file(self) -> bool:
        """Start a new file unless one was already started this second."""
        with self._lock:
            return self._roll_unlocked()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()

    def __enter__(self) -> LogFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _append_unlocked(self, data: bytes) -> None:
        assert self._file is not None
        self._file.append(data)
        if self._file.written_bytes() > self._roll_size:
            self._roll_unlocked()
            return
        self._count += 1
        if self._count >= self._check_every_n:
            self._count = 0
            now = int(time.time())
            this_period = now // ROLL_PER_SECONDS * ROLL_PER_SECONDS
            if this_period != self._start_of_period:
                self._roll_unlocked()
            elif now - self._last_flush > self._flush_interval:
                self._last_flush = now
                self._file.flush()

    def _roll_unlocked(self) -> bool:
        now = int(time.time())
        filename = get_log_file_name(self._basename, now)
        start = now // ROLL_PER_SECONDS * ROLL_PER_SECONDS
        if now > self._last_roll:
            self._last_roll = now
            self._last_flush = now
            self._start_of_period = start
            old = self._file
            self._file = AppendFile(filename)
            if old is not None:
                old.close()
            return True
        return False