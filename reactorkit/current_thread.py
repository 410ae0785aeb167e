"""Per-thread identity: cached thread id and thread name."""

import os
import threading
import time

_local = threading.local()


def tid() -> int:
    """The kernel id of the calling thread, cached per thread."""
    cached = getattr(_local, "tid", 0)
    if cached == 0:
        cached = threading.get_native_id()
        _local.tid = cached
        _local.tid_string = f"{cached:5d} "
    return cached


def tid_string() -> str:
    """The thread id padded to five columns and followed by a space."""
    tid()
    return _local.tid_string


def name() -> str:
    """The name set for the calling thread, or ``"unknown"``."""
    return getattr(_local, "name", "unknown")


def set_name(name: str) -> None:
    _local.name = name


def is_main_thread() -> bool:
    """True when the thread id equals the process id."""
    return tid() == os.getpid()


def sleep_usec(usec: int) -> None:
    """Sleep for ``usec`` microseconds."""
    if usec > 0:
        time.sleep(usec / 1_000_000)