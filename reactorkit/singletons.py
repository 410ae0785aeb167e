"""Process-wide and per-thread single instances."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_instances: dict[type, object] = {}
_instances_lock = threading.Lock()
_thread_instances = threading.local()


def instance(cls: type[T]) -> T:
    """The one process-wide instance of ``cls``, created on first use."""
    obj = _instances.get(cls)
    if obj is None:
        with _instances_lock:
            obj = _instances.get(cls)
            if obj is None:
                obj = cls()
                _instances[cls] = obj
    return obj  # type: ignore[return-value]


def _thread_table() -> dict[type, object]:
    table = getattr(_thread_instances, "table", None)
    if table is None:
        table = {}
        _thread_instances.table = table
    return table


def thread_local_instance(cls: type[T]) -> T:
    """The calling thread's own instance of ``cls``, created on first use."""
    table = _thread_table()
    obj = table.get(cls)
    if obj is None:
        obj = cls()
        table[cls] = obj
    return obj  # type: ignore[return-value]


def thread_local_pointer(cls: type[T]) -> T | None:
    """The calling thread's instance of ``cls`` if it exists, else None."""
    return _thread_table().get(cls)  # type: ignore[return-value]


class ThreadLocal(Generic[T]):
    """A value of which each thread gets its own copy, built by ``factory``."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._local = threading.local()

    def value(self) -> T:
        try:
            return self._local.value
        except AttributeError:
            obj = self._factory()
            self._local.value = obj
            return obj