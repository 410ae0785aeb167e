"""Callbacks that hold their target weakly and do nothing once it is gone."""

from __future__ import annotations

import weakref
from typing import Any, Callable


class WeakCallback:
    """Calls ``function(obj, *args)`` only while ``obj`` is still alive."""

    def __init__(self, obj: Any, function: Callable[..., Any]) -> None:
        self._ref = weakref.ref(obj)
        self._function = function

    def __call__(self, *args) -> None:
        target = self._ref()
        if target is not None:
            self._function(target, *args)


def make_weak_callback(obj: Any, function: Callable[..., Any]) -> WeakCallback:
    """Bind ``function`` (typically an unbound method) weakly to ``obj``."""
    return WeakCallback(obj, function)