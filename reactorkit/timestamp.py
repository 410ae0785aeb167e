"""Microsecond-resolution UTC timestamps."""

from __future__ import annotations

import time
from dataclasses import dataclass

MICRO_SECONDS_PER_SECOND = 1000 * 1000


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of ``a``."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time, stored as microseconds since the Unix epoch."""

    micro_seconds_since_epoch: int = 0

    def to_string(self) -> str:
        """Return ``seconds.microseconds``, e.g. ``"1.500000"``."""
        seconds, micros = _trunc_divmod(
            self.micro_seconds_since_epoch, MICRO_SECONDS_PER_SECOND
        )
        return f"{seconds}.{micros:06d}"

    def to_formatted_string(self, show_microseconds: bool = True) -> str:
        """Return ``YYYYMMDD HH:MM:SS[.ffffff]`` in UTC."""
        seconds, micros = _trunc_divmod(
            self.micro_seconds_since_epoch, MICRO_SECONDS_PER_SECOND
        )
        tm = time.gmtime(seconds)
        text = (
            f"{tm.tm_year:4d}{tm.tm_mon:02d}{tm.tm_mday:02d} "
            f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
        )
        if show_microseconds:
            text += f".{micros:06d}"
        return text

    def seconds_since_epoch(self) -> int:
        """Whole seconds since the epoch, truncated toward zero."""
        return _trunc_divmod(self.micro_seconds_since_epoch, MICRO_SECONDS_PER_SECOND)[0]

    @classmethod
    def now(cls) -> Timestamp:
        """The current time."""
        return cls(time.time_ns() // 1000)

    @classmethod
    def invalid(cls) -> Timestamp:
        """The epoch timestamp, used as an invalid marker."""
        return cls()

    @classmethod
    def from_unix_time(cls, t: int, microseconds: int = 0) -> Timestamp:
        """Build a timestamp from Unix seconds plus microseconds."""
        return cls(int(t) * MICRO_SECONDS_PER_SECOND + microseconds)


def time_difference(high: Timestamp, low: Timestamp) -> float:
    """Seconds between two timestamps (``high - low``)."""
    diff = high.micro_seconds_since_epoch - low.micro_seconds_since_epoch
    return diff / MICRO_SECONDS_PER_SECOND


def add_time(timestamp: Timestamp, seconds: float) -> Timestamp:
    """Return ``timestamp`` moved forward by ``seconds``."""
    delta = int(seconds * MICRO_SECONDS_PER_SECOND)
    return Timestamp(timestamp.micro_seconds_since_epoch + delta)