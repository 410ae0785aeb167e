"""Calendar dates stored as Julian day numbers."""

from __future__ import annotations

import time
from dataclasses import dataclass


def _div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - _div(a, b) * b


@dataclass(frozen=True)
class YearMonthDay:
    """A year, month [1, 12] and day [1, 31]."""

    year: int
    month: int
    day: int


def get_julian_day_number(year: int, month: int, day: int) -> int:
    """Convert a Gregorian date to its Julian day number."""
    a = _div(14 - month, 12)
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + _div(153 * m + 2, 5)
        + y * 365
        + _div(y, 4)
        - _div(y, 100)
        + _div(y, 400)
        - 32045
    )


def get_year_month_day(julian_day_number: int) -> YearMonthDay:
    """Convert a Julian day number back to a Gregorian date."""
    a = julian_day_number + 32044
    b = _div(4 * a + 3, 146097)
    c = a - _div(146097 * b, 4)
    d = _div(4 * c + 3, 1461)
    e = c - _div(1461 * d, 4)
    m = _div(5 * e + 2, 153)
    return YearMonthDay(
        year=100 * b + d - 4800 + _div(m, 10),
        month=m + 3 - 12 * _div(m, 10),
        day=e - _div(153 * m + 2, 5) + 1,
    )


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date; ordering and equality follow the Julian day number."""

    julian_day_number: int = 0

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Date:
        """Build a date from year, month and day."""
        return cls(get_julian_day_number(year, month, day))

    @classmethod
    def from_struct_time(cls, t: time.struct_time) -> Date:
        """Build a date from a ``time.struct_time``."""
        return cls(get_julian_day_number(t.tm_year, t.tm_mon, t.tm_mday))

    def year_month_day(self) -> YearMonthDay:
        return get_year_month_day(self.julian_day_number)

    def year(self) -> int:
        return self.year_month_day().year

    def month(self) -> int:
        return self.year_month_day().month

    def day(self) -> int:
        return self.year_month_day().day

    def week_day(self) -> int:
        """Day of the week in [0, 6]."""
        return _mod(self.julian_day_number + 4, 7)

    def to_string(self) -> str:
        """Return ``YYYY-MM-DD``."""
        ymd = self.year_month_day()
        return f"{ymd.year:4d}-{ymd.month:02d}-{ymd.day:02d}"