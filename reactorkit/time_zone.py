"""Time zones with fixed UTC offsets."""

from __future__ import annotations

import bisect
import calendar
import time
from dataclasses import dataclass, field

_KNOWN_ZONES = {
    "Asia/Shanghai": 8 * 3600,
    "Asia/Tokyo": 9 * 3600,
    "America/New_York": -5 * 3600,
    "Europe/London": 0,
    "UTC": 0,
}


@dataclass(frozen=True)
class _LocalTime:
    gmt_offset: int
    is_dst: bool
    desig_idx: int


@dataclass(frozen=True)
class _Transition:
    gmttime: int
    localtime: int
    localtime_idx: int


@dataclass
class _ZoneData:
    transitions: list[_Transition] = field(default_factory=list)
    localtimes: list[_LocalTime] = field(default_factory=list)
    abbreviation: str = ""
    tzstring: str = ""

    def add_local_time(self, utc_offset: int, is_dst: bool, desig_idx: int) -> None:
        self.localtimes.append(_LocalTime(utc_offset, is_dst, desig_idx))

    def add_transition(self, when: int, local_idx: int) -> None:
        local = self.localtimes[local_idx]
        self.transitions.append(_Transition(when, when + local.gmt_offset, local_idx))

    def find_local_time(self, localtime: int) -> _LocalTime:
        if not self.transitions or localtime < self.transitions[0].localtime:
            return self.localtimes[0]
        keys = [t.localtime for t in self.transitions]
        pos = bisect.bisect_right(keys, localtime)
        if pos > 0:
            return self.localtimes[self.transitions[pos - 1].localtime_idx]
        return self.localtimes[self.transitions[0].localtime_idx]


class TimeZone:
    """A time zone; one built without a known name is invalid and acts as UTC."""

    def __init__(self, zonefile: str | None = None) -> None:
        self._data: _ZoneData | None = None
        if zonefile is not None and zonefile in _KNOWN_ZONES:
            data = _ZoneData(tzstring=zonefile)
            data.add_local_time(_KNOWN_ZONES[zonefile], False, 0)
            self._data = data

    @classmethod
    def from_offset(cls, east_of_utc: int, name: str) -> TimeZone:
        """A zone at a fixed offset of ``east_of_utc`` seconds."""
        zone = cls()
        data = _ZoneData(tzstring=name)
        data.add_local_time(east_of_utc, False, 0)
        zone._data = data
        return zone

    def valid(self) -> bool:
        return self._data is not None

    def to_local_time(self, seconds_since_epoch: int) -> time.struct_time:
        """Convert UTC seconds to broken-down local time in this zone."""
        if self._data is None:
            return time.gmtime(seconds_since_epoch)
        local = self._data.find_local_time(seconds_since_epoch)
        tm = time.gmtime(seconds_since_epoch + local.gmt_offset)
        return time.struct_time(tuple(tm)[:8] + (int(local.is_dst),))

    def from_local_time(self, local_tm) -> int:
        """Convert broken-down local time in this zone to UTC seconds."""
        local = int(time.mktime(tuple(local_tm)[:9]))
        if self._data is None:
            return local
        return local - self._data.find_local_time(local).gmt_offset

    @staticmethod
    def utc_time(seconds_since_epoch: int) -> time.struct_time:
        return time.gmtime(seconds_since_epoch)

    @staticmethod
    def from_utc_time(utc) -> int:
        return calendar.timegm(tuple(utc)[:9])