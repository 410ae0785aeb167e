import time

import pytest

from reactorkit.time_zone import TimeZone


def test_default_is_invalid():
    assert TimeZone().valid() is False


def test_unknown_name_is_invalid():
    assert TimeZone("Mars/Olympus").valid() is False


@pytest.mark.parametrize(
    "name", ["Asia/Shanghai", "Asia/Tokyo", "America/New_York", "Europe/London", "UTC"]
)
def test_known_zones_are_valid(name):
    assert TimeZone(name).valid() is True


def test_shanghai_offset():
    tm = TimeZone("Asia/Shanghai").to_local_time(0)
    assert tm.tm_hour == 8
    assert tm.tm_year == 1970


def test_from_offset_local_time():
    zone = TimeZone.from_offset(3600, "Plus1")
    assert zone.valid()
    tm = zone.to_local_time(0)
    assert tm.tm_hour == 1
    assert tm.tm_isdst == 0


def test_invalid_zone_behaves_as_utc():
    secs = 1_234_567_890
    assert tuple(TimeZone().to_local_time(secs)) == tuple(TimeZone.utc_time(secs))


@pytest.mark.parametrize("secs", [0, 86399, 1_000_000_000, 2_000_000_000])
def test_utc_round_trip(secs):
    assert TimeZone.from_utc_time(TimeZone.utc_time(secs)) == secs


def test_from_local_time_subtracts_offset():
    tm = time.gmtime(1_000_000_000)
    plain = TimeZone().from_local_time(tm)
    zone = TimeZone.from_offset(7200, "Plus2")
    assert plain - zone.from_local_time(tm) == 7200


def test_local_time_matches_shifted_utc():
    zone = TimeZone("Asia/Tokyo")
    secs = 1_500_000_000
    local = zone.to_local_time(secs)
    assert TimeZone.from_utc_time(local) - secs == 9 * 3600