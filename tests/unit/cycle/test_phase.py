"""
Unit tests for the phase calculator.

Covers the modulo rule for positive and negative offsets, the phase
boundaries, periodicity, the unconfigured state and local-day
normalisation (time of day, aware datetimes, daylight saving).
"""

import datetime
from zoneinfo import ZoneInfo

import pytest

from app.cycle.phase import (
    compute_phase,
    cycle_day,
    start_of_day,
    to_local_date,
    whole_days_between,
)
from app.schemas.cycle_phase import InPhase, OutPhase, Unconfigured

START = datetime.date(2026, 10, 12)
NEW_YORK = ZoneInfo("America/New_York")
TOKYO = ZoneInfo("Asia/Tokyo")


def _days(n: int) -> datetime.timedelta:
    return datetime.timedelta(days=n)


# ======================================================================
# Boundaries
# ======================================================================


class TestPhaseBoundaries:
    """Phase edges inside one cycle."""

    @pytest.mark.parametrize("offset,expected", [
        (0, OutPhase(day_index=0)),
        (6, OutPhase(day_index=6)),
        (7, InPhase(day_index=0)),
        (27, InPhase(day_index=20)),
        (28, OutPhase(day_index=0)),
        (-1, InPhase(day_index=20)),
        (-7, InPhase(day_index=14)),
        (-8, InPhase(day_index=13)),
        (-21, OutPhase(day_index=6)),
        (-28, OutPhase(day_index=0)),
    ])
    def test_boundaries(self, offset, expected):
        assert compute_phase(START, START + _days(offset)) == expected

    def test_day_before_start_is_last_in_day(self):
        """The day before the start is cycle day 27 of the previous cycle."""
        assert compute_phase(START, START - _days(1)) == InPhase(day_index=20)


# ======================================================================
# Modulo rule
# ======================================================================


class TestModuloRule:
    """Every offset follows ((d % 28) + 28) % 28."""

    @pytest.mark.parametrize("offset", range(-90, 91, 1))
    def test_matches_reference_formula(self, offset):
        day = ((offset % 28) + 28) % 28
        expected = OutPhase(day_index=day) if day < 7 else InPhase(day_index=day - 7)
        assert compute_phase(START, START + _days(offset)) == expected

    @pytest.mark.parametrize("cycles", [-50, -3, 1, 2, 100])
    def test_periodicity(self, cycles):
        assert compute_phase(START, START + _days(28 * cycles)) == compute_phase(START, START)

    @pytest.mark.parametrize("reference", [datetime.date(1, 1, 1), datetime.date(9999, 12, 31)])
    def test_calendar_extremes(self, reference):
        day = whole_days_between(START, reference) % 28
        expected = OutPhase(day_index=day) if day < 7 else InPhase(day_index=day - 7)
        assert compute_phase(START, reference) == expected

    def test_cycle_day_always_in_range(self):
        for offset in (-1000, -29, -1, 0, 1, 29, 1000):
            assert 0 <= cycle_day(START, START + _days(offset)) < 28


# ======================================================================
# Unconfigured
# ======================================================================


class TestUnconfigured:

    @pytest.mark.parametrize("reference", [
        START,
        START - _days(400),
        datetime.datetime(2030, 1, 1, 23, 59),
        datetime.datetime(2026, 10, 18, 12, 0, tzinfo=datetime.timezone.utc),
    ])
    def test_no_start_date(self, reference):
        assert compute_phase(None, reference) == Unconfigured()

    def test_unconfigured_differs_from_day_zero(self):
        assert compute_phase(None, START) != compute_phase(START, START)


# ======================================================================
# Local-day normalisation
# ======================================================================


class TestLocalDays:

    def test_time_of_day_ignored(self):
        morning = datetime.datetime(2026, 10, 19, 0, 1)
        night = datetime.datetime(2026, 10, 19, 23, 59, 59)
        assert compute_phase(START, morning) == compute_phase(START, night) == InPhase(day_index=0)

    def test_start_datetime_is_truncated(self):
        start = datetime.datetime(2026, 10, 12, 22, 30)
        assert compute_phase(start, datetime.date(2026, 10, 12)) == OutPhase(day_index=0)

    def test_aware_datetime_uses_local_calendar(self):
        """03:00 UTC on the 19th is still the 18th in New York."""
        utc = datetime.datetime(2026, 10, 19, 3, 0, tzinfo=datetime.timezone.utc)
        assert to_local_date(utc, NEW_YORK) == datetime.date(2026, 10, 18)
        assert compute_phase(START, utc, tz=NEW_YORK) == OutPhase(day_index=6)

    def test_dst_does_not_shift_day_index(self):
        """Fewer than 8 x 24h elapse across spring forward, but it is 8 calendar days."""
        start = datetime.date(2026, 3, 1)
        reference = datetime.datetime(2026, 3, 9, 0, 30, tzinfo=NEW_YORK)
        elapsed = reference.timestamp() - start_of_day(start, NEW_YORK).timestamp()
        assert elapsed < 8 * 86400
        assert compute_phase(start, reference, tz=NEW_YORK) == InPhase(day_index=1)

    def test_dst_fall_back_keeps_calendar_count(self):
        """More than 7 x 24h elapse across fall back, but it is 7 calendar days."""
        start = datetime.date(2026, 10, 29)
        reference = datetime.datetime(2026, 11, 5, 0, 30, tzinfo=NEW_YORK)
        elapsed = reference.timestamp() - start_of_day(start, NEW_YORK).timestamp()
        assert elapsed > 7 * 86400
        assert compute_phase(start, reference, tz=NEW_YORK) == InPhase(day_index=0)

    def test_start_of_day(self):
        assert start_of_day(datetime.date(2026, 10, 18)) == datetime.datetime(2026, 10, 18)
        aware = start_of_day(datetime.date(2026, 10, 18), NEW_YORK)
        assert aware.tzinfo is NEW_YORK
        assert (aware.hour, aware.minute) == (0, 0)


# ======================================================================
# Calendar limits
# ======================================================================


class TestCalendarLimits:
    """Aware datetimes whose conversion would leave the datetime range."""

    @pytest.mark.parametrize("tz", [TOKYO, NEW_YORK, None])
    def test_aware_max(self, tz):
        reference = datetime.datetime.max.replace(tzinfo=datetime.timezone.utc)
        assert to_local_date(reference, tz) == datetime.date(9999, 12, 31)
        assert compute_phase(START, reference, tz=tz) == compute_phase(START, datetime.date(9999, 12, 31))

    def test_aware_min_west_of_utc(self):
        reference = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
        assert to_local_date(reference, NEW_YORK) == datetime.date(1, 1, 1)
        assert compute_phase(START, reference, tz=NEW_YORK) == compute_phase(START, datetime.date(1, 1, 1))

    def test_aware_start_date_at_limit(self):
        start = datetime.datetime.max.replace(tzinfo=datetime.timezone.utc)
        assert compute_phase(start, datetime.date(9999, 12, 31), tz=TOKYO) == OutPhase(day_index=0)
