"""
Phase calculator: maps a cycle start date and a query date to a phase.

Model
-----
The start date is day 0 of an OUT phase.  For any query date:

    raw_diff  = whole calendar days from start to query (may be negative)
    cycle_day = raw_diff mod 28            (always in 0-27)
    phase     = OUT(cycle_day)         if cycle_day < 7
                IN(cycle_day - 7)      otherwise

Dates before the start date belong to earlier cycles, so the day right
before the start is cycle day 27, the last IN day of the previous cycle.

Both inputs are reduced to a local calendar date before anything else.
Day counts come from date subtraction, never from elapsed seconds, so a
daylight saving shift cannot move a query into the neighbouring day.

Everything here is pure: no I/O, no shared state.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.schemas.cycle_phase import (
    CYCLE_LENGTH_DAYS,
    OUT_PHASE_DAYS,
    CyclePhase,
    InPhase,
    OutPhase,
    Unconfigured,
)


def to_local_date(
    value: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> datetime.date:
    """Strip the time of day from ``value``.

    Aware datetimes are converted to ``tz`` first (the system zone when
    ``tz`` is ``None``).  Naive datetimes are taken as local wall time.
    Near the calendar limits, where the conversion would leave the
    representable range, the datetime's own wall date is used.
    """
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            try:
                return value.astimezone(tz).date()
            except (OverflowError, OSError, ValueError):
                return value.date()
        return value.date()
    return value


def start_of_day(
    day: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> datetime.datetime:
    """Local midnight of ``day``; naive when ``tz`` is ``None``."""
    return datetime.datetime.combine(to_local_date(day, tz), datetime.time.min, tzinfo=tz)


def whole_days_between(start: datetime.date, end: datetime.date) -> int:
    """Calendar days from ``start`` to ``end``, negative if ``end`` is earlier."""
    return (end - start).days


def cycle_day(
    start_date: datetime.date,
    reference_date: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    """Offset of ``reference_date`` inside its 28-day cycle."""
    raw_diff = whole_days_between(
        to_local_date(start_date, tz),
        to_local_date(reference_date, tz),
    )
    # Python's % is floored: the result stays in [0, 28) for negative offsets.
    return raw_diff % CYCLE_LENGTH_DAYS


def compute_phase(
    start_date: Optional[datetime.date],
    reference_date: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> CyclePhase:
    """Compute the phase of ``reference_date`` for a cycle starting on ``start_date``.

    Args:
        start_date: Day 0 of an OUT phase, or ``None`` if not configured.
        reference_date: The date (or datetime) to classify.
        tz: Zone defining local calendar days for aware datetimes.

    Returns:
        :class:`OutPhase`, :class:`InPhase`, or :class:`Unconfigured`
        when ``start_date`` is ``None``.
    """
    if start_date is None:
        return Unconfigured()

    day = cycle_day(start_date, reference_date, tz)
    if day < OUT_PHASE_DAYS:
        return OutPhase(day_index=day)
    return InPhase(day_index=day - OUT_PHASE_DAYS)
