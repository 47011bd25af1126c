"""
Widget timeline builder.

The renderer asks for a timeline, shows each entry from its date on and
asks again once the last entry is reached.  Entries sit on local
midnights so the display flips exactly when the calendar day changes.
"""

import datetime
from typing import Optional

from app.cycle.phase import compute_phase, start_of_day, to_local_date
from app.schemas.cycle_phase import InPhase
from app.schemas.timeline import CycleEntry, CycleTimeline

DEFAULT_TIMELINE_DAYS = 7


def build_timeline(
    start_date: Optional[datetime.date],
    now: datetime.datetime,
    days: int = DEFAULT_TIMELINE_DAYS,
    tz: Optional[datetime.tzinfo] = None,
) -> CycleTimeline:
    """Build one entry per local day, starting with the day of ``now``.

    Args:
        start_date: Configured start date, ``None`` if not configured.
        now: Current instant.
        days: Number of entries (at least 1).
        tz: Zone defining local days.

    Returns:
        :class:`CycleTimeline` reloading at the midnight after the last entry.
    """
    if days < 1:
        raise ValueError(f"Timeline needs at least one day, got {days}")

    today = to_local_date(now, tz)
    entries: list[CycleEntry] = []
    for offset in range(days):
        day = today + datetime.timedelta(days=offset)
        entries.append(CycleEntry(date=start_of_day(day, tz), phase=compute_phase(start_date, day, tz)))

    return CycleTimeline(
        entries=entries,
        next_reload_at=start_of_day(today + datetime.timedelta(days=days), tz),
    )


def placeholder_entry(now: datetime.datetime) -> CycleEntry:
    """Entry shown while the real data loads."""
    return CycleEntry(date=now, phase=InPhase(day_index=0))


def snapshot_entry(
    start_date: Optional[datetime.date],
    now: datetime.datetime,
    tz: Optional[datetime.tzinfo] = None,
) -> CycleEntry:
    """Entry for ``now`` as a preview."""
    return CycleEntry(date=now, phase=compute_phase(start_date, now, tz))
