"""Tests for the widget timeline builder."""

import datetime

import pytest

from app.cycle.timeline import build_timeline, placeholder_entry, snapshot_entry
from app.schemas.cycle_phase import InPhase, OutPhase, Unconfigured

START = datetime.date(2026, 10, 12)
NOW = datetime.datetime(2026, 10, 18, 15, 30)


class TestBuildTimeline:

    def test_one_entry_per_local_midnight(self):
        timeline = build_timeline(START, NOW, days=7)
        assert [e.date for e in timeline.entries] == [
            datetime.datetime(2026, 10, 18 + i) for i in range(7)
        ]

    def test_phases_follow_calendar(self):
        timeline = build_timeline(START, NOW, days=7)
        assert [e.phase for e in timeline.entries] == [
            OutPhase(day_index=6),
            InPhase(day_index=0),
            InPhase(day_index=1),
            InPhase(day_index=2),
            InPhase(day_index=3),
            InPhase(day_index=4),
            InPhase(day_index=5),
        ]

    def test_reload_after_last_entry(self):
        timeline = build_timeline(START, NOW, days=7)
        assert timeline.reload_policy == "at_end"
        assert timeline.next_reload_at == datetime.datetime(2026, 10, 25)

    def test_unconfigured_timeline(self):
        timeline = build_timeline(None, NOW, days=3)
        assert len(timeline.entries) == 3
        assert all(e.phase == Unconfigured() for e in timeline.entries)

    def test_crosses_month_end(self):
        timeline = build_timeline(START, datetime.datetime(2026, 10, 30, 8, 0), days=4)
        assert timeline.entries[-1].date == datetime.datetime(2026, 11, 2)

    @pytest.mark.parametrize("days", [0, -1])
    def test_rejects_empty_timeline(self, days):
        with pytest.raises(ValueError):
            build_timeline(START, NOW, days=days)


class TestSingleEntries:

    def test_placeholder(self):
        entry = placeholder_entry(NOW)
        assert entry.date == NOW
        assert entry.phase == InPhase(day_index=0)

    def test_snapshot(self):
        assert snapshot_entry(START, NOW).phase == OutPhase(day_index=6)
        assert snapshot_entry(None, NOW).phase == Unconfigured()

    def test_entry_serialises_with_phase_tag(self):
        data = snapshot_entry(START, NOW).model_dump(mode="json")
        assert data["phase"] == {"kind": "out", "day_index": 6}
