"""
Widget timeline schemas.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.cycle_phase import CyclePhase


class CycleEntry(BaseModel):
    """A single timeline entry, shown from ``date`` on."""

    date: datetime.datetime
    phase: CyclePhase


class CycleTimeline(BaseModel):
    """Precomputed entries for the rendering surface."""

    entries: list[CycleEntry] = Field(..., min_length=1)
    reload_policy: Literal["at_end"] = "at_end"
    next_reload_at: datetime.datetime = Field(
        ...,
        description="When the renderer should ask for a new timeline",
    )
