"""Pydantic schemas for cycle phases and widget timelines."""

from app.schemas.cycle_phase import (
    CYCLE_LENGTH_DAYS,
    IN_PHASE_DAYS,
    OUT_PHASE_DAYS,
    CyclePhase,
    InPhase,
    OutPhase,
    PhaseDisplay,
    Unconfigured,
)
from app.schemas.timeline import CycleEntry, CycleTimeline

__all__ = [
    "CYCLE_LENGTH_DAYS",
    "IN_PHASE_DAYS",
    "OUT_PHASE_DAYS",
    "CyclePhase",
    "InPhase",
    "OutPhase",
    "PhaseDisplay",
    "Unconfigured",
    "CycleEntry",
    "CycleTimeline",
]
