"""Cycle core: phase calculator, shared date store, presentation, timeline."""

from app.cycle.display import describe
from app.cycle.phase import compute_phase
from app.cycle.store import SharedDateStore
from app.cycle.timeline import build_timeline

__all__ = ["SharedDateStore", "build_timeline", "compute_phase", "describe"]
