"""Business logic services."""

from app.services.cycle_service import CycleService

__all__ = [
    "CycleService",
]
