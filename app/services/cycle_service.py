"""
Cycle service.

Glue between the front ends and the cycle core.

**Configuration surface** saves the start date, then asks the renderer to
rebuild its timeline by writing a reload marker next to the date.

**Rendering surface** loads the start date and runs the calculator on
every call.  A missing or unreadable store gives ``Unconfigured``; it
never raises.
"""

import datetime
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.cycle.phase import compute_phase
from app.cycle.store import SharedDateStore
from app.cycle.timeline import build_timeline, placeholder_entry, snapshot_entry
from app.db.repositories.shared_defaults import SharedDefaultsRepository
from app.schemas.cycle_phase import CyclePhase
from app.schemas.timeline import CycleEntry, CycleTimeline


class CycleService:
    """Service for the configuring app and the widget renderer."""

    def __init__(
        self,
        session: Session,
        app_group_id: Optional[str] = None,
        tz: Optional[datetime.tzinfo] = None,
    ):
        self.session = session
        self.app_group_id = app_group_id or settings.APP_GROUP_ID
        self.tz = tz if tz is not None else settings.local_tz
        self.store = SharedDateStore(session, app_group_id=self.app_group_id, tz=self.tz)
        self.defaults_repo = SharedDefaultsRepository(session, self.app_group_id)

    def _now(self, now: Optional[datetime.datetime]) -> datetime.datetime:
        return now if now is not None else datetime.datetime.now(self.tz)

    # ------------------------------------------------------------------
    # Configuration surface
    # ------------------------------------------------------------------

    def set_start_date(self, start_date: datetime.date, now: Optional[datetime.datetime] = None) -> CyclePhase:
        """Save ``start_date``, request a widget reload and return today's phase."""
        now = self._now(now)
        saved = self.store.save_start_date(start_date)
        self.request_timeline_reload(now)
        return compute_phase(saved, now, self.tz)

    def get_start_date(self) -> Optional[datetime.date]:
        return self.store.load_start_date()

    def request_timeline_reload(self, now: Optional[datetime.datetime] = None) -> None:
        now = self._now(now)
        try:
            self.defaults_repo.set_double(settings.TIMELINE_RELOAD_KEY, now.timestamp())
        except SQLAlchemyError as exc:
            # The renderer still reloads on its own schedule.
            self.session.rollback()
            logger.warning(f"Could not request timeline reload: {exc}")

    # ------------------------------------------------------------------
    # Rendering surface
    # ------------------------------------------------------------------

    def get_current_status(self, now: Optional[datetime.datetime] = None) -> CyclePhase:
        return compute_phase(self.store.load_start_date(), self._now(now), self.tz)

    def get_status(self, for_date: datetime.date) -> CyclePhase:
        return compute_phase(self.store.load_start_date(), for_date, self.tz)

    def get_placeholder(self, now: Optional[datetime.datetime] = None) -> CycleEntry:
        return placeholder_entry(self._now(now))

    def get_snapshot(self, now: Optional[datetime.datetime] = None) -> CycleEntry:
        return snapshot_entry(self.store.load_start_date(), self._now(now), self.tz)

    def get_timeline(self, now: Optional[datetime.datetime] = None, days: Optional[int] = None) -> CycleTimeline:
        return build_timeline(
            self.store.load_start_date(),
            self._now(now),
            days=days if days is not None else settings.TIMELINE_DAYS,
            tz=self.tz,
        )

    def reload_requested_since(self, instant: datetime.datetime) -> bool:
        """True if the configuration surface asked for a reload after ``instant``."""
        try:
            requested_at = self.defaults_repo.get_double(settings.TIMELINE_RELOAD_KEY)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning(f"Could not read timeline reload marker: {exc}")
            return False
        return requested_at is not None and requested_at > instant.timestamp()
