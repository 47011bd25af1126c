"""
Shared date store.

Persists the cycle start date in the app group namespace so that the
configuring app writes it and the widget renderer reads it.

The calendar date is stored as float seconds from the Unix epoch to
midnight UTC of that date.  The encoding does not depend on the zone of
the writing or the reading process, and covers every date from year 1
to 9999.  Whether a date is configured is decided by the presence of the
row, so every encoded value (zero included) is a real date.
"""

import datetime
import math
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import SharedStoreUnavailableError
from app.cycle.phase import to_local_date
from app.db.repositories.shared_defaults import SharedDefaultsRepository

_EPOCH = datetime.date(1970, 1, 1)
_SECONDS_PER_DAY = 86400.0


def encode_start_date(value: datetime.date) -> float:
    """Seconds from the epoch to midnight UTC of ``value``."""
    return (value - _EPOCH).days * _SECONDS_PER_DAY


def decode_start_date(timestamp: float) -> Optional[datetime.date]:
    """Calendar date of ``timestamp``, or ``None`` if it is not a usable value."""
    if not math.isfinite(timestamp):
        return None
    try:
        return _EPOCH + datetime.timedelta(seconds=timestamp)
    except (OverflowError, ValueError):
        return None

class SharedDateStore:
    """Start date persistence in the shared app group namespace."""

    def __init__(
        self,
        session: Session,
        app_group_id: Optional[str] = None,
        key: Optional[str] = None,
        tz: Optional[datetime.tzinfo] = None,
    ):
        self.session = session
        self.app_group_id = app_group_id or settings.APP_GROUP_ID
        self.key = key or settings.CYCLE_START_DATE_KEY
        self.tz = tz
        self.repo = SharedDefaultsRepository(session, self.app_group_id)

    def save_start_date(self, value: datetime.date) -> datetime.date:
        """Store ``value`` (normalised to its local date), overwriting any prior date.

        Raises:
            SharedStoreUnavailableError: the namespace could not be written.
        """
        day = to_local_date(value, self.tz)
        try:
            self.repo.set_double(self.key, encode_start_date(day))
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Could not save start date in '{self.app_group_id}': {exc}")
            raise SharedStoreUnavailableError(self.app_group_id, self.key) from exc

        logger.info(f"Cycle start date set to {day.isoformat()} in '{self.app_group_id}'")
        return day

    def load_start_date(self) -> Optional[datetime.date]:
        """Return the stored start date, or ``None`` if absent or unreadable."""
        try:
            timestamp = self.repo.get_double(self.key)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.warning(f"Shared store '{self.app_group_id}' unavailable: {exc}")
            return None

        if timestamp is None:
            logger.debug(f"No '{self.key}' in '{self.app_group_id}'")
            return None

        day = decode_start_date(timestamp)
        if day is None:
            logger.warning(f"Ignoring unusable '{self.key}' value {timestamp!r}")
        return day
