"""
Shared defaults model.

A small key-value table standing in for a per-app-group defaults suite.
Both the configuring app and the widget renderer open the same database,
so every row is visible to both processes.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class SharedDefault(SQLModel, table=True):
    """One numeric value stored under ``key`` in the ``suite_name`` namespace.

    The existence of the row is what marks a key as set.  The value itself
    carries no sentinel meaning.
    """

    __tablename__ = "shared_defaults"
    __table_args__ = (UniqueConstraint("suite_name", "key", name="uq_shared_defaults_suite_key"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    suite_name: str = Field(index=True, max_length=255, nullable=False)
    key: str = Field(max_length=255, nullable=False)
    value: float = Field(nullable=False)

    # Timestamps
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
