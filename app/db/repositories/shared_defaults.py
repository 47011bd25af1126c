"""Shared defaults repository."""

from typing import Optional

from sqlmodel import Session, select

from app.models.shared_default import SharedDefault, utc_now


class SharedDefaultsRepository:
    """Repository for SharedDefault rows of a single app group suite."""

    def __init__(self, session: Session, suite_name: str):
        self.session = session
        self.suite_name = suite_name

    def get(self, key: str) -> Optional[SharedDefault]:
        statement = select(SharedDefault).where(
            SharedDefault.suite_name == self.suite_name,
            SharedDefault.key == key,
        )
        return self.session.exec(statement).first()

    def get_double(self, key: str) -> Optional[float]:
        """Return the stored value, or ``None`` if the key was never written."""
        row = self.get(key)
        if row is None:
            return None
        return row.value

    def set_double(self, key: str, value: float) -> SharedDefault:
        """Insert or overwrite ``key``; last write wins."""
        row = self.get(key)
        if row is None:
            row = SharedDefault(suite_name=self.suite_name, key=key, value=value)
        else:
            row.value = value
            row.updated_at = utc_now()
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row
