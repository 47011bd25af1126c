"""Database repositories."""

from app.db.repositories.shared_defaults import SharedDefaultsRepository

__all__ = [
    "SharedDefaultsRepository",
]
