"""SQLModel database models."""

from app.models.shared_default import SharedDefault

__all__ = [
    "SharedDefault",
]
