"""
Database session management.

Provides the SQLModel engine bound to the app group container and
session creation.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.database_url

if settings.DATABASE_URL is None:
    # The container directory is shared by the app and the widget
    settings.shared_container_path.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a session on the shared namespace database.

    Example:
        with contextlib.contextmanager(get_db)() as db:
            CycleService(db).get_current_status()
    """
    with Session(engine) as session:
        yield session
