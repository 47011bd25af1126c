"""
Database initialization.

Creates the shared defaults table in the app group container.
"""

from loguru import logger
from sqlmodel import SQLModel

from app.core.config import settings
from app.db.session import engine


def init_db() -> None:
    """
    Initialize database schema.

    Creates all SQLModel tables if they do not exist yet.
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info(f"Creating tables for app group '{settings.APP_GROUP_ID}'")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
