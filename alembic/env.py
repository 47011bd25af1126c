"""
Alembic environment for the shared defaults database.

Migrations target the SQLite file inside the app group container (or
``DATABASE_URL`` when set).  SQLite cannot ALTER most constraints in
place, so batch mode is switched on for it.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlmodel import SQLModel

from app.core.config import settings
from app.db.base import SharedDefault  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

DATABASE_URL = settings.database_url
IS_SQLITE = DATABASE_URL.startswith("sqlite")

target_metadata = SQLModel.metadata


def _configure_kwargs() -> dict:
    return {
        "target_metadata": target_metadata,
        "render_as_batch": IS_SQLITE,
        "compare_type": True,
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL for the shared defaults database."""
    context.configure(url=DATABASE_URL, literal_binds=True, dialect_opts={"paramstyle": "named"},
                      **_configure_kwargs())

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations, creating the app group container if needed."""
    if IS_SQLITE and settings.DATABASE_URL is None:
        settings.shared_container_path.mkdir(parents=True, exist_ok=True)

    connectable = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **_configure_kwargs())

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
