"""Shared fixtures: an in-memory shared defaults database."""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401  (registers SharedDefault on SQLModel.metadata)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def broken_engine(engine):
    """Database whose shared defaults table has gone missing."""
    SQLModel.metadata.drop_all(engine)
    return engine
