"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables
    - Foreign keys are enforced, as on PostgreSQL
    - Importing inventory.main never points at a real PostgreSQL server

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one
      connection that holds the database
    - PostgreSQL-only behavior (SET TRANSACTION READ ONLY) is exercised with
      spies rather than a live server
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure tests don't accidentally use a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

from inventory.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://", echo=False, poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db(test_engine):
    """DatabaseSessionManager over the test engine, schema created."""
    manager = DatabaseSessionManager(test_engine)
    await manager.create_schema()
    return manager
