"""Database Session Manager — engine construction, error mapping, probes.

Tests cover:
    - Engine faults are re-raised as the matching StoreError subclass
    - verify_connectivity succeeds on a live engine and times out on a hung one
    - health_check reports False instead of raising
    - Pool limits from Settings reach the PostgreSQL engine
    - SQLite engines built from Settings enforce foreign keys
"""

import asyncio

import pytest
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, SQLAlchemyError,
)

from inventory.config import Settings
from inventory.core.domain_types import AccessMode
from inventory.core.errors import (
    ConnectivityError, ConstraintViolationError, ErrorContext, StoreError,
)
from inventory.infrastructure.database import (
    create_engine_from_settings, translate_errors,
)


def test_integrity_error_becomes_constraint_violation():
    ctx = ErrorContext(entity="Owner", record_id="o1", operation="create")
    with pytest.raises(ConstraintViolationError) as exc_info:
        with translate_errors("create", ctx):
            raise IntegrityError("INSERT", {}, Exception("UNIQUE failed"))
    assert exc_info.value.context is ctx
    assert isinstance(exc_info.value.__cause__, IntegrityError)


def test_operational_error_becomes_connectivity_error():
    with pytest.raises(ConnectivityError) as exc_info:
        with translate_errors("get_one"):
            raise OperationalError("SELECT", {}, Exception("server closed"))
    assert exc_info.value.http_status == 503


def test_socket_error_becomes_connectivity_error():
    with pytest.raises(ConnectivityError):
        with translate_errors("connect"):
            raise ConnectionRefusedError("refused")


def test_other_engine_errors_become_store_error():
    with pytest.raises(StoreError) as exc_info:
        with translate_errors("update"):
            raise SQLAlchemyError("boom")
    assert type(exc_info.value) is StoreError
    assert exc_info.value.http_status == 500


def test_non_engine_errors_pass_through():
    with pytest.raises(KeyError):
        with translate_errors("get_one"):
            raise KeyError("id")


async def test_verify_connectivity_on_live_engine(db):
    await db.verify_connectivity(timeout=1.0)


async def test_verify_connectivity_times_out(db, monkeypatch):
    async def hung_ping():
        await asyncio.sleep(1)

    monkeypatch.setattr(db, "_ping", hung_ping)
    with pytest.raises(ConnectivityError) as exc_info:
        await db.verify_connectivity(timeout=0.01)
    assert exc_info.value.operation == "connect"


async def test_health_check(db, monkeypatch):
    assert await db.health_check() is True

    async def failing_ping():
        raise ConnectivityError("down", "connect")

    monkeypatch.setattr(db, "_ping", failing_ping)
    assert await db.health_check() is False


async def test_unit_of_work_rolls_back_on_error(db):
    with pytest.raises(RuntimeError):
        async with db.unit_of_work(AccessMode.READ_WRITE) as work:
            assert work.is_active
            raise RuntimeError("abandon")


async def test_sqlite_engine_from_settings_enforces_foreign_keys():
    engine = create_engine_from_settings(Settings(database_url="sqlite+aiosqlite://"))
    assert engine.dialect.name == "sqlite"
    async with engine.connect() as conn:
        enabled = (await conn.execute(text("PRAGMA foreign_keys"))).scalar()
    assert enabled == 1
    await engine.dispose()


async def test_postgres_engine_gets_pool_limits():
    settings = Settings(
        database_url="postgresql://u:p@localhost:5432/inv",
        database_pool_size=7,
        database_max_overflow=3,
    )
    engine = create_engine_from_settings(settings)
    assert engine.dialect.name == "postgresql"
    assert engine.dialect.driver == "asyncpg"
    assert engine.sync_engine.pool.size() == 7
    await engine.dispose()
