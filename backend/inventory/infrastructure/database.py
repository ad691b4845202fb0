"""Database Session Manager — async connection pool, units of work, and error mapping.

Invariants:
    - One engine (connection pool) per application, owned by app.state
    - Every unit of work is rolled back and released on exit; after a successful
      commit the rollback is a no-op
    - Read-only intent is declared to PostgreSQL with SET TRANSACTION READ ONLY
    - SQLite connections enforce foreign keys (PRAGMA foreign_keys=ON)
    - All SQLAlchemy exceptions mapped to StoreError subclasses (core/errors.py);
      commit failures mapped to CommitError

Design Decisions:
    - Manager wraps an existing AsyncEngine: tests hand in an in-memory SQLite
      engine, production builds one from Settings with create_engine_from_settings
    - expire_on_commit=False: records are read after the session closes
    - No retries: every fault surfaces to the caller immediately
"""

import asyncio
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, InterfaceError, DisconnectionError,
    TimeoutError as PoolTimeoutError, SQLAlchemyError,
)

from inventory.config import Settings
from inventory.core.domain_types import AccessMode
from inventory.core.errors import (
    CommitError, ConnectivityError, ConstraintViolationError, ErrorContext,
    StoreError,
)

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the pooled async engine described by Settings."""
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        # SQLite picks its own pool class (static for :memory:, queue for files)
        engine = create_async_engine(url, echo=False)
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_async_engine(
        url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle_seconds,
        pool_timeout=settings.database_pool_timeout_seconds,
        pool_pre_ping=settings.database_pool_pre_ping,
        connect_args={"timeout": settings.database_connect_timeout_seconds},
    )


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign-key enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@contextmanager
def translate_errors(
    operation: str, context: ErrorContext | None = None,
) -> Iterator[None]:
    """Re-raise engine faults as StoreError subclasses."""
    try:
        yield
    except IntegrityError as e:
        logger.error(f"DB integrity error during {operation}: {e.orig}")
        raise ConstraintViolationError(
            "Integrity constraint violated", operation, context,
        ) from e
    except (
        OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError,
    ) as e:
        logger.error(f"DB connectivity error during {operation}: {e}")
        raise ConnectivityError(
            "Connection or operational error", operation, context,
        ) from e
    except SQLAlchemyError as e:
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise StoreError("Database operation failed", operation, context) from e
    except OSError as e:
        logger.error(f"DB socket error during {operation}: {e}")
        raise ConnectivityError(
            "Database unreachable", operation, context,
        ) from e


class DatabaseSessionManager:
    """Opens units of work against a pooled engine."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def supports_read_only(self) -> bool:
        return self.engine.dialect.name == "postgresql"

    @asynccontextmanager
    async def unit_of_work(
        self, mode: AccessMode = AccessMode.READ_WRITE,
    ) -> AsyncIterator[AsyncSession]:
        """Provide one transactional scope, abandoned on any exit without commit."""
        session = self._session_factory()
        try:
            if mode is AccessMode.READ_ONLY and self.supports_read_only:
                with translate_errors("begin"):
                    await session.execute(text("SET TRANSACTION READ ONLY"))
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def commit(
        self, work: AsyncSession, context: ErrorContext | None = None,
    ) -> None:
        """Commit a unit of work; any failure becomes CommitError."""
        try:
            await work.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB commit failed: {e}")
            raise CommitError(type(e).__name__, context) from e

    async def create_schema(self) -> None:
        """Create all tables (development and tests only; no migrations)."""
        from inventory.db.base import Base
        import inventory.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def verify_connectivity(self, timeout: float) -> None:
        """Startup liveness check, bounded in time. Raises ConnectivityError."""
        try:
            await asyncio.wait_for(self._ping(), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise ConnectivityError(
                f"no answer within {timeout}s", "connect",
            ) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self._ping()
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def _ping(self) -> None:
        with translate_errors("connect"):
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
