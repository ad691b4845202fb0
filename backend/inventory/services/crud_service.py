"""Transactional Service — wraps each Record Store call in exactly one unit of work.

Invariants:
    - Reads open a read-only unit of work, writes a read-write one
    - One Record Store call per unit of work, then commit
    - Store failure: the unit of work is abandoned and the same error propagates
    - Commit failure: CommitError propagates
    - No business logic beyond transaction boundaries; the only extra rule is
      refusing update on non-updatable entities

Design Decisions:
    - Abandon-on-exit lives in DatabaseSessionManager.unit_of_work (context
      manager), so early returns and exceptions cannot leave a transaction open
    - Store and session manager injected at construction; the pool is shared,
      services are cheap and built per request
"""

import logging
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from inventory.core.domain_types import RecordId, StoreOperation
from inventory.core.errors import (
    ErrorContext, InventoryError, OperationNotSupportedError,
)
from inventory.core.repository_protocols import RecordStore
from inventory.infrastructure.database import DatabaseSessionManager
from inventory.schemas.base import Record
from inventory.services.entities import EntityDefinition
from inventory.services.record_store import SqlRecordStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)
ResultT = TypeVar("ResultT")


class CrudService(Generic[RecordT]):
    """Transaction-boundary manager for one entity."""

    def __init__(
        self,
        entity: EntityDefinition,
        store: RecordStore[RecordT],
        db: DatabaseSessionManager,
    ):
        self.entity = entity
        self._store = store
        self._db = db

    async def get_one(self, key: RecordId) -> RecordT:
        return await self._run(
            StoreOperation.GET_ONE, key,
            lambda work: self._store.get_one(work, key),
        )

    async def get_one_by(self, column: str, value: str) -> RecordT:
        """Single-record lookup by an alternate key (e.g. owner email)."""
        if column not in self.entity.lookup_columns:
            raise ValueError(f"{self.entity.name} cannot be looked up by {column}")
        return await self._run(
            StoreOperation.GET_ONE, value,
            lambda work: self._store.get_one_by(work, column, value),
        )

    async def get_many(self, filter_key: str | None = None) -> Sequence[RecordT]:
        return await self._run(
            StoreOperation.GET_MANY, filter_key,
            lambda work: self._store.get_many(work, filter_key),
        )

    async def create(self, record: RecordT) -> None:
        """Persist a record; an assigned id is visible on `record` afterwards."""
        await self._run(
            StoreOperation.CREATE, record.id,
            lambda work: self._store.create(work, record),
        )

    async def update(self, record: RecordT) -> None:
        if not self.entity.updatable:
            raise OperationNotSupportedError(self.entity.name, "update")
        await self._run(
            StoreOperation.UPDATE, record.id,
            lambda work: self._store.update(work, record),
        )

    async def delete(self, key: RecordId) -> None:
        await self._run(
            StoreOperation.DELETE, key,
            lambda work: self._store.delete(work, key),
        )

    async def _run(
        self,
        operation: StoreOperation,
        record_id: str | None,
        call: Callable[[AsyncSession], Awaitable[ResultT]],
    ) -> ResultT:
        extra = {
            "entity": self.entity.name,
            "record_id": record_id,
            "operation": operation.value,
        }
        async with self._db.unit_of_work(operation.access_mode) as work:
            try:
                result = await call(work)
            except InventoryError as e:
                level = logging.WARNING if e.http_status < 500 else logging.ERROR
                logger.log(
                    level, f"{self.entity.name} {operation.value} failed: {e.message}",
                    extra={**extra, "error_code": e.code},
                )
                raise
            await self._db.commit(work, ErrorContext(
                entity=self.entity.name,
                record_id=record_id,
                operation=operation.value,
            ))
        return result


def build_service(
    entity: EntityDefinition,
    db: DatabaseSessionManager,
    strict_writes: bool = False,
) -> CrudService:
    """Wire a CrudService over a fresh SqlRecordStore for `entity`."""
    return CrudService(entity, SqlRecordStore(entity, strict_writes), db)
