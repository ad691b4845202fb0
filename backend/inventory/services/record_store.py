"""Record Store — generic parameterized-SQL gateway for one inventory table.

Invariants:
    - Every operation runs on a unit of work the caller already opened;
      the store never begins, commits, or closes one
    - get_one/get_one_by raise NotFoundError on zero rows, never return None
    - get_many returns a fully materialized list ([] on no match)
    - create assigns a generated id into the caller's record when id is empty,
      before the insert is issued
    - update/delete of a missing id: silent no-op, or NotFoundError when
      strict_writes is set
    - Engine faults leave as StoreError subclasses (translate_errors)

Design Decisions:
    - SQLAlchemy Core statements against model.__table__: plain parameterized
      SQL, rowcount available for strict writes, no identity-map side effects
    - Rows validated into records through Pydantic (from_attributes)
"""

import logging
from typing import Callable, Generic, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from inventory.core.domain_types import RecordId, StoreOperation
from inventory.core.errors import ErrorContext, NotFoundError
from inventory.core.identifiers import generate_id
from inventory.infrastructure.database import translate_errors
from inventory.schemas.base import Record
from inventory.services.entities import EntityDefinition

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


class SqlRecordStore(Generic[RecordT]):
    """Persistence gateway for the table behind one EntityDefinition."""

    def __init__(
        self,
        entity: EntityDefinition,
        strict_writes: bool = False,
        id_factory: Callable[[], str] = generate_id,
    ):
        self.entity = entity
        self._table = entity.model.__table__
        self._schema = entity.schema
        self._strict_writes = strict_writes
        self._id_factory = id_factory

    async def get_one(self, work: AsyncSession, key: RecordId) -> RecordT:
        return await self.get_one_by(work, "id", key)

    async def get_one_by(
        self, work: AsyncSession, column: str, value: str,
    ) -> RecordT:
        logger.debug(f"Fetching {self.entity.name} with {column}: {value}")
        ctx = self._context(StoreOperation.GET_ONE, value)
        stmt = select(self._table).where(self._column(column) == value)
        with translate_errors(StoreOperation.GET_ONE.value, ctx):
            result = await work.execute(stmt)
            row = result.mappings().first()
        if row is None:
            raise NotFoundError(self.entity.name, value, ctx)
        return self._schema.model_validate(dict(row))

    async def get_many(
        self, work: AsyncSession, filter_key: str | None = None,
    ) -> list[RecordT]:
        stmt = select(self._table).order_by(self._column(self.entity.order_by))
        if filter_key is not None:
            if self.entity.parent_column is None:
                raise ValueError(f"{self.entity.name} has no parent filter")
            stmt = stmt.where(
                self._column(self.entity.parent_column) == filter_key,
            )
        logger.debug(
            f"Fetching {self.entity.name} records",
            extra={"entity": self.entity.name, "record_id": filter_key},
        )
        ctx = self._context(StoreOperation.GET_MANY, filter_key)
        with translate_errors(StoreOperation.GET_MANY.value, ctx):
            result = await work.execute(stmt)
            rows = result.mappings().all()
        return [self._schema.model_validate(dict(row)) for row in rows]

    async def create(self, work: AsyncSession, record: RecordT) -> None:
        if not record.id:
            record.id = self._id_factory()
        logger.debug(f"Creating {self.entity.name}: {record.id}")
        ctx = self._context(StoreOperation.CREATE, record.id)
        stmt = insert(self._table).values(**record.model_dump())
        with translate_errors(StoreOperation.CREATE.value, ctx):
            await work.execute(stmt)

    async def update(self, work: AsyncSession, record: RecordT) -> None:
        logger.debug(f"Updating {self.entity.name}: {record.id}")
        ctx = self._context(StoreOperation.UPDATE, record.id)
        stmt = (
            update(self._table)
            .where(self._table.c.id == record.id)
            .values(**record.model_dump(exclude={"id"}))
        )
        with translate_errors(StoreOperation.UPDATE.value, ctx):
            result = await work.execute(stmt)
        self._check_affected(result.rowcount, record.id, ctx)

    async def delete(self, work: AsyncSession, key: RecordId) -> None:
        logger.debug(f"Deleting {self.entity.name}: {key}")
        ctx = self._context(StoreOperation.DELETE, key)
        stmt = delete(self._table).where(self._table.c.id == key)
        with translate_errors(StoreOperation.DELETE.value, ctx):
            result = await work.execute(stmt)
        self._check_affected(result.rowcount, key, ctx)

    def _check_affected(
        self, rowcount: int, key: str | None, ctx: ErrorContext,
    ) -> None:
        if rowcount == 0 and self._strict_writes:
            raise NotFoundError(self.entity.name, str(key), ctx)

    def _column(self, name: str):
        try:
            return self._table.c[name]
        except KeyError:
            raise ValueError(
                f"{self.entity.name} has no column '{name}'",
            ) from None

    def _context(
        self, operation: StoreOperation, record_id: str | None,
    ) -> ErrorContext:
        return ErrorContext(
            entity=self.entity.name,
            record_id=record_id,
            operation=operation.value,
        )
