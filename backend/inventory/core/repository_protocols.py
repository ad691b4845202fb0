"""Boundary Protocols — contracts between the transactional services and persistence.

Invariants:
    - Core NEVER imports from services, infrastructure or db
    - Record Stores receive an already-open unit of work; they never open,
      commit or close one themselves
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - UnitOfWork mirrors the subset of AsyncSession the stores use, so
      tests and alternative backends can stand in without SQLAlchemy
"""

from typing import Any, Protocol, Sequence, TypeVar

from inventory.core.domain_types import RecordId

RecordT = TypeVar("RecordT")


class UnitOfWork(Protocol):
    """A single open transactional scope."""
    async def execute(self, statement: Any, *args: Any, **kwargs: Any) -> Any: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class RecordStore(Protocol[RecordT]):
    """Contract for one table's persistence gateway."""
    async def get_one(self, work: UnitOfWork, key: RecordId) -> RecordT: ...
    async def get_one_by(
        self, work: UnitOfWork, column: str, value: str,
    ) -> RecordT: ...
    async def get_many(
        self, work: UnitOfWork, filter_key: str | None = None,
    ) -> Sequence[RecordT]: ...
    async def create(self, work: UnitOfWork, record: RecordT) -> None: ...
    async def update(self, work: UnitOfWork, record: RecordT) -> None: ...
    async def delete(self, work: UnitOfWork, key: RecordId) -> None: ...
