"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps the opaque string primary key shared by every table
    - AccessMode is declared for every unit of work (read-only vs read-write)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log records without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)


# ─── Enums ───────────────────────────────────────────────────────

class AccessMode(str, Enum):
    """Declared intent of a unit of work."""
    READ_ONLY = "read_only"
    READ_WRITE = "read_write"


class StoreOperation(str, Enum):
    """Record Store operations — used in logs and error context."""
    GET_ONE = "get_one"
    GET_MANY = "get_many"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def access_mode(self) -> AccessMode:
        if self in (StoreOperation.GET_ONE, StoreOperation.GET_MANY):
            return AccessMode.READ_ONLY
        return AccessMode.READ_WRITE
