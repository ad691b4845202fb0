"""Error Hierarchy — typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status the API layer answers with
    - to_response() produces the REST error envelope
    - StoreError subclasses cover faults raised by the relational engine

Design Decisions:
    - Single hierarchy with InventoryError base: one FastAPI handler catches all
    - Status mapping lives on the error, not in the routes: NotFound → 404,
      ConstraintViolation → 409, Decode → 400, Connectivity → 503
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    UNSUPPORTED = "unsupported"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which record and operation an error belongs to."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    record_id: str | None = None
    operation: str | None = None


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "record_id": self.context.record_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class NotFoundError(InventoryError):
    """Keyed lookup matched zero rows."""
    def __init__(
        self, entity: str, key: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=entity, record_id=key)
        super().__init__(
            f"{entity} '{key}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.entity = entity
        self.key = key


class DecodeError(InventoryError):
    """Inbound payload could not be decoded into a record."""
    def __init__(
        self,
        message: str = "Invalid request data",
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class OperationNotSupportedError(InventoryError):
    """Operation is not offered for this entity (device logs are append-only)."""
    def __init__(
        self, entity: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=entity, operation=operation)
        super().__init__(
            f"{entity} does not support {operation}",
            "OPERATION_NOT_SUPPORTED", ErrorCategory.UNSUPPORTED,
            ErrorSeverity.ERROR, ctx, 405,
        )


# ─── Store Errors ───────────────────────────────────────────────

class StoreError(InventoryError):
    """Relational engine fault not covered by a more specific subclass."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "STORE_ERROR",
        category: ErrorCategory = ErrorCategory.DATABASE,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
        http_status: int = 500,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"Database {operation} failed: {message}",
            code, category, severity, ctx, http_status,
        )
        self.operation = operation


class ConstraintViolationError(StoreError):
    """Insert or update violated a uniqueness or foreign-key rule."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, operation, context,
            code="CONSTRAINT_VIOLATION", category=ErrorCategory.CONFLICT,
            severity=ErrorSeverity.ERROR, http_status=409,
        )


class ConnectivityError(StoreError):
    """Pool, connection or network fault."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, operation, context,
            code="CONNECTIVITY_ERROR", http_status=503,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class GenerationError(InventoryError):
    """Identifier generation failed (entropy source unavailable)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Identifier generation failed: {message}",
            "GENERATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class CommitError(InventoryError):
    """Unit-of-work finalization failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Commit failed: {message}",
            "COMMIT_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
