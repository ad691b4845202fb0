"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (entity, record_id, operation, request fields) surfaced when present
    - JSON format in production, human-readable in development
    - Optional log file is size-rotated; stdout always receives the same records

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan, with explicit arguments
      from Settings (no module-level configuration)
    - setup_logging is idempotent: it replaces the handlers it installed before
"""

import logging
import json
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler

EXTRA_FIELDS = (
    "entity", "record_id", "operation", "error_code",
    "method", "path", "status_code", "duration_ms", "client_ip",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"

_installed_handlers: list[logging.Handler] = []


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
) -> list[logging.Handler]:
    """Configure root logging. Returns the handlers it installed.

    Handlers from an earlier call are removed and closed first.
    """
    for old in _installed_handlers:
        logging.root.removeHandler(old)
        old.close()
    _installed_handlers.clear()

    formatter = build_formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count,
            encoding="utf-8",
        ))
    for handler in handlers:
        handler.setFormatter(formatter)
        logging.root.addHandler(handler)
    _installed_handlers.extend(handlers)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handlers
