"""Structured logging — JSON formatter fields and handler setup."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from inventory.infrastructure.observability import (
    JSONFormatter, build_formatter, setup_logging,
)


def _record(msg="Handler called", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "inventory.test", logging.INFO, __file__, 1, msg, None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "inventory.test"
    assert payload["message"] == "Handler called"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras():
    record = _record(
        method="GET", path="/api/v1/owners", status_code=200,
        duration_ms=1.5, client_ip="8.8.8.8", unrelated="hidden",
    )
    payload = json.loads(JSONFormatter().format(record))
    assert payload["method"] == "GET"
    assert payload["status_code"] == 200
    assert payload["client_ip"] == "8.8.8.8"
    assert "unrelated" not in payload


def test_build_formatter_text():
    formatter = build_formatter("text")
    assert not isinstance(formatter, JSONFormatter)
    assert "Handler called" in formatter.format(_record())


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    installed: list[logging.Handler] = []
    yield installed
    for handler in installed:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


def test_setup_logging_with_rotating_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "inventory.log"
    handlers = setup_logging(
        "debug", "json", log_file=str(log_file), max_bytes=1024, backup_count=2,
    )
    restore_root_logger.extend(handlers)

    assert len(handlers) == 2
    rotating = handlers[1]
    assert isinstance(rotating, RotatingFileHandler)
    assert rotating.maxBytes == 1024
    assert rotating.backupCount == 2
    assert logging.getLogger().level == logging.DEBUG

    logging.getLogger("inventory.test").info("written", extra={"entity": "Owner"})
    rotating.flush()
    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert json.loads(line)["entity"] == "Owner"


def test_setup_logging_stdout_only(restore_root_logger):
    handlers = setup_logging("INFO", "text")
    restore_root_logger.extend(handlers)
    assert len(handlers) == 1
    assert not isinstance(handlers[0], RotatingFileHandler)


def test_setup_logging_twice_replaces_handlers(tmp_path, restore_root_logger):
    root = logging.getLogger()
    before = len(root.handlers)

    first = setup_logging("INFO", "json", log_file=str(tmp_path / "a.log"))
    restore_root_logger.extend(first)
    second = setup_logging("INFO", "json", log_file=str(tmp_path / "b.log"))
    restore_root_logger.extend(second)

    assert len(root.handlers) == before + 2
    assert not any(h in root.handlers for h in first)
    assert all(h in root.handlers for h in second)
