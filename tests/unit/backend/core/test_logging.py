"""
Unit Tests for Centralized Logging.

Tests logging setup from LoggingSchema and the structured JSON output.
"""

import json
import logging
from unittest.mock import patch

import pytest
import structlog

from modules.backend.core.config_schema import LoggingSchema
from modules.backend.core.logging import get_logger, setup_logging


def _logging_schema(**file_overrides) -> LoggingSchema:
    file_handler = {
        "enabled": False,
        "path": "logs/system.jsonl",
        "max_bytes": 1048576,
        "backup_count": 1,
    }
    file_handler.update(file_overrides)
    return LoggingSchema(
        level="INFO",
        format="json",
        handlers={"console": {"enabled": False}, "file": file_handler},
    )


@pytest.fixture(autouse=True)
def _restore_logging():
    """Put the root logger and structlog back the way the test found them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    """Tests for setup_logging handler wiring."""

    def test_level_override(self):
        setup_logging(level="DEBUG", config=_logging_schema())

        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_toggle(self):
        setup_logging(enable_console=True, config=_logging_schema())
        assert len(logging.getLogger().handlers) == 1

        setup_logging(enable_console=False, config=_logging_schema())
        assert logging.getLogger().handlers == []

    def test_reads_logging_yaml_by_default(self):
        setup_logging(enable_console=False)

        assert logging.getLogger().level == logging.INFO


class TestJsonOutput:
    """Tests for the JSONL file handler output."""

    def test_writes_structured_records_with_request_context(self, tmp_path):
        log_file = tmp_path / "system.jsonl"

        with patch(
            "modules.backend.core.logging._resolve_log_path",
            return_value=log_file,
        ):
            setup_logging(config=_logging_schema(enabled=True))

        structlog.contextvars.bind_contextvars(request_id="req-42", method="GET", path="/health")
        get_logger("tests.logging").info("Seat looked up", seat="12A")

        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "Seat looked up"
        assert record["level"] == "info"
        assert record["logger"] == "tests.logging"
        assert record["request_id"] == "req-42"
        assert record["seat"] == "12A"
        assert "timestamp" in record
