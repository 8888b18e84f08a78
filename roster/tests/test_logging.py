"""Logging configuration tests."""

from __future__ import annotations

import json
import logging
import sys

from roster.core.logging import ECSJsonFormatter, configure_logging


class TestConfigureLogging:
    def teardown_method(self) -> None:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)

    def test_configures_single_stdout_handler(self) -> None:
        configure_logging(log_level="DEBUG", json_format=False)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].stream is sys.stdout

    def test_json_format_uses_ecs_formatter(self) -> None:
        configure_logging(log_level="INFO", json_format=True)

        assert isinstance(logging.getLogger().handlers[0].formatter, ECSJsonFormatter)


class TestECSJsonFormatter:
    def test_formats_extra_as_labels(self) -> None:
        formatter = ECSJsonFormatter(service_name="roster-api", environment="test")
        record = logging.LogRecord(
            name="roster.services.character",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Character created",
            args=(),
            exc_info=None,
        )
        record.character_id = 7

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Character created"
        assert payload["log.level"] == "info"
        assert payload["service.name"] == "roster-api"
        assert payload["service.environment"] == "test"
        assert payload["labels"] == {"character_id": 7}

    def test_includes_error_fields(self) -> None:
        formatter = ECSJsonFormatter()
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                name="roster",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        payload = json.loads(formatter.format(record))

        assert payload["error.type"] == "RuntimeError"
        assert payload["error.message"] == "boom"
