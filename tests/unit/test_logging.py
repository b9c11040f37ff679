"""Unit tests for logging configuration."""

import logging

import orjson
import pytest
import structlog

from outpost_abi.arguments import ArgumentStore
from outpost_abi.config import load_config
from outpost_abi.config.defaults import LoggingParams
from outpost_abi.logging import configure_logging_from_config, get_logger


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo global structlog and root level changes after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureFromConfig:
    """The logging config section drives structlog output."""

    def test_level_filters_output(self, caplog) -> None:
        configure_logging_from_config(LoggingParams(level="ERROR"))
        logger = get_logger("outpost_abi.tests.level")

        logger.warning("hidden event")
        logger.error("shown event")

        assert logging.getLogger().level == logging.ERROR
        assert "shown event" in caplog.text
        assert "hidden event" not in caplog.text

    def test_json_format(self, caplog) -> None:
        configure_logging_from_config(LoggingParams(level="INFO", format_json=True,
                                                    include_timestamp=False))
        get_logger("outpost_abi.tests.json").info("structured", label="BTCUSD")

        record = orjson.loads(caplog.records[-1].getMessage())
        assert record["event"] == "structured"
        assert record["label"] == "BTCUSD"
        assert record["level"] == "info"
        assert "timestamp" not in record

    def test_timestamp_included(self, caplog) -> None:
        configure_logging_from_config(LoggingParams(level="INFO", format_json=True))
        get_logger("outpost_abi.tests.ts").info("stamped")

        assert "timestamp" in orjson.loads(caplog.records[-1].getMessage())

    def test_loaded_config(self, caplog) -> None:
        config = load_config(overrides={"logging": {"level": "DEBUG", "format_json": True}})
        configure_logging_from_config(config.logging)

        ArgumentStore({"period": "14"}).get("period", int)

        events = [orjson.loads(r.getMessage()) for r in caplog.records
                  if r.name == "outpost_abi.arguments"]
        assert [e["stage"] for e in events] == ["direct", "string_fallback"]
        assert [e["result"] for e in events] == ["FAIL", "OK"]
        assert all(e["subsystem"] == "arguments" for e in events)

    def test_coercion_events_hidden_above_debug(self, caplog) -> None:
        configure_logging_from_config(LoggingParams(level="INFO"))

        ArgumentStore({"period": "14"}).get("period", int)

        assert not [r for r in caplog.records if r.name == "outpost_abi.arguments"]
