"""Tests for structured logging setup."""

import json
import logging

import pytest
import structlog
from pythonjsonlogger import jsonlogger

from healthmonitor.errors import ConfigurationError
from healthmonitor.logging_config import get_logger, setup_json_logging


def test_setup_json_logging_installs_json_handler(restore_logging):
    """Test the root logger gets a single JSON handler."""
    setup_json_logging(log_level="WARNING", service_name="test-monitor")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_setup_json_logging_binds_service_context(restore_logging):
    """Test global context carries service and environment."""
    setup_json_logging(service_name="test-monitor", environment="staging")

    context = structlog.contextvars.get_contextvars()
    assert context["service"] == "test-monitor"
    assert context["environment"] == "staging"


def test_get_logger_returns_structlog_logger():
    """Test get_logger returns a usable structlog logger."""
    logger = get_logger("healthmonitor.test")

    assert hasattr(logger, "info")
    assert hasattr(logger, "bind")


def test_setup_json_logging_reads_level_from_env(restore_logging, monkeypatch):
    """Test LOG_LEVEL is used when no level is passed."""
    monkeypatch.setenv("LOG_LEVEL", "error")

    setup_json_logging()

    assert logging.getLogger().level == logging.ERROR


def test_setup_json_logging_rejects_unknown_level(restore_logging):
    """Test an unknown level raises ConfigurationError."""
    with pytest.raises(ConfigurationError):
        setup_json_logging(log_level="verbose")


def test_structured_events_written_as_json(restore_logging, capsys):
    """Test structlog events reach the JSON handler with bound context."""
    setup_json_logging(log_level="INFO", service_name="test-monitor", environment="ci")

    get_logger("healthmonitor.test").info("target_checked", target="node-1")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    record = json.loads(lines[-1])
    assert record["message"] == "target_checked"
    assert record["target"] == "node-1"
    assert record["service"] == "test-monitor"
    assert record["environment"] == "ci"
    assert record["levelname"] == "INFO"


def test_structured_events_filtered_by_level(restore_logging, capsys):
    """Test events below the configured level are dropped."""
    setup_json_logging(log_level="WARNING")

    get_logger("healthmonitor.test").info("quiet_event")

    assert "quiet_event" not in capsys.readouterr().out
