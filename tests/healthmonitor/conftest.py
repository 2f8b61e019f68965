"""Shared fixtures for the healthmonitor tests."""

import logging

import pytest
import structlog


@pytest.fixture
def restore_logging():
    """Undo setup_json_logging after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
