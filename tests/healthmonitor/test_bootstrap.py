"""
Tests for reporter composition at process startup.

Tests cover:
- Logged choice of reporter variant
- initialize_health_metrics wiring of logging, config and registration
"""

import json
import logging

import pytest
from prometheus_client import CollectorRegistry
from pythonjsonlogger import jsonlogger
from structlog.testing import capture_logs

from healthmonitor.bootstrap import build_health_reporter, initialize_health_metrics
from healthmonitor.config import MetricsConfig
from healthmonitor.metrics import HealthMetrics, MetricSet
from healthmonitor.reporters import NoOpHealthReporter
from healthmonitor.sinks import CollectorRegistrySink

ENV_VARS = (
    "HEALTH_MONITOR_METRICS_ENABLED",
    "HEALTH_MONITOR_METRICS_REPORTER",
    "HEALTH_MONITOR_METRICS_LOG_LEVEL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _events(logs):
    return {entry["event"]: entry for entry in logs}


# ============================================================================
# COMPOSITION LOGGING TESTS
# ============================================================================


def test_logs_disabled_variant():
    """Test the no-op choice is logged with the configured reporter."""
    with capture_logs() as logs:
        build_health_reporter(MetricsConfig(enabled=False))

    entry = _events(logs)["health_metrics_disabled"]
    assert entry["reporter"] == "prometheus"
    assert entry["log_level"] == "info"


def test_logs_logging_variant():
    """Test the logging choice is logged with its level."""
    with capture_logs() as logs:
        build_health_reporter(MetricsConfig(reporter="logging", log_level="WARNING"))

    assert _events(logs)["health_metrics_logging"]["level"] == "WARNING"


def test_logs_registered_variant():
    """Test registration of the prometheus variant is logged."""
    with capture_logs() as logs:
        build_health_reporter(
            MetricsConfig(),
            sink=CollectorRegistrySink(CollectorRegistry()),
            metric_set=MetricSet(),
        )

    assert _events(logs)["health_metrics_registered"]["reporter"] == "prometheus"


# ============================================================================
# STARTUP TESTS
# ============================================================================


def test_initialize_configures_json_logging_and_registers(restore_logging, capsys):
    """Test startup installs JSON logging and returns a registered handle."""
    registry = CollectorRegistry()

    reporter = initialize_health_metrics(
        sink=CollectorRegistrySink(registry),
        metric_set=MetricSet(),
        service_name="test-monitor",
    )
    reporter.report_unhealthy("node-9")

    assert isinstance(reporter, HealthMetrics)
    assert registry.get_sample_value(
        "health_monitor_unhealthy_target_total", {"target": "node-9"}
    ) == 1.0
    assert isinstance(logging.getLogger().handlers[0].formatter, jsonlogger.JsonFormatter)

    records = [
        json.loads(line)
        for line in capsys.readouterr().out.splitlines()
        if line.startswith("{")
    ]
    registered = [r for r in records if r["message"] == "health_metrics_registered"]
    assert registered
    assert registered[0]["service"] == "test-monitor"


def test_initialize_reads_config_file(restore_logging, tmp_path):
    """Test startup honours the config file."""
    path = tmp_path / "metrics.yaml"
    path.write_text("metrics:\n  reporter: noop\n")

    reporter = initialize_health_metrics(config_path=path)

    assert isinstance(reporter, NoOpHealthReporter)
