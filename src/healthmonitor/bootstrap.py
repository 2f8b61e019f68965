"""Compose the HealthReporter the health monitor is started with."""

from pathlib import Path
from typing import Callable, Optional, Union

from .config import MetricsConfig, load_metrics_config
from .logging_config import get_logger, setup_json_logging
from .metrics import MetricSet, register
from .reporters import HealthReporter, LoggingHealthReporter, NoOpHealthReporter
from .sinks import CollectorRegistrySink, RegisterableSink

SinkArg = Optional[Union[RegisterableSink, Callable[..., None]]]


def build_health_reporter(
    config: Optional[MetricsConfig] = None,
    sink: SinkArg = None,
    metric_set: Optional[MetricSet] = None,
) -> HealthReporter:
    """
    Build the reporter selected by configuration.

    The prometheus variant registers the metric set into ``sink``
    (default: the global CollectorRegistry).

    Args:
        config: Metrics configuration (default: from environment)
        sink: Store receiving the instruments
        metric_set: Instruments to register (default: process-wide set)

    Returns:
        HealthReporter for the health monitor to report through
    """
    config = config or MetricsConfig.from_env()
    logger = get_logger(__name__)

    if not config.enabled or config.reporter == "noop":
        logger.info("health_metrics_disabled", reporter=config.reporter)
        return NoOpHealthReporter()

    if config.reporter == "logging":
        logger.info("health_metrics_logging", level=config.log_level)
        return LoggingHealthReporter(log_level=config.numeric_log_level)

    reporter = register(sink if sink is not None else CollectorRegistrySink(), metric_set)
    logger.info("health_metrics_registered", reporter=config.reporter)
    return reporter


def initialize_health_metrics(
    config_path: Optional[Union[str, Path]] = None,
    sink: SinkArg = None,
    metric_set: Optional[MetricSet] = None,
    service_name: str = "health-monitor",
) -> HealthReporter:
    """
    Process startup: configure JSON logging, load configuration, build the reporter.

    Call once, before the monitor issues any report.
    """
    setup_json_logging(service_name=service_name)
    config = load_metrics_config(config_path)
    return build_health_reporter(config, sink=sink, metric_set=metric_set)
