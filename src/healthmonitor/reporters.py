"""
HealthReporter Interface and Implementations

The health monitor reports target transitions through this contract and
never touches concrete instruments:
- HealthReporter: Abstract interface for reporters
- NoOpHealthReporter: For disabled metrics collection (does nothing)
- LoggingHealthReporter: Logs reports to standard logger

The Prometheus-backed variant is the HealthMetrics handle returned by
healthmonitor.metrics.register().
"""

import logging
from abc import ABC, abstractmethod

from .descriptors import (
    CURRENT_HEALTHY_TARGETS,
    HEALTHY_TARGETS_TOTAL,
    UNHEALTHY_TARGETS_TOTAL,
)

logger = logging.getLogger(__name__)


class HealthReporter(ABC):
    """Abstract interface for reporting target health transitions."""

    @abstractmethod
    def report_healthy(self, target: str) -> None:
        """Record one "target seen healthy" event.

        Args:
            target: Opaque identifier of the monitored endpoint
        """
        ...

    @abstractmethod
    def report_unhealthy(self, target: str) -> None:
        """Record one "target unhealthy" event.

        Args:
            target: Opaque identifier of the monitored endpoint
        """
        ...

    @abstractmethod
    def report_current_healthy_count(self, count: float) -> None:
        """Overwrite the current number of healthy targets.

        Args:
            count: Snapshot supplied by the monitor, passed through unchecked
        """
        ...


class NoOpHealthReporter(HealthReporter):
    """No-op reporter for disabled metrics - swallows all reports."""

    def targets_total(self, target: str) -> None:
        """Swallow target-keyed report."""
        pass

    def targets_gauge(self, count: float) -> None:
        """Swallow gauge report."""
        pass

    report_healthy = targets_total
    report_unhealthy = targets_total
    report_current_healthy_count = targets_gauge


class LoggingHealthReporter(HealthReporter):
    """Reporter that logs every report to standard logger."""

    def __init__(self, log_level: int = logging.DEBUG):
        self.log_level = log_level

    def report_healthy(self, target: str) -> None:
        logger.log(self.log_level, f"METRIC counter {HEALTHY_TARGETS_TOTAL.name}+=1 target={target}")

    def report_unhealthy(self, target: str) -> None:
        logger.log(self.log_level, f"METRIC counter {UNHEALTHY_TARGETS_TOTAL.name}+=1 target={target}")

    def report_current_healthy_count(self, count: float) -> None:
        logger.log(self.log_level, f"METRIC gauge {CURRENT_HEALTHY_TARGETS.name}={count}")
