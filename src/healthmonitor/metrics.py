"""
Prometheus Metrics for the Health Monitor

Exposes metrics for:
- Targets observed healthy (counter, partitioned by target)
- Currently healthy targets (gauge)
- Targets observed unhealthy (counter, partitioned by target)

Instruments are created unregistered. A store receives them exactly once
through register(), which returns a HealthMetrics handle:

    from prometheus_client import CollectorRegistry
    from healthmonitor.metrics import register
    from healthmonitor.sinks import CollectorRegistrySink

    health_metrics = register(CollectorRegistrySink(CollectorRegistry()))
    health_metrics.report_healthy("node-1")
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

from prometheus_client import Counter, Gauge

from .descriptors import (
    CURRENT_HEALTHY_TARGETS,
    HEALTHY_TARGETS_TOTAL,
    UNHEALTHY_TARGETS_TOTAL,
    MetricDescriptor,
)
from .reporters import HealthReporter
from .sinks import CallableSink, Registerable, RegisterableSink

logger = logging.getLogger(__name__)


# ============================================================================
# METRIC SET
# ============================================================================


class MetricSet:
    """
    Fixed collection of the health monitor instruments.

    Order is stable: healthy counter, current gauge, unhealthy counter.
    Label values are recorded as given, including empty strings.
    """

    DESCRIPTORS: Tuple[MetricDescriptor, ...] = (
        HEALTHY_TARGETS_TOTAL,
        CURRENT_HEALTHY_TARGETS,
        UNHEALTHY_TARGETS_TOTAL,
    )

    def __init__(self):
        self.healthy_targets_total = Counter(
            HEALTHY_TARGETS_TOTAL.name,
            HEALTHY_TARGETS_TOTAL.documentation,
            labelnames=HEALTHY_TARGETS_TOTAL.label_names,
            registry=None,
        )
        self.current_healthy_targets = Gauge(
            CURRENT_HEALTHY_TARGETS.name,
            CURRENT_HEALTHY_TARGETS.documentation,
            registry=None,
        )
        self.unhealthy_targets_total = Counter(
            UNHEALTHY_TARGETS_TOTAL.name,
            UNHEALTHY_TARGETS_TOTAL.documentation,
            labelnames=UNHEALTHY_TARGETS_TOTAL.label_names,
            registry=None,
        )
        self._registerables: Tuple[Registerable, ...] = (
            self.healthy_targets_total,
            self.current_healthy_targets,
            self.unhealthy_targets_total,
        )

    def registerables(self) -> List[Registerable]:
        """Instruments in registration order."""
        return list(self._registerables)

    def descriptors(self) -> List[MetricDescriptor]:
        return list(self.DESCRIPTORS)

    def __iter__(self) -> Iterator[Registerable]:
        return iter(self._registerables)

    def __len__(self) -> int:
        return len(self._registerables)

    def report_healthy(self, target: str) -> None:
        self.healthy_targets_total.labels(target).inc()

    def report_current_healthy_count(self, count: float) -> None:
        self.current_healthy_targets.set(count)

    def report_unhealthy(self, target: str) -> None:
        self.unhealthy_targets_total.labels(target).inc()


# Process-wide metric set, lives for the process lifetime
default_metric_set = MetricSet()


def healthy_targets_total(target: str) -> None:
    """Increment the total number of healthy instances observed for target."""
    default_metric_set.report_healthy(target)


def current_healthy_targets(count: float) -> None:
    """Set the current number of healthy targets observed by the monitor."""
    default_metric_set.report_current_healthy_count(count)


def unhealthy_targets_total(target: str) -> None:
    """Increment the total number of unhealthy instances observed for target."""
    default_metric_set.report_unhealthy(target)


# ============================================================================
# REGISTRATION
# ============================================================================


@dataclass(frozen=True)
class HealthMetrics(HealthReporter):
    """Report operations bound to a registered MetricSet."""

    healthy_targets_total: Callable[[str], None]
    current_healthy_targets: Callable[[float], None]
    unhealthy_targets_total: Callable[[str], None]

    def report_healthy(self, target: str) -> None:
        self.healthy_targets_total(target)

    def report_unhealthy(self, target: str) -> None:
        self.unhealthy_targets_total(target)

    def report_current_healthy_count(self, count: float) -> None:
        self.current_healthy_targets(count)


def register(
    sink: Union[RegisterableSink, Callable[..., None]],
    metric_set: Optional[MetricSet] = None,
) -> HealthMetrics:
    """
    Register the health monitor metrics in the provided store.

    Not idempotent: a second call hands the same instruments to the sink
    again and the store decides whether that is an error.

    Args:
        sink: RegisterableSink, or a bare function taking *registerables
        metric_set: Instruments to register (default: process-wide set)

    Returns:
        HealthMetrics bound to the registered instruments
    """
    if not isinstance(sink, RegisterableSink):
        sink = CallableSink(sink)

    if metric_set is None:
        sink.register(*default_metric_set.registerables())
        logger.info(f"Registered {len(default_metric_set)} health monitor metrics")
        return HealthMetrics(
            healthy_targets_total=healthy_targets_total,
            current_healthy_targets=current_healthy_targets,
            unhealthy_targets_total=unhealthy_targets_total,
        )

    sink.register(*metric_set.registerables())
    logger.info(f"Registered {len(metric_set)} health monitor metrics")
    return HealthMetrics(
        healthy_targets_total=metric_set.report_healthy,
        current_healthy_targets=metric_set.report_current_healthy_count,
        unhealthy_targets_total=metric_set.report_unhealthy,
    )
