"""
Health Monitor Metrics

Instrumentation facade for target health monitoring: the instruments,
their one-time registration into a metrics store, and the reporters the
monitor reports through.
"""

from .bootstrap import build_health_reporter, initialize_health_metrics
from .config import MetricsConfig, load_metrics_config
from .descriptors import (
    CURRENT_HEALTHY_TARGETS,
    HEALTHY_TARGETS_TOTAL,
    UNHEALTHY_TARGETS_TOTAL,
    MetricDescriptor,
    StabilityLevel,
)
from .errors import ConfigurationError, HealthMonitorMetricsError
from .metrics import (
    HealthMetrics,
    MetricSet,
    current_healthy_targets,
    default_metric_set,
    healthy_targets_total,
    register,
    unhealthy_targets_total,
)
from .reporters import HealthReporter, LoggingHealthReporter, NoOpHealthReporter
from .sinks import CallableSink, CollectorRegistrySink, Registerable, RegisterableSink

__all__ = [
    # Metric set
    "MetricSet",
    "default_metric_set",
    "MetricDescriptor",
    "StabilityLevel",
    "HEALTHY_TARGETS_TOTAL",
    "CURRENT_HEALTHY_TARGETS",
    "UNHEALTHY_TARGETS_TOTAL",
    # Report functions and registration
    "healthy_targets_total",
    "current_healthy_targets",
    "unhealthy_targets_total",
    "register",
    "HealthMetrics",
    # Reporters
    "HealthReporter",
    "NoOpHealthReporter",
    "LoggingHealthReporter",
    "build_health_reporter",
    "initialize_health_metrics",
    # Sinks
    "Registerable",
    "RegisterableSink",
    "CollectorRegistrySink",
    "CallableSink",
    # Configuration and errors
    "MetricsConfig",
    "load_metrics_config",
    "HealthMonitorMetricsError",
    "ConfigurationError",
]
