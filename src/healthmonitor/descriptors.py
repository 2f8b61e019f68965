"""Names, help text and stability metadata of the health monitor instruments."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

TARGET_LABEL = "target"


class StabilityLevel(str, Enum):
    """Stability classification of an exported metric."""
    ALPHA = "ALPHA"
    STABLE = "STABLE"


@dataclass(frozen=True)
class MetricDescriptor:
    """Immutable metadata of one instrument."""

    name: str
    help: str
    stability_level: StabilityLevel = StabilityLevel.ALPHA
    label_names: Tuple[str, ...] = ()

    @property
    def documentation(self) -> str:
        """Help text as exported, prefixed with the stability level."""
        return f"[{self.stability_level.value}] {self.help}"


HEALTHY_TARGETS_TOTAL = MetricDescriptor(
    name="health_monitor_healthy_target_total",
    help="Number of healthy instances registered with the health monitor. Partitioned by targets",
    label_names=(TARGET_LABEL,),
)

CURRENT_HEALTHY_TARGETS = MetricDescriptor(
    name="health_monitor_current_healthy_targets",
    help="Number of currently healthy instances observed by the health monitor",
)

UNHEALTHY_TARGETS_TOTAL = MetricDescriptor(
    name="health_monitor_unhealthy_target_total",
    help="Number of unhealthy instances registered with the health monitor. Partitioned by targets",
    label_names=(TARGET_LABEL,),
)
