"""
Registration sinks

A sink is the store-side half of registration: it accepts the
registerable instruments of a MetricSet and makes them exportable.

- RegisterableSink: Abstract interface for sinks
- CollectorRegistrySink: Registers into a prometheus_client CollectorRegistry
- CallableSink: Wraps a bare register function
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional

from prometheus_client import REGISTRY, CollectorRegistry
from prometheus_client.metrics import MetricWrapperBase

logger = logging.getLogger(__name__)

# Counter and Gauge both derive from MetricWrapperBase
Registerable = MetricWrapperBase


class RegisterableSink(ABC):
    """Abstract interface for a store that accepts registerable instruments."""

    @abstractmethod
    def register(self, *registerables: Registerable) -> None:
        """Register instruments with the store.

        Args:
            *registerables: Instruments to make exportable
        """
        ...


class CollectorRegistrySink(RegisterableSink):
    """Sink backed by a Prometheus CollectorRegistry.

    Duplicate names are rejected by the registry itself with ValueError.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """Initialize with optional custom registry.

        Args:
            registry: Prometheus registry (defaults to prometheus_client.REGISTRY)
        """
        self.registry = registry if registry is not None else REGISTRY

    def register(self, *registerables: Registerable) -> None:
        for registerable in registerables:
            self.registry.register(registerable)
            logger.debug(f"Registered collector {registerable!r}")


class CallableSink(RegisterableSink):
    """Sink that forwards registration to a plain function."""

    def __init__(self, register_fn: Callable[..., None]):
        self.register_fn = register_fn

    def register(self, *registerables: Registerable) -> None:
        self.register_fn(*registerables)
