"""
Exceptions for the health monitor metrics package.

Report operations never raise; these cover configuration and composition
of reporters only.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class HealthMonitorMetricsError(Exception):
    """Base exception for health monitor metrics errors."""

    def __init__(self, message: str, component: str = "unknown",
                 context: Optional[Dict[str, Any]] = None):
        """Initialize exception with metadata.

        Args:
            message: Error message
            component: Component where error occurred
            context: Additional context data
        """
        self.message = message
        self.component = component
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured log format."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "component": self.component,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigurationError(HealthMonitorMetricsError, ValueError):
    """Raised when metrics configuration is invalid."""
    pass
