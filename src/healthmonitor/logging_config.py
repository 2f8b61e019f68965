"""
Structured Logging Module

structlog events are rendered into stdlib log records and written by a
single python-json-logger handler, so library records and structured
events share one JSON stream.

Environment Variables:
    LOG_LEVEL: Root log level (default: INFO)
    ENVIRONMENT: Bound into every structured event (default: development)
"""

import logging
import os
import sys
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

from .config import LOG_LEVELS
from .errors import ConfigurationError


def setup_json_logging(
    log_level: Optional[str] = None,
    service_name: str = "health-monitor",
    environment: Optional[str] = None,
) -> None:
    """
    Route all logging through one JSON handler on stdout.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default: LOG_LEVEL)
        service_name: Bound as ``service`` on structured events
        environment: Bound as ``environment`` (default: ENVIRONMENT)

    Raises:
        ConfigurationError: If the log level is unknown
    """
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if level_name not in LOG_LEVELS:
        raise ConfigurationError(f"Unknown log level: {level_name}", component="logging")
    level = getattr(logging, level_name)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(
        fmt='%(levelname)s %(name)s %(message)s',
        timestamp=True
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        environment=environment or os.getenv("ENVIRONMENT", "development"),
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """
    Get a structured logger instance

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)
