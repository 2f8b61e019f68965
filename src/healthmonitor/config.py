"""
Metrics Configuration with Environment Variable Support

Decides whether health monitor metrics are collected and which reporter
carries them. Values come from a YAML/JSON file (``metrics:`` section),
then environment variables, then defaults.

Environment Variables:
    HEALTH_MONITOR_METRICS_ENABLED: Enable metrics collection (default: true)
    HEALTH_MONITOR_METRICS_REPORTER: prometheus, logging or noop (default: prometheus)
    HEALTH_MONITOR_METRICS_LOG_LEVEL: Level for the logging reporter (default: DEBUG)

Config files may use ${VAR_NAME} or ${VAR_NAME:default} placeholders.
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

REPORTERS = ("prometheus", "logging", "noop")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# config key -> (environment variable, default)
ENV_DEFAULTS = {
    "enabled": ("HEALTH_MONITOR_METRICS_ENABLED", "true"),
    "reporter": ("HEALTH_MONITOR_METRICS_REPORTER", "prometheus"),
    "log_level": ("HEALTH_MONITOR_METRICS_LOG_LEVEL", "DEBUG"),
}


class ConfigLoader:
    """
    Loads configuration files with environment variable substitution.

    Supports placeholders in the format ${VAR_NAME} or ${VAR_NAME:default_value}.
    """

    ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    @classmethod
    def load_config(cls, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load a YAML or JSON configuration file, format chosen by extension.

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If the format is unsupported or the file is empty
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()
        with open(path, 'r', encoding='utf-8') as f:
            if suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif suffix == '.json':
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {suffix}",
                    component="config",
                    context={"path": str(path)},
                )

        if data is None:
            raise ConfigurationError(f"Configuration file is empty: {path}", component="config")

        return cls._process_env_vars(data)

    @classmethod
    def _process_env_vars(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: cls._process_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [cls._process_env_vars(item) for item in data]
        elif isinstance(data, str):
            return cls._substitute_env_var(data)
        return data

    @classmethod
    def _substitute_env_var(cls, value: str) -> Union[str, int, float, bool]:
        """
        Substitute ${VAR} / ${VAR:default} placeholders in a string value.

        A value that is exactly one placeholder is converted to int, float
        or bool where possible.

        Raises:
            ConfigurationError: If a required environment variable is not set
        """
        def replace_match(match):
            var_expr = match.group(1)
            if ':' in var_expr:
                var_name, default_value = var_expr.split(':', 1)
                var_name = var_name.strip()
                default_value = default_value.strip()
            else:
                var_name = var_expr.strip()
                default_value = None

            env_value = os.getenv(var_name)
            if env_value is None:
                if default_value is None:
                    raise ConfigurationError(
                        f"Required environment variable not set: {var_name}",
                        component="config",
                    )
                env_value = default_value
            return env_value

        result = cls.ENV_VAR_PATTERN.sub(replace_match, value)
        if cls.ENV_VAR_PATTERN.fullmatch(value):
            return cls._convert_value(result)
        return result

    @classmethod
    def _convert_value(cls, value: str) -> Union[str, int, float, bool]:
        lowered = value.lower()
        if lowered in ('true', 'yes', 'on'):
            return True
        if lowered in ('false', 'no', 'off'):
            return False
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_value(key: str) -> str:
    name, default = ENV_DEFAULTS[key]
    return os.getenv(name, default)


@dataclass
class MetricsConfig:
    """Configuration for health monitor metrics collection."""
    enabled: bool = True
    reporter: str = "prometheus"
    log_level: str = "DEBUG"

    def __post_init__(self):
        self.enabled = _parse_bool(self.enabled)
        self.reporter = str(self.reporter).lower()
        self.log_level = str(self.log_level).upper()
        if self.reporter not in REPORTERS:
            raise ConfigurationError(
                f"Unknown metrics reporter: {self.reporter}",
                component="config",
                context={"allowed": list(REPORTERS)},
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                component="config",
                context={"allowed": list(LOG_LEVELS)},
            )

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "MetricsConfig":
        """Load configuration from environment variables."""
        return cls(**{key: _env_value(key) for key in ENV_DEFAULTS})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricsConfig":
        """
        Build configuration from a parsed config mapping.

        Keys missing from the ``metrics`` section fall back to the environment.
        """
        section = data.get("metrics", data) if isinstance(data, dict) else data
        if not isinstance(section, dict):
            raise ConfigurationError("'metrics' section must be a mapping", component="config")

        return cls(**{
            key: section[key] if key in section else _env_value(key)
            for key in ENV_DEFAULTS
        })


def load_metrics_config(path: Optional[Union[str, Path]] = None) -> MetricsConfig:
    """
    Load metrics configuration.

    Args:
        path: Optional YAML/JSON config file. Without it only the
              environment and defaults are used.

    Returns:
        MetricsConfig instance
    """
    if path is None:
        config = MetricsConfig.from_env()
    else:
        config = MetricsConfig.from_dict(ConfigLoader.load_config(path))
        logger.info(f"Loaded metrics configuration from {path}")
    return config
