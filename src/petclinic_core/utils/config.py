"""
Configuration management utilities.

This module reads the clinic configuration from environment variables and
configures logging from it.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..exceptions import ConfigurationException

DEFAULT_PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]


class LogLevel(Enum):
    """Enumeration for log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvironmentConfig:
    """Reads settings from environment variables."""

    @staticmethod
    def get_str(key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the variable's value, or ``default`` when it is unset."""
        return os.getenv(key, default)

    @staticmethod
    def get_list(
        key: str, separator: str = ",", default: Optional[List[str]] = None
    ) -> List[str]:
        """
        Split a variable into a list of non-blank, stripped items.

        Args:
            key: Environment variable key
            separator: Separator character for list items
            default: Value returned when the variable is unset

        Returns:
            List of strings, or a copy of ``default`` (empty when omitted)
        """
        value = os.getenv(key)

        if value is None:
            return list(default or [])

        return [item.strip() for item in value.split(separator) if item.strip()]


@dataclass
class ClinicConfig:
    """Settings of the clinic record-keeping package."""

    pet_types: List[str] = field(default_factory=lambda: list(DEFAULT_PET_TYPES))
    log_level: LogLevel = LogLevel.INFO
    log_file: Optional[str] = None

    @classmethod
    def from_environment(cls, prefix: str = "PETCLINIC_") -> "ClinicConfig":
        """
        Create the configuration from environment variables.

        Reads ``<prefix>PET_TYPES`` (comma separated), ``<prefix>LOG_LEVEL``
        and ``<prefix>LOG_FILE``.

        Raises:
            ConfigurationException: If the log level is not a known level
        """
        level_key = f"{prefix}LOG_LEVEL"
        level_name = EnvironmentConfig.get_str(level_key, "INFO")
        try:
            log_level = LogLevel(level_name.upper())
        except ValueError:
            raise ConfigurationException(
                f"Environment variable '{level_key}' must be one of "
                f"{', '.join(level.value for level in LogLevel)}, got: {level_name}",
                config_key=level_key,
                config_value=level_name,
            )

        return cls(
            pet_types=EnvironmentConfig.get_list(
                f"{prefix}PET_TYPES", default=DEFAULT_PET_TYPES
            ),
            log_level=log_level,
            log_file=EnvironmentConfig.get_str(f"{prefix}LOG_FILE"),
        )


class LoggingConfigurator:
    """Utility class for configuring logging."""

    DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def configure_basic_logging(
        level: Union[str, LogLevel] = LogLevel.INFO,
        format_string: Optional[str] = None,
        log_file: Optional[str] = None,
    ) -> None:
        """
        Configure basic logging for the application.

        Args:
            level: Logging level
            format_string: Custom format string
            log_file: Optional log file path, appended to
        """
        if isinstance(level, LogLevel):
            level = level.value

        basic_config_args: Dict[str, Any] = {
            "level": level,
            "format": format_string or LoggingConfigurator.DEFAULT_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        }

        if log_file:
            basic_config_args["filename"] = log_file
            basic_config_args["filemode"] = "a"

        logging.basicConfig(**basic_config_args)

    @staticmethod
    def configure_from_config(config: ClinicConfig) -> None:
        """Configure basic logging from a ``ClinicConfig``."""
        LoggingConfigurator.configure_basic_logging(
            level=config.log_level, log_file=config.log_file
        )
