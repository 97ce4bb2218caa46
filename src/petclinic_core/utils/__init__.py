"""
Utility functions and helper modules.

This module provides validation helpers and configuration management
shared across the package.
"""

from .validation import (
    ValidationError,
    ValidationResult,
    sanitize_string,
    validate_not_future,
    validate_required_text,
    validate_telephone,
)

from .config import (
    LogLevel,
    ClinicConfig,
    EnvironmentConfig,
    LoggingConfigurator,
)

__all__ = [
    # Validation helpers
    "ValidationError",
    "ValidationResult",
    "sanitize_string",
    "validate_required_text",
    "validate_telephone",
    "validate_not_future",
    # Configuration utilities
    "LogLevel",
    "ClinicConfig",
    "EnvironmentConfig",
    "LoggingConfigurator",
]
