"""
Core exceptions for the petclinic-core package.

This module defines the exception hierarchy and custom exceptions
used throughout the clinic record-keeping code.
"""

import logging
import time
from typing import Any, Dict, List, Optional


class PetClinicException(Exception):
    """
    Base exception class for all petclinic-core package exceptions.

    Provides a consistent interface for error handling across the package.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary format.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": time.time(),
        }

    def log_error(
        self, logger: Optional[logging.Logger] = None, level: int = logging.ERROR
    ) -> None:
        """
        Log the exception with appropriate level and context.

        Args:
            logger: Logger instance to use (creates default if None)
            level: Logging level to use
        """
        if logger is None:
            logger = logging.getLogger(__name__)

        log_data = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

        logger.log(
            level,
            f"Exception occurred: {self.message}",
            extra={"exception_data": log_data},
        )

    def __str__(self) -> str:
        """String representation of the exception."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ValidationException(PetClinicException):
    """Base exception for data validation errors."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize validation exception.

        Args:
            message: Error message
            field: Field that failed validation
            value: Value that failed validation
            validation_errors: Detailed validation errors
        """
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if validation_errors:
            details["validation_errors"] = validation_errors

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class SchemaValidationException(ValidationException):
    """Exception raised when Pydantic schema validation fails."""

    def __init__(
        self,
        message: str = "Schema validation failed",
        schema_name: Optional[str] = None,
        validation_errors: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize schema validation exception.

        Args:
            message: Error message
            schema_name: Name of the schema that failed validation
            validation_errors: Pydantic validation errors
        """
        super().__init__(
            message=message,
            field=None,
            value=None,
            validation_errors=validation_errors,
        )
        self.error_code = "SCHEMA_VALIDATION_ERROR"
        if schema_name:
            self.details["schema_name"] = schema_name


class InvalidArgumentException(ValidationException, ValueError):
    """
    Exception raised when an operation receives a missing or unusable argument.

    Raised by the owner aggregate when a visit is attached without a pet
    identifier, without a visit, or with an identifier that matches none of
    the owner's stored pets.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """
        Initialize invalid argument exception.

        Args:
            message: Error message
            argument: Name of the offending argument
            value: Offending value, if any
        """
        super().__init__(message=message, field=argument, value=value)
        self.error_code = "INVALID_ARGUMENT"
        self.argument = argument

    def __str__(self) -> str:
        return self.message


class PetTypeParseException(ValidationException):
    """Exception raised when text does not name any known pet type."""

    def __init__(self, text: Optional[str], message: Optional[str] = None):
        """
        Initialize pet type parse exception.

        Args:
            text: The text that could not be resolved
            message: Error message, derived from the text when omitted
        """
        super().__init__(
            message=message or f"type not found: {text}",
            field="type",
        )
        self.error_code = "PARSE_ERROR"
        self.text = text
        self.details["text"] = text

    def __str__(self) -> str:
        return self.message


class ConfigurationException(PetClinicException):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str = "Configuration error",
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        """
        Initialize configuration exception.

        Args:
            message: Error message
            config_key: Configuration key that caused the error
            config_value: Configuration value (will be sanitized)
        """
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = self._sanitize_config_value(
                config_key, config_value
            )

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details,
        )

    @staticmethod
    def _sanitize_config_value(key: Optional[str], value: str) -> str:
        """Sanitize configuration values to avoid exposing secrets."""
        if not key:
            return "[REDACTED]"

        sensitive_keys = ["password", "secret", "key", "token", "credential"]
        if any(sensitive in key.lower() for sensitive in sensitive_keys):
            return "[REDACTED]"

        return value


# Error formatting


def format_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Format Pydantic validation errors into a user-friendly structure.

    Args:
        errors: List of Pydantic validation errors

    Returns:
        Dictionary mapping field names to lists of error messages
    """
    formatted_errors: Dict[str, List[str]] = {}

    for error in errors:
        field_path = ".".join(str(loc) for loc in error.get("loc", []))
        if not field_path:
            field_path = "root"

        message = error.get("msg", "Validation error")
        error_type = error.get("type", "unknown")

        if error_type == "value_error":
            formatted_message = message
        elif error_type == "missing":
            formatted_message = "This field is required"
        else:
            formatted_message = f"{message} (type: {error_type})"

        formatted_errors.setdefault(field_path, []).append(formatted_message)

    return formatted_errors
