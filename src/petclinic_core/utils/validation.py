"""
Validation and data processing utilities for clinic records.

This module provides the field checks shared by the Pydantic schemas:
required text, ten-digit telephone numbers and dates that must not lie in
the future.
"""

import re
import unicodedata
from datetime import date
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """Custom validation error with structured error information."""

    def __init__(
        self, message: str, field: Optional[str] = None, code: Optional[str] = None
    ):
        self.message = message
        self.field = field
        self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary format."""
        return {"message": self.message, "field": self.field, "code": self.code}


class ValidationResult(Generic[T]):
    """Result of a validation operation."""

    def __init__(
        self, value: Optional[T] = None, errors: Optional[List[ValidationError]] = None
    ):
        self.value = value
        self.errors = errors or []
        self.is_valid = len(self.errors) == 0

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        self.is_valid = False

    def raise_for_errors(self) -> T:
        """Return the value, raising ``ValueError`` with the first error message if invalid."""
        if not self.is_valid:
            raise ValueError(self.errors[0].message)
        return self.value


TELEPHONE_PATTERN = re.compile(r"[0-9]{10}")


def sanitize_string(value: str, max_length: Optional[int] = None) -> str:
    """
    Sanitize a string by normalizing unicode and trimming whitespace.

    Args:
        value: The string to sanitize
        max_length: Maximum allowed length

    Returns:
        Sanitized string
    """
    normalized = unicodedata.normalize("NFKC", value)

    # Strip whitespace and collapse multiple spaces
    sanitized = re.sub(r"\s+", " ", normalized.strip())

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length].rstrip()

    return sanitized


def validate_required_text(
    value: Optional[str], field: str, label: Optional[str] = None
) -> ValidationResult[str]:
    """
    Validate that a text value is present and not blank.

    Args:
        value: The text to validate
        field: Field name reported in the error
        label: Human-readable name used in the message, defaults to the field

    Returns:
        ValidationResult with the sanitized text or errors
    """
    result = ValidationResult[str]()
    label = label or field.replace("_", " ").capitalize()

    if value is None or not value.strip():
        result.add_error(ValidationError(f"{label} is required", field, "required"))
        return result

    result.value = sanitize_string(value)
    return result


def validate_telephone(telephone: Optional[str]) -> ValidationResult[str]:
    """
    Validate a telephone number made of exactly 10 digits.

    Args:
        telephone: The telephone number to validate

    Returns:
        ValidationResult with the telephone number or errors
    """
    result = ValidationResult[str]()

    if telephone is None or not telephone.strip():
        result.add_error(
            ValidationError("Telephone is required", "telephone", "required")
        )
        return result

    telephone = telephone.strip()
    if not TELEPHONE_PATTERN.fullmatch(telephone):
        result.add_error(
            ValidationError(
                "Telephone must be exactly 10 digits", "telephone", "invalid_format"
            )
        )
        return result

    result.value = telephone
    return result


def validate_not_future(
    value: Optional[date], field: str, today: Optional[date] = None
) -> ValidationResult[date]:
    """
    Validate that an optional date does not lie in the future.

    Args:
        value: The date to validate, None is accepted
        field: Field name reported in the error
        today: Reference date, defaults to the current date

    Returns:
        ValidationResult with the date or errors
    """
    result = ValidationResult[date](value=value)
    today = today or date.today()

    if value is not None and value > today:
        label = field.replace("_", " ").capitalize()
        result.add_error(
            ValidationError(f"{label} cannot be in the future", field, "future_date")
        )

    return result
