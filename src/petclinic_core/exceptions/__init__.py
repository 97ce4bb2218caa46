"""
Custom exceptions for the petclinic-core package.

This module defines the exception hierarchy and custom exceptions
used throughout the clinic record-keeping code.
"""

from .core_exceptions import (
    ConfigurationException,
    InvalidArgumentException,
    PetClinicException,
    PetTypeParseException,
    SchemaValidationException,
    ValidationException,
    format_validation_errors,
)

__all__ = [
    # Exception classes
    "PetClinicException",
    "ValidationException",
    "SchemaValidationException",
    "InvalidArgumentException",
    "PetTypeParseException",
    "ConfigurationException",
    # Utility functions
    "format_validation_errors",
]
