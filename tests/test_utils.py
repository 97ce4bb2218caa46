"""
Tests for utility functions.

This module covers the validation helpers and the configuration
utilities driven by environment variables.
"""

from datetime import date, timedelta
from unittest.mock import patch

import pytest

from petclinic_core.exceptions import ConfigurationException
from petclinic_core.utils.config import (
    DEFAULT_PET_TYPES,
    ClinicConfig,
    EnvironmentConfig,
    LoggingConfigurator,
    LogLevel,
)
from petclinic_core.utils.validation import (
    ValidationError,
    ValidationResult,
    sanitize_string,
    validate_not_future,
    validate_required_text,
    validate_telephone,
)


class TestValidationHelpers:
    """Test validation helper functions."""

    def test_sanitize_string(self):
        assert sanitize_string("  110   W. Liberty\tSt. ") == "110 W. Liberty St."
        assert sanitize_string("Madison", max_length=3) == "Mad"

    def test_required_text(self):
        result = validate_required_text(" George ", "first_name")

        assert result.is_valid
        assert result.value == "George"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required_text_blank(self, value):
        result = validate_required_text(value, "first_name")

        assert not result.is_valid
        assert result.errors[0].message == "First name is required"
        assert result.errors[0].code == "required"

    def test_required_text_label(self):
        result = validate_required_text("", "name", "Pet name")

        assert result.errors[0].message == "Pet name is required"
        assert result.errors[0].field == "name"

    def test_valid_telephone(self):
        result = validate_telephone("6085551023")

        assert result.is_valid
        assert result.value == "6085551023"

    @pytest.mark.parametrize(
        "telephone", ["608555102", "60855510231", "(608)555102", "608555102x"]
    )
    def test_invalid_telephone(self, telephone):
        result = validate_telephone(telephone)

        assert not result.is_valid
        assert result.errors[0].code == "invalid_format"

    @pytest.mark.parametrize(
        "telephone", ["٠١٢٣٤٥٦٧٨٩", "６０８５５５１０２３", "6085551023\n1"]
    )
    def test_telephone_accepts_only_ascii_digits(self, telephone):
        result = validate_telephone(telephone)

        assert not result.is_valid
        assert result.errors[0].message == "Telephone must be exactly 10 digits"

    def test_missing_telephone(self):
        assert validate_telephone(None).errors[0].code == "required"

    def test_not_future(self):
        today = date(2024, 6, 1)

        assert validate_not_future(date(2024, 6, 1), "birth_date", today).is_valid
        assert validate_not_future(None, "birth_date", today).is_valid

        result = validate_not_future(today + timedelta(days=1), "birth_date", today)
        assert result.errors[0].message == "Birth date cannot be in the future"

    def test_raise_for_errors(self):
        assert ValidationResult[str](value="ok").raise_for_errors() == "ok"

        result = ValidationResult[str]()
        result.add_error(ValidationError("Broken", "field", "code"))
        with pytest.raises(ValueError, match="Broken"):
            result.raise_for_errors()

    def test_validation_error_to_dict(self):
        error = ValidationError("Telephone is required", "telephone", "required")

        assert error.to_dict() == {
            "message": "Telephone is required",
            "field": "telephone",
            "code": "required",
        }


class TestEnvironmentConfig:
    """Test environment variable helpers."""

    def test_get_str(self):
        with patch.dict("os.environ", {"PETCLINIC_TEST": "value"}):
            assert EnvironmentConfig.get_str("PETCLINIC_TEST") == "value"

    def test_get_str_default(self):
        with patch.dict("os.environ", {}, clear=True):
            assert EnvironmentConfig.get_str("PETCLINIC_TEST") is None
            assert EnvironmentConfig.get_str("PETCLINIC_TEST", "INFO") == "INFO"

    def test_get_list(self):
        with patch.dict("os.environ", {"PETCLINIC_TEST": "cat, dog,,bird "}):
            assert EnvironmentConfig.get_list("PETCLINIC_TEST") == [
                "cat",
                "dog",
                "bird",
            ]

    def test_get_list_default(self):
        with patch.dict("os.environ", {}, clear=True):
            assert EnvironmentConfig.get_list("PETCLINIC_TEST") == []

    def test_get_list_default_is_copied(self):
        default = ["cat"]

        with patch.dict("os.environ", {}, clear=True):
            result = EnvironmentConfig.get_list("PETCLINIC_TEST", default=default)

        result.append("dog")
        assert default == ["cat"]


class TestClinicConfig:
    """Test the clinic configuration."""

    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = ClinicConfig.from_environment()

        assert config.pet_types == DEFAULT_PET_TYPES
        assert config.log_level is LogLevel.INFO
        assert config.log_file is None

    def test_from_environment(self):
        env = {
            "PETCLINIC_PET_TYPES": "cat,dog",
            "PETCLINIC_LOG_LEVEL": "debug",
            "PETCLINIC_LOG_FILE": "/tmp/petclinic.log",
        }
        with patch.dict("os.environ", env, clear=True):
            config = ClinicConfig.from_environment()

        assert config.pet_types == ["cat", "dog"]
        assert config.log_level is LogLevel.DEBUG
        assert config.log_file == "/tmp/petclinic.log"

    def test_invalid_log_level(self):
        with patch.dict("os.environ", {"PETCLINIC_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(
                ConfigurationException, match="PETCLINIC_LOG_LEVEL"
            ) as exc_info:
                ClinicConfig.from_environment()

        exc = exc_info.value
        assert exc.error_code == "CONFIGURATION_ERROR"
        assert exc.details == {
            "config_key": "PETCLINIC_LOG_LEVEL",
            "config_value": "LOUD",
        }

    def test_invalid_log_level_with_prefix(self):
        with patch.dict("os.environ", {"CLINIC_LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ConfigurationException, match="CLINIC_LOG_LEVEL"):
                ClinicConfig.from_environment(prefix="CLINIC_")

    def test_default_pet_types_are_not_shared(self):
        config = ClinicConfig()
        config.pet_types.append("dragon")

        assert "dragon" not in ClinicConfig().pet_types


class TestLoggingConfigurator:
    """Test logging configuration helpers."""

    def test_configure_basic_logging(self):
        with patch("logging.basicConfig") as basic_config:
            LoggingConfigurator.configure_basic_logging(
                LogLevel.DEBUG, log_file="/tmp/petclinic.log"
            )

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == "DEBUG"
        assert kwargs["filename"] == "/tmp/petclinic.log"
        assert kwargs["filemode"] == "a"

    def test_configure_from_config(self):
        config = ClinicConfig(log_level=LogLevel.WARNING)

        with patch("logging.basicConfig") as basic_config:
            LoggingConfigurator.configure_from_config(config)

        assert basic_config.call_args.kwargs["level"] == "WARNING"
        assert "filename" not in basic_config.call_args.kwargs
