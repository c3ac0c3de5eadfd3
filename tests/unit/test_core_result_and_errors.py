"""Unit tests for Result types and error classes.

Tests cover:
- Success/Failure construction, immutability and pattern matching
- ValidationError defaults and string form
- ValidationFailed as a ValueError carrying the error
- UnsupportedLocaleError code and message
"""

from dataclasses import FrozenInstanceError

import pytest

from validkit.core.enums import ErrorCode
from validkit.core.errors import (
    DomainError,
    UnsupportedLocaleError,
    ValidationError,
    ValidationFailed,
)
from validkit.core.result import Failure, Success, is_success


def _error(**overrides) -> ValidationError:
    fields = {"message": "Required", "key": "required", "validator": "text", "locale": "en-US"}
    fields.update(overrides)
    return ValidationError(**fields)


@pytest.mark.unit
class TestResult:
    """Test Success and Failure."""

    def test_success_holds_value(self):
        """Test Success exposes its value."""
        result = Success(value="04595257")

        assert result.value == "04595257"
        assert is_success(result)

    def test_failure_holds_error(self):
        """Test Failure exposes its error."""
        error = _error()
        result = Failure(error=error)

        assert result.error is error
        assert not is_success(result)

    def test_results_are_immutable(self):
        """Test Success cannot be mutated."""
        result = Success(value=1)

        with pytest.raises(FrozenInstanceError):
            result.value = 2  # type: ignore[misc]

    def test_pattern_matching(self):
        """Test results work with structural pattern matching."""
        match Failure(error=_error(key="invalid")):
            case Success():
                matched = "success"
            case Failure(error=error):
                matched = error.key

        assert matched == "invalid"


@pytest.mark.unit
class TestValidationError:
    """Test ValidationError dataclass."""

    def test_defaults(self):
        """Test code and params defaults."""
        error = _error()

        assert error.code == ErrorCode.VALIDATION_FAILED
        assert error.params == {}
        assert error.details is None
        assert isinstance(error, DomainError)

    def test_str_includes_code_and_message(self):
        """Test __str__ combines code value and message."""
        assert str(_error()) == "validation_failed: Required"

    def test_is_not_an_exception(self):
        """Test domain errors flow as data."""
        assert not isinstance(_error(), Exception)


@pytest.mark.unit
class TestExceptions:
    """Test raised exception types."""

    def test_validation_failed_wraps_error(self):
        """Test ValidationFailed carries the error and its message."""
        error = _error(key="minLength", message="Must be at least 5 characters")
        exc = ValidationFailed(error)

        assert isinstance(exc, ValueError)
        assert exc.error is error
        assert exc.key == "minLength"
        assert str(exc) == "Must be at least 5 characters"

    def test_unsupported_locale_error(self):
        """Test UnsupportedLocaleError reports the tag."""
        exc = UnsupportedLocaleError("fr-FR")

        assert isinstance(exc, ValueError)
        assert exc.tag == "fr-FR"
        assert exc.code == ErrorCode.UNSUPPORTED_LOCALE
        assert "fr-FR" in str(exc)
