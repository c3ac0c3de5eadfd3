"""Core error types."""

from validkit.core.errors.common_errors import (
    UnsupportedLocaleError,
    ValidationError,
    ValidationFailed,
)
from validkit.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "ValidationFailed",
    "UnsupportedLocaleError",
]
