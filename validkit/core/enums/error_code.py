"""Machine-readable error codes.

Every validation failure carries ``VALIDATION_FAILED``; the specific rule
that failed is identified by the error's message key. Configuration
problems get their own codes so callers can tell them apart.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes attached to ``DomainError`` instances."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Configuration errors
    UNSUPPORTED_LOCALE = "unsupported_locale"
