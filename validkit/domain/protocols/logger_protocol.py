"""LoggerProtocol definition for structured logging.

Validators only log in rare, non-fatal situations (for example a legacy
postal code format that is still accepted). Logs are structured: a short
event name plus key-value context.

Usage:
    from validkit.core.container import get_logger
    from validkit.domain.protocols import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    logger.warning("legacy_5_digit_postal_code", postal_code="10001")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception whose type and text are added to context.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that includes ``context`` in every entry."""
        ...
