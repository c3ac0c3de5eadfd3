"""Base domain error class.

DomainError is the base class for errors that flow through validkit as data
(inside ``Failure``), never raised directly. Code that needs an exception
wraps one of these in ``ValidationFailed``.
"""

from dataclasses import dataclass

from validkit.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable, locale-resolved message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
