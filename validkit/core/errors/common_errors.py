"""Error types shared by every validator.

Error Types:
- ValidationError: a value violated a rule (returned inside ``Failure``)
- ValidationFailed: exception raised by ``Validator.parse``
- UnsupportedLocaleError: exception raised for unknown locale tags

``ValidationFailed`` and ``UnsupportedLocaleError`` subclass ``ValueError`` so
pydantic converts them into its own validation errors when a validator runs
inside a model.

Usage:
    from validkit import email
    from validkit.core.errors import ValidationFailed

    try:
        email(business_only=True).parse("user@gmail.com")
    except ValidationFailed as exc:
        print(exc.error.key)  # "businessOnly"
"""

from dataclasses import dataclass, field
from typing import Any

from validkit.core.enums import ErrorCode
from validkit.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """A value violated one rule of a validator.

    Attributes:
        code: Always ``ErrorCode.VALIDATION_FAILED``.
        message: Message resolved for ``locale``.
        key: Message key of the violated rule (e.g. ``required``, ``invalid``).
        params: Interpolation parameters used to build ``message``.
        validator: Name of the validator that produced the error.
        locale: Locale the message was resolved in.
        details: Additional context.
    """

    code: ErrorCode = ErrorCode.VALIDATION_FAILED
    key: str
    params: dict[str, Any] = field(default_factory=dict)
    validator: str | None = None
    locale: str | None = None


class ValidationFailed(ValueError):
    """Raised by ``Validator.parse`` when a value fails validation.

    Attributes:
        error: The ``ValidationError`` describing the failed rule.
    """

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def key(self) -> str:
        return self.error.key


class UnsupportedLocaleError(ValueError):
    """Raised when a locale tag has no message catalog."""

    code = ErrorCode.UNSUPPORTED_LOCALE

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unsupported locale: {tag!r}")
        self.tag = tag
