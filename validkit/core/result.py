"""Result types for validation outcomes.

Validators report failures as data instead of raising. ``safe_parse`` returns
either ``Success`` with the canonical value or ``Failure`` with the first
violated rule.

Usage:
    from validkit import business_id
    from validkit.core.result import Failure, Success

    match business_id().safe_parse("12345675"):
        case Success(value=value):
            print(f"Valid: {value}")
        case Failure(error=error):
            print(f"{error.key}: {error.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """A value that passed every rule.

    Attributes:
        value: Canonical (preprocessed) value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """The first rule a value violated.

    Attributes:
        error: Structured error describing the violation.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]


def is_success(result: "Result[T, E]") -> bool:
    """Return True when ``result`` is a ``Success``."""
    return isinstance(result, Success)
