"""Typed option records shared by every validator.

Each validator declares a frozen pydantic model listing its options with
explicit defaults. Unknown options are rejected when the validator is built.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from validkit.i18n import normalize_locale


class ValidatorOptions(BaseModel):
    """Options common to every validator.

    Attributes:
        required: Reject empty input when True; otherwise empty input yields None.
        transform: Hook applied to the normalized value before the rules run.
        messages: Per-locale message overrides, ``{locale: {key: template}}``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    required: bool = True
    transform: Callable[[Any], Any] | None = None
    messages: dict[str, dict[str, str]] | None = None

    @field_validator("messages")
    @classmethod
    def normalize_message_locales(
        cls, v: dict[str, dict[str, str]] | None
    ) -> dict[str, dict[str, str]] | None:
        """Key overrides by canonical locale so "en" and "en-US" both match."""
        if v is None:
            return None
        merged: dict[str, dict[str, str]] = {}
        for tag, overrides in v.items():
            merged.setdefault(normalize_locale(tag), {}).update(overrides)
        return merged


class WhitelistOptions(ValidatorOptions):
    """Options for validators that accept an explicit list of values.

    The whitelist is consulted after the required check, so an empty entry
    (``""``) never admits empty input: use ``required=False`` for that.
    """

    whitelist: tuple[str, ...] = ()
    default_value: str | None = None


O = TypeVar("O", bound=ValidatorOptions)


def resolve_options(cls: type[O], options: O | None, overrides: dict[str, Any]) -> O:
    """Build the options record for a factory call.

    ``options`` may be a prebuilt record; keyword ``overrides`` replace its
    fields. Either way the result is validated by ``cls``.
    """
    if options is None:
        return cls.model_validate(overrides)
    if not overrides:
        return options
    return cls.model_validate({**dict(options), **overrides})
