"""Taiwan (ROC) passport numbers: nine digits, the first one encoding the type."""

import re
from enum import Enum
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

_PASSPORT = re.compile(r"^[0-3]\d{8}$", re.ASCII)


class PassportType(str, Enum):
    DIPLOMATIC = "diplomatic"
    OFFICIAL = "official"
    ORDINARY = "ordinary"
    TRAVEL = "travel"
    ANY = "any"


PASSPORT_TYPE_DIGIT: dict[PassportType, str] = {
    PassportType.DIPLOMATIC: "0",
    PassportType.OFFICIAL: "1",
    PassportType.ORDINARY: "2",
    PassportType.TRAVEL: "3",
}


def validate_passport(value: str) -> bool:
    return bool(_PASSPORT.match(value))


def get_passport_type(value: str) -> PassportType | None:
    """Return the passport type encoded by the first digit.

    >>> get_passport_type("212345678")
    <PassportType.ORDINARY: 'ordinary'>
    """
    if not validate_passport(value):
        return None
    for passport_type, digit in PASSPORT_TYPE_DIGIT.items():
        if value[0] == digit:
            return passport_type
    return None


class PassportOptions(ValidatorOptions):
    """Options for ``passport``."""

    passport_type: PassportType = PassportType.ANY
    default_value: str | None = None


def passport(options: PassportOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a passport number validator. Keys: ``required``, ``invalid``."""
    opts = resolve_options(PassportOptions, options, kwargs)

    rules = [Rule("invalid", validate_passport)]
    if opts.passport_type != PassportType.ANY:
        expected = PASSPORT_TYPE_DIGIT[opts.passport_type]
        rules.append(Rule("invalid", lambda v: v[0] == expected))

    return Validator(
        "passport",
        namespace="taiwan.passport",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
