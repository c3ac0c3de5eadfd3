"""Passwords: composition rules, weak-pattern detection and a strength score.

Passwords are never trimmed or case-converted.
"""

import re
from enum import Enum
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import TrimMode, prepare_text

COMMON_PASSWORDS: tuple[str, ...] = (
    "password",
    "123456",
    "123456789",
    "12345678",
    "12345",
    "1234567",
    "admin",
    "qwerty",
    "abc123",
    "password123",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "sunshine",
    "princess",
)

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"""[!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?]""")
_REPEATING = re.compile(r"(.)\1{2,}")
_SEQUENTIAL = re.compile(
    r"abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|qrs|rst|stu|tuv|uvw|vwx|wxy|xyz"
    r"|012|123|234|345|456|567|678|789",
    re.IGNORECASE,
)


class PasswordStrength(str, Enum):
    """Strength levels, weakest first."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def rank(self) -> int:
        return list(PasswordStrength).index(self)


def calculate_password_strength(password: str) -> PasswordStrength:
    """Score a password.

    One point each for length >= 8, >= 12 and >= 16, and for containing
    lowercase, uppercase, digit and special characters. One point is taken
    off for runs of a repeated character and for sequences such as ``abc``
    or ``123``.

    Example:
        >>> calculate_password_strength("password")
        <PasswordStrength.WEAK: 'weak'>
        >>> calculate_password_strength("Tr0ub4dor&Zebra!")
        <PasswordStrength.VERY_STRONG: 'very-strong'>
    """
    score = sum(len(password) >= n for n in (8, 12, 16))
    score += sum(bool(p.search(password)) for p in (_LOWER, _UPPER, _DIGIT, _SPECIAL))
    if _REPEATING.search(password):
        score -= 1
    if _SEQUENTIAL.search(password):
        score -= 1

    if score <= 2:
        return PasswordStrength.WEAK
    if score <= 4:
        return PasswordStrength.MEDIUM
    if score <= 6:
        return PasswordStrength.STRONG
    return PasswordStrength.VERY_STRONG


def contains_common_password(password: str) -> bool:
    lowered = password.lower()
    return any(common in lowered for common in COMMON_PASSWORDS)


class PasswordOptions(ValidatorOptions):
    """Options for ``password``."""

    min: int | None = None
    max: int | None = None
    uppercase: bool = False
    lowercase: bool = False
    digits: bool = False
    special: bool = False
    no_repeating: bool = False
    no_sequential: bool = False
    no_common_words: bool = False
    min_strength: PasswordStrength | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)


def password(options: PasswordOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a password validator.

    Keys, in evaluation order: ``required``, ``min``, ``max``, ``uppercase``,
    ``lowercase``, ``digits``, ``special``, ``noRepeating``, ``noSequential``,
    ``noCommonWords``, ``minStrength``, ``includes``, ``excludes``,
    ``invalid`` (regex).
    """
    opts = resolve_options(PasswordOptions, options, kwargs)

    rules: list[Rule] = []
    if opts.min is not None:
        rules.append(Rule("min", lambda v: len(v) >= opts.min, {"min": opts.min}))
    if opts.max is not None:
        rules.append(Rule("max", lambda v: len(v) <= opts.max, {"max": opts.max}))
    for enabled, key, pattern in (
        (opts.uppercase, "uppercase", _UPPER),
        (opts.lowercase, "lowercase", _LOWER),
        (opts.digits, "digits", _DIGIT),
        (opts.special, "special", _SPECIAL),
    ):
        if enabled:
            rules.append(Rule(key, lambda v, p=pattern: p.search(v) is not None))
    if opts.no_repeating:
        rules.append(Rule("noRepeating", lambda v: _REPEATING.search(v) is None))
    if opts.no_sequential:
        rules.append(Rule("noSequential", lambda v: _SEQUENTIAL.search(v) is None))
    if opts.no_common_words:
        rules.append(Rule("noCommonWords", lambda v: not contains_common_password(v)))
    if opts.min_strength is not None:
        rules.append(
            Rule(
                "minStrength",
                lambda v: calculate_password_strength(v).rank >= opts.min_strength.rank,
                {"minStrength": opts.min_strength.value},
            )
        )
    if opts.includes is not None:
        rules.append(Rule("includes", lambda v: opts.includes in v, {"includes": opts.includes}))
    if opts.excludes:
        rules.append(
            Rule(
                "excludes",
                lambda v: first_contained(v, opts.excludes) is None,
                lambda v: {"excludes": first_contained(v, opts.excludes)},
            )
        )
    if opts.regex is not None:
        rules.append(
            Rule("invalid", lambda v: opts.regex.search(v) is not None, {"regex": opts.regex.pattern})
        )

    return Validator(
        "password",
        namespace="common.password",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            trim=TrimMode.NONE,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
