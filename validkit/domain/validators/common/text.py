"""Free text with length, content and pattern constraints."""

import re
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, TrimMode, prepare_text


def as_tuple(value: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...] | None:
    """Accept a single string or a sequence of strings."""
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def first_contained(value: str, needles: tuple[str, ...]) -> str | None:
    return next((needle for needle in needles if needle in value), None)


class TextOptions(ValidatorOptions):
    """Options for ``text``.

    Attributes:
        min_length: Minimum length after preprocessing.
        max_length: Maximum length after preprocessing.
        starts_with: Required prefix.
        ends_with: Required suffix.
        includes: Required substring.
        excludes: Forbidden substring(s).
        regex: Pattern the value must contain a match for.
        trim_mode: Whitespace trimming.
        casing: Case conversion.
        not_empty: Reject whitespace-only values (relevant with ``trim_mode="none"``).
    """

    min_length: int | None = None
    max_length: int | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None
    trim_mode: TrimMode = TrimMode.TRIM
    casing: Casing = Casing.NONE
    not_empty: bool = False
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)


def text(options: TextOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a text validator.

    Keys, in evaluation order: ``required``, ``notEmpty``, ``minLength``,
    ``maxLength``, ``startsWith``, ``endsWith``, ``includes``, ``excludes``,
    ``invalid`` (regex).

    Example:
        >>> text(min_length=3, casing="title").parse("  hello world ")
        'Hello World'
    """
    opts = resolve_options(TextOptions, options, kwargs)

    rules: list[Rule] = []
    if opts.not_empty:
        rules.append(Rule("notEmpty", lambda v: v.strip() != ""))
    if opts.min_length is not None:
        rules.append(
            Rule("minLength", lambda v: len(v) >= opts.min_length, {"minLength": opts.min_length})
        )
    if opts.max_length is not None:
        rules.append(
            Rule("maxLength", lambda v: len(v) <= opts.max_length, {"maxLength": opts.max_length})
        )
    if opts.starts_with is not None:
        rules.append(
            Rule(
                "startsWith",
                lambda v: v.startswith(opts.starts_with),
                {"startsWith": opts.starts_with},
            )
        )
    if opts.ends_with is not None:
        rules.append(
            Rule("endsWith", lambda v: v.endswith(opts.ends_with), {"endsWith": opts.ends_with})
        )
    if opts.includes is not None:
        rules.append(
            Rule("includes", lambda v: opts.includes in v, {"includes": opts.includes})
        )
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
        "text",
        namespace="common.text",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            trim=opts.trim_mode,
            casing=opts.casing,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
