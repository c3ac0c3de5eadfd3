"""Identifiers: UUID, ObjectId, Snowflake, CUID, ULID, Nano ID, numeric and ShortId.

The type check is only implicit (``auto``) when no content constraint is
given; with ``starts_with``/``ends_with``/``includes``/``excludes`` the
value must satisfy those, and only an explicit ``type``/``allowed_types``
still checks the format.
"""

import re
from enum import Enum
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.text import as_tuple
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import TrimMode, prepare_text


class IdType(str, Enum):
    NUMERIC = "numeric"
    UUID = "uuid"
    OBJECT_ID = "objectId"
    NANOID = "nanoid"
    SNOWFLAKE = "snowflake"
    CUID = "cuid"
    ULID = "ulid"
    SHORTID = "shortid"
    AUTO = "auto"


ID_PATTERNS: dict[IdType, re.Pattern[str]] = {
    IdType.NUMERIC: re.compile(r"^\d+$", re.ASCII),
    IdType.UUID: re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        re.ASCII | re.IGNORECASE,
    ),
    IdType.OBJECT_ID: re.compile(r"^[0-9a-f]{24}$", re.ASCII | re.IGNORECASE),
    IdType.NANOID: re.compile(r"^[A-Za-z0-9_-]{21}$", re.ASCII),
    IdType.SNOWFLAKE: re.compile(r"^\d{19}$", re.ASCII),
    IdType.CUID: re.compile(r"^c[a-z0-9]{24}$", re.ASCII),
    IdType.ULID: re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}$", re.ASCII | re.IGNORECASE),
    IdType.SHORTID: re.compile(r"^[A-Za-z0-9_-]{7,14}$", re.ASCII),
}

# Most specific first; shortid matches almost anything and goes last.
DETECTION_ORDER: tuple[IdType, ...] = (
    IdType.UUID,
    IdType.OBJECT_ID,
    IdType.SNOWFLAKE,
    IdType.CUID,
    IdType.ULID,
    IdType.NANOID,
    IdType.NUMERIC,
    IdType.SHORTID,
)

_CASE_PRESERVING = frozenset({IdType.UUID, IdType.OBJECT_ID})


def detect_id_type(value: str) -> IdType | None:
    """Return the first matching id type.

    >>> detect_id_type("507f1f77bcf86cd799439011")
    <IdType.OBJECT_ID: 'objectId'>
    >>> detect_id_type("1234567890123456789")
    <IdType.SNOWFLAKE: 'snowflake'>
    """
    for id_type in DETECTION_ORDER:
        if ID_PATTERNS[id_type].match(value):
            return id_type
    return None


def validate_id_type(value: str, id_type: IdType) -> bool:
    if id_type == IdType.AUTO:
        return detect_id_type(value) is not None
    return ID_PATTERNS[id_type].match(value) is not None


class IdOptions(ValidatorOptions):
    """Options for ``id``.

    Attributes:
        type: Expected id type, or ``auto`` to accept any known one.
        allowed_types: Accept any of these types (overrides ``type``).
        custom_regex: Replaces the type check.
        case_sensitive: When False, content checks ignore case and the
            output is lowercased (except for uuid/objectId).
    """

    type: IdType = IdType.AUTO
    min_length: int | None = None
    max_length: int | None = None
    allowed_types: tuple[IdType, ...] | None = None
    custom_regex: re.Pattern[str] | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    case_sensitive: bool = True
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)


def _type_rule(opts: IdOptions) -> Rule | None:
    has_content_checks = any(
        option is not None
        for option in (opts.starts_with, opts.ends_with, opts.includes, opts.excludes)
    )
    if opts.allowed_types:
        if has_content_checks and opts.type == IdType.AUTO:
            return None
        return Rule(
            "invalid",
            lambda v: any(validate_id_type(v, t) for t in opts.allowed_types),
            {"allowedTypes": [t.value for t in opts.allowed_types]},
        )
    if opts.type != IdType.AUTO:
        return Rule(opts.type.value, lambda v: validate_id_type(v, opts.type))
    if has_content_checks:
        return None
    return Rule("invalid", lambda v: detect_id_type(v) is not None)


def id(options: IdOptions | None = None, **kwargs: Any) -> Validator[str]:  # noqa: A001
    """Build an identifier validator.

    Keys, in evaluation order: ``required``, ``minLength``, ``maxLength``,
    ``customFormat`` or the type key (``invalid``, or the id type's own
    key such as ``uuid``, falling back to ``invalid``), ``startsWith``,
    ``endsWith``, ``includes``, ``excludes``.

    Example:
        >>> id(type="uuid").safe_parse("not-a-uuid").error.key
        'uuid'
    """
    opts = resolve_options(IdOptions, options, kwargs)

    def fold(text: str) -> str:
        return text if opts.case_sensitive else text.lower()

    rules: list[Rule] = []
    if opts.min_length is not None:
        rules.append(
            Rule("minLength", lambda v: len(v) >= opts.min_length, {"minLength": opts.min_length})
        )
    if opts.max_length is not None:
        rules.append(
            Rule("maxLength", lambda v: len(v) <= opts.max_length, {"maxLength": opts.max_length})
        )
    if opts.custom_regex is not None:
        rules.append(Rule("customFormat", lambda v: opts.custom_regex.search(v) is not None))
    elif (type_rule := _type_rule(opts)) is not None:
        rules.append(type_rule)
    if opts.starts_with is not None:
        rules.append(
            Rule(
                "startsWith",
                lambda v: fold(v).startswith(fold(opts.starts_with)),
                {"startsWith": opts.starts_with},
            )
        )
    if opts.ends_with is not None:
        rules.append(
            Rule(
                "endsWith",
                lambda v: fold(v).endswith(fold(opts.ends_with)),
                {"endsWith": opts.ends_with},
            )
        )
    if opts.includes is not None:
        rules.append(
            Rule("includes", lambda v: fold(opts.includes) in fold(v), {"includes": opts.includes})
        )
    if opts.excludes:

        def excluded(value: str) -> str | None:
            return next((e for e in opts.excludes if fold(e) in fold(value)), None)

        rules.append(
            Rule(
                "excludes",
                lambda v: excluded(v) is None,
                lambda v: {"excludes": excluded(v)},
            )
        )

    lowercase_output = not opts.case_sensitive and opts.type not in _CASE_PRESERVING

    return Validator(
        "id",
        namespace="common.id",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            trim=TrimMode.NONE,
            transform=opts.transform,
        ),
        rules=rules,
        finalize=str.lower if lowercase_output else None,
        messages=opts.messages,
        invalid_fallback_keys=[t.value for t in IdType],
    )
