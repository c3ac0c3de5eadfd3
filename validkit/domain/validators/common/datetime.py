"""Date-time values in one of fifteen fixed formats, including ISO 8601,
RFC 2822 and Unix timestamps.

Naive values are read as wall-clock time in ``timezone`` when one is set;
aware values (ISO with ``Z``, RFC, Unix) are converted into it. Unix
timestamps are UTC.
"""

import email.utils
import re
from datetime import UTC, datetime as DateTime, tzinfo
from enum import Enum
from functools import partial
from typing import Any, Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator, model_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.temporal import format_with_tokens, is_weekend, parse_with_format
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.common.time import hour_rules
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, TrimMode, prepare_text


class DateTimeFormat(str, Enum):
    YMD_HM = "YYYY-MM-DD HH:mm"
    YMD_HMS = "YYYY-MM-DD HH:mm:ss"
    YMD_HM_12 = "YYYY-MM-DD hh:mm A"
    YMD_HMS_12 = "YYYY-MM-DD hh:mm:ss A"
    DMY_SLASH_HM = "DD/MM/YYYY HH:mm"
    DMY_SLASH_HMS = "DD/MM/YYYY HH:mm:ss"
    DMY_SLASH_HM_12 = "DD/MM/YYYY hh:mm A"
    MDY_SLASH_HM = "MM/DD/YYYY HH:mm"
    MDY_SLASH_HM_12 = "MM/DD/YYYY hh:mm A"
    YMD_SLASH_HM = "YYYY/MM/DD HH:mm"
    DMY_DASH_HM = "DD-MM-YYYY HH:mm"
    MDY_DASH_HM = "MM-DD-YYYY HH:mm"
    ISO = "ISO"
    RFC = "RFC"
    UNIX = "UNIX"


DATETIME_PATTERNS: dict[DateTimeFormat, re.Pattern[str]] = {
    fmt: re.compile(pattern, re.ASCII | re.IGNORECASE)
    for fmt, pattern in {
        DateTimeFormat.YMD_HM: r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$",
        DateTimeFormat.YMD_HMS: r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$",
        DateTimeFormat.YMD_HM_12: r"^\d{4}-\d{2}-\d{2} \d{1,2}:\d{2} (AM|PM)$",
        DateTimeFormat.YMD_HMS_12: r"^\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}:\d{2} (AM|PM)$",
        DateTimeFormat.DMY_SLASH_HM: r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}$",
        DateTimeFormat.DMY_SLASH_HMS: r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}:\d{2}$",
        DateTimeFormat.DMY_SLASH_HM_12: r"^\d{1,2}/\d{1,2}/\d{4} \d{1,2}:\d{2} (AM|PM)$",
        DateTimeFormat.MDY_SLASH_HM: r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}$",
        DateTimeFormat.MDY_SLASH_HM_12: r"^\d{1,2}/\d{1,2}/\d{4} \d{1,2}:\d{2} (AM|PM)$",
        DateTimeFormat.YMD_SLASH_HM: r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}$",
        DateTimeFormat.DMY_DASH_HM: r"^\d{1,2}-\d{1,2}-\d{4} \d{2}:\d{2}$",
        DateTimeFormat.MDY_DASH_HM: r"^\d{1,2}-\d{1,2}-\d{4} \d{2}:\d{2}$",
        DateTimeFormat.ISO: r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?$",
        DateTimeFormat.RFC: r"^[A-Za-z]{3}, \d{1,2} [A-Za-z]{3} \d{4} \d{2}:\d{2}:\d{2} [A-Z]{3}$",
        DateTimeFormat.UNIX: r"^\d{10}$",
    }.items()
}


def _in_zone(value: DateTime, zone: tzinfo | None) -> DateTime:
    if zone is None:
        return value
    return value.astimezone(zone) if value.tzinfo else value.replace(tzinfo=zone)


def parse_datetime_value(
    value: str, fmt: DateTimeFormat, zone: tzinfo | None = None
) -> DateTime | None:
    """Parse ``value`` in ``fmt``, or return None.

    Example:
        >>> parse_datetime_value("1710508245", DateTimeFormat.UNIX)
        datetime.datetime(2024, 3, 15, 13, 10, 45, tzinfo=datetime.timezone.utc)
    """
    value = value.strip()
    if DATETIME_PATTERNS[fmt].match(value) is None:
        return None
    match fmt:
        case DateTimeFormat.ISO:
            try:
                parsed = DateTime.fromisoformat(value)
            except ValueError:
                return None
        case DateTimeFormat.RFC:
            try:
                parsed = email.utils.parsedate_to_datetime(value)
            except (TypeError, ValueError):
                return None
        case DateTimeFormat.UNIX:
            parsed = DateTime.fromtimestamp(int(value), tz=UTC)
        case _:
            parsed = parse_with_format(value, fmt.value)
            if parsed is None:
                return None
    return _in_zone(parsed, zone)


def validate_datetime_format(value: str, fmt: DateTimeFormat) -> bool:
    return parse_datetime_value(value, fmt) is not None


def format_datetime_value(value: DateTime, fmt: DateTimeFormat) -> str:
    """Render ``value`` in ``fmt``; ISO and RFC output is UTC."""
    match fmt:
        case DateTimeFormat.ISO:
            return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        case DateTimeFormat.RFC:
            return email.utils.format_datetime(value.astimezone(UTC), usegmt=True)
        case DateTimeFormat.UNIX:
            return str(int(value.timestamp()))
        case _:
            return format_with_tokens(value, fmt.value)


def normalize_datetime_value(
    value: str, fmt: DateTimeFormat, zone: tzinfo | None = None
) -> str | None:
    parsed = parse_datetime_value(value, fmt, zone)
    return format_datetime_value(parsed, fmt) if parsed is not None else None


def _aligned(a: DateTime, b: DateTime) -> tuple[DateTime, DateTime]:
    """Make a naive/aware pair comparable by reading naive values as local time."""
    if (a.tzinfo is None) == (b.tzinfo is None):
        return a, b
    return a.astimezone(), b.astimezone()


def _now_for(value: DateTime) -> DateTime:
    return DateTime.now(value.tzinfo) if value.tzinfo else DateTime.now()


def is_before(a: DateTime, b: DateTime) -> bool:
    a, b = _aligned(a, b)
    return a < b


class DateTimeOptions(ValidatorOptions):
    """Options for ``datetime``.

    Attributes:
        min / max: Inclusive bounds, as strings in ``format`` or datetimes.
        timezone: IANA zone name (e.g. ``Asia/Taipei``).
        minute_step: Minutes must be a multiple of this.
        regex: Replaces the format check; date-time rules are skipped.
        whitelist: Values accepted as-is.
        whitelist_only: Reject anything not in ``whitelist``.
    """

    format: DateTimeFormat = DateTimeFormat.YMD_HM
    min: str | DateTime | None = None
    max: str | DateTime | None = None
    min_hour: int | None = None
    max_hour: int | None = None
    allowed_hours: tuple[int, ...] | None = None
    minute_step: int | None = None
    timezone: str | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None
    trim_mode: TrimMode = TrimMode.TRIM
    casing: Casing = Casing.NONE
    must_be_past: bool = False
    must_be_future: bool = False
    must_be_today: bool = False
    must_not_be_today: bool = False
    weekdays_only: bool = False
    weekends_only: bool = False
    whitelist: tuple[str, ...] = ()
    whitelist_only: bool = False
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {v!r}") from e
        return v

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        for bound in (self.min, self.max):
            if isinstance(bound, str) and parse_datetime_value(bound, self.format) is None:
                raise ValueError(f"bound {bound!r} does not match format {self.format.value!r}")
        return self


def datetime(options: DateTimeOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a date-time validator.

    Keys, in evaluation order: ``required``, ``notInWhitelist``,
    ``customRegex`` or ``format``, ``includes``, ``excludes``, ``invalid``,
    ``hour``, ``minute``, ``min``, ``max``, ``past``, ``future``, ``today``,
    ``notToday``, ``weekday``, ``weekend``.

    Example:
        >>> datetime(min_hour=9, max_hour=17).safe_parse("2024-03-15 18:30").error.key
        'hour'
    """
    opts = resolve_options(DateTimeOptions, options, kwargs)
    fmt = opts.format
    zone = ZoneInfo(opts.timezone) if opts.timezone else None

    def moment(value: str) -> DateTime:
        return parse_datetime_value(value, fmt, zone)

    def bound(value: str | DateTime) -> tuple[DateTime, str]:
        if isinstance(value, str):
            return parse_datetime_value(value, fmt, zone), value
        return _in_zone(value, zone), format_datetime_value(value, fmt)

    rules: list[Rule] = []
    if opts.whitelist and opts.whitelist_only:
        rules.append(Rule("notInWhitelist", lambda v: v in opts.whitelist))
    if opts.regex is not None:
        rules.append(Rule("customRegex", lambda v: opts.regex.search(v) is not None))
    else:
        rules.append(
            Rule("format", lambda v: validate_datetime_format(v, fmt), {"format": fmt.value})
        )
    if opts.includes:
        rules.append(Rule("includes", lambda v: opts.includes in v, {"includes": opts.includes}))
    if opts.excludes:
        rules.append(
            Rule(
                "excludes",
                lambda v: first_contained(v, opts.excludes) is None,
                lambda v: {"excludes": first_contained(v, opts.excludes)},
            )
        )

    if opts.regex is None:
        rules.append(Rule("invalid", lambda v: moment(v) is not None))
        rules.extend(hour_rules(opts.min_hour, opts.max_hour, opts.allowed_hours, moment))
        if opts.minute_step is not None:
            rules.append(
                Rule(
                    "minute",
                    lambda v: moment(v).minute % opts.minute_step == 0,
                    {"minuteStep": opts.minute_step},
                )
            )
        if opts.min is not None:
            lower, lower_text = bound(opts.min)
            rules.append(Rule("min", lambda v: not is_before(moment(v), lower), {"min": lower_text}))
        if opts.max is not None:
            upper, upper_text = bound(opts.max)
            rules.append(Rule("max", lambda v: not is_before(upper, moment(v)), {"max": upper_text}))
        if opts.must_be_past:
            rules.append(Rule("past", lambda v: moment(v) < _now_for(moment(v))))
        if opts.must_be_future:
            rules.append(Rule("future", lambda v: moment(v) > _now_for(moment(v))))
        if opts.must_be_today:
            rules.append(Rule("today", lambda v: moment(v).date() == _now_for(moment(v)).date()))
        if opts.must_not_be_today:
            rules.append(
                Rule("notToday", lambda v: moment(v).date() != _now_for(moment(v)).date())
            )
        if opts.weekdays_only:
            rules.append(Rule("weekday", lambda v: not is_weekend(moment(v))))
        if opts.weekends_only:
            rules.append(Rule("weekend", lambda v: is_weekend(moment(v))))

    prepare = partial(
        prepare_text,
        required=opts.required,
        default=opts.default_value,
        trim=opts.trim_mode,
        casing=opts.casing,
        transform=opts.transform,
    )

    def preprocess(value: Any) -> str | None:
        if isinstance(value, DateTime):
            value = format_datetime_value(_in_zone(value, zone), fmt)
        return prepare(value)

    return Validator(
        "datetime",
        namespace="common.datetime",
        required=opts.required,
        preprocess=preprocess,
        accept=(lambda v: v in opts.whitelist) if opts.whitelist else None,
        rules=rules,
        messages=opts.messages,
    )
