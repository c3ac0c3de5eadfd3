"""Times of day in 24-hour or 12-hour notation.

A whitelist can admit non-time values ("now", "TBD"). A custom regex
replaces the format check and disables every time-based rule.
"""

import re
from collections.abc import Callable
from datetime import time as Time
from enum import Enum
from functools import partial
from typing import Any, Self

from pydantic import field_validator, model_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, TrimMode, prepare_text


class TimeFormat(str, Enum):
    HH_MM = "HH:mm"
    HH_MM_SS = "HH:mm:ss"
    HH_MM_A = "hh:mm A"
    HH_MM_SS_A = "hh:mm:ss A"
    H_MM = "H:mm"
    H_MM_A = "h:mm A"

    @property
    def is_12_hour(self) -> bool:
        return "A" in self.value

    @property
    def has_seconds(self) -> bool:
        return "ss" in self.value


TIME_PATTERNS: dict[TimeFormat, re.Pattern[str]] = {
    TimeFormat.HH_MM: re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$", re.ASCII),
    TimeFormat.HH_MM_SS: re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]$", re.ASCII),
    TimeFormat.HH_MM_A: re.compile(r"^(0?[1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)$", re.ASCII | re.I),
    TimeFormat.HH_MM_SS_A: re.compile(
        r"^(0?[1-9]|1[0-2]):[0-5][0-9]:[0-5][0-9]\s?(AM|PM)$", re.ASCII | re.I
    ),
    TimeFormat.H_MM: re.compile(r"^([0-9]|1[0-9]|2[0-3]):[0-5][0-9]$", re.ASCII),
    TimeFormat.H_MM_A: re.compile(r"^([1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)$", re.ASCII | re.I),
}

_CLOCK_12 = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s?(AM|PM)$", re.ASCII | re.I)
_CLOCK_24 = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", re.ASCII)


def validate_time_format(value: str, fmt: TimeFormat) -> bool:
    return TIME_PATTERNS[fmt].match(value.strip()) is not None


def parse_time(value: str, fmt: TimeFormat) -> Time | None:
    """Parse a clock reading in the 12- or 24-hour family of ``fmt``.

    >>> parse_time("12:15 AM", TimeFormat.HH_MM_A)
    datetime.time(0, 15)
    """
    value = value.strip()
    if fmt.is_12_hour:
        match = _CLOCK_12.match(value)
        if match is None:
            return None
        hour, minute = int(match.group(1)), int(match.group(2))
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if match.group(4).upper() == "PM" else 0)
    else:
        match = _CLOCK_24.match(value)
        if match is None:
            return None
        hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    try:
        return Time(hour, minute, second)
    except ValueError:
        return None


def normalize_time(value: str, fmt: TimeFormat) -> str | None:
    """Render a valid reading as zero-padded 24-hour ``HH:mm`` (``HH:mm:ss`` when ``fmt`` has seconds)."""
    parsed = parse_time(value, fmt)
    if parsed is None:
        return None
    return parsed.strftime("%H:%M:%S" if fmt.has_seconds else "%H:%M")


def seconds_of_day(value: Time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


class TimeOptions(ValidatorOptions):
    """Options for ``time``.

    Attributes:
        min / max: Inclusive bounds written in ``format``.
        min_hour / max_hour: Inclusive hour range (0-23).
        allowed_hours: Explicit hour allowlist.
        minute_step: Minutes must be a multiple of this.
        second_step: Seconds must be a multiple of this (formats with seconds).
        regex: Replaces the format check; time-based rules are skipped.
        whitelist: Values accepted as-is.
        whitelist_only: Reject anything not in ``whitelist``.
    """

    format: TimeFormat = TimeFormat.HH_MM
    min: str | None = None
    max: str | None = None
    min_hour: int | None = None
    max_hour: int | None = None
    allowed_hours: tuple[int, ...] | None = None
    minute_step: int | None = None
    second_step: int | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None
    trim_mode: TrimMode = TrimMode.TRIM
    casing: Casing = Casing.NONE
    whitelist: tuple[str, ...] = ()
    whitelist_only: bool = False
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        if self.regex is None:
            for bound in (self.min, self.max):
                if bound is not None and parse_time(bound, self.format) is None:
                    raise ValueError(f"bound {bound!r} is not a {self.format.value} time")
        return self


def time(options: TimeOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a time-of-day validator.

    Keys, in evaluation order: ``required``, ``notInWhitelist``,
    ``customRegex`` or ``format``, ``includes``, ``excludes``, ``invalid``,
    ``hour``, ``minute``, ``second``, ``min``, ``max``.

    Example:
        >>> time(format="hh:mm A", min="09:00 AM").safe_parse("08:30 AM").error.key
        'min'
    """
    opts = resolve_options(TimeOptions, options, kwargs)
    fmt = opts.format

    def clock(value: str) -> Time:
        return parse_time(value, fmt)

    rules: list[Rule] = []
    if opts.whitelist and opts.whitelist_only:
        rules.append(Rule("notInWhitelist", lambda v: v in opts.whitelist))
    if opts.regex is not None:
        rules.append(Rule("customRegex", lambda v: opts.regex.search(v) is not None))
    else:
        rules.append(Rule("format", lambda v: validate_time_format(v, fmt), {"format": fmt.value}))
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
        rules.append(Rule("invalid", lambda v: clock(v) is not None))
        rules.extend(hour_rules(opts.min_hour, opts.max_hour, opts.allowed_hours, clock))
        if opts.minute_step is not None:
            rules.append(
                Rule(
                    "minute",
                    lambda v: clock(v).minute % opts.minute_step == 0,
                    {"minuteStep": opts.minute_step},
                )
            )
        if opts.second_step is not None and fmt.has_seconds:
            rules.append(
                Rule(
                    "second",
                    lambda v: clock(v).second % opts.second_step == 0,
                    {"secondStep": opts.second_step},
                )
            )
        if opts.min is not None:
            lower = seconds_of_day(parse_time(opts.min, fmt))
            rules.append(Rule("min", lambda v: seconds_of_day(clock(v)) >= lower, {"min": opts.min}))
        if opts.max is not None:
            upper = seconds_of_day(parse_time(opts.max, fmt))
            rules.append(Rule("max", lambda v: seconds_of_day(clock(v)) <= upper, {"max": opts.max}))

    return Validator(
        "time",
        namespace="common.time",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            trim=opts.trim_mode,
            casing=opts.casing,
            transform=opts.transform,
        ),
        accept=(lambda v: v in opts.whitelist) if opts.whitelist else None,
        rules=rules,
        messages=opts.messages,
    )


def hour_rules(
    min_hour: int | None,
    max_hour: int | None,
    allowed_hours: tuple[int, ...] | None,
    clock: Callable[[str], Any],
) -> list[Rule]:
    """Hour range and allowlist rules, shared with ``datetime``."""
    rules: list[Rule] = []
    hour_range = {
        "minHour": 0 if min_hour is None else min_hour,
        "maxHour": 23 if max_hour is None else max_hour,
    }
    if min_hour is not None:
        rules.append(Rule("hour", lambda v: clock(v).hour >= min_hour, hour_range))
    if max_hour is not None:
        rules.append(Rule("hour", lambda v: clock(v).hour <= max_hour, hour_range))
    if allowed_hours:
        rules.append(
            Rule(
                "hour",
                lambda v: clock(v).hour in allowed_hours,
                {
                    "minHour": min(allowed_hours),
                    "maxHour": max(allowed_hours),
                    "allowedHours": allowed_hours,
                },
            )
        )
    return rules
