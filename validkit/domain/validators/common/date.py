"""Calendar dates in a configurable token format (default ``YYYY-MM-DD``).

The validated value is returned as the input string; range and calendar
checks compare at day granularity against the local date.
"""

from datetime import date as Date, datetime as DateTime, time as Time
from functools import partial
from typing import Any, Self

from pydantic import field_validator, model_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.temporal import format_with_tokens, is_weekend, parse_date
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"


def render_date_input(value: Any, fmt: str) -> Any:
    """Render ``date``/``datetime`` objects in ``fmt``; other input passes through."""
    if isinstance(value, DateTime):
        return format_with_tokens(value, fmt)
    if isinstance(value, Date):
        return format_with_tokens(DateTime.combine(value, Time()), fmt)
    return value


class DateOptions(ValidatorOptions):
    """Options for ``date``.

    ``min`` and ``max`` are written in ``format`` and are inclusive.
    """

    format: str = DEFAULT_DATE_FORMAT
    min: str | None = None
    max: str | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    must_be_past: bool = False
    must_be_future: bool = False
    must_be_today: bool = False
    must_not_be_today: bool = False
    weekdays_only: bool = False
    weekends_only: bool = False
    default_value: str | None = None

    @field_validator("excludes", mode="before")
    @classmethod
    def accept_single_exclude(cls, v: Any) -> Any:
        return as_tuple(v)

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        for bound in (self.min, self.max):
            if bound is not None and parse_date(bound, self.format) is None:
                raise ValueError(f"bound {bound!r} does not match format {self.format!r}")
        return self


def date(options: DateOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a date validator.

    Keys, in evaluation order: ``required``, ``format``, ``min``, ``max``,
    ``includes``, ``excludes``, ``past``, ``future``, ``today``,
    ``notToday``, ``weekday``, ``weekend``.

    Example:
        >>> date(format="DD/MM/YYYY").parse("15/03/2024")
        '15/03/2024'
    """
    opts = resolve_options(DateOptions, options, kwargs)
    fmt = opts.format

    def day(value: str) -> Date:
        return parse_date(value, fmt)

    rules: list[Rule] = [Rule("format", lambda v: parse_date(v, fmt) is not None, {"format": fmt})]
    if opts.min is not None:
        lower = parse_date(opts.min, fmt)
        rules.append(Rule("min", lambda v: day(v) >= lower, {"min": opts.min}))
    if opts.max is not None:
        upper = parse_date(opts.max, fmt)
        rules.append(Rule("max", lambda v: day(v) <= upper, {"max": opts.max}))
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
    if opts.must_be_past:
        rules.append(Rule("past", lambda v: day(v) < Date.today()))
    if opts.must_be_future:
        rules.append(Rule("future", lambda v: day(v) > Date.today()))
    if opts.must_be_today:
        rules.append(Rule("today", lambda v: day(v) == Date.today()))
    if opts.must_not_be_today:
        rules.append(Rule("notToday", lambda v: day(v) != Date.today()))
    if opts.weekdays_only:
        rules.append(Rule("weekday", lambda v: not is_weekend(day(v))))
    if opts.weekends_only:
        rules.append(Rule("weekend", lambda v: is_weekend(day(v))))

    prepare = partial(
        prepare_text,
        required=opts.required,
        default=opts.default_value,
        transform=opts.transform,
    )

    return Validator(
        "date",
        namespace="common.date",
        required=opts.required,
        preprocess=lambda v: prepare(render_date_input(v, fmt)),
        rules=rules,
        messages=opts.messages,
    )
