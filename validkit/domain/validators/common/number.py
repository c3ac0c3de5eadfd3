"""Numbers: parsing from text, type and sign constraints, range, step and precision.

Unparsable input is carried forward as ``nan`` so it is reported under the
key for the requested number type rather than as a generic type error.
Booleans are never treated as numbers.
"""

import math
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options

Number = int | float


class NumberType(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    BOTH = "both"


def parse_number(value: Any, *, parse_commas: bool = False) -> Number | None:
    """Convert raw input to ``int``/``float``.

    Returns ``None`` for empty input and ``nan`` for anything unparsable.

    Example:
        >>> parse_number(" 1,234 ", parse_commas=True)
        1234
        >>> parse_number("12abc")
        nan
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int | float):
        return value
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    if parse_commas:
        text = text.replace(",", "")
    if text == "":
        return None
    if not text.isascii() or "_" in text:
        return math.nan
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def is_integral(value: Number) -> bool:
    return isinstance(value, int) or value.is_integer()


def decimal_places(value: Number) -> int:
    """Number of digits after the decimal point in the shortest representation."""
    if isinstance(value, int):
        return 0
    exponent = Decimal(repr(value)).as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def is_multiple_of(value: Number, step: Number) -> bool:
    if not math.isfinite(value):
        return False
    return Fraction(repr(value)) % Fraction(repr(step)) == 0


def prepare_number(
    value: Any,
    *,
    default: Number | None = None,
    parse_commas: bool = False,
    transform: Callable[[Number], Number] | None = None,
) -> Number | None:
    parsed = parse_number(value, parse_commas=parse_commas)
    if parsed is None:
        return default
    if transform is not None and math.isfinite(parsed):
        parsed = transform(parsed)
    return parsed


class NumberOptions(ValidatorOptions):
    """Options for ``number``.

    Attributes:
        type: Accept integers, non-integers, or both.
        finite: Reject infinities.
        parse_commas: Strip thousands separators from text input.
        precision: Maximum number of decimal places.
    """

    min: Number | None = None
    max: Number | None = None
    type: NumberType = NumberType.BOTH
    positive: bool = False
    negative: bool = False
    non_negative: bool = False
    non_positive: bool = False
    multiple_of: Number | None = None
    precision: int | None = None
    finite: bool = True
    parse_commas: bool = False
    default_value: Number | None = None

    @field_validator("multiple_of")
    @classmethod
    def positive_step(cls, v: Number | None) -> Number | None:
        if v is not None and not (math.isfinite(v) and v > 0):
            raise ValueError("multiple_of must be a positive finite number")
        return v


def number(options: NumberOptions | None = None, **kwargs: Any) -> Validator[Number]:
    """Build a number validator.

    Keys, in evaluation order: ``required``, ``integer``/``float``/``invalid``
    (unparsable, by ``type``), ``finite``, ``integer``/``float`` (type),
    ``positive``, ``negative``, ``nonNegative``, ``nonPositive``, ``min``,
    ``max``, ``multipleOf``, ``precision``.

    Example:
        >>> number(type="integer").safe_parse("1.5").error.key
        'integer'
    """
    opts = resolve_options(NumberOptions, options, kwargs)

    nan_key = {NumberType.INTEGER: "integer", NumberType.FLOAT: "float"}.get(opts.type, "invalid")
    rules: list[Rule] = [Rule(nan_key, lambda v: not math.isnan(v))]
    if opts.finite:
        rules.append(Rule("finite", math.isfinite))
    if opts.type == NumberType.INTEGER:
        rules.append(Rule("integer", is_integral))
    elif opts.type == NumberType.FLOAT:
        rules.append(Rule("float", lambda v: not is_integral(v)))

    if opts.positive:
        rules.append(Rule("positive", lambda v: v > 0))
    if opts.negative:
        rules.append(Rule("negative", lambda v: v < 0))
    if opts.non_negative:
        rules.append(Rule("nonNegative", lambda v: v >= 0))
    if opts.non_positive:
        rules.append(Rule("nonPositive", lambda v: v <= 0))
    if opts.min is not None:
        rules.append(Rule("min", lambda v: v >= opts.min, {"min": opts.min}))
    if opts.max is not None:
        rules.append(Rule("max", lambda v: v <= opts.max, {"max": opts.max}))
    if opts.multiple_of is not None:
        rules.append(
            Rule(
                "multipleOf",
                lambda v: is_multiple_of(v, opts.multiple_of),
                {"multipleOf": opts.multiple_of},
            )
        )
    if opts.precision is not None:
        rules.append(
            Rule(
                "precision",
                lambda v: not math.isfinite(v) or decimal_places(v) <= opts.precision,
                {"precision": opts.precision},
            )
        )

    return Validator(
        "number",
        namespace="common.number",
        required=opts.required,
        preprocess=partial(
            prepare_number,
            default=opts.default_value,
            parse_commas=opts.parse_commas,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
