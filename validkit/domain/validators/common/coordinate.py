"""Geographic coordinates: a ``lat,lng`` pair or a single latitude/longitude."""

import math
from enum import Enum
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.number import Number, decimal_places, parse_number
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text


class CoordinateType(str, Enum):
    PAIR = "pair"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


def validate_latitude(value: Number) -> bool:
    return math.isfinite(value) and -90 <= value <= 90


def validate_longitude(value: Number) -> bool:
    return math.isfinite(value) and -180 <= value <= 180


def _to_number(text: str) -> Number | None:
    parsed = parse_number(text)
    if parsed is None or math.isnan(parsed):
        return None
    return parsed


def split_pair(value: str) -> tuple[Number, Number] | None:
    """Split ``"lat,lng"`` into two numbers, or None if it is not such a pair.

    >>> split_pair("25.0330, 121.5654")
    (25.033, 121.5654)
    """
    parts = value.split(",")
    if len(parts) != 2:
        return None
    lat, lng = _to_number(parts[0]), _to_number(parts[1])
    if lat is None or lng is None:
        return None
    return lat, lng


class CoordinateOptions(ValidatorOptions):
    """Options for ``coordinate``. ``precision`` caps the decimal places of each number."""

    type: CoordinateType = CoordinateType.PAIR
    precision: int | None = None
    default_value: str | None = None


def coordinate(options: CoordinateOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a coordinate validator.

    Keys: ``required``, then for pairs ``invalid`` (shape), ``invalidLatitude``,
    ``invalidLongitude``; for single values ``invalidLatitude`` or
    ``invalidLongitude``. Excess precision reports ``invalid``.
    """
    opts = resolve_options(CoordinateOptions, options, kwargs)

    def within_precision(*numbers: Number) -> bool:
        return all(decimal_places(n) <= opts.precision for n in numbers)

    rules: list[Rule]
    match opts.type:
        case CoordinateType.PAIR:
            rules = [
                Rule("invalid", lambda v: split_pair(v) is not None),
                Rule("invalidLatitude", lambda v: validate_latitude(split_pair(v)[0])),
                Rule("invalidLongitude", lambda v: validate_longitude(split_pair(v)[1])),
            ]
            if opts.precision is not None:
                rules.append(Rule("invalid", lambda v: within_precision(*split_pair(v))))
        case CoordinateType.LATITUDE:
            rules = [
                Rule("invalidLatitude", lambda v: (n := _to_number(v)) is not None and validate_latitude(n))
            ]
            if opts.precision is not None:
                rules.append(Rule("invalid", lambda v: within_precision(_to_number(v))))
        case CoordinateType.LONGITUDE:
            rules = [
                Rule("invalidLongitude", lambda v: (n := _to_number(v)) is not None and validate_longitude(n))
            ]
            if opts.precision is not None:
                rules.append(Rule("invalid", lambda v: within_precision(_to_number(v))))

    return Validator(
        "coordinate",
        namespace="common.coordinate",
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
