"""CSS colors: hex, ``rgb()``/``rgba()`` and ``hsl()``/``hsla()``."""

import re
from enum import Enum
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    ANY = "any"


_HEX = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.ASCII | re.IGNORECASE)
_HEX_ALPHA = re.compile(r"^#(?:[0-9a-f]{4}|[0-9a-f]{8})$", re.ASCII | re.IGNORECASE)
_NUM = r"(-?\d+(?:\.\d+)?)"
_RGB = re.compile(
    rf"^(rgba?)\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*(?:,\s*{_NUM})?\s*\)$", re.ASCII
)
_HSL = re.compile(
    rf"^(hsla?)\(\s*{_NUM}\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*(?:,\s*{_NUM})?\s*\)$", re.ASCII
)


def _alpha_ok(function: str, alpha: str | None, allow_alpha: bool) -> bool:
    """``rgba``/``hsla`` need an alpha channel and the plain forms must not have one."""
    if alpha is None:
        return not function.endswith("a")
    return allow_alpha and function.endswith("a") and 0 <= float(alpha) <= 1


def is_hex_color(value: str, allow_alpha: bool = True) -> bool:
    return bool(_HEX.match(value) or (allow_alpha and _HEX_ALPHA.match(value)))


def is_rgb_color(value: str, allow_alpha: bool = True) -> bool:
    """
    >>> is_rgb_color("rgb(255, 0, 128)")
    True
    >>> is_rgb_color("rgb(256, 0, 0)")
    False
    """
    match = _RGB.match(value)
    if match is None:
        return False
    function, *channels, alpha = match.groups()
    for channel in channels:
        number = float(channel)
        if not number.is_integer() or not 0 <= number <= 255:
            return False
    return _alpha_ok(function, alpha, allow_alpha)


def is_hsl_color(value: str, allow_alpha: bool = True) -> bool:
    match = _HSL.match(value)
    if match is None:
        return False
    function, hue, saturation, lightness, alpha = match.groups()
    if not 0 <= float(hue) <= 360:
        return False
    if not (0 <= float(saturation) <= 100 and 0 <= float(lightness) <= 100):
        return False
    return _alpha_ok(function, alpha, allow_alpha)


_CHECKS = {
    ColorFormat.HEX: is_hex_color,
    ColorFormat.RGB: is_rgb_color,
    ColorFormat.HSL: is_hsl_color,
}

_SINGLE_FORMAT_KEYS = {
    ColorFormat.HEX: "notHex",
    ColorFormat.RGB: "notRgb",
    ColorFormat.HSL: "notHsl",
}


def validate_color(value: str, formats: tuple[ColorFormat, ...], allow_alpha: bool = True) -> bool:
    if ColorFormat.ANY in formats:
        formats = tuple(_CHECKS)
    return any(_CHECKS[fmt](value, allow_alpha) for fmt in formats)


class ColorOptions(ValidatorOptions):
    """Options for ``color``. ``format`` takes one format or a list."""

    format: tuple[ColorFormat, ...] = (ColorFormat.ANY,)
    allow_alpha: bool = True
    default_value: str | None = None

    @field_validator("format", mode="before")
    @classmethod
    def accept_single_format(cls, v: Any) -> Any:
        return (v,) if isinstance(v, str) else v


def color(options: ColorOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a color validator.

    A single requested format reports ``notHex``/``notRgb``/``notHsl``; any
    other combination reports ``invalid``.

    Example:
        >>> color(format="hex").safe_parse("rgb(0,0,0)").error.key
        'notHex'
    """
    opts = resolve_options(ColorOptions, options, kwargs)
    formats = opts.format

    key = "invalid"
    if len(formats) == 1 and formats[0] in _SINGLE_FORMAT_KEYS:
        key = _SINGLE_FORMAT_KEYS[formats[0]]

    return Validator(
        "color",
        namespace="common.color",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=opts.transform,
        ),
        rules=[Rule(key, lambda v: validate_color(v, formats, opts.allow_alpha))],
        messages=opts.messages,
    )
