"""Taiwan vehicle license plates (車牌)."""

import re
from enum import Enum
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, chain, prepare_text

CAR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[A-Z]{3}\d{4}$", re.ASCII),  # ABC-1234
    re.compile(r"^\d{4}[A-Z]{2}$", re.ASCII),  # 1234-AB
    re.compile(r"^[A-Z]{2}\d{4}$", re.ASCII),  # AB-1234 (legacy)
    re.compile(r"^[A-Z]\d{5}$", re.ASCII),  # A1-2345 (legacy)
)

MOTORCYCLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^[A-Z]{3}\d{4}$", re.ASCII),  # ABC-1234
    re.compile(r"^\d{3}[A-Z]{3}$", re.ASCII),  # 123-ABC
    re.compile(r"^[A-Z]{2}\d{4}$", re.ASCII),  # AB-1234 (legacy)
    re.compile(r"^\d{4}[A-Z]{2}$", re.ASCII),  # 1234-AB (legacy)
)

_SEPARATORS = re.compile(r"[-\s]")


class PlateType(str, Enum):
    CAR = "car"
    MOTORCYCLE = "motorcycle"
    ANY = "any"


def validate_license_plate(value: str, plate_type: PlateType = PlateType.ANY) -> bool:
    """Match a separator-free plate against the patterns of ``plate_type``.

    Example:
        >>> validate_license_plate("123ABC", PlateType.CAR)
        False
        >>> validate_license_plate("123ABC", PlateType.MOTORCYCLE)
        True
    """
    plate_type = PlateType(plate_type)
    patterns: tuple[re.Pattern[str], ...] = ()
    if plate_type in (PlateType.CAR, PlateType.ANY):
        patterns += CAR_PATTERNS
    if plate_type in (PlateType.MOTORCYCLE, PlateType.ANY):
        patterns += MOTORCYCLE_PATTERNS
    return any(pattern.match(value) for pattern in patterns)


class LicensePlateOptions(ValidatorOptions):
    """Options for ``license_plate``."""

    plate_type: PlateType = PlateType.ANY
    default_value: str | None = None


def license_plate(options: LicensePlateOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a license plate validator.

    Input is uppercased with dashes and spaces removed (``abc-1234`` ->
    ``ABC1234``). Keys: ``required``, ``invalid``.
    """
    opts = resolve_options(LicensePlateOptions, options, kwargs)

    return Validator(
        "license_plate",
        namespace="taiwan.license_plate",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            casing=Casing.UPPER,
            transform=chain(lambda s: _SEPARATORS.sub("", s), opts.transform),
        ),
        rules=[Rule("invalid", lambda v: validate_license_plate(v, opts.plate_type))],
        messages=opts.messages,
    )
