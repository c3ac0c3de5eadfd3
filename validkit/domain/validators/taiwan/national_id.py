"""Taiwan National ID (身分證字號) and resident certificate (居留證號) numbers.

Layouts sharing one checksum:

- Citizen:       letter + [12] + 8 digits (A123456789)
- New resident:  letter + [89] + 8 digits (A800000014), issued since 2021
- Old resident:  letter + [ABCD] + 8 digits (AA12345677), gender letter
  counts as 1 (A, C) or 0 (B, D)

The first letter maps to a two-digit city code; the city digits and body
digits are weighted by ``CHECKSUM_COEFFICIENTS`` and the check digit is
``(10 - sum % 10) % 10``.
"""

import re
from enum import Enum
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, prepare_text

CITY_CODES: dict[str, int] = {
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15, "G": 16, "H": 17,
    "I": 34, "J": 18, "K": 19, "L": 20, "M": 21, "N": 22, "O": 35, "P": 23,
    "Q": 24, "R": 25, "S": 26, "T": 27, "U": 28, "V": 29, "W": 32, "X": 30,
    "Y": 31, "Z": 33,
}  # fmt: skip

CHECKSUM_COEFFICIENTS: tuple[int, ...] = (1, 9, 8, 7, 6, 5, 4, 3, 2, 1)

_CITIZEN = re.compile(r"^[A-Z][12]\d{8}$", re.ASCII)
_NEW_RESIDENT = re.compile(r"^[A-Z][89]\d{8}$", re.ASCII)
_OLD_RESIDENT = re.compile(r"^[A-Z][ABCD]\d{8}$", re.ASCII)


class NationalIdType(str, Enum):
    CITIZEN = "citizen"
    RESIDENT = "resident"
    BOTH = "both"


def _check_digit(weighted_sum: int) -> int:
    return (10 - weighted_sum % 10) % 10


def _city_sum(letter: str) -> int:
    city = CITY_CODES[letter]
    return (city // 10) * CHECKSUM_COEFFICIENTS[0] + (city % 10) * CHECKSUM_COEFFICIENTS[1]


def _numeric_layout_valid(value: str) -> bool:
    digits = [int(ch) for ch in value[1:]]
    total = _city_sum(value[0])
    total += sum(d * c for d, c in zip(digits[:8], CHECKSUM_COEFFICIENTS[2:]))
    return _check_digit(total) == digits[8]


def validate_citizen_id(value: str) -> bool:
    """Validate a citizen National ID (letter + 1/2 + 8 digits)."""
    return bool(_CITIZEN.match(value)) and _numeric_layout_valid(value)


def validate_new_resident_id(value: str) -> bool:
    """Validate a new-style resident certificate (letter + 8/9 + 8 digits)."""
    return bool(_NEW_RESIDENT.match(value)) and _numeric_layout_valid(value)


def validate_old_resident_id(value: str) -> bool:
    """Validate an old-style resident certificate (two letters + 8 digits)."""
    if not _OLD_RESIDENT.match(value):
        return False
    gender = 1 if value[1] in "AC" else 0
    digits = [int(ch) for ch in value[2:]]
    total = _city_sum(value[0]) + gender * CHECKSUM_COEFFICIENTS[2]
    total += sum(d * c for d, c in zip(digits[:7], CHECKSUM_COEFFICIENTS[3:]))
    return _check_digit(total) == digits[7]


def validate_national_id(
    value: str,
    id_type: NationalIdType = NationalIdType.BOTH,
    allow_old_resident: bool = True,
) -> bool:
    """Validate ``value`` against the layouts enabled by ``id_type``.

    Example:
        >>> validate_national_id("A123456789")
        True
        >>> validate_national_id("A123456789", NationalIdType.RESIDENT)
        False
    """
    if len(value) != 10:
        return False

    resident = validate_new_resident_id(value) or (
        allow_old_resident and validate_old_resident_id(value)
    )
    match NationalIdType(id_type):
        case NationalIdType.CITIZEN:
            return validate_citizen_id(value)
        case NationalIdType.RESIDENT:
            return resident
        case _:
            return validate_citizen_id(value) or resident


class NationalIdOptions(ValidatorOptions):
    """Options for ``national_id``."""

    type: NationalIdType = NationalIdType.BOTH
    allow_old_resident: bool = True
    default_value: str | None = None


def national_id(options: NationalIdOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a Taiwan National ID / resident certificate validator.

    Input is trimmed and uppercased. Keys: ``required``, ``invalid``.
    """
    opts = resolve_options(NationalIdOptions, options, kwargs)

    return Validator(
        "national_id",
        namespace="taiwan.national_id",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            casing=Casing.UPPER,
            transform=opts.transform,
        ),
        rules=[
            Rule(
                "invalid",
                lambda v: validate_national_id(v, opts.type, opts.allow_old_resident),
            ),
        ],
        messages=opts.messages,
    )
