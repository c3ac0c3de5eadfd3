"""Taiwan Business Administration Number (統一編號).

Eight digits. The first seven are weighted by ``1, 2, 1, 2, 1, 2, 4``; the
decimal digits of every product are summed and the eighth digit is added.
The number is valid when the total is divisible by 5 (rule in force since
2023) or by 10 (legacy rule). When the seventh digit is 7 its product (28)
may be read as 10 or 11, so ``total + 1`` is also accepted.
"""

import re
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

BUSINESS_ID_COEFFICIENTS: tuple[int, ...] = (1, 2, 1, 2, 1, 2, 4)

_DIGITS = re.compile(r"^\d+$", re.ASCII)
_BUSINESS_ID = re.compile(r"^\d{8}$", re.ASCII)


def _digit_sum(product: int) -> int:
    return product // 10 + product % 10


def _divisible(total: int) -> bool:
    return total % 5 == 0 or total % 10 == 0


def validate_business_id(value: str) -> bool:
    """Validate the 統一編號 checksum.

    Example:
        >>> validate_business_id("04595257")
        True
        >>> validate_business_id("12345670")  # valid only through the 7th-digit rule
        True
        >>> validate_business_id("12345672")
        False
    """
    if not _BUSINESS_ID.match(value):
        return False

    digits = [int(ch) for ch in value]
    total = sum(_digit_sum(d * c) for d, c in zip(digits, BUSINESS_ID_COEFFICIENTS))
    total += digits[7]

    if _divisible(total):
        return True
    return digits[6] == 7 and _divisible(total + 1)


class BusinessIdOptions(ValidatorOptions):
    """Options for ``business_id``."""

    default_value: str | None = None


def business_id(options: BusinessIdOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a 統一編號 validator.

    Keys, in evaluation order: ``required``, ``numbersOnly``, ``length``,
    ``invalid`` (checksum).
    """
    opts = resolve_options(BusinessIdOptions, options, kwargs)

    return Validator(
        "business_id",
        namespace="taiwan.business_id",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=opts.transform,
        ),
        rules=[
            Rule("numbersOnly", lambda v: bool(_DIGITS.match(v))),
            Rule("length", lambda v: len(v) == 8, {"length": 8}),
            Rule("invalid", validate_business_id),
        ],
        messages=opts.messages,
    )
