"""Payment card numbers: length, Luhn checksum, brand and allowlist."""

import re
from enum import Enum
from functools import partial
from typing import Any

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import WhitelistOptions, resolve_options
from validkit.domain.validators.preprocess import chain, prepare_text

_SEPARATORS = re.compile(r"[\s-]")
_CARD_DIGITS = re.compile(r"^\d{13,19}$", re.ASCII)


class CardType(str, Enum):
    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    JCB = "jcb"
    DISCOVER = "discover"
    UNIONPAY = "unionpay"
    ANY = "any"


# First match wins.
CARD_PREFIXES: tuple[tuple[CardType, re.Pattern[str]], ...] = (
    (CardType.VISA, re.compile(r"^4")),
    (CardType.MASTERCARD, re.compile(r"^(5[1-5]|2[2-7])")),
    (CardType.AMEX, re.compile(r"^3[47]")),
    (CardType.JCB, re.compile(r"^35")),
    (CardType.DISCOVER, re.compile(r"^(6011|65|64[4-9])")),
    (CardType.UNIONPAY, re.compile(r"^62")),
)


def strip_card_separators(value: str) -> str:
    return _SEPARATORS.sub("", value)


def detect_card_type(value: str) -> CardType:
    """Guess the card brand from the number prefix.

    >>> detect_card_type("4111 1111 1111 1111")
    <CardType.VISA: 'visa'>
    """
    digits = strip_card_separators(value)
    for card_type, prefix in CARD_PREFIXES:
        if prefix.match(digits):
            return card_type
    return CardType.ANY


def luhn_checksum_ok(digits: str) -> bool:
    total = 0
    for index, char in enumerate(reversed(digits)):
        n = int(char)
        if index % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def validate_credit_card(value: str) -> bool:
    digits = strip_card_separators(value)
    return bool(_CARD_DIGITS.match(digits)) and luhn_checksum_ok(digits)


class CreditCardOptions(WhitelistOptions):
    """Options for ``credit_card``.

    Attributes:
        card_type: Accepted brand(s); ``any`` disables the brand check.
        whitelist: When non-empty, only these numbers pass.
    """

    card_type: tuple[CardType, ...] = (CardType.ANY,)

    @field_validator("card_type", mode="before")
    @classmethod
    def accept_single_type(cls, v: Any) -> Any:
        return (v,) if isinstance(v, str) else v


def credit_card(options: CreditCardOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a card number validator.

    Spaces and dashes are removed. Keys: ``required``, ``invalid`` (format,
    checksum or brand), ``notInWhitelist``.
    """
    opts = resolve_options(CreditCardOptions, options, kwargs)

    rules = [Rule("invalid", validate_credit_card)]
    if CardType.ANY not in opts.card_type:
        rules.append(Rule("invalid", lambda v: detect_card_type(v) in opts.card_type))
    if opts.whitelist:
        allowed = frozenset(strip_card_separators(w) for w in opts.whitelist)
        rules.append(Rule("notInWhitelist", lambda v: v in allowed))

    return Validator(
        "credit_card",
        namespace="common.creditCard",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=chain(strip_card_separators, opts.transform),
        ),
        rules=rules,
        messages=opts.messages,
    )
