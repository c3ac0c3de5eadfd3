"""Taiwan mobile phone numbers (手機): ``09`` followed by 8 digits."""

import re
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import WhitelistOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text
from validkit.domain.validators.taiwan.numbering_plan import strip_separators

_MOBILE = re.compile(r"^09\d{8}$", re.ASCII)


def validate_mobile(value: str) -> bool:
    """
    >>> validate_mobile("0912-345-678")
    True
    """
    return bool(_MOBILE.match(strip_separators(value)))


class MobileOptions(WhitelistOptions):
    """Options for ``mobile``. Whitelisted numbers skip the format check."""


def mobile(options: MobileOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a Taiwan mobile number validator. Keys: ``required``, ``invalid``."""
    opts = resolve_options(MobileOptions, options, kwargs)
    whitelist = frozenset(opts.whitelist)

    return Validator(
        "mobile",
        namespace="taiwan.mobile",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=opts.transform,
        ),
        accept=lambda v: v in whitelist,
        rules=[Rule("invalid", validate_mobile)],
        messages=opts.messages,
    )
