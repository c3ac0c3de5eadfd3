"""Taiwan landline telephone numbers (市話)."""

from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import WhitelistOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text
from validkit.domain.validators.taiwan.numbering_plan import TELEPHONE_PLAN, matches_plan


def validate_tel(value: str) -> bool:
    """Validate a landline number against ``TELEPHONE_PLAN``."""
    return matches_plan(value, TELEPHONE_PLAN)


class TelOptions(WhitelistOptions):
    """Options for ``tel``.

    Whitelisted numbers are accepted regardless of format.
    """


def tel(options: TelOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a Taiwan landline validator. Keys: ``required``, ``invalid``.

    The value is returned as entered (trimmed); dashes and spaces are only
    ignored for matching.
    """
    opts = resolve_options(TelOptions, options, kwargs)
    whitelist = frozenset(opts.whitelist)

    return Validator(
        "tel",
        namespace="taiwan.tel",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            transform=opts.transform,
        ),
        accept=lambda v: v in whitelist,
        rules=[Rule("invalid", validate_tel)],
        messages=opts.messages,
    )
