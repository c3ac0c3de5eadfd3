"""Taiwan fax numbers (傳真)."""

from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import WhitelistOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text
from validkit.domain.validators.taiwan.numbering_plan import FAX_PLAN, matches_plan


def validate_fax(value: str) -> bool:
    """Validate a fax number against ``FAX_PLAN`` (2024 numbering plan)."""
    return matches_plan(value, FAX_PLAN)


class FaxOptions(WhitelistOptions):
    """Options for ``fax``.

    A non-empty whitelist is exclusive: only listed numbers pass.
    """


def fax(options: FaxOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a Taiwan fax number validator.

    Keys: ``required``, ``notInWhitelist`` (whitelist set), ``invalid``.
    """
    opts = resolve_options(FaxOptions, options, kwargs)
    whitelist = frozenset(opts.whitelist)

    rules = (
        [Rule("notInWhitelist", lambda v: v in whitelist, {"whitelist": opts.whitelist})]
        if whitelist
        else [Rule("invalid", validate_fax)]
    )

    return Validator(
        "fax",
        namespace="taiwan.fax",
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
