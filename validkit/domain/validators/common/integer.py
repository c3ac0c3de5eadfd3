"""Whole numbers. Integer-valued floats (``3.0``) normalize to ``int``."""

from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.number import is_integral, prepare_number
from validkit.domain.validators.options import ValidatorOptions, resolve_options


class IntegerOptions(ValidatorOptions):
    """Options for ``integer``."""

    min: int | None = None
    max: int | None = None
    default_value: int | None = None


def integer(options: IntegerOptions | None = None, **kwargs: Any) -> Validator[int]:
    """Build an integer validator. Keys: ``required``, ``integer``, ``min``, ``max``."""
    opts = resolve_options(IntegerOptions, options, kwargs)

    rules = [Rule("integer", is_integral)]
    if opts.min is not None:
        rules.append(Rule("min", lambda v: v >= opts.min, {"min": opts.min}))
    if opts.max is not None:
        rules.append(Rule("max", lambda v: v <= opts.max, {"max": opts.max}))

    return Validator(
        "integer",
        namespace="common.integer",
        required=opts.required,
        preprocess=partial(prepare_number, default=opts.default_value, transform=opts.transform),
        rules=rules,
        finalize=int,
        messages=opts.messages,
    )
