"""Booleans parsed from common truthy/falsy spellings."""

from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options

DEFAULT_TRUTHY: tuple[Any, ...] = (True, "true", 1, "1", "yes", "on")
DEFAULT_FALSY: tuple[Any, ...] = (False, "false", 0, "0", "no", "off")


def matches_any(value: Any, candidates: tuple[Any, ...]) -> bool:
    """Membership test where strings compare case-insensitively and types must agree.

    ``True`` does not match ``1`` and ``"1"`` does not match ``1``.
    """
    for candidate in candidates:
        if isinstance(value, str) and isinstance(candidate, str):
            if value.lower() == candidate.lower():
                return True
        elif type(value) is type(candidate) and value == candidate:
            return True
    return False


def prepare_boolean(
    value: Any,
    *,
    default: bool | None,
    truthy: tuple[Any, ...],
    falsy: tuple[Any, ...],
    strict: bool,
    transform: Any = None,
) -> Any:
    if isinstance(value, str):
        value = value.strip()
    if value is None or value == "":
        return default
    if strict and not isinstance(value, bool):
        return value

    if matches_any(value, truthy):
        parsed = True
    elif matches_any(value, falsy):
        parsed = False
    else:
        return value
    return transform(parsed) if transform is not None else parsed


class BooleanOptions(ValidatorOptions):
    """Options for ``boolean``.

    Attributes:
        should_be: Require a specific value (e.g. accepting terms).
        truthy_values: Inputs read as True.
        falsy_values: Inputs read as False.
        strict: Accept only real ``bool`` values.
    """

    should_be: bool | None = None
    truthy_values: tuple[Any, ...] = DEFAULT_TRUTHY
    falsy_values: tuple[Any, ...] = DEFAULT_FALSY
    strict: bool = False
    default_value: bool | None = None


def boolean(options: BooleanOptions | None = None, **kwargs: Any) -> Validator[bool]:
    """Build a boolean validator.

    Keys, in evaluation order: ``required``, ``invalid``, ``shouldBeTrue`` /
    ``shouldBeFalse``.

    Example:
        >>> boolean().parse("Yes")
        True
    """
    opts = resolve_options(BooleanOptions, options, kwargs)

    rules = [Rule("invalid", lambda v: isinstance(v, bool))]
    if opts.should_be is True:
        rules.append(Rule("shouldBeTrue", lambda v: v is True))
    elif opts.should_be is False:
        rules.append(Rule("shouldBeFalse", lambda v: v is False))

    return Validator(
        "boolean",
        namespace="common.boolean",
        required=opts.required,
        preprocess=partial(
            prepare_boolean,
            default=opts.default_value,
            truthy=opts.truthy_values,
            falsy=opts.falsy_values,
            strict=opts.strict,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
