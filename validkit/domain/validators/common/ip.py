"""IPv4/IPv6 addresses with optional CIDR suffix, parsed with ``ipaddress``."""

import ipaddress
import re
from enum import Enum
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import WhitelistOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

_PREFIX = re.compile(r"^\d+$", re.ASCII)


class IpVersion(str, Enum):
    V4 = "v4"
    V6 = "v6"
    ANY = "any"


def validate_ipv4(value: str) -> bool:
    """Dotted quad, no leading zeros.

    >>> validate_ipv4("192.168.001.1")
    False
    """
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def validate_ipv6(value: str) -> bool:
    """Full, ``::``-compressed or IPv4-tailed form. Zone ids (``%eth0``) are rejected."""
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def split_cidr(value: str) -> tuple[str, str | None]:
    address, slash, prefix = value.partition("/")
    return address, (prefix if slash else None)


def valid_prefix(address: str, prefix: str) -> bool:
    if not _PREFIX.match(prefix):
        return False
    return int(prefix) <= (32 if validate_ipv4(address) else 128)


class IpOptions(WhitelistOptions):
    """Options for ``ip``.

    Attributes:
        version: ``v4``, ``v6`` or ``any``.
        allow_cidr: Accept a ``/prefix`` suffix.
        whitelist: When non-empty, only these exact values pass.
    """

    version: IpVersion = IpVersion.ANY
    allow_cidr: bool = False


def ip(options: IpOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build an IP address validator.

    Keys, in evaluation order: ``required``, ``invalid`` (CIDR not allowed),
    ``notIPv4``/``notIPv6``/``invalid`` (address), ``invalid`` (prefix),
    ``notInWhitelist``.

    Example:
        >>> ip(version="v4").safe_parse("::1").error.key
        'notIPv4'
    """
    opts = resolve_options(IpOptions, options, kwargs)

    def address(value: str) -> str:
        return split_cidr(value)[0]

    rules: list[Rule] = []
    if not opts.allow_cidr:
        rules.append(Rule("invalid", lambda v: "/" not in v))
    match opts.version:
        case IpVersion.V4:
            rules.append(Rule("notIPv4", lambda v: validate_ipv4(address(v))))
        case IpVersion.V6:
            rules.append(Rule("notIPv6", lambda v: validate_ipv6(address(v))))
        case _:
            rules.append(
                Rule("invalid", lambda v: validate_ipv4(address(v)) or validate_ipv6(address(v)))
            )
    if opts.allow_cidr:
        rules.append(
            Rule(
                "invalid",
                lambda v: (prefix := split_cidr(v)[1]) is None or valid_prefix(address(v), prefix),
            )
        )
    if opts.whitelist:
        rules.append(Rule("notInWhitelist", lambda v: v in opts.whitelist))

    return Validator(
        "ip",
        namespace="common.ip",
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
