"""Absolute URLs with protocol, host, port, path, query and fragment policies."""

import re
from functools import partial
from typing import Any
from urllib.parse import SplitResult, urlsplit

from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.email import domain_matches
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*$", re.ASCII)
_HIERARCHICAL_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss", "file"})
_PRIVATE_172 = re.compile(r"^172\.(1[6-9]|2[0-9]|3[0-1])\.", re.ASCII)


def split_url(value: str) -> SplitResult | None:
    """Parse an absolute URL, or return None when it is not one.

    Hierarchical schemes (http, https, ftp, ws, wss) need a host, and an
    explicit port must be a number in range.
    """
    if any(ch.isspace() for ch in value):
        return None
    try:
        parts = urlsplit(value)
        parts.port  # raises for a non-numeric or out-of-range port
    except ValueError:
        return None
    if not parts.scheme or not _SCHEME.match(parts.scheme):
        return None
    if parts.scheme in _HIERARCHICAL_SCHEMES - {"file"} and not parts.hostname:
        return None
    if parts.scheme not in _HIERARCHICAL_SCHEMES and not (parts.netloc or parts.path):
        return None
    return parts


def is_url(value: str) -> bool:
    return split_url(value) is not None


def effective_port(parts: SplitResult) -> int:
    """Explicit port, else 443 for https and 80 for everything else."""
    if parts.port is not None:
        return parts.port
    return 443 if parts.scheme == "https" else 80


def is_local_host(hostname: str) -> bool:
    """Loopback and private-network hosts (``localhost``, 127.0.0.1, 10/8, 172.16/12, 192.168/16)."""
    return (
        hostname in ("localhost", "127.0.0.1")
        or hostname.startswith(("192.168.", "10."))
        or _PRIVATE_172.match(hostname) is not None
    )


def _host(value: str) -> str:
    return (urlsplit(value).hostname or "").lower()


class UrlOptions(ValidatorOptions):
    """Options for ``url``.

    Attributes:
        protocols: Allowed schemes, without ``:``.
        allowed_domains: Host allowlist (subdomains included).
        blocked_domains: Host blocklist (subdomains included).
        allowed_ports: Port allowlist, using the scheme default when absent.
        blocked_ports: Port blocklist.
        must_have_query / must_not_have_query: Query string policy.
        must_have_fragment / must_not_have_fragment: Fragment policy.
        allow_localhost: When False, loopback and private hosts fail with ``localhost``.
        block_localhost: When True, loopback and private hosts fail with ``noLocalhost``.
    """

    min: int | None = None
    max: int | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    protocols: tuple[str, ...] | None = None
    allowed_domains: tuple[str, ...] | None = None
    blocked_domains: tuple[str, ...] | None = None
    allowed_ports: tuple[int, ...] | None = None
    blocked_ports: tuple[int, ...] | None = None
    path_starts_with: str | None = None
    path_ends_with: str | None = None
    must_have_query: bool = False
    must_not_have_query: bool = False
    must_have_fragment: bool = False
    must_not_have_fragment: bool = False
    allow_localhost: bool = True
    block_localhost: bool = False
    default_value: str | None = None

    @field_validator("excludes", "protocols", "allowed_domains", "blocked_domains", mode="before")
    @classmethod
    def accept_single_value(cls, v: Any) -> Any:
        return as_tuple(v)


def url(options: UrlOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a URL validator.

    Keys, in evaluation order: ``required``, ``invalid``, ``min``, ``max``,
    ``includes``, ``excludes``, ``protocol``, ``domain``, ``domainBlacklist``,
    ``port`` (allowlist, then blocklist), ``pathStartsWith``, ``pathEndsWith``,
    ``hasQuery``, ``noQuery``, ``hasFragment``, ``noFragment``,
    ``noLocalhost``, ``localhost``.

    Example:
        >>> url(protocols=["https"]).safe_parse("http://example.com").error.key
        'protocol'
    """
    opts = resolve_options(UrlOptions, options, kwargs)

    rules: list[Rule] = [Rule("invalid", is_url)]
    if opts.min is not None:
        rules.append(Rule("min", lambda v: len(v) >= opts.min, {"min": opts.min}))
    if opts.max is not None:
        rules.append(Rule("max", lambda v: len(v) <= opts.max, {"max": opts.max}))
    if opts.includes is not None:
        rules.append(Rule("includes", lambda v: opts.includes in v, {"includes": opts.includes}))
    if opts.excludes:
        rules.append(
            Rule(
                "excludes",
                lambda v: first_contained(v, opts.excludes) is None,
                lambda v: {"excludes": first_contained(v, opts.excludes)},
            )
        )
    if opts.protocols is not None:
        rules.append(
            Rule(
                "protocol",
                lambda v: urlsplit(v).scheme in opts.protocols,
                {"protocols": opts.protocols},
            )
        )
    if opts.allowed_domains is not None:
        rules.append(
            Rule(
                "domain",
                lambda v: domain_matches(_host(v), opts.allowed_domains, True),
                {"domains": opts.allowed_domains},
            )
        )
    if opts.blocked_domains:
        rules.append(
            Rule(
                "domainBlacklist",
                lambda v: not domain_matches(_host(v), opts.blocked_domains, True),
                lambda v: {
                    "domain": next(
                        d for d in opts.blocked_domains if domain_matches(_host(v), (d,), True)
                    )
                },
            )
        )
    if opts.allowed_ports is not None:
        rules.append(
            Rule(
                "port",
                lambda v: effective_port(urlsplit(v)) in opts.allowed_ports,
                lambda v: {"port": effective_port(urlsplit(v)), "ports": opts.allowed_ports},
            )
        )
    if opts.blocked_ports:
        rules.append(
            Rule(
                "port",
                lambda v: effective_port(urlsplit(v)) not in opts.blocked_ports,
                lambda v: {"port": effective_port(urlsplit(v))},
            )
        )
    if opts.path_starts_with:
        rules.append(
            Rule(
                "pathStartsWith",
                lambda v: (urlsplit(v).path or "/").startswith(opts.path_starts_with),
                {"path": opts.path_starts_with},
            )
        )
    if opts.path_ends_with:
        rules.append(
            Rule(
                "pathEndsWith",
                lambda v: (urlsplit(v).path or "/").endswith(opts.path_ends_with),
                {"path": opts.path_ends_with},
            )
        )
    if opts.must_have_query:
        rules.append(Rule("hasQuery", lambda v: bool(urlsplit(v).query)))
    if opts.must_not_have_query:
        rules.append(Rule("noQuery", lambda v: not urlsplit(v).query))
    if opts.must_have_fragment:
        rules.append(Rule("hasFragment", lambda v: bool(urlsplit(v).fragment)))
    if opts.must_not_have_fragment:
        rules.append(Rule("noFragment", lambda v: not urlsplit(v).fragment))
    if opts.block_localhost:
        rules.append(Rule("noLocalhost", lambda v: not is_local_host(_host(v))))
    if not opts.allow_localhost:
        rules.append(Rule("localhost", lambda v: not is_local_host(_host(v))))

    return Validator(
        "url",
        namespace="common.url",
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
