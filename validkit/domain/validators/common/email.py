"""Email addresses.

Format is checked with the ``email-validator`` library (no DNS lookups).
Domain policies run after the format check in a fixed order: business-only,
blacklist, allowlist, disposable.
"""

from functools import partial
from typing import Any

from email_validator import EmailNotValidError, validate_email as _check_email_syntax
from pydantic import field_validator

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.common.text import as_tuple, first_contained
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, prepare_text

FREE_EMAIL_DOMAINS: tuple[str, ...] = (
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "icloud.com",
    "aol.com",
    "protonmail.com",
    "zoho.com",
)

DISPOSABLE_EMAIL_DOMAINS: tuple[str, ...] = (
    "10minutemail.com",
    "tempmail.org",
    "guerrillamail.com",
    "mailinator.com",
    "yopmail.com",
    "temp-mail.org",
    "throwaway.email",
    "getnada.com",
    "maildrop.cc",
)


def is_email_syntax_valid(value: str) -> bool:
    """Check address syntax without deliverability (DNS) checks."""
    try:
        _check_email_syntax(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def email_domain(value: str) -> str:
    """Return the lowercased domain part of an address."""
    return value.rpartition("@")[2].lower()


def domain_matches(domain: str, candidates: tuple[str, ...], allow_subdomains: bool) -> bool:
    """True when ``domain`` equals one of ``candidates`` (or is a subdomain of one)."""
    for candidate in candidates:
        candidate = candidate.lower()
        if domain == candidate or (allow_subdomains and domain.endswith("." + candidate)):
            return True
    return False


class EmailOptions(ValidatorOptions):
    """Options for ``email``.

    Attributes:
        domain: Allowed domain(s).
        domain_blacklist: Rejected domains.
        min_length: Minimum address length.
        max_length: Maximum address length.
        includes: Required substring.
        excludes: Forbidden substring(s).
        allow_subdomains: Domain lists also match their subdomains.
        business_only: Reject free providers (``FREE_EMAIL_DOMAINS``).
        no_disposable: Reject disposable providers (``DISPOSABLE_EMAIL_DOMAINS``).
        lowercase: Lowercase the whole address.
    """

    domain: tuple[str, ...] | None = None
    domain_blacklist: tuple[str, ...] = ()
    min_length: int | None = None
    max_length: int | None = None
    includes: str | None = None
    excludes: tuple[str, ...] | None = None
    allow_subdomains: bool = True
    business_only: bool = False
    no_disposable: bool = False
    lowercase: bool = True
    default_value: str | None = None

    @field_validator("domain", "excludes", mode="before")
    @classmethod
    def accept_single_value(cls, v: Any) -> Any:
        return as_tuple(v)


def email(options: EmailOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build an email validator.

    Keys, in evaluation order: ``required``, ``invalid``, ``minLength``,
    ``maxLength``, ``includes``, ``excludes``, ``businessOnly``,
    ``domainBlacklist``, ``domain``, ``noDisposable``.

    Example:
        >>> email(business_only=True).safe_parse("user@gmail.com").error.key
        'businessOnly'
    """
    opts = resolve_options(EmailOptions, options, kwargs)
    subdomains = opts.allow_subdomains

    rules: list[Rule] = [Rule("invalid", is_email_syntax_valid)]
    if opts.min_length is not None:
        rules.append(
            Rule("minLength", lambda v: len(v) >= opts.min_length, {"minLength": opts.min_length})
        )
    if opts.max_length is not None:
        rules.append(
            Rule("maxLength", lambda v: len(v) <= opts.max_length, {"maxLength": opts.max_length})
        )
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
    if opts.business_only:
        rules.append(
            Rule(
                "businessOnly",
                lambda v: not domain_matches(email_domain(v), FREE_EMAIL_DOMAINS, subdomains),
            )
        )
    if opts.domain_blacklist:
        rules.append(
            Rule(
                "domainBlacklist",
                lambda v: not domain_matches(email_domain(v), opts.domain_blacklist, subdomains),
                lambda v: {"domain": email_domain(v)},
            )
        )
    if opts.domain is not None:
        rules.append(
            Rule(
                "domain",
                lambda v: domain_matches(email_domain(v), opts.domain, subdomains),
                {"domain": opts.domain},
            )
        )
    if opts.no_disposable:
        rules.append(
            Rule(
                "noDisposable",
                lambda v: not domain_matches(email_domain(v), DISPOSABLE_EMAIL_DOMAINS, subdomains),
            )
        )

    return Validator(
        "email",
        namespace="common.email",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            casing=Casing.LOWER if opts.lowercase else Casing.NONE,
            transform=opts.transform,
        ),
        rules=rules,
        messages=opts.messages,
    )
