"""Message lookup and ``${param}`` interpolation."""

import re
from collections.abc import Mapping
from typing import Any

from validkit.i18n.catalogs import CATALOGS
from validkit.i18n.locale import get_locale, normalize_locale

_PLACEHOLDER = re.compile(r"\$\{(\w+)\}")


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(str(item) for item in value)
    return str(value)


def interpolate(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Replace ``${name}`` placeholders with values from ``params``.

    Missing parameters become empty strings; sequences are joined with ", ".

    Example:
        >>> interpolate("Must be at least ${min} characters", {"min": 5})
        'Must be at least 5 characters'
    """
    params = params or {}
    return _PLACEHOLDER.sub(lambda match: _display(params.get(match.group(1))), template)


def has_message(key: str, *, locale: str | None = None) -> bool:
    """Return True when the catalog for ``locale`` defines ``key``."""
    resolved = normalize_locale(locale) if locale else get_locale()
    return key in CATALOGS[resolved]


def t(
    key: str,
    params: Mapping[str, Any] | None = None,
    *,
    locale: str | None = None,
) -> str:
    """Translate a dotted message key.

    Args:
        key: Dotted key such as ``"taiwan.business_id.invalid"``.
        params: Values for ``${name}`` placeholders.
        locale: Locale to use instead of the current one.

    Returns:
        Interpolated message, or ``key`` itself when no catalog entry exists.
    """
    resolved = normalize_locale(locale) if locale else get_locale()
    template = CATALOGS[resolved].get(key)
    if template is None:
        return key
    return interpolate(template, params)
