"""Current-locale selection.

The current locale is stored in a ``ContextVar``: every thread and every
asyncio task sees its own value, so concurrent validations in different
locales do not interfere. When no locale has been set for the context,
``Settings.default_locale`` applies.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from validkit.core.config import get_settings
from validkit.core.errors import UnsupportedLocaleError

SUPPORTED_LOCALES: tuple[str, ...] = ("en-US", "zh-TW")

_ALIASES: dict[str, str] = {
    "en": "en-US",
    "en-us": "en-US",
    "en_us": "en-US",
    "zh": "zh-TW",
    "zh-tw": "zh-TW",
    "zh_tw": "zh-TW",
    "zh-hant": "zh-TW",
    "zh-hant-tw": "zh-TW",
}

_current_locale: ContextVar[str | None] = ContextVar("validkit_locale", default=None)


def normalize_locale(tag: str) -> str:
    """Map a locale tag or alias to a supported catalog name.

    Args:
        tag: Locale tag such as ``"en"``, ``"en-US"`` or ``"zh-Hant"``.

    Returns:
        One of ``SUPPORTED_LOCALES``.

    Raises:
        UnsupportedLocaleError: If no catalog exists for ``tag``.

    Example:
        >>> normalize_locale("EN")
        'en-US'
    """
    normalized = _ALIASES.get(tag.strip().lower())
    if normalized is None:
        raise UnsupportedLocaleError(tag)
    return normalized


def set_locale(tag: str) -> None:
    """Set the locale for the current context."""
    _current_locale.set(normalize_locale(tag))


def get_locale() -> str:
    """Return the locale of the current context (or the configured default)."""
    current = _current_locale.get()
    if current is not None:
        return current
    return normalize_locale(get_settings().default_locale)


def reset_locale() -> None:
    """Forget the locale set for the current context."""
    _current_locale.set(None)


@contextmanager
def use_locale(tag: str) -> Iterator[str]:
    """Temporarily switch the current locale.

    Example:
        >>> with use_locale("en"):
        ...     business_id().safe_parse("123")
    """
    normalized = normalize_locale(tag)
    token = _current_locale.set(normalized)
    try:
        yield normalized
    finally:
        _current_locale.reset(token)
