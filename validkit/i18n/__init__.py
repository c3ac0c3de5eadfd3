"""Locale-keyed message catalogs.

Usage:
    from validkit.i18n import set_locale, t, use_locale

    set_locale("en")
    t("common.required")  # "Required"

    with use_locale("zh-TW"):
        t("common.required")  # "必填"
"""

from validkit.i18n.catalogs import CATALOGS
from validkit.i18n.locale import (
    SUPPORTED_LOCALES,
    get_locale,
    normalize_locale,
    reset_locale,
    set_locale,
    use_locale,
)
from validkit.i18n.messages import has_message, interpolate, t

__all__ = [
    "CATALOGS",
    "SUPPORTED_LOCALES",
    "get_locale",
    "has_message",
    "interpolate",
    "normalize_locale",
    "reset_locale",
    "set_locale",
    "t",
    "use_locale",
]
