"""Unit tests for the locale message store.

Tests cover:
- Locale normalization and aliases
- set_locale / get_locale / use_locale scoping
- Context isolation between threads
- t() lookup, interpolation and missing-key behavior
- Catalog parity between en-US and zh-TW
"""

import os
import threading
from unittest.mock import patch

import pytest

from validkit.core.config import get_settings
from validkit.core.errors import UnsupportedLocaleError
from validkit.i18n import (
    CATALOGS,
    SUPPORTED_LOCALES,
    get_locale,
    has_message,
    interpolate,
    normalize_locale,
    reset_locale,
    set_locale,
    t,
    use_locale,
)
from validkit.i18n.catalogs import flatten_catalog


@pytest.mark.unit
class TestNormalizeLocale:
    """Test normalize_locale()."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("en", "en-US"),
            ("EN-us", "en-US"),
            ("en_US", "en-US"),
            ("zh", "zh-TW"),
            ("zh-TW", "zh-TW"),
            ("zh-Hant", "zh-TW"),
            (" zh-hant-tw ", "zh-TW"),
        ],
    )
    def test_aliases(self, tag, expected):
        """Test aliases map to supported catalogs."""
        assert normalize_locale(tag) == expected

    def test_unsupported_locale_raises(self):
        """Test unknown tags raise UnsupportedLocaleError."""
        with pytest.raises(UnsupportedLocaleError):
            normalize_locale("fr-FR")

    def test_set_locale_rejects_unknown(self):
        """Test set_locale validates its argument."""
        with pytest.raises(ValueError):
            set_locale("xx")

    def test_supported_locales(self):
        """Test both catalogs ship."""
        assert SUPPORTED_LOCALES == ("en-US", "zh-TW")
        assert set(CATALOGS) == set(SUPPORTED_LOCALES)


@pytest.mark.unit
class TestCurrentLocale:
    """Test current-locale storage."""

    def test_set_and_get(self):
        """Test set_locale() changes get_locale()."""
        set_locale("zh")
        assert get_locale() == "zh-TW"

    def test_use_locale_restores_previous(self):
        """Test use_locale() scopes the switch."""
        with use_locale("zh-TW") as active:
            assert active == "zh-TW"
            assert get_locale() == "zh-TW"
        assert get_locale() == "en-US"

    def test_use_locale_restores_on_error(self):
        """Test the previous locale is restored when the block raises."""
        with pytest.raises(RuntimeError):
            with use_locale("zh-TW"):
                raise RuntimeError("boom")
        assert get_locale() == "en-US"

    def test_default_from_settings_when_unset(self):
        """Test get_locale() falls back to Settings.default_locale."""
        reset_locale()
        get_settings.cache_clear()
        try:
            with patch.dict(os.environ, {"VALIDKIT_DEFAULT_LOCALE": "en"}):
                get_settings.cache_clear()
                assert get_locale() == "en-US"
            get_settings.cache_clear()
            with patch.dict(os.environ, {"VALIDKIT_DEFAULT_LOCALE": "zh-TW"}):
                assert get_locale() == "zh-TW"
        finally:
            get_settings.cache_clear()

    def test_locale_is_isolated_per_thread(self):
        """Test a locale set in another thread does not leak."""
        seen: list[str] = []

        def worker():
            set_locale("zh-TW")
            seen.append(get_locale())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == ["zh-TW"]
        assert get_locale() == "en-US"


@pytest.mark.unit
class TestTranslate:
    """Test t() and interpolate()."""

    def test_translates_in_current_locale(self):
        """Test lookup follows the current locale."""
        assert t("common.required") == "Required"
        with use_locale("zh-TW"):
            assert t("common.required") == "必填"

    def test_explicit_locale_argument(self):
        """Test locale= overrides the current locale."""
        assert t("common.required", locale="zh") == "必填"

    def test_interpolates_params(self):
        """Test ${name} placeholders are replaced."""
        assert t("common.text.minLength", {"minLength": 5}) == "Must be at least 5 characters"

    def test_missing_param_becomes_empty(self):
        """Test missing parameters render as empty strings."""
        assert t("common.text.minLength") == "Must be at least  characters"

    def test_missing_key_returns_key(self):
        """Test unknown keys are returned unchanged."""
        assert t("common.nothing.here") == "common.nothing.here"

    def test_sequences_are_joined(self):
        """Test list params render comma separated."""
        assert interpolate("${a}", {"a": [".jpg", ".png"]}) == ".jpg, .png"

    def test_has_message(self):
        """Test has_message() reports catalog membership."""
        assert has_message("taiwan.business_id.invalid")
        assert not has_message("taiwan.business_id.required")


@pytest.mark.unit
class TestCatalogs:
    """Test shipped catalogs."""

    def test_flatten_catalog(self):
        """Test nested dicts become dotted keys."""
        tree = {"common": {"required": "R", "text": {"minLength": "M"}}}

        assert flatten_catalog(tree) == {"common.required": "R", "common.text.minLength": "M"}

    def test_locales_define_the_same_keys(self):
        """Test en-US and zh-TW have identical key sets."""
        assert set(CATALOGS["en-US"]) == set(CATALOGS["zh-TW"])

    def test_templates_are_non_empty_strings(self):
        """Test every template is a non-empty string."""
        for locale, catalog in CATALOGS.items():
            for key, template in catalog.items():
                assert isinstance(template, str) and template.strip(), f"{locale}:{key}"
