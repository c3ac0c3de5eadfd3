"""Pytest configuration.

Every test runs with the en-US locale so message assertions are stable,
regardless of ``VALIDKIT_DEFAULT_LOCALE``. The locale is reset afterwards.
"""

import pytest

from validkit.i18n import reset_locale, set_locale


@pytest.fixture(autouse=True)
def english_locale():
    """Force en-US for the duration of each test."""
    set_locale("en-US")
    yield
    reset_locale()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests without external dependencies")
