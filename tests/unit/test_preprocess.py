"""Unit tests for shared string preprocessing.

Tests cover:
- to_title_case / apply_trim / apply_casing
- coerce_text: scalar to text conversion
- chain: left-to-right composition
- prepare_text: empty handling, default, trim, casing, transform order
"""

import pytest

from validkit.domain.validators.preprocess import (
    Casing,
    TrimMode,
    apply_casing,
    apply_trim,
    chain,
    coerce_text,
    is_empty,
    prepare_text,
    to_title_case,
)


@pytest.mark.unit
class TestStringSteps:
    """Test the individual string steps."""

    def test_title_case(self):
        """Test each word is capitalized and the rest lowercased."""
        assert to_title_case("hELLO wORLD") == "Hello World"
        assert to_title_case("it's a test") == "It's A Test"

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (TrimMode.TRIM, "a b"),
            (TrimMode.TRIM_START, "a b  "),
            (TrimMode.TRIM_END, "  a b"),
            (TrimMode.NONE, "  a b  "),
        ],
    )
    def test_apply_trim(self, mode, expected):
        """Test every trim mode."""
        assert apply_trim("  a b  ", mode) == expected

    @pytest.mark.parametrize(
        ("casing", "expected"),
        [
            (Casing.UPPER, "TAIPEI CITY"),
            (Casing.LOWER, "taipei city"),
            (Casing.TITLE, "Taipei City"),
            (Casing.NONE, "taipei CITY"),
        ],
    )
    def test_apply_casing(self, casing, expected):
        """Test every casing mode."""
        assert apply_casing("taipei CITY", casing) == expected

    def test_chain_skips_none(self):
        """Test steps run left to right and None steps are skipped."""
        run = chain(str.strip, None, str.upper)

        assert run("  ab ") == "AB"

    def test_empty_chain_is_identity(self):
        """Test an empty chain returns its input."""
        assert chain()("x") == "x"


@pytest.mark.unit
class TestCoerceText:
    """Test coerce_text()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(None, None), ("abc", "abc"), (12, "12"), (1.5, "1.5"), (True, "true"), (False, "false")],
    )
    def test_coerce(self, raw, expected):
        """Test scalars become text and None stays None."""
        assert coerce_text(raw) == expected

    def test_is_empty(self):
        """Test only None and the empty string count as empty."""
        assert is_empty(None)
        assert is_empty("")
        assert not is_empty(" ")
        assert not is_empty(0)


@pytest.mark.unit
class TestPrepareText:
    """Test prepare_text()."""

    def test_empty_required_stays_empty_string(self):
        """Test required empty input is kept as '' for the required check."""
        assert prepare_text(None, required=True) == ""
        assert prepare_text("   ", required=True) == ""

    def test_empty_optional_becomes_none(self):
        """Test optional empty input becomes None."""
        assert prepare_text("   ", required=False) is None

    def test_default_is_trimmed(self):
        """Test default replaces empty input and is normalized."""
        assert prepare_text("", required=True, default=" x ") == "x"

    def test_default_is_cased(self):
        """Test casing also applies to the default."""
        assert prepare_text(None, required=False, default="abc", casing=Casing.UPPER) == "ABC"

    def test_trim_none_keeps_whitespace(self):
        """Test whitespace-only input is not empty without trimming."""
        assert prepare_text("  ", required=True, trim=TrimMode.NONE) == "  "

    def test_transform_runs_last(self):
        """Test transform sees the trimmed, cased value."""
        seen = []

        def transform(value):
            seen.append(value)
            return value + "!"

        assert prepare_text(" ab ", required=True, casing=Casing.UPPER, transform=transform) == "AB!"
        assert seen == ["AB"]

    def test_non_string_input(self):
        """Test numbers are converted before trimming."""
        assert prepare_text(12345678, required=True) == "12345678"
