"""Unit tests for text, email and password validators.

Tests cover:
- text: trimming, casing, length and content rules, regex
- email: syntax, lowercase, domain policies and their order
- password: composition rules, weak patterns, strength score
"""

import pytest

from validkit.domain.validators.common import (
    PasswordStrength,
    calculate_password_strength,
    email,
    password,
    text,
)


@pytest.mark.unit
class TestText:
    """Test text()."""

    def test_defaults_trim(self):
        """Test default trimming."""
        assert text().parse("  hello ") == "hello"

    @pytest.mark.parametrize(
        ("trim_mode", "expected"),
        [("trim_start", "hi  "), ("trim_end", "  hi"), ("none", "  hi  ")],
    )
    def test_trim_modes(self, trim_mode, expected):
        """Test each trim mode."""
        assert text(trim_mode=trim_mode).parse("  hi  ") == expected

    @pytest.mark.parametrize(
        ("casing", "expected"),
        [("upper", "HELLO WORLD"), ("lower", "hello world"), ("title", "Hello World")],
    )
    def test_casing(self, casing, expected):
        """Test case conversion."""
        assert text(casing=casing).parse("hELLO wORLD") == expected

    def test_length_rules(self):
        """Test min/max length keys and messages."""
        validator = text(min_length=3, max_length=5)

        assert validator.safe_parse("ab").error.message == "Must be at least 3 characters"
        assert validator.safe_parse("abcdef").error.message == "Must be at most 5 characters"
        assert validator.is_valid("abcd")

    def test_content_rules(self):
        """Test startsWith, endsWith and includes."""
        validator = text(starts_with="INV-", ends_with="-TW", includes="2024")

        assert validator.safe_parse("X-2024-TW").error.key == "startsWith"
        assert validator.safe_parse("INV-2024-US").error.key == "endsWith"
        assert validator.safe_parse("INV-2023-TW").error.message == "Must include 2024"
        assert validator.is_valid("INV-2024-TW")

    def test_excludes_reports_first_match(self):
        """Test excludes names the substring that was found."""
        validator = text(excludes=["foo", "bar"])

        assert validator.safe_parse("a bar b").error.message == "Must not contain bar"

    def test_single_exclude_string(self):
        """Test a single string is accepted for excludes."""
        assert not text(excludes="spam").is_valid("no spam")

    def test_regex(self):
        """Test regex failures report invalid."""
        validator = text(regex=r"^[a-z]+$")

        assert validator.is_valid("abc")
        assert validator.safe_parse("abc1").error.message == "Invalid format"

    def test_not_empty_without_trim(self):
        """Test whitespace-only values with trimming disabled."""
        validator = text(trim_mode="none", not_empty=True)

        assert validator.safe_parse("   ").error.key == "notEmpty"

    def test_default_value(self):
        """Test empty input takes the default."""
        assert text(default_value="n/a").parse("") == "n/a"

    def test_transform_runs_last(self):
        """Test the transform hook sees normalized input."""
        assert text(casing="upper", transform=lambda s: s + "!").parse(" hi ") == "HI!"

    def test_zh_tw_message(self):
        """Test zh-TW message."""
        assert text(min_length=3).safe_parse("a", locale="zh-TW").error.message == (
            "長度至少 3 個字元"
        )


@pytest.mark.unit
class TestEmail:
    """Test email()."""

    def test_lowercases(self):
        """Test addresses are lowercased by default."""
        assert email().parse(" John.Doe@Company.COM ") == "john.doe@company.com"

    def test_keep_case(self):
        """Test lowercase=False keeps case."""
        assert email(lowercase=False).parse("John@Company.com") == "John@Company.com"

    @pytest.mark.parametrize("value", ["plainaddress", "a@", "@company.com", "a b@company.com"])
    def test_invalid_syntax(self, value):
        """Test malformed addresses."""
        result = email().safe_parse(value)

        assert result.error.key == "invalid"
        assert result.error.message == "Invalid email format"

    def test_business_only(self):
        """Test free providers are rejected."""
        validator = email(business_only=True)

        assert validator.safe_parse("user@gmail.com").error.key == "businessOnly"
        assert validator.is_valid("user@company.com")

    def test_domain_allowlist(self):
        """Test domain restriction with subdomains."""
        validator = email(domain="company.com")

        assert validator.is_valid("a@company.com")
        assert validator.is_valid("a@mail.company.com")
        assert validator.safe_parse("a@other.com").error.message == (
            "Must be under the domain @company.com"
        )

    def test_domain_allowlist_without_subdomains(self):
        """Test allow_subdomains=False."""
        assert not email(domain="company.com", allow_subdomains=False).is_valid("a@mail.company.com")

    def test_domain_blacklist(self):
        """Test blacklisted domains report the domain."""
        result = email(domain_blacklist=["spam.com"]).safe_parse("a@spam.com")

        assert result.error.key == "domainBlacklist"
        assert result.error.message == "Email domain spam.com is not allowed"

    def test_no_disposable(self):
        """Test disposable providers are rejected."""
        assert email(no_disposable=True).safe_parse("a@mailinator.com").error.key == "noDisposable"

    def test_blacklist_checked_before_allowlist(self):
        """Test policy order."""
        validator = email(domain="spam.com", domain_blacklist=["spam.com"])

        assert validator.safe_parse("a@spam.com").error.key == "domainBlacklist"


@pytest.mark.unit
class TestPasswordStrength:
    """Test calculate_password_strength()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("password", PasswordStrength.WEAK),
            ("Passw0rd", PasswordStrength.MEDIUM),
            ("Str0ng!Passw0rd", PasswordStrength.STRONG),
            ("Tr0ub4dor&Zebra!", PasswordStrength.VERY_STRONG),
        ],
    )
    def test_levels(self, value, expected):
        """Test each strength level."""
        assert calculate_password_strength(value) == expected

    def test_rank_order(self):
        """Test ranks increase with strength."""
        assert PasswordStrength.WEAK.rank < PasswordStrength.VERY_STRONG.rank


@pytest.mark.unit
class TestPassword:
    """Test password()."""

    def test_not_trimmed(self):
        """Test whitespace is preserved."""
        assert password().parse(" secret ") == " secret "

    def test_composition_rules_in_order(self):
        """Test keys are checked in declaration order."""
        validator = password(min=8, uppercase=True, lowercase=True, digits=True, special=True)

        assert validator.safe_parse("short").error.key == "min"
        assert validator.safe_parse("alllowercase").error.key == "uppercase"
        assert validator.safe_parse("ALLUPPERCASE").error.key == "lowercase"
        assert validator.safe_parse("NoDigitsHere").error.key == "digits"
        assert validator.safe_parse("NoSpecial1").error.message == (
            "Must include at least one special character"
        )
        assert validator.is_valid("Str0ng!Passw0rd")

    def test_weak_patterns(self):
        """Test repeating, sequential and common-word checks."""
        assert password(no_repeating=True).safe_parse("aaab").error.key == "noRepeating"
        assert password(no_sequential=True).safe_parse("xabcx").error.key == "noSequential"
        assert password(no_common_words=True).safe_parse("MyPassword!").error.key == "noCommonWords"

    def test_min_strength(self):
        """Test minimum strength."""
        result = password(min_strength="strong").safe_parse("password")

        assert result.error.message == "Password strength must be at least strong"
        assert password(min_strength=PasswordStrength.STRONG).is_valid("Str0ng!Passw0rd")

    def test_max(self):
        """Test max length."""
        assert password(max=4).safe_parse("12345").error.message == "Must be at most 4 characters"
