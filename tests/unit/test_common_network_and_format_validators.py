"""Unit tests for url, ip, color, coordinate and credit_card validators.

Tests cover:
- url: absolute URL parsing, protocol/domain/port/path/query/fragment policies
- ip: versions, CIDR, leading zeros, whitelist
- color: hex/rgb/hsl forms, alpha handling, per-format keys
- coordinate: pairs, single values, precision
- credit_card: Luhn, brands, separators, whitelist
"""

import pytest

from validkit.domain.validators.common import (
    CardType,
    color,
    coordinate,
    credit_card,
    detect_card_type,
    ip,
    url,
    validate_ipv4,
)
from validkit.domain.validators.common.url import is_local_host, split_url


@pytest.mark.unit
class TestSplitUrl:
    """Test split_url()."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://www.example.com/path?q=1",
            "ftp://files.example.com",
            "http://localhost:8080",
            "mailto:user@company.com",
        ],
    )
    def test_valid(self, value):
        """Test absolute URLs."""
        assert split_url(value) is not None

    @pytest.mark.parametrize(
        "value", ["www.example.com", "http://", "http://host:99999", "https://exa mple.com", "not a url"]
    )
    def test_invalid(self, value):
        """Test relative, hostless and malformed URLs."""
        assert split_url(value) is None

    def test_local_hosts(self):
        """Test loopback and private ranges."""
        assert is_local_host("localhost")
        assert is_local_host("10.0.0.1")
        assert is_local_host("172.20.0.1")
        assert not is_local_host("172.32.0.1")
        assert not is_local_host("example.com")


@pytest.mark.unit
class TestUrl:
    """Test url()."""

    def test_valid(self):
        """Test the value is returned trimmed."""
        assert url().parse(" https://example.com ") == "https://example.com"

    def test_invalid_message(self):
        """Test invalid key and message."""
        assert url().safe_parse("example.com").error.message == "Invalid URL format"

    def test_protocols(self):
        """Test protocol allowlist."""
        result = url(protocols=["https"]).safe_parse("http://example.com")

        assert result.error.key == "protocol"
        assert result.error.message == "Protocol must be one of: https"

    def test_allowed_domains_include_subdomains(self):
        """Test domain allowlist."""
        validator = url(allowed_domains=["example.com"])

        assert validator.is_valid("https://api.example.com/v1")
        assert validator.safe_parse("https://other.org").error.message == (
            "Domain must be one of: example.com"
        )

    def test_blocked_domains(self):
        """Test domain blocklist names the matched domain."""
        result = url(blocked_domains=["evil.com", "bad.com"]).safe_parse("https://cdn.bad.com")

        assert result.error.key == "domainBlacklist"
        assert result.error.message == "Domain bad.com is not allowed"

    def test_allowed_ports_use_scheme_default(self):
        """Test 443/80 defaults against the port allowlist."""
        validator = url(allowed_ports=[443])

        assert validator.is_valid("https://example.com")
        assert validator.safe_parse("http://example.com").error.message == "Port 80 is not allowed"

    def test_blocked_ports(self):
        """Test port blocklist."""
        result = url(blocked_ports=[8080]).safe_parse("http://example.com:8080")

        assert result.error.message == "Port 8080 is not allowed"

    def test_path_rules(self):
        """Test path prefix and suffix."""
        assert url(path_starts_with="/api").is_valid("https://example.com/api/users")
        assert url(path_starts_with="/api").safe_parse("https://example.com").error.key == (
            "pathStartsWith"
        )
        assert url(path_ends_with=".json").safe_parse("https://example.com/a.xml").error.message == (
            "Path must end with .json"
        )

    def test_query_and_fragment_rules(self):
        """Test query and fragment policies."""
        assert url(must_have_query=True).safe_parse("https://example.com").error.key == "hasQuery"
        assert url(must_not_have_query=True).safe_parse("https://example.com?a=1").error.key == "noQuery"
        assert url(must_have_fragment=True).safe_parse("https://example.com").error.key == "hasFragment"
        assert url(must_not_have_fragment=True).safe_parse("https://example.com#top").error.key == (
            "noFragment"
        )

    def test_localhost_policies(self):
        """Test both localhost switches."""
        assert url(allow_localhost=False).safe_parse("http://localhost:3000").error.key == "localhost"
        assert url(block_localhost=True).safe_parse("http://192.168.1.1").error.key == "noLocalhost"
        assert url().is_valid("http://localhost:3000")

    def test_length(self):
        """Test min/max length."""
        assert url(max=20).safe_parse("https://example.com/long/path").error.key == "max"


@pytest.mark.unit
class TestIp:
    """Test ip()."""

    def test_leading_zeros_rejected(self):
        """Test octets with leading zeros."""
        assert validate_ipv4("192.168.1.1")
        assert not validate_ipv4("192.168.001.1")

    @pytest.mark.parametrize("value", ["192.168.1.1", "2001:db8::1", "::1", "::ffff:192.168.1.1"])
    def test_any_version(self, value):
        """Test v4 and v6 forms."""
        assert ip().is_valid(value)

    def test_version_keys(self):
        """Test per-version keys."""
        assert ip(version="v4").safe_parse("::1").error.message == "Must be a valid IPv4 address"
        assert ip(version="v6").safe_parse("10.0.0.1").error.key == "notIPv6"

    def test_zone_id_rejected(self):
        """Test IPv6 zone ids."""
        assert ip().safe_parse("fe80::1%eth0").error.key == "invalid"

    def test_cidr(self):
        """Test CIDR suffix handling."""
        assert ip().safe_parse("10.0.0.0/8").error.key == "invalid"
        assert ip(allow_cidr=True).is_valid("10.0.0.0/8")
        assert ip(allow_cidr=True).is_valid("2001:db8::/32")
        assert not ip(allow_cidr=True).is_valid("10.0.0.0/33")
        assert not ip(allow_cidr=True).is_valid("10.0.0.0/x")

    def test_whitelist(self):
        """Test whitelist is exclusive."""
        validator = ip(whitelist=["10.0.0.1"])

        assert validator.is_valid("10.0.0.1")
        assert validator.safe_parse("10.0.0.2").error.message == "IP address is not in the allowed list"


@pytest.mark.unit
class TestColor:
    """Test color()."""

    @pytest.mark.parametrize(
        "value",
        ["#fff", "#FF0000", "#ff000080", "rgb(255, 0, 128)", "rgba(0,0,0,0.5)", "hsl(120, 50%, 50%)"],
    )
    def test_valid(self, value):
        """Test every supported form."""
        assert color().is_valid(value)

    @pytest.mark.parametrize(
        "value", ["#ff0000f", "fff", "rgb(256, 0, 0)", "rgb(0,0,0,0.5)", "rgba(0,0,0)", "hsl(361, 50%, 50%)"]
    )
    def test_invalid(self, value):
        """Test out-of-range and mismatched alpha forms."""
        assert color().safe_parse(value).error.message == "Invalid color format"

    def test_alpha_can_be_disabled(self):
        """Test allow_alpha=False."""
        assert not color(allow_alpha=False).is_valid("#ff000080")
        assert not color(allow_alpha=False).is_valid("rgba(0,0,0,0.5)")

    def test_single_format_keys(self):
        """Test per-format keys."""
        assert color(format="hex").safe_parse("rgb(0,0,0)").error.message == "Must be a valid hex color"
        assert color(format="rgb").safe_parse("#000").error.key == "notRgb"
        assert color(format="hsl").safe_parse("#000").error.key == "notHsl"

    def test_multiple_formats_report_invalid(self):
        """Test a format list uses the generic key."""
        validator = color(format=["hex", "rgb"])

        assert validator.is_valid("rgb(0,0,0)")
        assert validator.safe_parse("hsl(0, 0%, 0%)").error.key == "invalid"


@pytest.mark.unit
class TestCoordinate:
    """Test coordinate()."""

    def test_pair(self):
        """Test a valid pair is returned as entered."""
        assert coordinate().parse("25.0330, 121.5654") == "25.0330, 121.5654"

    @pytest.mark.parametrize(
        ("value", "key"),
        [("abc", "invalid"), ("1,2,3", "invalid"), ("91, 0", "invalidLatitude"), ("0, 181", "invalidLongitude")],
    )
    def test_pair_errors(self, value, key):
        """Test shape and range keys."""
        assert coordinate().safe_parse(value).error.key == key

    def test_messages(self):
        """Test range messages."""
        assert coordinate().safe_parse("-91,0").error.message == "Latitude must be between -90 and 90"

    def test_single_values(self):
        """Test latitude and longitude types."""
        assert coordinate(type="latitude").is_valid("45.5")
        assert coordinate(type="latitude").safe_parse("-91").error.key == "invalidLatitude"
        assert coordinate(type="longitude").is_valid("-179.9")
        assert coordinate(type="longitude").safe_parse("x").error.key == "invalidLongitude"

    def test_precision(self):
        """Test decimal place limit."""
        validator = coordinate(precision=2)

        assert validator.is_valid("25.03, 121.56")
        assert validator.safe_parse("25.033, 121.56").error.key == "invalid"


@pytest.mark.unit
class TestCreditCard:
    """Test credit_card()."""

    def test_separators_removed(self):
        """Test spaces and dashes are stripped."""
        assert credit_card().parse("5555 5555 5555 4444") == "5555555555554444"
        assert credit_card().parse("4111-1111-1111-1111") == "4111111111111111"

    def test_luhn_failure(self):
        """Test checksum failure."""
        result = credit_card().safe_parse("4111111111111112")

        assert result.error.key == "invalid"
        assert result.error.message == "Invalid credit card number"

    def test_length(self):
        """Test too short numbers."""
        assert not credit_card().is_valid("4111")

    @pytest.mark.parametrize(
        ("value", "card_type"),
        [
            ("4111111111111111", CardType.VISA),
            ("5555555555554444", CardType.MASTERCARD),
            ("378282246310005", CardType.AMEX),
            ("3530111333300000", CardType.JCB),
            ("6011111111111117", CardType.DISCOVER),
        ],
    )
    def test_detect_card_type(self, value, card_type):
        """Test brand detection by prefix."""
        assert detect_card_type(value) == card_type

    def test_brand_restriction(self):
        """Test card_type restriction reports invalid."""
        validator = credit_card(card_type=["visa", "mastercard"])

        assert validator.is_valid("4111111111111111")
        assert validator.safe_parse("378282246310005").error.key == "invalid"

    def test_whitelist(self):
        """Test whitelist compares digits only."""
        validator = credit_card(whitelist=["4111-1111-1111-1111"])

        assert validator.is_valid("4111 1111 1111 1111")
        assert validator.safe_parse("5555555555554444").error.key == "notInWhitelist"
