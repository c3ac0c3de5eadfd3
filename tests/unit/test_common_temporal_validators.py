"""Unit tests for date, time and datetime validators.

Tests cover:
- Token format parsing (padding, impossible dates, 12-hour clock)
- date(): formats, inclusive bounds, calendar rules against a frozen clock
- time(): formats, hour/minute/second rules, bounds, whitelist, custom regex
- datetime(): fixed formats, ISO/RFC/Unix, time zones, bounds, calendar rules
"""

from datetime import UTC, date as Date, datetime as DateTime, time as Time
from zoneinfo import ZoneInfo

import pytest
from freezegun import freeze_time
from pydantic import ValidationError as PydanticValidationError

from validkit.domain.validators.common import (
    DateTimeFormat,
    TimeFormat,
    date,
    datetime,
    format_datetime_value,
    normalize_time,
    parse_datetime_value,
    parse_time,
    time,
)
from validkit.domain.validators.common.temporal import format_with_tokens, parse_with_format


@pytest.mark.unit
class TestTokenFormats:
    """Test parse_with_format() and format_with_tokens()."""

    def test_parses_12_hour_clock(self):
        """Test hh/A tokens."""
        assert parse_with_format("2024-03-15 02:30 PM", "YYYY-MM-DD hh:mm A") == DateTime(
            2024, 3, 15, 14, 30
        )
        assert parse_with_format("2024-03-15 12:05 am", "YYYY-MM-DD hh:mm a") == DateTime(
            2024, 3, 15, 0, 5
        )

    def test_padding_is_strict(self):
        """Test padded and unpadded tokens."""
        assert parse_with_format("2024-3-5", "YYYY-MM-DD") is None
        assert parse_with_format("5/3/2024", "D/M/YYYY") == DateTime(2024, 3, 5)
        assert parse_with_format("05/3/2024", "D/M/YYYY") is None

    def test_impossible_dates(self):
        """Test Feb 30 and hour 13 on a 12-hour clock."""
        assert parse_with_format("2024-02-30", "YYYY-MM-DD") is None
        assert parse_with_format("13:00 PM", "hh:mm A") is None

    def test_literal_text(self):
        """Test bracketed literals."""
        assert parse_with_format("2024年03月", "YYYY[年]MM[月]") == DateTime(2024, 3, 1)

    def test_format_with_tokens(self):
        """Test rendering."""
        assert format_with_tokens(DateTime(2024, 3, 5, 14, 7), "DD/MM/YYYY hh:mm A") == (
            "05/03/2024 02:07 PM"
        )


@pytest.mark.unit
class TestDate:
    """Test date()."""

    def test_default_format(self):
        """Test YYYY-MM-DD."""
        assert date().parse("2024-03-15") == "2024-03-15"

    def test_invalid_format_message(self):
        """Test the format key carries the format."""
        result = date().safe_parse("2024-02-30")

        assert result.error.key == "format"
        assert result.error.message == "Must be in YYYY-MM-DD format"

    def test_custom_format(self):
        """Test another token format."""
        validator = date(format="DD/MM/YYYY")

        assert validator.is_valid("15/03/2024")
        assert not validator.is_valid("2024-03-15")

    def test_date_objects_rendered(self):
        """Test date and datetime inputs are rendered in the format."""
        assert date().parse(Date(2024, 3, 15)) == "2024-03-15"
        assert date(format="DD/MM/YYYY").parse(DateTime(2024, 3, 15, 9, 0)) == "15/03/2024"

    def test_bounds_are_inclusive(self):
        """Test min and max."""
        validator = date(min="2024-01-01", max="2024-12-31")

        assert validator.is_valid("2024-01-01")
        assert validator.is_valid("2024-12-31")
        assert validator.safe_parse("2023-12-31").error.message == "Date must be on or after 2024-01-01"
        assert validator.safe_parse("2025-01-01").error.key == "max"

    def test_bound_must_match_format(self):
        """Test malformed bounds fail at build time."""
        with pytest.raises(PydanticValidationError):
            date(min="01/01/2024")

    @freeze_time("2024-03-15")
    def test_past_future_today(self):
        """Test calendar rules against a frozen clock."""
        assert date(must_be_past=True).is_valid("2024-03-14")
        assert date(must_be_past=True).safe_parse("2024-03-15").error.message == "Date must be in the past"
        assert date(must_be_future=True).safe_parse("2024-03-15").error.key == "future"
        assert date(must_be_today=True).is_valid("2024-03-15")
        assert date(must_not_be_today=True).safe_parse("2024-03-15").error.key == "notToday"

    def test_weekday_and_weekend(self):
        """Test weekday rules (2024-03-16 is a Saturday)."""
        assert date(weekdays_only=True).safe_parse("2024-03-16").error.message == "Date must be a weekday"
        assert date(weekends_only=True).is_valid("2024-03-16")
        assert date(weekends_only=True).safe_parse("2024-03-15").error.key == "weekend"


@pytest.mark.unit
class TestParseTime:
    """Test time helpers."""

    def test_parse_time(self):
        """Test 12-hour conversion."""
        assert parse_time("12:15 AM", TimeFormat.HH_MM_A) == Time(0, 15)
        assert parse_time("12:00 PM", TimeFormat.HH_MM_A) == Time(12, 0)
        assert parse_time("23:59", TimeFormat.HH_MM) == Time(23, 59)
        assert parse_time("25:00", TimeFormat.HH_MM) is None

    def test_normalize_time(self):
        """Test zero-padded 24-hour output."""
        assert normalize_time("9:05", TimeFormat.HH_MM) == "09:05"
        assert normalize_time("02:30:15 PM", TimeFormat.HH_MM_SS_A) == "14:30:15"


@pytest.mark.unit
class TestTime:
    """Test time()."""

    @pytest.mark.parametrize("value", ["09:30", "9:30", "23:59", "00:00"])
    def test_valid_24_hour(self, value):
        """Test HH:mm."""
        assert time().is_valid(value)

    def test_invalid_format(self):
        """Test the format message."""
        assert time().safe_parse("24:00").error.message == "Must be in HH:mm format"

    def test_unpadded_hour_format(self):
        """Test H:mm rejects a leading zero."""
        assert time(format="H:mm").is_valid("9:30")
        assert not time(format="H:mm").is_valid("09:30")

    def test_12_hour(self):
        """Test hh:mm A with casing."""
        assert time(format="hh:mm A", casing="upper").parse("02:30 pm") == "02:30 PM"

    def test_bounds(self):
        """Test min and max in the configured format."""
        validator = time(min="09:00", max="17:00")

        assert validator.safe_parse("08:59").error.message == "Time must be after 09:00"
        assert validator.safe_parse("17:01").error.key == "max"
        assert validator.is_valid("17:00")

    def test_bounds_in_12_hour_format(self):
        """Test bounds compare by time of day."""
        validator = time(format="hh:mm A", min="09:00 AM")

        assert validator.safe_parse("08:30 AM").error.key == "min"
        assert validator.is_valid("01:00 PM")

    def test_bad_bound(self):
        """Test malformed bounds fail at build time."""
        with pytest.raises(PydanticValidationError):
            time(min="9am")

    def test_hours(self):
        """Test hour range and allowlist."""
        assert time(min_hour=9).safe_parse("08:00").error.message == "Hour must be between 9 and 23"
        result = time(allowed_hours=[9, 10]).safe_parse("11:00")
        assert result.error.key == "hour"
        assert result.error.message == "Hour must be between 9 and 10"

    def test_steps(self):
        """Test minute and second steps."""
        assert time(minute_step=15).safe_parse("09:20").error.message == (
            "Minutes must be in 15-minute intervals"
        )
        assert time(format="HH:mm:ss", second_step=30).safe_parse("09:00:15").error.key == "second"

    def test_whitelist(self):
        """Test whitelist accepts non-time values."""
        assert time(whitelist=["now"]).parse("now") == "now"

    def test_whitelist_only(self):
        """Test whitelist_only rejects other values."""
        result = time(whitelist=["09:00"], whitelist_only=True).safe_parse("10:00")

        assert result.error.message == "Time is not in the allowed list"

    def test_custom_regex(self):
        """Test regex replaces the format check."""
        validator = time(regex=r"^\d{4}$")

        assert validator.is_valid("0930")
        assert validator.safe_parse("09:30").error.message == "Invalid time format"


@pytest.mark.unit
class TestParseDateTime:
    """Test datetime helpers."""

    def test_unix_is_utc(self):
        """Test Unix timestamps."""
        assert parse_datetime_value("1710508245", DateTimeFormat.UNIX) == DateTime(
            2024, 3, 15, 13, 10, 45, tzinfo=UTC
        )

    def test_converted_into_zone(self):
        """Test aware values are converted to the configured zone."""
        parsed = parse_datetime_value("1710508245", DateTimeFormat.UNIX, ZoneInfo("Asia/Taipei"))

        assert parsed.hour == 21

    def test_naive_values_take_zone(self):
        """Test naive values are read as wall-clock time."""
        parsed = parse_datetime_value("2024-03-15 14:30", DateTimeFormat.YMD_HM, ZoneInfo("Asia/Taipei"))

        assert parsed.hour == 14
        assert parsed.utcoffset().total_seconds() == 8 * 3600

    @pytest.mark.parametrize(
        ("value", "fmt"),
        [
            ("2024-03-15T14:30:00Z", DateTimeFormat.ISO),
            ("2024-03-15T14:30:00.000Z", DateTimeFormat.ISO),
            ("Fri, 15 Mar 2024 14:30:00 GMT", DateTimeFormat.RFC),
            ("15/03/2024 14:30", DateTimeFormat.DMY_SLASH_HM),
            ("03/15/2024 02:30 PM", DateTimeFormat.MDY_SLASH_HM_12),
        ],
    )
    def test_formats(self, value, fmt):
        """Test parsing in several formats."""
        assert parse_datetime_value(value, fmt) is not None

    def test_iso_out_of_range(self):
        """Test ISO values that match the shape but not the calendar."""
        assert parse_datetime_value("2024-13-15T14:30:00Z", DateTimeFormat.ISO) is None

    def test_format_iso_in_utc(self):
        """Test ISO rendering."""
        value = DateTime(2024, 3, 15, 22, 30, tzinfo=ZoneInfo("Asia/Taipei"))

        assert format_datetime_value(value, DateTimeFormat.ISO) == "2024-03-15T14:30:00.000Z"


@pytest.mark.unit
class TestDateTime:
    """Test datetime()."""

    def test_default_format(self):
        """Test YYYY-MM-DD HH:mm."""
        assert datetime().parse("2024-03-15 14:30") == "2024-03-15 14:30"

    def test_format_message(self):
        """Test the format key."""
        assert datetime().safe_parse("2024-03-15T14:30").error.message == (
            "Must be in YYYY-MM-DD HH:mm format"
        )

    def test_datetime_objects_rendered(self):
        """Test datetime input is rendered in the format."""
        assert datetime().parse(DateTime(2024, 3, 15, 14, 30)) == "2024-03-15 14:30"

    def test_hours_and_minutes(self):
        """Test hour range and minute step."""
        assert datetime(min_hour=9, max_hour=17).safe_parse("2024-03-15 18:30").error.message == (
            "Hour must be between 9 and 17"
        )
        assert datetime(minute_step=15).safe_parse("2024-03-15 14:20").error.key == "minute"

    def test_string_bounds(self):
        """Test min/max written in the format."""
        validator = datetime(min="2024-01-01 00:00", max="2024-12-31 23:59")

        assert validator.safe_parse("2023-12-31 23:59").error.message == (
            "DateTime must be after 2024-01-01 00:00"
        )
        assert validator.is_valid("2024-01-01 00:00")

    def test_datetime_bound_rendered_in_message(self):
        """Test datetime bounds are shown in the format."""
        result = datetime(max=DateTime(2024, 12, 31, 23, 59)).safe_parse("2025-01-01 00:00")

        assert result.error.message == "DateTime must be before 2024-12-31 23:59"

    def test_unknown_timezone(self):
        """Test unknown zones fail at build time."""
        with pytest.raises(PydanticValidationError):
            datetime(timezone="Mars/Phobos")

    def test_iso(self):
        """Test ISO format."""
        validator = datetime(format="ISO")

        assert validator.is_valid("2024-03-15T14:30:00Z")
        assert validator.safe_parse("2024-13-15T14:30:00Z").error.key == "format"

    @freeze_time("2024-03-15 12:00:00")
    def test_past_future_today(self):
        """Test calendar rules against a frozen clock."""
        assert datetime(must_be_past=True).is_valid("2024-03-15 11:00")
        assert datetime(must_be_past=True).safe_parse("2024-03-15 13:00").error.message == (
            "DateTime must be in the past"
        )
        assert datetime(must_be_future=True).is_valid("2024-03-15 13:00")
        assert datetime(must_be_today=True).is_valid("2024-03-15 23:59")
        assert datetime(must_not_be_today=True).safe_parse("2024-03-15 00:00").error.key == "notToday"

    def test_weekday_and_weekend(self):
        """Test weekday rules (2024-03-16 is a Saturday)."""
        assert datetime(weekdays_only=True).safe_parse("2024-03-16 10:00").error.key == "weekday"
        assert datetime(weekends_only=True).is_valid("2024-03-16 10:00")

    def test_whitelist(self):
        """Test whitelist and whitelist_only."""
        assert datetime(whitelist=["TBD"]).parse("TBD") == "TBD"
        result = datetime(whitelist=["2024-03-15 14:30"], whitelist_only=True).safe_parse(
            "2024-03-15 15:00"
        )
        assert result.error.message == "DateTime is not in the allowed list"

    def test_custom_regex(self):
        """Test regex replaces the format check."""
        validator = datetime(regex=r"^\d{8}$")

        assert validator.parse("20240315") == "20240315"
        assert validator.safe_parse("2024").error.message == "Invalid datetime format"
