"""Token-based date/time format strings (``YYYY-MM-DD hh:mm A`` style).

Supported tokens:

========  ==========================================
``YYYY``  four-digit year
``MM``    month, two digits; ``M`` without padding
``DD``    day, two digits; ``D`` without padding
``HH``    hour 00-23; ``H`` without padding
``hh``    hour 01-12; ``h`` without padding
``mm``    minute, two digits
``ss``    second, two digits
``A``     ``AM``/``PM``; ``a`` lowercase
``[..]``  literal text
========  ==========================================

Parsing is strict: padded tokens require their padding, unpadded tokens
reject a leading zero, and impossible dates (Feb 30) are rejected.
"""

import re
from datetime import date, datetime
from functools import lru_cache

_TOKEN = re.compile(r"YYYY|MM|M|DD|D|HH|H|hh|h|mm|ss|A|a|\[[^\]]*\]")

_TOKEN_PATTERNS: dict[str, str] = {
    "YYYY": r"(?P<year>\d{4})",
    "MM": r"(?P<month>\d{2})",
    "M": r"(?P<month>1[0-2]|[1-9])",
    "DD": r"(?P<day>\d{2})",
    "D": r"(?P<day>3[01]|[12]\d|[1-9])",
    "HH": r"(?P<hour>\d{2})",
    "H": r"(?P<hour>2[0-3]|1\d|\d)",
    "hh": r"(?P<hour12>\d{2})",
    "h": r"(?P<hour12>1[0-2]|[1-9])",
    "mm": r"(?P<minute>\d{2})",
    "ss": r"(?P<second>\d{2})",
    "A": r"(?P<meridiem>AM|PM)",
    "a": r"(?P<meridiem>am|pm)",
}


@lru_cache(maxsize=64)
def compile_format(fmt: str) -> re.Pattern[str]:
    """Compile a format string into an anchored regex with named groups.

    Raises:
        re.error: If a token is repeated.
    """
    parts: list[str] = []
    pos = 0
    for match in _TOKEN.finditer(fmt):
        parts.append(re.escape(fmt[pos : match.start()]))
        token = match.group(0)
        if token.startswith("["):
            parts.append(re.escape(token[1:-1]))
        else:
            parts.append(_TOKEN_PATTERNS[token])
        pos = match.end()
    parts.append(re.escape(fmt[pos:]))
    return re.compile("".join(parts), re.ASCII | re.IGNORECASE)


def parse_with_format(value: str, fmt: str) -> datetime | None:
    """Parse ``value`` strictly against ``fmt``.

    Missing date fields default to 1970-01-01 and missing time fields to 0.

    Example:
        >>> parse_with_format("2024-03-15 02:30 PM", "YYYY-MM-DD hh:mm A")
        datetime.datetime(2024, 3, 15, 14, 30)
        >>> parse_with_format("2024-02-30", "YYYY-MM-DD") is None
        True
    """
    match = compile_format(fmt).fullmatch(value)
    if match is None:
        return None
    fields = match.groupdict()

    hour = int(fields.get("hour") or 0)
    if fields.get("hour12") is not None:
        hour12 = int(fields["hour12"])
        if not 1 <= hour12 <= 12:
            return None
        is_pm = (fields.get("meridiem") or "AM").upper() == "PM"
        hour = hour12 % 12 + (12 if is_pm else 0)

    try:
        return datetime(
            int(fields.get("year") or 1970),
            int(fields.get("month") or 1),
            int(fields.get("day") or 1),
            hour,
            int(fields.get("minute") or 0),
            int(fields.get("second") or 0),
        )
    except ValueError:
        return None


def parse_date(value: str, fmt: str) -> date | None:
    parsed = parse_with_format(value, fmt)
    return parsed.date() if parsed is not None else None


def format_with_tokens(value: datetime, fmt: str) -> str:
    """Render ``value`` with the same tokens ``parse_with_format`` reads.

    >>> format_with_tokens(datetime(2024, 3, 5, 9, 7), "D/M/YYYY h:mm a")
    '5/3/2024 9:07 am'
    """
    hour12 = value.hour % 12 or 12
    meridiem = "PM" if value.hour >= 12 else "AM"
    rendered = {
        "YYYY": f"{value.year:04d}",
        "MM": f"{value.month:02d}",
        "M": str(value.month),
        "DD": f"{value.day:02d}",
        "D": str(value.day),
        "HH": f"{value.hour:02d}",
        "H": str(value.hour),
        "hh": f"{hour12:02d}",
        "h": str(hour12),
        "mm": f"{value.minute:02d}",
        "ss": f"{value.second:02d}",
        "A": meridiem,
        "a": meridiem.lower(),
    }

    def substitute(match: re.Match[str]) -> str:
        token = match.group(0)
        return token[1:-1] if token.startswith("[") else rendered[token]

    return _TOKEN.sub(substitute, fmt)


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5
