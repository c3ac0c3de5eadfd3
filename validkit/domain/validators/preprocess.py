"""Input normalization shared by string validators.

Order is fixed: empty -> default, trim, casing, transform. The transform hook
runs last so it sees the fully normalized string.
"""

import re
from collections.abc import Callable
from enum import Enum
from typing import Any


class TrimMode(str, Enum):
    """Whitespace trimming applied before validation."""

    TRIM = "trim"
    TRIM_START = "trim_start"
    TRIM_END = "trim_end"
    NONE = "none"


class Casing(str, Enum):
    """Case conversion applied after trimming."""

    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"
    NONE = "none"


_WORD = re.compile(r"\w\S*")


def to_title_case(value: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest.

    >>> to_title_case("hELLO wORLD")
    'Hello World'
    """
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), value)


def apply_trim(value: str, mode: TrimMode) -> str:
    match mode:
        case TrimMode.TRIM:
            return value.strip()
        case TrimMode.TRIM_START:
            return value.lstrip()
        case TrimMode.TRIM_END:
            return value.rstrip()
        case _:
            return value


def apply_casing(value: str, casing: Casing) -> str:
    match casing:
        case Casing.UPPER:
            return value.upper()
        case Casing.LOWER:
            return value.lower()
        case Casing.TITLE:
            return to_title_case(value)
        case _:
            return value


def coerce_text(value: Any) -> str | None:
    """Convert a scalar to text; ``None`` stays ``None``."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def chain(*steps: Callable[[str], str] | None) -> Callable[[str], str]:
    """Compose string steps left to right, skipping ``None``."""
    active = [step for step in steps if step is not None]

    def run(value: str) -> str:
        for step in active:
            value = step(value)
        return value

    return run


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def prepare_text(
    value: Any,
    *,
    required: bool,
    default: str | None = None,
    trim: TrimMode = TrimMode.TRIM,
    casing: Casing = Casing.NONE,
    transform: Callable[[str], str] | None = None,
) -> str | None:
    """Run the standard string preprocessing pipeline.

    Args:
        value: Raw input.
        required: Whether empty input should stay ``""`` (to be rejected) or
            become ``None``.
        default: Substitute for empty input.
        trim: Trimming mode.
        casing: Case conversion.
        transform: Hook applied last.

    Returns:
        Normalized string, or ``None`` for empty optional input.
    """
    text = coerce_text(value)
    if text is not None:
        text = apply_trim(text, trim)
    if is_empty(text):
        if default is None:
            return "" if required else None
        text = apply_trim(default, trim)

    text = apply_casing(text, casing)
    if transform is not None:
        text = transform(text)
    return text
