"""Parsing of operator-entered text into domain values.

All helpers raise ValueError for malformed input so callers can report it and
ask again.
"""

import re
from datetime import time, timedelta

_HOURS_MINUTES = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def _split_hours_minutes(text: str) -> tuple[int, int]:
    match = _HOURS_MINUTES.match(text or "")
    if not match:
        raise ValueError(f"Expected a time in the format HH:MM, got {text!r}")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise ValueError(f"Minutes must be between 00 and 59, got {text!r}")
    return hours, minutes


def parse_clock_time(text: str) -> time:
    """Parse a wall-clock time such as "08:15"."""
    hours, minutes = _split_hours_minutes(text)
    if hours > 23:
        raise ValueError(f"Hours must be between 00 and 23, got {text!r}")
    return time(hours, minutes)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "00:15" or "01:30"."""
    hours, minutes = _split_hours_minutes(text)
    return timedelta(hours=hours, minutes=minutes)


def parse_optional_duration(text: str | None) -> timedelta | None:
    """Parse a duration, treating blank input as no duration."""
    if text is None or not text.strip():
        return None
    return parse_duration(text)


def parse_number(text: str) -> int:
    """Parse a whole number such as a train number or a menu option."""
    try:
        return int((text or "").strip())
    except ValueError:
        raise ValueError(f"Expected a whole number, got {text!r}") from None
