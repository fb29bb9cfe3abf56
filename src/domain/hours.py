"""
Weekly-hours text parsing.

Display hours are authored as "9:00am - 6:00pm". Both the structured-data
builder and the open-status rule derivation read them through the helpers
here so the two never disagree about what a day's window is.
"""

from __future__ import annotations

import re

from src.domain.entities import CLOSED

HOURS_DELIMITER = " - "

_TIME_TOKEN = re.compile(
    r"^(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?P<meridiem>[ap]\.?m\.?)?$",
    re.IGNORECASE,
)


def split_hours_range(text: str | None) -> tuple[str, str] | None:
    """
    Split a display-hours entry into its (opens, closes) tokens.

    Returns None for "Closed", empty values, or anything that does not split
    into exactly two non-empty tokens on " - ".
    """
    if not text or text.strip() == CLOSED:
        return None

    parts = [part.strip() for part in text.split(HOURS_DELIMITER)]
    if len(parts) != 2 or not all(parts):
        return None

    return parts[0], parts[1]


def parse_time_token(token: str) -> float:
    """
    Parse a time-of-day token into decimal hours.

    Accepts "9:00am", "9am", "12:30 PM", "17:30" and "7".
    12am is midnight (0.0) and 12pm is noon (12.0).

    Raises:
        ValueError: If the token is not a recognisable time of day.
    """
    match = _TIME_TOKEN.match(token.strip())
    if not match:
        raise ValueError(f"Unrecognised time of day: {token!r}")

    hour = int(match.group("hour"))
    minute = int(match.group("minute") or 0)
    meridiem = match.group("meridiem")

    if minute >= 60:
        raise ValueError(f"Minute out of range in {token!r}")

    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"Hour out of range for 12-hour clock in {token!r}")
        is_pm = meridiem.lower().startswith("p")
        hour = hour % 12 + (12 if is_pm else 0)
    elif hour > 23:
        raise ValueError(f"Hour out of range in {token!r}")

    return hour + minute / 60
