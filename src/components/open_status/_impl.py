"""
OpenStatusEvaluator - "Open now" / "Closed" from the wall clock.

Key behaviors:
- Localizes the instant to the business timezone, not the caller's
- A day marked "Closed" short-circuits before the rule table is consulted
- Windows are half-open: exactly at open is open, exactly at close is closed
- Weekdays missing from the rule table are closed
- Never raises: any failure degrades to the closed state
- Stateless: callers re-evaluate on their own schedule (every 60s on the site)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from src.domain.entities import CLOSED, WEEKDAYS
from src.domain.hours import parse_time_token, split_hours_range

from .models import CLOSED_STATUS, OPEN_STATUS, DayRule, DayRuleTable, OpenStatus

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Africa/Johannesburg"
REFRESH_INTERVAL_SECONDS = 60


# --- Localization ---


def localize(now: datetime, timezone: str) -> tuple[str, float]:
    """
    Convert an instant to (weekday name, decimal hour) in the given timezone.

    Naive datetimes are assumed to be UTC. Seconds are ignored, so 15:29:59
    is 15.4833... rather than rounding up.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    local = now.astimezone(ZoneInfo(timezone))
    current_day = WEEKDAYS[local.weekday()]
    current_time = local.hour + local.minute / 60
    return current_day, current_time


# --- Evaluation ---


def resolve_status(
    current_day: str,
    current_time: float,
    hours: Mapping[str, str],
    rules: DayRuleTable,
) -> OpenStatus:
    """
    Decide the status for an already-localized weekday and decimal hour.

    Unknown weekdays and malformed tables resolve to closed.
    """
    try:
        if hours.get(current_day) == CLOSED:
            return CLOSED_STATUS

        rule = rules.get(current_day)
        if rule is not None and rule.contains(current_time):
            return OPEN_STATUS

        return CLOSED_STATUS
    except Exception as e:
        logger.warning(f"Open status lookup failed for {current_day!r}: {e}")
        return CLOSED_STATUS


def evaluate(
    now: datetime,
    hours: Mapping[str, str],
    rules: DayRuleTable,
    timezone: str = DEFAULT_TIMEZONE,
) -> OpenStatus:
    """
    Evaluate whether the business is open at `now`.

    Args:
        now: Current instant (aware, or naive UTC)
        hours: Display hours, used only to detect explicit "Closed" days
        rules: Per-weekday operating windows
        timezone: IANA timezone the business operates in

    Returns:
        OpenStatus; closed on any error
    """
    try:
        current_day, current_time = localize(now, timezone)
    except Exception as e:
        logger.warning(f"Could not localize {now!r} to {timezone!r}: {e}")
        return CLOSED_STATUS

    return resolve_status(current_day, current_time, hours, rules)


# --- Rule Derivation ---


def parse_day_rule(text: str | None) -> DayRule | None:
    """
    Parse one display-hours entry into a DayRule.

    Returns None for closed days.

    Raises:
        ValueError: If the entry has two tokens that are not valid times,
            or the window is empty.
    """
    window = split_hours_range(text)
    if window is None:
        return None

    opens, closes = window
    open_hour = parse_time_token(opens)
    close_hour = parse_time_token(closes)
    if close_hour <= open_hour:
        raise ValueError(f"Closing time must be after opening time in {text!r}")

    return DayRule(open_hour=open_hour, close_hour=close_hour)


def derive_day_rules(
    hours: Mapping[str, str],
    overrides: Mapping[str, DayRule | None] | None = None,
) -> dict[str, DayRule]:
    """
    Build the rule table from display hours.

    Runs once at configuration load. Entries that fail to parse are logged and
    left out, which makes that weekday closed. Overrides replace the derived
    window per weekday; an override of None closes the day.
    """
    rules: dict[str, DayRule] = {}

    for day, text in hours.items():
        try:
            rule = parse_day_rule(text)
        except ValueError as e:
            logger.warning(f"Ignoring unparseable hours for {day}: {e}")
            continue
        if rule is not None:
            rules[day] = rule

    for day, override in (overrides or {}).items():
        if override is None:
            rules.pop(day, None)
        else:
            rules[day] = override

    return rules
