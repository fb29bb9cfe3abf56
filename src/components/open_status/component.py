"""
Open-status component - business open/closed evaluator.

Decides whether the practice is open from the current instant, the weekly
display hours and the per-weekday rule table.

Invariants:
- I1: "Closed" display days are closed at every time of day
- I2: Windows are [open, close)
- I3: Weekdays absent from the rule table are closed
- I4: Never raises; failures degrade to closed
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ._impl import DEFAULT_TIMEZONE, evaluate
from .models import CLOSED_STATUS, DayRuleTable, EvaluateStatusInput, OpenStatus
from .ports import ClockPort

logger = logging.getLogger(__name__)

# --- Component Entry Points ---


def run(inp: EvaluateStatusInput) -> OpenStatus:
    """
    Evaluate the open status for an explicit instant.

    Args:
        inp: Instant, display hours, rule table and timezone.

    Returns:
        OpenStatus computed for inp.now.
    """
    return evaluate(inp.now, inp.hours, inp.rules, inp.timezone)


def run_now(
    hours: Mapping[str, str],
    rules: DayRuleTable,
    *,
    clock: ClockPort,
    timezone: str = DEFAULT_TIMEZONE,
) -> OpenStatus:
    """
    Evaluate the open status at the clock's current instant.

    Callers refresh by calling again; nothing is cached between calls.
    A failing clock yields the closed status.
    """
    try:
        now = clock.now_utc()
    except Exception as e:
        logger.warning(f"Clock read failed: {e}")
        return CLOSED_STATUS
    return evaluate(now, hours, rules, timezone)
