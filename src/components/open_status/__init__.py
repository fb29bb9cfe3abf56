"""
Open-status component - "Open now" / "Closed" evaluation.
"""

from ._impl import (
    DEFAULT_TIMEZONE,
    REFRESH_INTERVAL_SECONDS,
    derive_day_rules,
    evaluate,
    localize,
    parse_day_rule,
    resolve_status,
)
from .component import run, run_now
from .models import (
    CLOSED_MESSAGE,
    CLOSED_STATUS,
    OPEN_MESSAGE,
    OPEN_STATUS,
    DayRule,
    DayRuleTable,
    EvaluateStatusInput,
    OpenStatus,
)
from .ports import ClockPort

__all__ = [
    # Entry points
    "run",
    "run_now",
    # Input models
    "EvaluateStatusInput",
    # Output models
    "OpenStatus",
    "OPEN_STATUS",
    "CLOSED_STATUS",
    "OPEN_MESSAGE",
    "CLOSED_MESSAGE",
    # Rules
    "DayRule",
    "DayRuleTable",
    "derive_day_rules",
    "parse_day_rule",
    # Evaluation
    "evaluate",
    "localize",
    "resolve_status",
    "DEFAULT_TIMEZONE",
    "REFRESH_INTERVAL_SECONDS",
    # Ports
    "ClockPort",
]
