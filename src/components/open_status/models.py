"""
Open-status component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

OPEN_MESSAGE = "Open now"
CLOSED_MESSAGE = "Closed"


@dataclass(frozen=True)
class DayRule:
    """Operating window for one weekday, in decimal hours [open_hour, close_hour)."""

    open_hour: float
    close_hour: float

    def contains(self, current_time: float) -> bool:
        return self.open_hour <= current_time < self.close_hour


# weekday -> window; weekdays without an entry are closed
DayRuleTable = Mapping[str, DayRule | None]


@dataclass(frozen=True)
class OpenStatus:
    """Open/closed status valid at the moment it was computed."""

    is_open: bool
    message: str

    def to_dict(self) -> dict[str, object]:
        return {"is_open": self.is_open, "message": self.message}


CLOSED_STATUS = OpenStatus(is_open=False, message=CLOSED_MESSAGE)
OPEN_STATUS = OpenStatus(is_open=True, message=OPEN_MESSAGE)


@dataclass(frozen=True)
class EvaluateStatusInput:
    """Input for evaluating the open status at an instant."""

    now: datetime
    hours: Mapping[str, str]
    rules: DayRuleTable
    timezone: str = "Africa/Johannesburg"
