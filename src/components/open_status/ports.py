"""
Open-status component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port for reading the current instant."""

    def now_utc(self) -> datetime:
        """Get current UTC time (timezone-aware)."""
        ...
