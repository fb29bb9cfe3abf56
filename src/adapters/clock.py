"""
Clock adapters for the open-status evaluator.

Key behaviors:
- now_utc: Returns the current instant, always UTC-aware
- now_local: The same instant in the business timezone
- The timezone is only resolved by now_local; now_utc never touches it
- FrozenClock pins the instant for deterministic tests and previews
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo


class SystemClock:
    """Wall-clock time source."""

    def __init__(self, tz_name: str = "Africa/Johannesburg") -> None:
        """
        Initialize with the timezone used for local conversions.

        Args:
            tz_name: IANA timezone name
        """
        self._tz_name = tz_name

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        return datetime.now(UTC)

    def now_local(self) -> datetime:
        """Get current time in the configured timezone."""
        return datetime.now(ZoneInfo(self._tz_name))

    @property
    def timezone_name(self) -> str:
        return self._tz_name


class FrozenClock:
    """
    Clock that returns a fixed instant.

    Useful for deterministic testing.
    """

    def __init__(self, frozen_utc: datetime, tz_name: str = "Africa/Johannesburg") -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The instant to return; naive values are taken as UTC
            tz_name: IANA timezone name for local conversions
        """
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)
        self._tz_name = tz_name

    def now_utc(self) -> datetime:
        """Get frozen UTC time."""
        return self._frozen_utc

    def now_local(self) -> datetime:
        """Get frozen time in local timezone."""
        return self._frozen_utc.astimezone(ZoneInfo(self._tz_name))

    @property
    def timezone_name(self) -> str:
        return self._tz_name

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta (for testing)."""
        self._frozen_utc = self._frozen_utc + delta


def create_clock(tz_name: str = "Africa/Johannesburg") -> SystemClock:
    """Factory function to create the production clock."""
    return SystemClock(tz_name)
