"""
Clock adapters.

SystemClock reads the wall clock; FixedClock always returns the same date.
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flight_search.exceptions import ConfigurationError
from flight_search.ports.clock import Clock


class SystemClock(Clock):
    """
    Wall-clock date.

    Without a timezone, uses the system's local date. With an IANA
    zone name (e.g. 'Australia/Melbourne'), uses the date in that zone.
    """

    def __init__(self, timezone: Optional[str] = None) -> None:
        """
        Initialize the clock.

        Args:
            timezone: IANA zone name, or None for the local date.

        Raises:
            ConfigurationError: If the zone name is unknown.
        """
        self._zone: Optional[ZoneInfo] = None
        if timezone is not None:
            try:
                self._zone = ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigurationError("timezone", timezone, "unknown zone") from e

    @property
    def timezone(self) -> Optional[str]:
        return self._zone.key if self._zone is not None else None

    def today(self) -> date:
        if self._zone is None:
            return date.today()
        return datetime.now(self._zone).date()


class FixedClock(Clock):
    """Clock pinned to a single date."""

    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today
