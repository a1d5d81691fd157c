"""
Tests for clock adapters.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest

from flight_search.adapters.clocks.system_clock import FixedClock, SystemClock
from flight_search.exceptions import ConfigurationError, FlightSearchError
from flight_search.ports.clock import Clock


class TestFixedClock:
    """Tests for FixedClock."""

    def test_returns_pinned_date(self) -> None:
        """Test the same date is always returned."""
        clock = FixedClock(date(2030, 6, 1))
        assert clock.today() == date(2030, 6, 1)
        assert clock.today() == date(2030, 6, 1)

    def test_is_clock(self) -> None:
        """Test FixedClock implements the port."""
        assert isinstance(FixedClock(date(2030, 6, 1)), Clock)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_local_date(self) -> None:
        """Test the default clock reports the local date."""
        before = date.today()
        today = SystemClock().today()
        after = date.today()

        assert before <= today <= after

    def test_zone_date(self) -> None:
        """Test a configured zone reports that zone's date."""
        zone = ZoneInfo("Australia/Melbourne")
        before = datetime.now(zone).date()
        today = SystemClock("Australia/Melbourne").today()
        after = datetime.now(zone).date()

        assert before <= today <= after

    def test_timezone_property(self) -> None:
        """Test the configured zone name is exposed."""
        assert SystemClock().timezone is None
        assert SystemClock("UTC").timezone == "UTC"

    def test_unknown_zone_raises(self) -> None:
        """Test an unknown zone name is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            SystemClock("Mars/Olympus_Mons")

        assert exc_info.value.setting == "timezone"
        assert "Mars/Olympus_Mons" in str(exc_info.value)
        assert isinstance(exc_info.value, FlightSearchError)
