"""
Shared fixtures for flight_search tests.

All date rules are evaluated against a FixedClock so results do not
depend on when the suite runs.
"""

from datetime import date, timedelta
from typing import Callable

import pytest

from flight_search.adapters.clocks.system_clock import FixedClock
from flight_search.schemas.request import FlightSearchRequest
from flight_search.services.search_validator import SearchRequestValidator

TODAY = date(2030, 6, 1)


def days_from_today(days: int, today: date = TODAY) -> str:
    """Format today + days as dd/MM/yyyy."""
    return (today + timedelta(days=days)).strftime("%d/%m/%Y")


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def days_out() -> Callable[[int], str]:
    """Formatter for dates relative to the fixed today."""
    return days_from_today


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def departure_date() -> str:
    """Valid departure three weeks out."""
    return days_from_today(21)


@pytest.fixture
def return_date() -> str:
    """Valid return four weeks out."""
    return days_from_today(28)


@pytest.fixture
def make_request(
    departure_date: str, return_date: str
) -> Callable[..., FlightSearchRequest]:
    """Factory for requests that pass every rule unless overridden."""

    def _make(**overrides) -> FlightSearchRequest:
        fields = {
            "departure_date": departure_date,
            "departure_airport_code": "syd",
            "emergency_row_seating": False,
            "return_date": return_date,
            "destination_airport_code": "mel",
            "seating_class": "economy",
            "adult_passenger_count": 2,
            "child_passenger_count": 0,
            "infant_passenger_count": 0,
        }
        fields.update(overrides)
        return FlightSearchRequest(**fields)

    return _make


@pytest.fixture
def validator(fixed_clock: FixedClock) -> SearchRequestValidator:
    """Validator with no held search."""
    return SearchRequestValidator(clock=fixed_clock)


@pytest.fixture
def primed_validator(
    validator: SearchRequestValidator, departure_date: str, return_date: str
) -> SearchRequestValidator:
    """Validator already holding a known good search (syd -> mel, 2+2)."""
    ok = validator.validate(
        departure_date, "syd", False,
        return_date, "mel", "economy",
        2, 2, 0,
    )
    assert ok, "Priming the held search should succeed"
    return validator
