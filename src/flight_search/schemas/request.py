"""
Flight search request and validated search state.

A FlightSearchRequest is the transient input handed to the validator.
A ValidatedSearch is what the validator holds after a request passes
every rule; it is replaced as a whole, never field by field.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class FlightSearchRequest:
    """
    Candidate flight search parameters.

    Attributes:
        departure_date: Departure date as dd/MM/yyyy text.
        departure_airport_code: Lowercase origin airport code (e.g. 'syd').
        emergency_row_seating: Whether an emergency-row seat is requested.
        return_date: Return date as dd/MM/yyyy text.
        destination_airport_code: Lowercase destination airport code.
        seating_class: Cabin class name (e.g. 'premium economy').
        adult_passenger_count: Number of adults.
        child_passenger_count: Number of children.
        infant_passenger_count: Number of infants.
    """

    departure_date: str
    departure_airport_code: str
    emergency_row_seating: bool
    return_date: str
    destination_airport_code: str
    seating_class: str
    adult_passenger_count: int
    child_passenger_count: int
    infant_passenger_count: int

    @property
    def total_passengers(self) -> int:
        """Sum of adults, children and infants."""
        return (
            self.adult_passenger_count
            + self.child_passenger_count
            + self.infant_passenger_count
        )

    def as_dict(self) -> Dict[str, Any]:
        """Plain dict of the nine request fields."""
        return asdict(self)


@dataclass(frozen=True)
class ValidatedSearch:
    """
    Last request that passed every search rule.

    Wraps the accepted request together with the dates parsed from it.
    Frozen so the validator can publish it with a single reference swap.

    Attributes:
        request: The accepted request, field values exactly as given.
        departure_on: Parsed departure date.
        return_on: Parsed return date.
        validated_on: The "today" the date rules were checked against.
    """

    request: FlightSearchRequest
    departure_on: date
    return_on: date
    validated_on: date

    @property
    def departure_date(self) -> str:
        return self.request.departure_date

    @property
    def departure_airport_code(self) -> str:
        return self.request.departure_airport_code

    @property
    def emergency_row_seating(self) -> bool:
        return self.request.emergency_row_seating

    @property
    def return_date(self) -> str:
        return self.request.return_date

    @property
    def destination_airport_code(self) -> str:
        return self.request.destination_airport_code

    @property
    def seating_class(self) -> str:
        return self.request.seating_class

    @property
    def adult_passenger_count(self) -> int:
        return self.request.adult_passenger_count

    @property
    def child_passenger_count(self) -> int:
        return self.request.child_passenger_count

    @property
    def infant_passenger_count(self) -> int:
        return self.request.infant_passenger_count

    @property
    def trip_length_days(self) -> int:
        """Days between departure and return (0 for same-day return)."""
        return (self.return_on - self.departure_on).days
