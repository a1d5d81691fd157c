"""
Validation outcome types.

The public validate() call only reports accept/reject; these types carry
the diagnostic detail used for logging and batch screening.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from flight_search.schemas.request import FlightSearchRequest, ValidatedSearch


class RejectionReason(Enum):
    """First business rule a rejected request failed."""

    NEGATIVE_PASSENGER_COUNT = "negative_passenger_count"
    PASSENGER_TOTAL_OUT_OF_RANGE = "passenger_total_out_of_range"
    TOO_MANY_CHILDREN_PER_ADULT = "too_many_children_per_adult"
    TOO_MANY_INFANTS_PER_ADULT = "too_many_infants_per_adult"
    INVALID_SEATING_CLASS = "invalid_seating_class"
    INVALID_AIRPORT = "invalid_airport"
    SAME_AIRPORT = "same_airport"
    INVALID_DATE = "invalid_date"
    DEPARTURE_IN_PAST = "departure_in_past"
    RETURN_BEFORE_DEPARTURE = "return_before_departure"
    EMERGENCY_ROW_NOT_ECONOMY = "emergency_row_not_economy"
    EMERGENCY_ROW_WITH_MINORS = "emergency_row_with_minors"
    CHILD_IN_FIRST_CLASS = "child_in_first_class"
    INFANT_IN_BUSINESS_CLASS = "infant_in_business_class"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of running the rule pipeline on one request.

    Exactly one of `search` and `reason` is set.

    Attributes:
        request: The evaluated request.
        search: Validated state to commit (accepted requests only).
        reason: First failed rule (rejected requests only).
    """

    request: FlightSearchRequest
    search: Optional[ValidatedSearch] = None
    reason: Optional[RejectionReason] = None

    def __post_init__(self) -> None:
        if (self.search is None) == (self.reason is None):
            raise ValueError("ValidationResult needs exactly one of search or reason")

    @property
    def accepted(self) -> bool:
        return self.search is not None

    @classmethod
    def accept(cls, search: ValidatedSearch) -> "ValidationResult":
        return cls(request=search.request, search=search)

    @classmethod
    def reject(
        cls, request: FlightSearchRequest, reason: RejectionReason
    ) -> "ValidationResult":
        return cls(request=request, reason=reason)
