"""
Flight Search - validation gate for flight search requests.

A request is accepted only if it satisfies every booking condition;
the validator then holds it as the current search.
"""

from flight_search.application import FlightSearch
from flight_search.schemas import (
    FlightSearchRequest,
    RejectionReason,
    SearchRules,
    ValidatedSearch,
    ValidationResult,
)
from flight_search.services import BatchScreeningService, SearchRequestValidator

__all__ = [
    "BatchScreeningService",
    "FlightSearch",
    "FlightSearchRequest",
    "RejectionReason",
    "SearchRequestValidator",
    "SearchRules",
    "ValidatedSearch",
    "ValidationResult",
]
