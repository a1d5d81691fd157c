"""
Search Request Validator - accept/reject gate for flight searches.

Runs the business rule pipeline over a candidate request and, only if
every rule passes, replaces the held search in one step. A rejected
request leaves the held search exactly as it was.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from flight_search.adapters.clocks.system_clock import SystemClock
from flight_search.exceptions import SearchNotValidatedError
from flight_search.ports.clock import Clock
from flight_search.schemas.request import FlightSearchRequest, ValidatedSearch
from flight_search.schemas.result import RejectionReason, ValidationResult
from flight_search.schemas.rules import DEFAULT_RULES, SearchRules
from flight_search.services.rules import (
    check_airports,
    check_date_order,
    check_passenger_counts,
    check_seating_class,
    check_seating_compatibility,
    parse_travel_dates,
)

logger = logging.getLogger(__name__)


class SearchRequestValidator:
    """
    Domain service validating flight search requests.

    Pipeline (fail-fast, in this order):
    1. Passenger counts, total and per-adult ratios
    2. Seating class membership
    3. Airport membership and distinctness
    4. Strict dd/MM/yyyy parsing of both dates
    5. Departure not in the past, return not before departure
    6. Emergency row / class / minor compatibility

    The held search is a frozen ValidatedSearch swapped in under a lock,
    so readers see either the previous search or the new one, never a mix.

    Attributes:
        _rules: Business rule limits and vocabularies.
        _clock: Source of "today" for the departure rule.
        _current: Last accepted search (None until the first success).
        _lock: Serializes evaluate-then-commit.
    """

    def __init__(
        self,
        rules: Optional[SearchRules] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the validator.

        Args:
            rules: Business rules. If None, uses the default conditions.
            clock: Date source. If None, uses the system local date.
        """
        self._rules = rules or DEFAULT_RULES
        self._clock = clock or SystemClock()
        self._current: Optional[ValidatedSearch] = None
        self._lock = threading.Lock()

    @property
    def rules(self) -> SearchRules:
        return self._rules

    # -------------------------
    # Validation
    # -------------------------

    def validate(
        self,
        departure_date: str,
        departure_airport_code: str,
        emergency_row_seating: bool,
        return_date: str,
        destination_airport_code: str,
        seating_class: str,
        adult_count: int,
        child_count: int,
        infant_count: int,
    ) -> bool:
        """
        Validate a search given as its nine fields.

        Returns:
            True if accepted (held search replaced), False if rejected
            (held search unchanged).
        """
        request = FlightSearchRequest(
            departure_date=departure_date,
            departure_airport_code=departure_airport_code,
            emergency_row_seating=emergency_row_seating,
            return_date=return_date,
            destination_airport_code=destination_airport_code,
            seating_class=seating_class,
            adult_passenger_count=adult_count,
            child_passenger_count=child_count,
            infant_passenger_count=infant_count,
        )
        return self.validate_request(request)

    def validate_request(self, request: FlightSearchRequest) -> bool:
        """
        Validate a request and commit it if every rule passes.

        Args:
            request: Candidate search.

        Returns:
            True if accepted, False otherwise.
        """
        with self._lock:
            result = self.evaluate(request)
            if not result.accepted:
                return False
            self._current = result.search

        logger.info(
            "Accepted search %s -> %s (%s, %d passengers)",
            request.departure_airport_code,
            request.destination_airport_code,
            request.seating_class,
            request.total_passengers,
        )
        return True

    def evaluate(self, request: FlightSearchRequest) -> ValidationResult:
        """
        Run the rule pipeline without touching the held search.

        Args:
            request: Candidate search.

        Returns:
            ValidationResult with the search to commit, or the first
            failed rule.
        """
        outcome = self._check(request)
        if isinstance(outcome, RejectionReason):
            logger.debug("Rejected search (%s): %s", outcome.value, request.as_dict())
            return ValidationResult.reject(request, outcome)
        return ValidationResult.accept(outcome)

    def _check(self, request: FlightSearchRequest) -> RejectionReason | ValidatedSearch:
        rules = self._rules

        # 1. Passengers (cheapest check first)
        reason = check_passenger_counts(
            request.adult_passenger_count,
            request.child_passenger_count,
            request.infant_passenger_count,
            rules,
        )
        if reason is not None:
            return reason

        # 2. Seating class
        reason = check_seating_class(request.seating_class, rules)
        if reason is not None:
            return reason

        # 3. Airports
        reason = check_airports(
            request.departure_airport_code,
            request.destination_airport_code,
            rules,
        )
        if reason is not None:
            return reason

        # 4. Dates must both parse before any comparison
        dates = parse_travel_dates(request.departure_date, request.return_date)
        if dates is None:
            return RejectionReason.INVALID_DATE
        departure_on, return_on = dates

        # 5. Date ordering
        today = self._clock.today()
        reason = check_date_order(departure_on, return_on, today)
        if reason is not None:
            return reason

        # 6. Seating / occupant compatibility
        reason = check_seating_compatibility(
            request.seating_class,
            request.emergency_row_seating,
            request.child_passenger_count,
            request.infant_passenger_count,
            rules,
        )
        if reason is not None:
            return reason

        return ValidatedSearch(
            request=request,
            departure_on=departure_on,
            return_on=return_on,
            validated_on=today,
        )

    # -------------------------
    # Held search
    # -------------------------

    @property
    def current(self) -> Optional[ValidatedSearch]:
        """Last accepted search, or None before the first success."""
        return self._current

    def require_current(self) -> ValidatedSearch:
        """
        Last accepted search.

        Raises:
            SearchNotValidatedError: If no request has been accepted yet.
        """
        current = self._current
        if current is None:
            raise SearchNotValidatedError()
        return current

    @property
    def departure_date(self) -> Optional[str]:
        current = self._current
        return current.departure_date if current is not None else None

    @property
    def departure_airport_code(self) -> Optional[str]:
        current = self._current
        return current.departure_airport_code if current is not None else None

    @property
    def emergency_row_seating(self) -> Optional[bool]:
        current = self._current
        return current.emergency_row_seating if current is not None else None

    @property
    def return_date(self) -> Optional[str]:
        current = self._current
        return current.return_date if current is not None else None

    @property
    def destination_airport_code(self) -> Optional[str]:
        current = self._current
        return current.destination_airport_code if current is not None else None

    @property
    def seating_class(self) -> Optional[str]:
        current = self._current
        return current.seating_class if current is not None else None

    @property
    def adult_passenger_count(self) -> Optional[int]:
        current = self._current
        return current.adult_passenger_count if current is not None else None

    @property
    def child_passenger_count(self) -> Optional[int]:
        current = self._current
        return current.child_passenger_count if current is not None else None

    @property
    def infant_passenger_count(self) -> Optional[int]:
        current = self._current
        return current.infant_passenger_count if current is not None else None
