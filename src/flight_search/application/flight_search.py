"""
FlightSearch Use Case - Public API for validating flight searches.

Facade over SearchRequestValidator that builds its dependencies from
Settings and exposes the classic run/get interface.
"""

from __future__ import annotations

import logging
from typing import Optional

from flight_search.adapters.clocks.system_clock import SystemClock
from flight_search.config import PACKAGE_LOGGER, Settings
from flight_search.ports.clock import Clock
from flight_search.schemas.request import ValidatedSearch
from flight_search.schemas.rules import SearchRules
from flight_search.services.search_validator import SearchRequestValidator

logger = logging.getLogger(__name__)


class FlightSearch:
    """
    Public API for flight search validation.

    Example usage:
        >>> search = FlightSearch()
        >>> ok = search.run_flight_search(
        ...     "07/11/2030", "mel", True,
        ...     "14/11/2030", "pvg", "economy",
        ...     3, 0, 0,
        ... )
        >>> ok, search.get_departure_airport_code()
        (True, 'mel')

    Attributes:
        _validator: Underlying SearchRequestValidator.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        rules: Optional[SearchRules] = None,
    ) -> None:
        """
        Initialize with optional custom dependencies.

        Settings, when given or loaded, also set the level of the
        flight_search package logger.

        Args:
            settings: Settings. If None and no clock is given, loaded
                from the environment.
            clock: Date source. If None, a SystemClock in settings.timezone.
            rules: Business rules. If None, the default conditions.
        """
        if clock is None:
            settings = settings or Settings.from_env()
            clock = SystemClock(settings.timezone)

        if settings is not None:
            logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)

        self._validator = SearchRequestValidator(rules=rules, clock=clock)

        logger.debug("FlightSearch initialized with %s", type(clock).__name__)

    @property
    def validator(self) -> SearchRequestValidator:
        return self._validator

    def run_flight_search(
        self,
        departure_date: str,
        departure_airport_code: str,
        emergency_row_seating: bool,
        return_date: str,
        destination_airport_code: str,
        seating_class: str,
        adult_passenger_count: int,
        child_passenger_count: int,
        infant_passenger_count: int,
    ) -> bool:
        """
        Validate a search; store it only if every condition holds.

        Returns:
            True if the search was accepted and stored.
        """
        return self._validator.validate(
            departure_date,
            departure_airport_code,
            emergency_row_seating,
            return_date,
            destination_airport_code,
            seating_class,
            adult_passenger_count,
            child_passenger_count,
            infant_passenger_count,
        )

    @property
    def current(self) -> Optional[ValidatedSearch]:
        return self._validator.current

    def get_departure_date(self) -> Optional[str]:
        return self._validator.departure_date

    def get_departure_airport_code(self) -> Optional[str]:
        return self._validator.departure_airport_code

    def is_emergency_row_seating(self) -> Optional[bool]:
        return self._validator.emergency_row_seating

    def get_return_date(self) -> Optional[str]:
        return self._validator.return_date

    def get_destination_airport_code(self) -> Optional[str]:
        return self._validator.destination_airport_code

    def get_seating_class(self) -> Optional[str]:
        return self._validator.seating_class

    def get_adult_passenger_count(self) -> Optional[int]:
        return self._validator.adult_passenger_count

    def get_child_passenger_count(self) -> Optional[int]:
        return self._validator.child_passenger_count

    def get_infant_passenger_count(self) -> Optional[int]:
        return self._validator.infant_passenger_count
