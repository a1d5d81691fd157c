"""
Business rule configuration for flight search validation.

Defines the limits and vocabularies the rule checks are evaluated against.
"""

from dataclasses import dataclass
from typing import FrozenSet

from flight_search.schemas.vocabulary import (
    AIRPORT_CODES,
    SEATING_CLASSES,
    SeatingClass,
)


@dataclass(frozen=True)
class SearchRules:
    """
    Immutable business rules for search requests.

    Defaults reproduce the published booking conditions. Frozen so a
    single instance can be shared between validators.

    Attributes:
        min_passengers: Minimum total passengers on a request.
        max_passengers: Maximum total passengers on a request.
        max_children_per_adult: Children allowed per accompanying adult.
        max_infants_per_adult: Infants allowed per accompanying adult.
        airports: Accepted airport codes.
        seating_classes: Accepted seating class names.
        emergency_row_class: Only class in which emergency rows are offered.
        no_children_class: Class that cannot seat children.
        no_infants_class: Class that cannot seat infants.
    """

    min_passengers: int = 1
    max_passengers: int = 9
    max_children_per_adult: int = 2
    max_infants_per_adult: int = 1
    airports: FrozenSet[str] = AIRPORT_CODES
    seating_classes: FrozenSet[str] = SEATING_CLASSES
    emergency_row_class: str = SeatingClass.ECONOMY.value
    no_children_class: str = SeatingClass.FIRST.value
    no_infants_class: str = SeatingClass.BUSINESS.value

    def __post_init__(self) -> None:
        """Validate rule limits after initialization."""
        if self.min_passengers < 0:
            raise ValueError(
                f"min_passengers must be >= 0, got {self.min_passengers}"
            )
        if self.min_passengers > self.max_passengers:
            raise ValueError(
                f"min_passengers ({self.min_passengers}) must be <= "
                f"max_passengers ({self.max_passengers})"
            )
        if self.max_children_per_adult < 0:
            raise ValueError(
                f"max_children_per_adult must be >= 0, got {self.max_children_per_adult}"
            )
        if self.max_infants_per_adult < 0:
            raise ValueError(
                f"max_infants_per_adult must be >= 0, got {self.max_infants_per_adult}"
            )
        if not self.airports:
            raise ValueError("airports cannot be empty")
        if not self.seating_classes:
            raise ValueError("seating_classes cannot be empty")
        if self.emergency_row_class not in self.seating_classes:
            raise ValueError(
                f"emergency_row_class '{self.emergency_row_class}' "
                "is not an accepted seating class"
            )


DEFAULT_RULES = SearchRules()
