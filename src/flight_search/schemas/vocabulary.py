"""
Fixed vocabularies for flight search requests.

Airport codes and seating classes are matched exactly (case-sensitive).
"""

from enum import Enum
from typing import FrozenSet


class SeatingClass(Enum):
    """Cabin service tiers accepted by the search."""

    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium economy"
    BUSINESS = "business"
    FIRST = "first"


AIRPORT_CODES: FrozenSet[str] = frozenset(
    {"syd", "mel", "lax", "cdg", "del", "pvg", "doh"}
)

SEATING_CLASSES: FrozenSet[str] = frozenset(c.value for c in SeatingClass)

# Textual form of departure/return dates (dd/MM/yyyy)
DATE_FORMAT = "%d/%m/%Y"
