"""
Schema definitions for Flight Search.

Frozen dataclasses for requests, rules and outcomes; Pandera for batch input.
"""

from .batch import SearchRequestSchema
from .request import FlightSearchRequest, ValidatedSearch
from .result import RejectionReason, ValidationResult
from .rules import DEFAULT_RULES, SearchRules
from .vocabulary import AIRPORT_CODES, DATE_FORMAT, SEATING_CLASSES, SeatingClass

__all__ = [
    # Vocabulary
    "AIRPORT_CODES",
    "DATE_FORMAT",
    "SEATING_CLASSES",
    "SeatingClass",
    # Requests
    "FlightSearchRequest",
    "ValidatedSearch",
    # Rules
    "DEFAULT_RULES",
    "SearchRules",
    # Outcomes
    "RejectionReason",
    "ValidationResult",
    # Batch
    "SearchRequestSchema",
]
