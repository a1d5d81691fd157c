"""
Domain services for Flight Search.

Services run the business rules (services.rules) over requests and own
the held search state.
"""

from flight_search.services.batch_screening_service import BatchScreeningService
from flight_search.services.search_validator import SearchRequestValidator

__all__ = ["BatchScreeningService", "SearchRequestValidator"]
