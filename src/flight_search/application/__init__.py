"""
Application layer for Flight Search.

Provides the public entry point, wiring settings, clock and rules into
the validator.
"""

from flight_search.application.flight_search import FlightSearch

__all__ = ["FlightSearch"]
