"""
Port interfaces for Flight Search.

Ports define the abstract interfaces the validation services depend on.
This follows the Ports and Adapters (Hexagonal) architecture pattern.
"""

from flight_search.ports.clock import Clock

__all__ = ["Clock"]
