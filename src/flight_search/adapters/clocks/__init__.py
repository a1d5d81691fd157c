"""Clock adapters."""

from flight_search.adapters.clocks.system_clock import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
