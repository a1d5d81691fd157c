"""
Clock port interface.

The departure date rule compares against "today"; the source of that date
is injected so validation stays deterministic under test.
"""

from abc import ABC, abstractmethod
from datetime import date


class Clock(ABC):
    """
    Abstract source of the current calendar date.

    Implementations:
    - SystemClock: Wall-clock date (local or configured timezone)
    - FixedClock: Constant date for tests and replays
    """

    @abstractmethod
    def today(self) -> date:
        """
        Current calendar date.

        Returns:
            Today's date as seen by this clock.
        """
        ...
