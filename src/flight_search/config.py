"""
Configuration module for Flight Search.

Loads settings from the environment (and a .env file, if present) and
configures logging for scripts embedding the validator.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from flight_search.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

TIMEZONE_ENV = "FLIGHT_SEARCH_TIMEZONE"
LOG_LEVEL_ENV = "FLIGHT_SEARCH_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "flight_search"
_CONSOLE_HANDLER_NAME = "flight_search.console"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        timezone: IANA zone name used to decide "today" for the
            departure date rule. None means the system local date.
        log_level: Level name for the flight_search package logger.
    """

    timezone: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                "log level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Returns:
            Settings populated from FLIGHT_SEARCH_* variables.

        Raises:
            ConfigurationError: If the log level is not recognised.
        """
        timezone = os.getenv(TIMEZONE_ENV) or None
        log_level = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper()
        return cls(timezone=timezone, log_level=log_level)


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write to stdout.

    Safe to call repeatedly: the console handler installed by an earlier
    call is replaced, so each record is written once.

    Args:
        level: Logging level name (e.g. "DEBUG").
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if handler.get_name() == _CONSOLE_HANDLER_NAME:
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
