"""
Custom exceptions for the flight_search package.

Business rule failures are never raised - validate() reports them as
False. These exceptions cover misuse and misconfiguration only.
"""


class FlightSearchError(Exception):
    """Base exception for all flight_search errors."""

    pass


class ConfigurationError(FlightSearchError):
    """Raised when a setting cannot be used."""

    def __init__(self, setting: str, value: str, reason: str = "invalid value") -> None:
        self.setting = setting
        self.value = value
        message = f"Invalid {setting} '{value}': {reason}"
        super().__init__(message)


class SearchNotValidatedError(FlightSearchError):
    """Raised when the held search is required before any request was accepted."""

    def __init__(self, message: str = "No flight search has been validated yet") -> None:
        super().__init__(message)
