"""
Business rule checks for flight search requests.

Each check returns None when the rule holds, or the RejectionReason
describing the failure. Checks never raise on bad input; the validator
runs them in a fixed order and stops at the first failure.
"""

import re
from datetime import date, datetime
from typing import Optional, Tuple

from flight_search.schemas.result import RejectionReason
from flight_search.schemas.rules import DEFAULT_RULES, SearchRules
from flight_search.schemas.vocabulary import DATE_FORMAT

# strptime accepts single-digit fields; widths are pinned here first
_DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


# -------------------------
# Passenger counts
# -------------------------


def check_passenger_counts(
    adults: int,
    children: int,
    infants: int,
    rules: SearchRules = DEFAULT_RULES,
) -> Optional[RejectionReason]:
    """
    Check passenger counts, total and per-adult ratios.

    Args:
        adults: Number of adults.
        children: Number of children.
        infants: Number of infants.
        rules: Limits to check against.

    Returns:
        None if valid, otherwise the first failed rule.
    """
    if adults < 0 or children < 0 or infants < 0:
        return RejectionReason.NEGATIVE_PASSENGER_COUNT

    total = adults + children + infants
    if total < rules.min_passengers or total > rules.max_passengers:
        return RejectionReason.PASSENGER_TOTAL_OUT_OF_RANGE

    # No adults means no children or infants either
    if children > adults * rules.max_children_per_adult:
        return RejectionReason.TOO_MANY_CHILDREN_PER_ADULT
    if infants > adults * rules.max_infants_per_adult:
        return RejectionReason.TOO_MANY_INFANTS_PER_ADULT

    return None


# -------------------------
# Seating class and airports
# -------------------------


def check_seating_class(
    seating_class: Optional[str],
    rules: SearchRules = DEFAULT_RULES,
) -> Optional[RejectionReason]:
    """Check the seating class is one of the accepted names (case-sensitive)."""
    if not isinstance(seating_class, str) or not seating_class:
        return RejectionReason.INVALID_SEATING_CLASS
    if seating_class not in rules.seating_classes:
        return RejectionReason.INVALID_SEATING_CLASS
    return None


def check_airports(
    departure_airport_code: Optional[str],
    destination_airport_code: Optional[str],
    rules: SearchRules = DEFAULT_RULES,
) -> Optional[RejectionReason]:
    """
    Check both airports are accepted codes and differ from each other.

    Args:
        departure_airport_code: Origin airport code.
        destination_airport_code: Destination airport code.
        rules: Accepted airport codes.

    Returns:
        INVALID_AIRPORT, SAME_AIRPORT, or None.
    """
    for code in (departure_airport_code, destination_airport_code):
        if not isinstance(code, str) or code not in rules.airports:
            return RejectionReason.INVALID_AIRPORT

    if departure_airport_code == destination_airport_code:
        return RejectionReason.SAME_AIRPORT

    return None


# -------------------------
# Dates
# -------------------------


def parse_strict_date(text: Optional[str]) -> Optional[date]:
    """
    Parse a dd/MM/yyyy date without lenient rollover.

    Field widths are exact and the day must exist in that month:
    '31/04/2030' and '29/02/2100' are rejected rather than shifted
    into the following month.

    Args:
        text: Date text to parse.

    Returns:
        The parsed date, or None if the text is not a real date.

    Example:
        >>> parse_strict_date("29/02/2104")
        datetime.date(2104, 2, 29)
        >>> parse_strict_date("29/02/2100") is None
        True
    """
    if not isinstance(text, str):
        return None

    if _DATE_PATTERN.fullmatch(text) is None:
        return None

    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_travel_dates(
    departure_date: Optional[str],
    return_date: Optional[str],
) -> Optional[Tuple[date, date]]:
    """
    Parse both trip dates.

    Returns:
        (departure, return) dates, or None if either fails to parse.
    """
    departure_on = parse_strict_date(departure_date)
    if departure_on is None:
        return None

    return_on = parse_strict_date(return_date)
    if return_on is None:
        return None

    return departure_on, return_on


def check_date_order(
    departure_on: date,
    return_on: date,
    today: date,
) -> Optional[RejectionReason]:
    """
    Check departure is not in the past and return is not before departure.

    Same-day departure and same-day return are both allowed.
    """
    if departure_on < today:
        return RejectionReason.DEPARTURE_IN_PAST
    if return_on < departure_on:
        return RejectionReason.RETURN_BEFORE_DEPARTURE
    return None


# -------------------------
# Seating / occupant compatibility
# -------------------------


def check_seating_compatibility(
    seating_class: str,
    emergency_row_seating: bool,
    children: int,
    infants: int,
    rules: SearchRules = DEFAULT_RULES,
) -> Optional[RejectionReason]:
    """
    Check the class and emergency-row choice suit the passengers.

    Emergency rows exist only in economy, whoever is travelling; they
    cannot seat children or infants. First class cannot seat children
    and business class cannot seat infants.

    Args:
        seating_class: Validated seating class.
        emergency_row_seating: Whether an emergency row is requested.
        children: Number of children.
        infants: Number of infants.
        rules: Class restrictions.

    Returns:
        None if compatible, otherwise the first failed rule.
    """
    if emergency_row_seating:
        if seating_class != rules.emergency_row_class:
            return RejectionReason.EMERGENCY_ROW_NOT_ECONOMY
        if children > 0 or infants > 0:
            return RejectionReason.EMERGENCY_ROW_WITH_MINORS

    if children > 0 and seating_class == rules.no_children_class:
        return RejectionReason.CHILD_IN_FIRST_CLASS
    if infants > 0 and seating_class == rules.no_infants_class:
        return RejectionReason.INFANT_IN_BUSINESS_CLASS

    return None
