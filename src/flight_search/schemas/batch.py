"""
Batch search request schema using Pandera.

Structural contract for DataFrames of search requests (CSV imports,
bulk screening). Business rules are NOT checked here - only shape and
types; the rule pipeline runs per row afterwards.
"""

import pandera as pa
from pandera.typing import Series


class SearchRequestSchema(pa.DataFrameModel):
    """
    Nine-column contract for batch search requests.

    Only the text columns are coerced. The emergency-row flag must
    already be a bool column and the counts an int column: coercing
    "False" to bool gives True, and coercing 1.7 to int gives 1.

    Counts are not range-checked here: negative counts are a business
    rule rejection, not a malformed row.
    """

    departure_date: Series[str] = pa.Field(
        nullable=False,
        coerce=True,
        description="Departure date, dd/MM/yyyy",
    )
    departure_airport_code: Series[str] = pa.Field(
        nullable=False,
        coerce=True,
        description="Origin airport code (e.g., 'syd')",
    )
    emergency_row_seating: Series[bool] = pa.Field(
        nullable=False,
        coerce=False,
        description="Emergency-row seating requested (bool dtype only)",
    )
    return_date: Series[str] = pa.Field(
        nullable=False,
        coerce=True,
        description="Return date, dd/MM/yyyy",
    )
    destination_airport_code: Series[str] = pa.Field(
        nullable=False,
        coerce=True,
        description="Destination airport code",
    )
    seating_class: Series[str] = pa.Field(
        nullable=False,
        coerce=True,
        description="Seating class name",
    )
    adult_passenger_count: Series[int] = pa.Field(
        coerce=False, description="Adults (int dtype only)"
    )
    child_passenger_count: Series[int] = pa.Field(
        coerce=False, description="Children (int dtype only)"
    )
    infant_passenger_count: Series[int] = pa.Field(
        coerce=False, description="Infants (int dtype only)"
    )

    class Config:
        # Extra columns (request ids, source file, ...) pass through unchanged
        strict = False
        # Schema-wide coercion would override the per-field settings above
        coerce = False
        name = "SearchRequestSchema"
        description = "Batch flight search requests"
