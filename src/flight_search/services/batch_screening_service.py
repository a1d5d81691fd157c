"""
Batch Screening Service - rule pipeline over DataFrames of requests.

Screens many search requests at once (e.g. a CSV export of saved
searches) without committing any of them, annotating each row with its
outcome.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

import pandas as pd

from flight_search.schemas.batch import SearchRequestSchema
from flight_search.schemas.request import FlightSearchRequest
from flight_search.services.search_validator import SearchRequestValidator

logger = logging.getLogger(__name__)

ACCEPTED_COLUMN = "accepted"
REASON_COLUMN = "rejection_reason"

_REQUEST_COLUMNS = (
    "departure_date",
    "departure_airport_code",
    "emergency_row_seating",
    "return_date",
    "destination_airport_code",
    "seating_class",
    "adult_passenger_count",
    "child_passenger_count",
    "infant_passenger_count",
)


class BatchScreeningService:
    """
    Applies a SearchRequestValidator to every row of a DataFrame.

    Structure is checked once at the boundary with SearchRequestSchema;
    business rules are then evaluated per row. Rows are independent:
    screening never changes the validator's held search unless
    commit_last_accepted is requested.

    Attributes:
        _validator: Validator whose rules and clock are applied.
    """

    def __init__(self, validator: SearchRequestValidator) -> None:
        self._validator = validator

    def screen(
        self,
        requests_df: pd.DataFrame,
        commit_last_accepted: bool = False,
    ) -> pd.DataFrame:
        """
        Screen a DataFrame of search requests.

        Args:
            requests_df: One request per row with the nine request
                columns. Extra columns are preserved.
            commit_last_accepted: If True, commit the last accepted row
                to the validator's held search.

        Returns:
            Copy of the input with `accepted` (bool) and
            `rejection_reason` (str or None) columns appended.

        Raises:
            pandera.errors.SchemaErrors: If columns are missing or have the
                wrong dtype. All structural failures are collected and
                reported together (lazy validation).
        """
        start_time = time.perf_counter()

        validated_df = SearchRequestSchema.validate(requests_df, lazy=True)
        requests = self._to_requests(validated_df)

        accepted: List[bool] = []
        reasons: List[Optional[str]] = []
        last_accepted: Optional[FlightSearchRequest] = None

        for request in requests:
            result = self._validator.evaluate(request)
            accepted.append(result.accepted)
            reasons.append(result.reason.value if result.reason else None)
            if result.accepted:
                last_accepted = request

        screened_df = validated_df.copy()
        screened_df[ACCEPTED_COLUMN] = pd.Series(
            accepted, index=screened_df.index, dtype=bool
        )
        screened_df[REASON_COLUMN] = pd.Series(
            reasons, index=screened_df.index, dtype=object
        )

        if commit_last_accepted and last_accepted is not None:
            self._validator.validate_request(last_accepted)

        logger.info(
            "Screened %d search requests: %d accepted in %.0fms",
            len(requests),
            sum(accepted),
            (time.perf_counter() - start_time) * 1000,
        )
        return screened_df

    @staticmethod
    def _to_requests(df: pd.DataFrame) -> List[FlightSearchRequest]:
        """Convert validated rows into FlightSearchRequest objects."""
        records = df.loc[:, list(_REQUEST_COLUMNS)].to_dict(orient="records")
        return [
            FlightSearchRequest(
                departure_date=str(row["departure_date"]),
                departure_airport_code=str(row["departure_airport_code"]),
                emergency_row_seating=bool(row["emergency_row_seating"]),
                return_date=str(row["return_date"]),
                destination_airport_code=str(row["destination_airport_code"]),
                seating_class=str(row["seating_class"]),
                adult_passenger_count=int(row["adult_passenger_count"]),
                child_passenger_count=int(row["child_passenger_count"]),
                infant_passenger_count=int(row["infant_passenger_count"]),
            )
            for row in records
        ]
