"""
Tests for flight_search schema definitions.

Validates that:
1. Requests and validated searches are immutable
2. SearchRules rejects inconsistent limits
3. ValidationResult carries exactly one outcome
4. SearchRequestSchema checks batch structure and keeps extra columns
"""

from dataclasses import FrozenInstanceError
from datetime import date

import pandas as pd
import pandera as pa
import pytest

from flight_search.schemas.batch import SearchRequestSchema
from flight_search.schemas.request import FlightSearchRequest, ValidatedSearch
from flight_search.schemas.result import RejectionReason, ValidationResult
from flight_search.schemas.rules import DEFAULT_RULES, SearchRules
from flight_search.schemas.vocabulary import (
    AIRPORT_CODES,
    SEATING_CLASSES,
    SeatingClass,
)


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def request_obj() -> FlightSearchRequest:
    return FlightSearchRequest(
        departure_date="22/06/2030",
        departure_airport_code="syd",
        emergency_row_seating=False,
        return_date="29/06/2030",
        destination_airport_code="mel",
        seating_class="economy",
        adult_passenger_count=2,
        child_passenger_count=3,
        infant_passenger_count=1,
    )


@pytest.fixture
def valid_batch_df() -> pd.DataFrame:
    """Create a DataFrame matching SearchRequestSchema."""
    return pd.DataFrame({
        "departure_date": ["22/06/2030", "22/06/2030"],
        "departure_airport_code": ["syd", "mel"],
        "emergency_row_seating": [False, True],
        "return_date": ["29/06/2030", "29/06/2030"],
        "destination_airport_code": ["mel", "pvg"],
        "seating_class": ["economy", "economy"],
        "adult_passenger_count": [2, 3],
        "child_passenger_count": [4, 0],
        "infant_passenger_count": [0, 0],
    })


# -------------------------
# Vocabulary tests
# -------------------------


class TestVocabulary:
    """Tests for fixed vocabularies."""

    def test_airport_codes(self) -> None:
        """Test the seven accepted airports."""
        assert AIRPORT_CODES == {"syd", "mel", "lax", "cdg", "del", "pvg", "doh"}

    def test_seating_classes_match_enum(self) -> None:
        """Test class names come from SeatingClass."""
        assert SEATING_CLASSES == {"economy", "premium economy", "business", "first"}
        assert SeatingClass("premium economy") is SeatingClass.PREMIUM_ECONOMY

    def test_vocabularies_are_frozen(self) -> None:
        """Test vocabularies cannot be mutated."""
        assert isinstance(AIRPORT_CODES, frozenset)
        assert isinstance(SEATING_CLASSES, frozenset)


# -------------------------
# FlightSearchRequest / ValidatedSearch tests
# -------------------------


class TestFlightSearchRequest:
    """Tests for the request dataclass."""

    def test_total_passengers(self, request_obj: FlightSearchRequest) -> None:
        """Test total sums all passenger types."""
        assert request_obj.total_passengers == 6

    def test_immutable(self, request_obj: FlightSearchRequest) -> None:
        """Test fields cannot be reassigned."""
        with pytest.raises(FrozenInstanceError):
            request_obj.seating_class = "first"  # type: ignore[misc]

    def test_as_dict_has_nine_fields(self, request_obj: FlightSearchRequest) -> None:
        """Test as_dict returns exactly the request fields."""
        data = request_obj.as_dict()
        assert len(data) == 9
        assert data["departure_airport_code"] == "syd"


class TestValidatedSearch:
    """Tests for the held search dataclass."""

    def test_mirrors_request_fields(self, request_obj: FlightSearchRequest) -> None:
        """Test every request field is readable on the search."""
        search = ValidatedSearch(
            request=request_obj,
            departure_on=date(2030, 6, 22),
            return_on=date(2030, 6, 29),
            validated_on=date(2030, 6, 1),
        )

        for name, value in request_obj.as_dict().items():
            assert getattr(search, name) == value
        assert search.trip_length_days == 7

    def test_immutable(self, request_obj: FlightSearchRequest) -> None:
        """Test the search cannot be modified in place."""
        search = ValidatedSearch(
            request=request_obj,
            departure_on=date(2030, 6, 22),
            return_on=date(2030, 6, 22),
            validated_on=date(2030, 6, 1),
        )
        with pytest.raises(FrozenInstanceError):
            search.request = request_obj  # type: ignore[misc]


# -------------------------
# SearchRules tests
# -------------------------


class TestSearchRules:
    """Tests for rule configuration."""

    def test_defaults(self) -> None:
        """Test default rules match the booking conditions."""
        assert DEFAULT_RULES.min_passengers == 1
        assert DEFAULT_RULES.max_passengers == 9
        assert DEFAULT_RULES.max_children_per_adult == 2
        assert DEFAULT_RULES.max_infants_per_adult == 1
        assert DEFAULT_RULES.emergency_row_class == "economy"
        assert DEFAULT_RULES.no_children_class == "first"
        assert DEFAULT_RULES.no_infants_class == "business"

    def test_min_greater_than_max_raises(self) -> None:
        """Test min_passengers > max_passengers is rejected."""
        with pytest.raises(ValueError, match="min_passengers"):
            SearchRules(min_passengers=5, max_passengers=4)

    def test_negative_ratio_raises(self) -> None:
        """Test negative ratios are rejected."""
        with pytest.raises(ValueError, match="max_children_per_adult"):
            SearchRules(max_children_per_adult=-1)
        with pytest.raises(ValueError, match="max_infants_per_adult"):
            SearchRules(max_infants_per_adult=-1)

    def test_empty_vocabulary_raises(self) -> None:
        """Test empty airport or class sets are rejected."""
        with pytest.raises(ValueError, match="airports"):
            SearchRules(airports=frozenset())
        with pytest.raises(ValueError, match="seating_classes"):
            SearchRules(seating_classes=frozenset())

    def test_emergency_class_must_be_accepted(self) -> None:
        """Test emergency_row_class must be one of the seating classes."""
        with pytest.raises(ValueError, match="emergency_row_class"):
            SearchRules(emergency_row_class="coach")


# -------------------------
# ValidationResult tests
# -------------------------


class TestValidationResult:
    """Tests for validation outcomes."""

    def test_reject(self, request_obj: FlightSearchRequest) -> None:
        """Test a rejected result carries the reason only."""
        result = ValidationResult.reject(request_obj, RejectionReason.SAME_AIRPORT)

        assert not result.accepted
        assert result.search is None
        assert result.reason is RejectionReason.SAME_AIRPORT

    def test_accept(self, request_obj: FlightSearchRequest) -> None:
        """Test an accepted result carries the search only."""
        search = ValidatedSearch(
            request=request_obj,
            departure_on=date(2030, 6, 22),
            return_on=date(2030, 6, 29),
            validated_on=date(2030, 6, 1),
        )
        result = ValidationResult.accept(search)

        assert result.accepted
        assert result.request is request_obj
        assert result.reason is None

    def test_needs_exactly_one_outcome(self, request_obj: FlightSearchRequest) -> None:
        """Test neither-or-both outcomes are rejected."""
        with pytest.raises(ValueError):
            ValidationResult(request=request_obj)

    def test_fourteen_reasons(self) -> None:
        """Test every rule failure has its own reason."""
        assert len(RejectionReason) == 14


# -------------------------
# SearchRequestSchema tests
# -------------------------


class TestSearchRequestSchema:
    """Tests for batch structure validation."""

    def test_valid_df_passes(self, valid_batch_df: pd.DataFrame) -> None:
        """Test a well-formed batch validates."""
        validated = SearchRequestSchema.validate(valid_batch_df)
        assert len(validated) == 2

    def test_extra_columns_preserved(self, valid_batch_df: pd.DataFrame) -> None:
        """Test extra columns pass through unchanged."""
        df = valid_batch_df.assign(request_id=["a", "b"])
        validated = SearchRequestSchema.validate(df)

        assert list(validated["request_id"]) == ["a", "b"]

    def test_missing_column_raises(self, valid_batch_df: pd.DataFrame) -> None:
        """Test a missing request column raises SchemaErrors under lazy validation."""
        df = valid_batch_df.drop(columns=["seating_class"])
        with pytest.raises(pa.errors.SchemaErrors):
            SearchRequestSchema.validate(df, lazy=True)

    def test_text_counts_raise(self, valid_batch_df: pd.DataFrame) -> None:
        """Test non-numeric counts raise SchemaErrors."""
        df = valid_batch_df.assign(adult_passenger_count=["two", "three"])
        with pytest.raises(pa.errors.SchemaErrors):
            SearchRequestSchema.validate(df, lazy=True)

    def test_fractional_counts_raise(self, valid_batch_df: pd.DataFrame) -> None:
        """Test 1.7 adults is rejected rather than truncated to 1."""
        df = valid_batch_df.assign(adult_passenger_count=[1.7, 2.0])
        with pytest.raises(pa.errors.SchemaErrors):
            SearchRequestSchema.validate(df, lazy=True)

    @pytest.mark.parametrize("flags", [["False", "False"], ["True", "False"]])
    def test_text_emergency_flag_raises(
        self, valid_batch_df: pd.DataFrame, flags: list
    ) -> None:
        """Test "False"/"True" strings are rejected rather than read as truthy."""
        df = valid_batch_df.assign(emergency_row_seating=flags)
        with pytest.raises(pa.errors.SchemaErrors):
            SearchRequestSchema.validate(df, lazy=True)

    def test_text_columns_coerced(self, valid_batch_df: pd.DataFrame) -> None:
        """Test text columns still accept non-string values as text."""
        df = valid_batch_df.assign(seating_class=[1, 2])
        validated = SearchRequestSchema.validate(df)
        assert list(validated["seating_class"]) == ["1", "2"]

    def test_negative_counts_allowed_structurally(
        self, valid_batch_df: pd.DataFrame
    ) -> None:
        """Test negative counts are left for the business rules."""
        df = valid_batch_df.assign(child_passenger_count=[-1, 0])
        validated = SearchRequestSchema.validate(df)
        assert validated["child_passenger_count"].iloc[0] == -1
