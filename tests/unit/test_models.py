"""
Tests for core data models and exceptions.
"""

import pytest
from pydantic import ValidationError

from fuel_calibration.core.exceptions import (
    FuelCalibrationError,
    InvalidArgumentError,
    ParseError,
)
from fuel_calibration.core.models import (
    CalibrationDocument,
    CalibrationMeta,
    CalibrationPoint,
    RawSample,
    StatisticsSnapshot,
)
from fuel_calibration.core.types import ParseErrorKind


class TestCalibrationPoint:
    """Tests for CalibrationPoint."""

    def test_rescaled_uses_original_volume(self):
        """Test rescaling derives from the original volume."""
        point = CalibrationPoint(code=100, volume=5.0, original_volume=50.0)

        assert point.rescaled(10).volume == 5.0
        assert point.rescaled(2).volume == 25.0
        assert point.rescaled(2).original_volume == 50.0

    def test_negative_code_rejected(self):
        """Test codes must be non-negative."""
        with pytest.raises(ValidationError):
            CalibrationPoint(code=-1, volume=0.0, original_volume=0.0)

    def test_frozen(self):
        """Test points are immutable."""
        point = CalibrationPoint(code=1, volume=1.0, original_volume=1.0)

        with pytest.raises(ValidationError):
            point.volume = 2.0


class TestDocumentAndSamples:
    """Tests for documents and raw samples."""

    def test_document_defaults(self):
        """Test an empty document."""
        document = CalibrationDocument()

        assert len(document) == 0
        assert document.meta == CalibrationMeta()

    def test_raw_sample_index_non_negative(self):
        """Test sequence indices cannot be negative."""
        with pytest.raises(ValidationError):
            RawSample(sequence_index=-1, code=1.0, raw_label="x")

    def test_snapshot_defaults(self):
        """Test a default snapshot is all zeros."""
        snapshot = StatisticsSnapshot()

        assert snapshot.is_empty
        assert snapshot.max_deviation == 0.0


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_malformed_row_message(self):
        """Test row errors name the row and line."""
        error = ParseError.malformed_row(4, "oops")

        assert error.kind is ParseErrorKind.MALFORMED_ROW
        assert error.message == "Invalid row format at row 4: oops"
        assert "row=4" in str(error)
        assert isinstance(error, FuelCalibrationError)

    def test_empty_result_message(self):
        """Test the empty result message."""
        assert ParseError.empty_result("raw data").message == "No raw data found in document"

    def test_malformed_date_time_keeps_text(self):
        """Test date/time errors keep the offending text."""
        error = ParseError.malformed_date_time("bad")

        assert error.text == "bad"
        assert error.details["kind"] == "malformed_date_time"

    def test_invalid_argument(self):
        """Test InvalidArgumentError details."""
        error = InvalidArgumentError("bad divisor", argument="divisor", value=0)

        assert isinstance(error, ValueError)
        assert str(error) == "bad divisor | Details: argument=divisor, value=0"
