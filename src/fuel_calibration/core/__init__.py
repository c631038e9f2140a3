"""
Core data models, types and errors for the fuel sensor calibration engine.
"""

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
    SampleDeviation,
    StatisticsSnapshot,
    TimestampedSample,
)
from fuel_calibration.core.types import ParseErrorKind, RecordType

__all__ = [
    # Models
    "CalibrationDocument",
    "CalibrationMeta",
    "CalibrationPoint",
    "RawSample",
    "SampleDeviation",
    "StatisticsSnapshot",
    "TimestampedSample",
    # Types
    "ParseErrorKind",
    "RecordType",
    # Errors
    "FuelCalibrationError",
    "InvalidArgumentError",
    "ParseError",
]
