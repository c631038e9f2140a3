"""
Fuel Calibration - fuel level sensor calibration and raw data analysis.

This package converts raw fuel level sensor codes into volume using a
calibration (tarirovka) table and derives summary statistics:

- Calibration XML parsing and raw series CSV parsing
- Divisor rescaling that always starts from the original table volumes
- Clamped piecewise-linear code to volume interpolation
- Timestamped series derivation and statistics against the table
- CSV export and template documents for both input formats
"""

__version__ = "1.0.0"

# Core models
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
from fuel_calibration.core.exceptions import (
    FuelCalibrationError,
    InvalidArgumentError,
    ParseError,
)

# Configuration
from fuel_calibration.config import Settings, configure, get_settings

# Curves
from fuel_calibration.curves import (
    CalibrationCurve,
    CalibrationParser,
    CSVExporter,
    calibration_template,
    default_export_filename,
    export_csv,
    load_calibration_file,
    parse_calibration,
    raw_series_template,
)

# Series
from fuel_calibration.series import (
    RawSeriesParser,
    format_date_time,
    load_raw_series_file,
    parse_date_time,
    parse_raw_series,
    to_timestamped_samples,
)

# Analysis
from fuel_calibration.analysis import StatisticsEngine, compute_statistics

# Session
from fuel_calibration.session import CalibrationSession

__all__ = [
    "__version__",
    # Models
    "CalibrationDocument",
    "CalibrationMeta",
    "CalibrationPoint",
    "RawSample",
    "SampleDeviation",
    "StatisticsSnapshot",
    "TimestampedSample",
    "ParseErrorKind",
    "RecordType",
    # Errors
    "FuelCalibrationError",
    "InvalidArgumentError",
    "ParseError",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    # Curves
    "CalibrationCurve",
    "CalibrationParser",
    "CSVExporter",
    "calibration_template",
    "default_export_filename",
    "export_csv",
    "load_calibration_file",
    "parse_calibration",
    "raw_series_template",
    # Series
    "RawSeriesParser",
    "format_date_time",
    "load_raw_series_file",
    "parse_date_time",
    "parse_raw_series",
    "to_timestamped_samples",
    # Analysis
    "StatisticsEngine",
    "compute_statistics",
    # Session
    "CalibrationSession",
]
