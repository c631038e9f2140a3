"""
Calibration curve parsing, interpolation, templates and export.
"""

from fuel_calibration.curves.curve import CalibrationCurve, validate_divisor
from fuel_calibration.curves.export import (
    CSVExporter,
    Exporter,
    default_export_filename,
    export_csv,
)
from fuel_calibration.curves.parser import (
    CalibrationParser,
    load_calibration_file,
    parse_calibration,
)
from fuel_calibration.curves.templates import (
    calibration_template,
    raw_series_template,
    write_templates,
)

__all__ = [
    # Curve
    "CalibrationCurve",
    "validate_divisor",
    # Parser
    "CalibrationParser",
    "load_calibration_file",
    "parse_calibration",
    # Export
    "CSVExporter",
    "Exporter",
    "default_export_filename",
    "export_csv",
    # Templates
    "calibration_template",
    "raw_series_template",
    "write_templates",
]
