"""
Raw sensor series parsing and timestamp derivation.
"""

from fuel_calibration.series.parser import (
    RawSeriesParser,
    load_raw_series_file,
    parse_raw_series,
)
from fuel_calibration.series.timestamps import (
    format_date_time,
    parse_date_time,
    to_timestamped_samples,
)

__all__ = [
    "RawSeriesParser",
    "load_raw_series_file",
    "parse_raw_series",
    "format_date_time",
    "parse_date_time",
    "to_timestamped_samples",
]
