"""
Statistics of raw sensor series against a calibration curve.
"""

from fuel_calibration.analysis.statistics import (
    StatisticsEngine,
    compute_statistics,
    find_nearest_point,
    sample_deviations,
)

__all__ = [
    "StatisticsEngine",
    "compute_statistics",
    "find_nearest_point",
    "sample_deviations",
]
