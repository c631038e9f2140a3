"""
Summary statistics of a raw series against its calibration curve.
"""

from collections.abc import Sequence

import numpy as np

from fuel_calibration.core.logging import get_logger
from fuel_calibration.core.models import (
    CalibrationPoint,
    RawSample,
    SampleDeviation,
    StatisticsSnapshot,
    TimestampedSample,
)
from fuel_calibration.curves.curve import CalibrationCurve

logger = get_logger(__name__)

# Stand-in for the nearest point when the curve has no points
_ORIGIN_POINT = CalibrationPoint(code=0, volume=0.0, original_volume=0.0)


def find_nearest_point(curve: CalibrationCurve, code: float) -> CalibrationPoint:
    """
    Calibration point whose code is closest to ``code``.

    Ties go to the first point in stored order. An empty curve yields a
    zero point at code 0.
    """
    if curve.is_empty:
        return _ORIGIN_POINT
    distances = np.abs(np.asarray(curve.codes, dtype=float) - code)
    # argmin returns the first index among equal minima
    return curve.points[int(np.argmin(distances))]


def sample_deviations(
    curve: CalibrationCurve,
    raw_samples: Sequence[RawSample],
) -> list[SampleDeviation]:
    """
    Compare every raw sample with its nearest calibration point.

    Uses the original codes of all raw samples, whether or not their
    labels parse as dates.
    """
    deviations = []
    for sample in raw_samples:
        volume = curve.interpolate(sample.code)
        nearest = find_nearest_point(curve, sample.code)
        deviations.append(
            SampleDeviation(
                code=sample.code,
                volume=volume,
                nearest_volume=nearest.volume,
                deviation=abs(volume - nearest.volume),
            )
        )
    return deviations


class StatisticsEngine:
    """
    Computes a StatisticsSnapshot from a curve and a raw series.

    Stateless; every call recomputes from its inputs and never raises
    for empty inputs.
    """

    @staticmethod
    def compute(
        curve: CalibrationCurve,
        samples: Sequence[TimestampedSample],
        raw_samples: Sequence[RawSample],
    ) -> StatisticsSnapshot:
        """
        Compute aggregate metrics.

        Args:
            curve: Calibration curve (possibly empty).
            samples: Timestamped view of the raw series (date-parsed samples only).
            raw_samples: Full raw series.

        Returns:
            StatisticsSnapshot with averages, deviations and counts.
        """
        calibration_average = float(np.mean(curve.volumes)) if len(curve) else 0.0
        raw_average = float(np.mean([s.volume for s in samples])) if samples else 0.0

        deviations = np.array([d.deviation for d in sample_deviations(curve, raw_samples)])
        if deviations.size:
            average_deviation = float(deviations.mean())
            max_deviation = float(deviations.max())
        else:
            average_deviation = 0.0
            max_deviation = 0.0

        snapshot = StatisticsSnapshot(
            calibration_average=calibration_average,
            raw_average=raw_average,
            average_deviation=average_deviation,
            max_deviation=max_deviation,
            sample_count=len(raw_samples),
            calibration_point_count=len(curve),
        )
        logger.debug(snapshot.summary())
        return snapshot


def compute_statistics(
    curve: CalibrationCurve,
    samples: Sequence[TimestampedSample],
    raw_samples: Sequence[RawSample],
) -> StatisticsSnapshot:
    """Convenience wrapper around StatisticsEngine.compute."""
    return StatisticsEngine.compute(curve, samples, raw_samples)
