"""
Calibration curve: sorted (code, volume) points with rescaling and
clamped piecewise-linear interpolation.
"""

import math
from collections.abc import Iterable
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from fuel_calibration.core.exceptions import InvalidArgumentError
from fuel_calibration.core.models import CalibrationPoint


def validate_divisor(divisor: float) -> float:
    """Return the divisor as float or raise InvalidArgumentError."""
    try:
        value = float(divisor)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"Divisor must be a number, got {divisor!r}", argument="divisor", value=divisor
        ) from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(
            f"Divisor must be a positive finite number, got {divisor!r}",
            argument="divisor",
            value=divisor,
        )
    return value


class CalibrationCurve(BaseModel):
    """
    Interpolation table mapping sensor codes to volume.

    Points are kept sorted ascending by code (stable for equal codes).
    Each point retains its original document volume, so rescaling never
    compounds: ``curve.rescale(d1).rescale(d2)`` equals ``curve.rescale(d2)``.
    """

    model_config = ConfigDict(frozen=True)

    # Declared before points so the points validator can see it
    divisor: float = Field(default=1.0, gt=0.0)
    points: tuple[CalibrationPoint, ...] = Field(default_factory=tuple)

    @field_validator("points", mode="after")
    @classmethod
    def sort_points(
        cls, v: tuple[CalibrationPoint, ...], info: ValidationInfo
    ) -> tuple[CalibrationPoint, ...]:
        """Derive volumes from the divisor and sort stably by code."""
        divisor = info.data.get("divisor")
        if divisor is not None:
            v = tuple(p.rescaled(divisor) for p in v)
        return tuple(sorted(v, key=lambda p: p.code))

    @classmethod
    def from_points(
        cls,
        points: Iterable[CalibrationPoint],
        divisor: float = 1.0,
    ) -> "CalibrationCurve":
        """
        Build a curve from parsed points, applying the divisor.

        Args:
            points: Points as produced by the calibration parser.
            divisor: Positive scalar applied to the original volumes.

        Returns:
            New CalibrationCurve.
        """
        return cls(points=tuple(points), divisor=validate_divisor(divisor))

    @classmethod
    def empty(cls) -> "CalibrationCurve":
        return cls()

    def rescale(self, divisor: float) -> "CalibrationCurve":
        """
        Return a new curve with volumes re-derived from the original values.

        Args:
            divisor: Positive scalar.

        Raises:
            InvalidArgumentError: If the divisor is not a positive finite number.
        """
        return CalibrationCurve.from_points(self.points, divisor)

    def interpolate(self, code: float) -> float:
        """
        Convert a sensor code to volume.

        An empty curve passes the code through unchanged. Codes outside the
        table are clamped to the first/last volume; inside, the first
        bracketing pair from the low end is linearly interpolated.
        """
        if not self.points:
            return code
        if math.isnan(code):
            return math.nan

        first = self.points[0]
        last = self.points[-1]
        if code <= first.code:
            return first.volume
        if code >= last.code:
            return last.volume

        # First index whose code is >= the input; its predecessor is < the input
        hi_idx = int(np.searchsorted(self.codes, code, side="left"))
        lo = self.points[hi_idx - 1]
        hi = self.points[hi_idx]

        span = hi.code - lo.code
        if span == 0:
            return lo.volume
        ratio = (code - lo.code) / span
        return lo.volume + ratio * (hi.volume - lo.volume)

    def interpolate_many(self, codes: Iterable[float]) -> list[float]:
        """Convert several codes to volume."""
        return [self.interpolate(code) for code in codes]

    @property
    def codes(self) -> list[int]:
        return [p.code for p in self.points]

    @property
    def volumes(self) -> list[float]:
        return [p.volume for p in self.points]

    @property
    def original_volumes(self) -> list[float]:
        return [p.original_volume for p in self.points]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def min_code(self) -> Optional[int]:
        return self.points[0].code if self.points else None

    @property
    def max_code(self) -> Optional[int]:
        return self.points[-1].code if self.points else None

    def to_numpy(self) -> tuple[np.ndarray, np.ndarray]:
        """Convert to numpy arrays (codes, volumes)."""
        return np.array(self.codes, dtype=float), np.array(self.volumes, dtype=float)

    def __len__(self) -> int:
        return len(self.points)

    def summary(self) -> str:
        """Generate a summary string."""
        if not self.points:
            return "Empty calibration curve"
        return (
            f"Points: {len(self.points)}, "
            f"Codes: {self.min_code}-{self.max_code}, "
            f"Volume: {self.points[0].volume:g}-{self.points[-1].volume:g} l, "
            f"Divisor: {self.divisor:g}"
        )
