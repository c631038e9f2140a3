"""
Core data models for the fuel sensor calibration engine.

All models use Pydantic for validation and are frozen: every record is
rebuilt wholesale on upload or divisor change, never mutated in place.
"""

from pydantic import BaseModel, ConfigDict, Field


class CalibrationPoint(BaseModel):
    """A single (sensor code, volume) entry of a calibration table."""

    model_config = ConfigDict(frozen=True)

    code: int = Field(..., ge=0, description="Sensor code")
    volume: float = Field(..., description="Volume after applying the divisor")
    original_volume: float = Field(..., description="Volume as written in the document")
    label: str = Field(default="", description="Display label, e.g. 'Калибровка 3'")

    def rescaled(self, divisor: float) -> "CalibrationPoint":
        """Copy of this point with the volume derived from the original value."""
        return self.model_copy(update={"volume": self.original_volume / divisor})


class CalibrationMeta(BaseModel):
    """Metadata extracted once per calibration document."""

    model_config = ConfigDict(frozen=True)

    calibration_date: str = Field(default="")


class CalibrationDocument(BaseModel):
    """Result of parsing a calibration document."""

    model_config = ConfigDict(frozen=True)

    points: tuple[CalibrationPoint, ...] = Field(default_factory=tuple)
    meta: CalibrationMeta = Field(default_factory=CalibrationMeta)

    def __len__(self) -> int:
        return len(self.points)


class RawSample(BaseModel):
    """One raw sensor reading in input order."""

    model_config = ConfigDict(frozen=True)

    sequence_index: int = Field(..., ge=0, description="0-based index among emitted rows")
    code: float = Field(..., description="Raw sensor code")
    raw_label: str = Field(..., description="Original date/time text")


class TimestampedSample(BaseModel):
    """A raw reading associated with a point in time and converted to volume."""

    model_config = ConfigDict(frozen=True)

    timestamp_millis: int
    volume: float
    raw_label: str
    code: float


class SampleDeviation(BaseModel):
    """Per-sample comparison against the nearest calibration point."""

    model_config = ConfigDict(frozen=True)

    code: float
    volume: float = Field(..., description="Interpolated volume for the code")
    nearest_volume: float = Field(..., description="Volume of the nearest calibration point")
    deviation: float = Field(..., ge=0.0)


class StatisticsSnapshot(BaseModel):
    """Aggregate metrics over a calibration curve and a raw series."""

    model_config = ConfigDict(frozen=True)

    calibration_average: float = 0.0
    raw_average: float = 0.0
    average_deviation: float = 0.0
    max_deviation: float = 0.0
    sample_count: int = Field(default=0, ge=0)
    calibration_point_count: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        """True when neither calibration points nor samples contributed."""
        return self.sample_count == 0 and self.calibration_point_count == 0

    def summary(self) -> str:
        """Generate a summary string."""
        return (
            f"Calibration avg: {self.calibration_average:.1f} l, "
            f"Measured avg: {self.raw_average:.1f} l, "
            f"Max deviation: {self.max_deviation:.1f} l, "
            f"Avg deviation: {self.average_deviation:.1f} l, "
            f"Samples: {self.sample_count}, "
            f"Calibration points: {self.calibration_point_count}"
        )
