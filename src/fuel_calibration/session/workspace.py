"""
Calibration session: the caller-side state of one working session.

Holds the last uploaded calibration table and raw series and re-derives
the curve, the timestamped view and the statistics whenever an upload or
the divisor changes. Everything it hands out is an immutable record.
"""

from pathlib import Path
from typing import Optional

from fuel_calibration.analysis.statistics import StatisticsEngine
from fuel_calibration.config import get_settings
from fuel_calibration.core.logging import LogContext, get_logger, log_operation
from fuel_calibration.core.models import (
    CalibrationDocument,
    CalibrationMeta,
    RawSample,
    StatisticsSnapshot,
    TimestampedSample,
)
from fuel_calibration.curves.curve import CalibrationCurve, validate_divisor
from fuel_calibration.curves.export import CSVExporter
from fuel_calibration.curves.parser import CalibrationParser
from fuel_calibration.series.parser import RawSeriesParser
from fuel_calibration.series.timestamps import to_timestamped_samples

logger = get_logger(__name__)


class CalibrationSession:
    """
    Current calibration table, raw series and divisor.

    The parsed document is retained so a divisor change rebuilds the curve
    from the original volumes. A failed load leaves the previous state
    untouched.

    Example:
        session = CalibrationSession()
        session.load_calibration(xml_text)
        session.load_raw_series(csv_text)
        session.set_divisor(10)
        print(session.statistics().summary())
    """

    def __init__(
        self,
        divisor: Optional[float] = None,
        calibration_parser: Optional[CalibrationParser] = None,
        series_parser: Optional[RawSeriesParser] = None,
        exporter: Optional[CSVExporter] = None,
    ):
        if divisor is None:
            divisor = get_settings().calibration.default_divisor
        self._divisor = validate_divisor(divisor)
        self._calibration_parser = calibration_parser or CalibrationParser()
        self._series_parser = series_parser or RawSeriesParser()
        self._exporter = exporter or CSVExporter()

        self._document: Optional[CalibrationDocument] = None
        self._curve = CalibrationCurve.empty()
        self._raw_samples: tuple[RawSample, ...] = ()

    @property
    def divisor(self) -> float:
        return self._divisor

    @property
    def curve(self) -> CalibrationCurve:
        return self._curve

    @property
    def meta(self) -> CalibrationMeta:
        if self._document is None:
            return CalibrationMeta()
        return self._document.meta

    @property
    def raw_samples(self) -> tuple[RawSample, ...]:
        return self._raw_samples

    @property
    def has_data(self) -> bool:
        """True once either a calibration table or a raw series is loaded."""
        return not self._curve.is_empty or bool(self._raw_samples)

    def load_calibration(self, content: str, source: str = "<string>") -> CalibrationCurve:
        """
        Parse a calibration document and make it current.

        Args:
            content: Calibration XML text.
            source: Name used in log messages.

        Returns:
            The new curve with the current divisor applied.
        """
        with LogContext(source=source), log_operation(logger, "load_calibration"):
            document = self._calibration_parser.parse_string(content)
            self._document = document
            self._curve = CalibrationCurve.from_points(document.points, self._divisor)
        logger.info(f"Calibration table loaded ({len(self._curve)} points)")
        return self._curve

    def load_calibration_file(self, path: Path) -> CalibrationCurve:
        path = Path(path)
        return self.load_calibration(path.read_text(encoding="utf-8-sig"), source=path.name)

    def load_raw_series(self, content: str, source: str = "<string>") -> tuple[RawSample, ...]:
        """
        Parse a raw series and make it current.

        Args:
            content: Delimited raw series text.
            source: Name used in log messages.

        Returns:
            The parsed samples.
        """
        with LogContext(source=source), log_operation(logger, "load_raw_series"):
            self._raw_samples = tuple(self._series_parser.parse_string(content))
        logger.info(f"Raw data loaded ({len(self._raw_samples)} points)")
        return self._raw_samples

    def load_raw_series_file(self, path: Path) -> tuple[RawSample, ...]:
        path = Path(path)
        return self.load_raw_series(path.read_text(encoding="utf-8-sig"), source=path.name)

    def set_divisor(self, divisor: float) -> CalibrationCurve:
        """
        Change the divisor and rebuild the curve from the original volumes.

        Raises:
            InvalidArgumentError: If the divisor is not a positive finite number.
        """
        self._divisor = validate_divisor(divisor)
        if self._document is not None:
            self._curve = CalibrationCurve.from_points(self._document.points, self._divisor)
            logger.info(f"Calibration recalculated with divisor {self._divisor:g}")
        return self._curve

    def timestamped_samples(self) -> list[TimestampedSample]:
        """Timestamped view of the raw series through the current curve."""
        return to_timestamped_samples(self._curve, self._raw_samples)

    def statistics(self) -> StatisticsSnapshot:
        """Statistics over the current curve and raw series."""
        return StatisticsEngine.compute(
            self._curve, self.timestamped_samples(), self._raw_samples
        )

    def export_csv(self) -> str:
        """Render the export table for the current state."""
        return self._exporter.render(self._curve, self.meta, self.timestamped_samples())

    def export_csv_file(self, path: Path) -> Path:
        """Write the export table to a file."""
        return self._exporter.export(self._curve, self.meta, self.timestamped_samples(), path)

    def clear(self) -> None:
        """Forget loaded data; the divisor is kept."""
        self._document = None
        self._curve = CalibrationCurve.empty()
        self._raw_samples = ()
