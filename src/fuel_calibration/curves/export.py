"""
Tabular export of calibration and measurement data.

Produces the flat CSV table users download: one row per calibration
point followed by one row per timestamped measurement.
"""

import csv
import io
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Optional

from fuel_calibration.config import ExportSettings, get_settings
from fuel_calibration.core.logging import get_logger
from fuel_calibration.core.models import CalibrationMeta, TimestampedSample
from fuel_calibration.core.types import RecordType
from fuel_calibration.curves.curve import CalibrationCurve

logger = get_logger(__name__)

EXPORT_HEADER = ("Тип", "Дата/Время", "Код датчика", "Объем (л)")


class Exporter(ABC):
    """Abstract base class for data exporters."""

    @abstractmethod
    def render(
        self,
        curve: CalibrationCurve,
        meta: CalibrationMeta,
        samples: Sequence[TimestampedSample],
    ) -> str:
        """Render the export document as text."""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get format name."""
        pass

    def export(
        self,
        curve: CalibrationCurve,
        meta: CalibrationMeta,
        samples: Sequence[TimestampedSample],
        path: Path,
    ) -> Path:
        """Render and write the export document to a file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        content = self.render(curve, meta, samples)
        with open(path, "w", encoding=self.encoding, newline="") as f:
            f.write(content)
        logger.info(f"Exported {self.get_format_name()} to {path}")
        return path

    @property
    def encoding(self) -> str:
        return "utf-8"


def _format_number(value: float) -> str:
    """Shortest text for a number: 100.0 -> '100', 0.5 -> '0.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class CSVExporter(Exporter):
    """
    Export calibration points and measurements to a delimited table.

    The header is ``Тип,Дата/Время,Код датчика,Объем (л)``; when the curve
    was rescaled the volume column notes the divisor.
    """

    def __init__(self, settings: Optional[ExportSettings] = None, delimiter: str = ","):
        """
        Initialize CSV exporter.

        Args:
            settings: Export labels and precision. Defaults to global settings.
            delimiter: Field delimiter.
        """
        self.settings = settings or get_settings().export
        self.delimiter = delimiter

    @property
    def encoding(self) -> str:
        return self.settings.encoding

    def header(self, curve: CalibrationCurve) -> list[str]:
        header = list(EXPORT_HEADER)
        if curve.divisor != 1:
            header[-1] = f"{header[-1]} (делитель: {_format_number(curve.divisor)})"
        return header

    def type_label(self, record_type: RecordType) -> str:
        if record_type is RecordType.CALIBRATION:
            return self.settings.calibration_type_label
        return self.settings.measurement_type_label

    def rows(
        self,
        curve: CalibrationCurve,
        meta: CalibrationMeta,
        samples: Sequence[TimestampedSample],
    ) -> list[list[str]]:
        """Build the table as a list of rows (header included)."""
        date_label = meta.calibration_date or self.settings.unknown_date_label
        decimals = self.settings.measurement_decimals

        table = [self.header(curve)]
        for point in curve.points:
            table.append(
                [
                    self.type_label(RecordType.CALIBRATION),
                    date_label,
                    str(point.code),
                    _format_number(point.volume),
                ]
            )
        for sample in samples:
            table.append(
                [
                    self.type_label(RecordType.MEASUREMENT),
                    sample.raw_label,
                    _format_number(sample.code),
                    f"{sample.volume:.{decimals}f}",
                ]
            )
        return table

    def render(
        self,
        curve: CalibrationCurve,
        meta: CalibrationMeta,
        samples: Sequence[TimestampedSample],
    ) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=self.delimiter, lineterminator="\n")
        writer.writerows(self.rows(curve, meta, samples))
        return buffer.getvalue().rstrip("\n")

    def get_format_name(self) -> str:
        return "CSV"


def default_export_filename(today: Optional[date] = None, prefix: Optional[str] = None) -> str:
    """
    Name for a downloaded export, e.g. ``fuel-data-export-2025-06-28.csv``.

    Args:
        today: Date to stamp; defaults to the current date.
        prefix: File name prefix; defaults to the configured prefix.
    """
    today = today or date.today()
    prefix = prefix or get_settings().export.filename_prefix
    return f"{prefix}-{today.isoformat()}.csv"


def export_csv(
    curve: CalibrationCurve,
    meta: CalibrationMeta,
    samples: Sequence[TimestampedSample],
) -> str:
    """Render the CSV export with default settings."""
    return CSVExporter().render(curve, meta, samples)
