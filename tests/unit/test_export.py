"""
Tests for the tabular CSV export.
"""

import csv
import io
from datetime import date

from fuel_calibration.config import ExportSettings
from fuel_calibration.core.models import CalibrationMeta, TimestampedSample
from fuel_calibration.core.types import RecordType
from fuel_calibration.curves.curve import CalibrationCurve
from fuel_calibration.curves.export import (
    EXPORT_HEADER,
    CSVExporter,
    default_export_filename,
    export_csv,
)


def _sample(label, code, volume):
    return TimestampedSample(timestamp_millis=0, volume=volume, raw_label=label, code=code)


def _read(text):
    return list(csv.reader(io.StringIO(text)))


class TestCSVExporter:
    """Tests for CSVExporter rendering."""

    def test_header_only_when_empty(self):
        """Test an empty export still has the header row."""
        text = export_csv(CalibrationCurve.empty(), CalibrationMeta(), [])

        assert text == "Тип,Дата/Время,Код датчика,Объем (л)"

    def test_calibration_rows(self, simple_curve):
        """Test one row per calibration point with the document date."""
        meta = CalibrationMeta(calibration_date="01.06.2025")

        rows = _read(export_csv(simple_curve, meta, []))

        assert rows[0] == list(EXPORT_HEADER)
        assert rows[1:] == [
            ["Калибровка", "01.06.2025", "0", "0"],
            ["Калибровка", "01.06.2025", "100", "10"],
            ["Калибровка", "01.06.2025", "200", "20"],
        ]

    def test_unknown_date(self, simple_curve):
        """Test a missing calibration date prints as unknown."""
        rows = _read(export_csv(simple_curve, CalibrationMeta(), []))

        assert rows[1][1] == "Неизвестно"

    def test_measurement_rows(self, simple_curve):
        """Test measurement rows carry label, code and one-decimal volume."""
        samples = [_sample("28.06.2025 07:03:29", 2535, 12.345)]

        rows = _read(export_csv(simple_curve, CalibrationMeta(), samples))

        assert rows[-1] == ["Измерение", "28.06.2025 07:03:29", "2535", "12.3"]

    def test_row_count(self, simple_curve):
        """Test header plus points plus samples."""
        samples = [_sample("a", 1, 0.1), _sample("b", 2, 0.2)]

        rows = _read(export_csv(simple_curve, CalibrationMeta(), samples))

        assert len(rows) == 1 + 3 + 2

    def test_divisor_in_header(self, simple_curve):
        """Test a rescaled curve notes the divisor in the volume column."""
        rows = _read(export_csv(simple_curve.rescale(10), CalibrationMeta(), []))

        assert rows[0][-1] == "Объем (л) (делитель: 10)"
        assert rows[2][-1] == "1"

    def test_fractional_values(self, simple_curve):
        """Test non-integer volumes and divisors keep their decimals."""
        rows = _read(export_csv(simple_curve.rescale(4), CalibrationMeta(), []))

        assert rows[0][-1] == "Объем (л) (делитель: 4)"
        assert rows[2][-1] == "2.5"

    def test_no_trailing_newline(self, simple_curve):
        """Test rows are joined by newlines without a final one."""
        text = export_csv(simple_curve, CalibrationMeta(), [])

        assert not text.endswith("\n")
        assert text.count("\n") == 3

    def test_custom_settings(self, simple_curve):
        """Test labels and precision come from settings."""
        settings = ExportSettings(
            measurement_decimals=3,
            unknown_date_label="n/a",
            calibration_type_label="cal",
            measurement_type_label="meas",
        )
        exporter = CSVExporter(settings=settings, delimiter=";")

        text = exporter.render(simple_curve, CalibrationMeta(), [_sample("t", 5, 0.5)])

        lines = text.split("\n")
        assert lines[1] == "cal;n/a;0;0"
        assert lines[-1] == "meas;t;5;0.500"
        assert exporter.type_label(RecordType.MEASUREMENT) == "meas"

    def test_export_to_file(self, tmp_path, simple_curve):
        """Test writing the table to disk."""
        path = tmp_path / "out" / "export.csv"

        written = CSVExporter().export(simple_curve, CalibrationMeta(), [], path)

        assert written == path
        assert path.read_text(encoding="utf-8").startswith("Тип,")

    def test_format_name(self):
        """Test the exporter format name."""
        assert CSVExporter().get_format_name() == "CSV"


class TestDefaultExportFilename:
    """Tests for export file naming."""

    def test_dated_name(self):
        """Test the name carries the ISO date."""
        assert default_export_filename(date(2025, 6, 28)) == "fuel-data-export-2025-06-28.csv"

    def test_custom_prefix(self):
        """Test an explicit prefix."""
        assert default_export_filename(date(2025, 1, 2), prefix="tank") == "tank-2025-01-02.csv"
