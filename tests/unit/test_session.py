"""
Tests for CalibrationSession state handling.
"""

import pytest

from fuel_calibration.config import get_settings
from fuel_calibration.core.exceptions import InvalidArgumentError, ParseError
from fuel_calibration.session.workspace import CalibrationSession


@pytest.fixture
def session(calibration_xml, raw_csv):
    """Session with both documents loaded, dates read in UTC."""
    get_settings().series.timezone = "UTC"
    session = CalibrationSession()
    session.load_calibration(calibration_xml, source="calibration.xml")
    session.load_raw_series(raw_csv, source="raw.csv")
    return session


class TestCalibrationSession:
    """Tests for CalibrationSession."""

    def test_initial_state(self):
        """Test a fresh session is empty."""
        session = CalibrationSession()

        assert not session.has_data
        assert session.curve.is_empty
        assert session.divisor == 1.0
        assert session.meta.calibration_date == ""
        assert session.statistics().is_empty

    def test_loaded_state(self, session):
        """Test loaded documents are exposed."""
        assert session.has_data
        assert session.curve.codes == [0, 100, 200]
        assert session.meta.calibration_date == "01.06.2025"
        assert len(session.raw_samples) == 3

    def test_divisor_does_not_compound(self, session):
        """Test successive divisor changes derive from document volumes."""
        session.set_divisor(2)
        session.set_divisor(10)

        assert session.curve.volumes == [0.0, 1.0, 2.0]

    def test_divisor_before_load(self, calibration_xml):
        """Test a divisor set before upload applies to the upload."""
        session = CalibrationSession(divisor=10)

        curve = session.load_calibration(calibration_xml)

        assert curve.volumes == [0.0, 1.0, 2.0]

    def test_default_divisor_from_settings(self):
        """Test the initial divisor comes from settings."""
        get_settings().calibration.default_divisor = 4.0

        assert CalibrationSession().divisor == 4.0

    def test_invalid_divisor_keeps_state(self, session):
        """Test a rejected divisor leaves the curve unchanged."""
        with pytest.raises(InvalidArgumentError):
            session.set_divisor(0)

        assert session.divisor == 1.0
        assert session.curve.volumes == [0.0, 10.0, 20.0]

    def test_failed_calibration_load_keeps_state(self, session):
        """Test a bad document does not replace the current table."""
        with pytest.raises(ParseError):
            session.load_calibration("not xml")

        assert session.curve.codes == [0, 100, 200]

    def test_failed_series_load_keeps_state(self, session):
        """Test a bad raw series does not replace the current samples."""
        with pytest.raises(ParseError):
            session.load_raw_series("a,1\nbroken")

        assert len(session.raw_samples) == 3

    def test_statistics_with_out_of_range_label(self):
        """Test a label too large for a date keeps the session usable."""
        session = CalibrationSession()
        session.load_raw_series("28.06.2025 07:03:29,50\n01.01.99999999999999999999 00:00:00,150")

        snapshot = session.statistics()

        assert snapshot.sample_count == 2
        assert len(session.timestamped_samples()) == 1
        assert len(session.export_csv().splitlines()) == 2

    def test_timestamped_samples(self, session):
        """Test the timestamped view uses the current curve."""
        samples = session.timestamped_samples()

        assert [s.volume for s in samples] == pytest.approx([5.0, 15.0, 20.0])
        assert samples[1].timestamp_millis - samples[0].timestamp_millis == 120_000

    def test_statistics(self, session):
        """Test statistics over the loaded data."""
        snapshot = session.statistics()

        assert snapshot.sample_count == 3
        assert snapshot.calibration_point_count == 3
        assert snapshot.calibration_average == pytest.approx(10.0)
        assert snapshot.raw_average == pytest.approx(40.0 / 3)
        # nearest volumes 0 (tie), 10 (tie), 20 -> deviations 5, 5, 0
        assert snapshot.max_deviation == pytest.approx(5.0)
        assert snapshot.average_deviation == pytest.approx(10.0 / 3)

    def test_load_files(self, tmp_path, calibration_xml, raw_csv):
        """Test loading both documents from disk."""
        calibration_path = tmp_path / "calibration.xml"
        raw_path = tmp_path / "raw.csv"
        calibration_path.write_text(calibration_xml, encoding="utf-8")
        raw_path.write_text(raw_csv, encoding="utf-8")
        session = CalibrationSession()

        session.load_calibration_file(calibration_path)
        session.load_raw_series_file(raw_path)

        assert len(session.curve) == 3
        assert len(session.raw_samples) == 3

    def test_export(self, session, tmp_path):
        """Test the export reflects the current state."""
        session.set_divisor(10)

        text = session.export_csv()
        path = session.export_csv_file(tmp_path / "export.csv")

        assert text.splitlines()[0].endswith("(делитель: 10)")
        assert len(text.splitlines()) == 1 + 3 + 3
        assert path.read_text(encoding="utf-8") == text

    def test_clear(self, session):
        """Test clear forgets data but keeps the divisor."""
        session.set_divisor(5)

        session.clear()

        assert not session.has_data
        assert session.divisor == 5.0
