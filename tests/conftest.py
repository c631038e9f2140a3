"""
Shared fixtures for fuel calibration tests.
"""

from datetime import timezone

import pytest

from fuel_calibration.config import Settings, configure
from fuel_calibration.core.models import CalibrationPoint
from fuel_calibration.curves.curve import CalibrationCurve


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Run every test against default settings."""
    for name in ("FUEL_SERIES_TIMEZONE", "FUEL_SERIES_DELIMITER", "FUEL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = configure(Settings(_env_file=None))
    yield settings
    configure(Settings(_env_file=None))


@pytest.fixture
def utc():
    return timezone.utc


@pytest.fixture
def calibration_xml():
    """Calibration document with points given out of code order."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<vehicle>
  <calibrationDate>01.06.2025</calibrationDate>
  <sensor number="0">
    <value code="200">20</value>
    <value code="0">0</value>
    <value code="100">10</value>
  </sensor>
</vehicle>"""


@pytest.fixture
def raw_csv():
    """Raw series with a header row."""
    return (
        "Дата и время,Код\n"
        "28.06.2025 07:03:29,50\n"
        "28.06.2025 07:05:29,150\n"
        "28.06.2025 07:07:29,250\n"
    )


def _point(code: int, volume: float, label: str = "") -> CalibrationPoint:
    return CalibrationPoint(code=code, volume=volume, original_volume=volume, label=label)


@pytest.fixture
def make_point():
    """Factory for points whose original volume equals their volume."""
    return _point


@pytest.fixture
def simple_curve(make_point):
    """Curve (0,0), (100,10), (200,20) with divisor 1."""
    return CalibrationCurve.from_points(
        [make_point(0, 0.0), make_point(100, 10.0), make_point(200, 20.0)]
    )
