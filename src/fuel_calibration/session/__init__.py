"""
Caller-side session state for uploads and divisor changes.
"""

from fuel_calibration.session.workspace import CalibrationSession

__all__ = ["CalibrationSession"]
