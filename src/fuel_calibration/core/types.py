"""
Domain-specific types and enumerations for fuel sensor calibration.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    """Categories of input document failures."""

    MALFORMED_DOCUMENT = "malformed_document"
    EMPTY_RESULT = "empty_result"
    MALFORMED_ROW = "malformed_row"
    MALFORMED_DATE_TIME = "malformed_date_time"


class RecordType(str, Enum):
    """Row discriminator used in the tabular export."""

    CALIBRATION = "calibration"
    MEASUREMENT = "measurement"
