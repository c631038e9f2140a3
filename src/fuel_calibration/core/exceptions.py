"""
Exceptions for the fuel sensor calibration engine.

Provides a small hierarchy of errors:
- FuelCalibrationError (base)
  - ParseError (document, row, date/time failures)
  - InvalidArgumentError (bad caller-supplied values such as the divisor)

All exceptions carry a human-readable message plus context details.
"""

from typing import Any, Optional

from fuel_calibration.core.types import ParseErrorKind


class FuelCalibrationError(Exception):
    """Base exception for calibration engine errors.

    Attributes:
        message: Human-readable error message.
        details: Additional error details.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"Details: {details_str}")
        return " | ".join(parts)


class ParseError(FuelCalibrationError):
    """An input document could not be turned into typed points.

    Raised when:
    - The calibration markup is not well-formed
    - A document yields no usable entries
    - A raw series row has fewer than two fields
    - A date/time label does not have the expected shape
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        row_number: Optional[int] = None,
        text: Optional[str] = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        details["kind"] = kind.value
        if row_number is not None:
            details["row"] = row_number
        if text is not None:
            details["text"] = text
        super().__init__(message, details=details)
        self.kind = kind
        self.row_number = row_number
        self.text = text

    @classmethod
    def malformed_document(cls, reason: str) -> "ParseError":
        return cls(
            f"Document cannot be parsed: {reason}",
            kind=ParseErrorKind.MALFORMED_DOCUMENT,
        )

    @classmethod
    def empty_result(cls, what: str) -> "ParseError":
        return cls(f"No {what} found in document", kind=ParseErrorKind.EMPTY_RESULT)

    @classmethod
    def malformed_row(cls, row_number: int, line: str) -> "ParseError":
        return cls(
            f"Invalid row format at row {row_number}: {line}",
            kind=ParseErrorKind.MALFORMED_ROW,
            row_number=row_number,
            text=line,
        )

    @classmethod
    def malformed_date_time(cls, text: str) -> "ParseError":
        return cls(
            f"Invalid date/time format: {text}",
            kind=ParseErrorKind.MALFORMED_DATE_TIME,
            text=text,
        )


class InvalidArgumentError(FuelCalibrationError, ValueError):
    """A caller-supplied value is outside its allowed range."""

    def __init__(self, message: str, argument: str, value: Any):
        super().__init__(message, details={"argument": argument, "value": value})
        self.argument = argument
        self.value = value
