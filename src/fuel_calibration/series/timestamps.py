"""
Date/time handling for raw series labels.

Labels look like ``28.06.2025 07:03:29`` (day.month.year hours:minutes:seconds)
and carry no timezone; they are read in a single configured reference zone.
"""

from collections.abc import Sequence
from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from fuel_calibration.config import get_settings
from fuel_calibration.core.exceptions import ParseError
from fuel_calibration.core.logging import get_logger
from fuel_calibration.core.models import RawSample, TimestampedSample
from fuel_calibration.curves.curve import CalibrationCurve

logger = get_logger(__name__)


def _resolve_zone(tz: Optional[tzinfo | str]) -> Optional[tzinfo]:
    """None means the configured zone, which itself defaults to local time."""
    if tz is None:
        tz = get_settings().series.timezone
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _split_fields(text: str, part: str, separator: str) -> list[int]:
    fields = part.split(separator)
    if len(fields) != 3:
        raise ParseError.malformed_date_time(text)
    try:
        return [int(field) for field in fields]
    except ValueError as e:
        raise ParseError.malformed_date_time(text) from e


def parse_date_time(text: str, tz: Optional[tzinfo | str] = None) -> int:
    """
    Convert a ``DD.MM.YYYY HH:MM:SS`` label to milliseconds since the epoch.

    Args:
        text: Label text.
        tz: Reference zone (tzinfo or IANA name). Defaults to the configured
            zone, or local time when none is configured.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        ParseError: MALFORMED_DATE_TIME when the label does not have the
            expected shape or names an impossible date.
    """
    parts = text.strip().split(" ")
    if len(parts) != 2:
        raise ParseError.malformed_date_time(text)

    day, month, year = _split_fields(text, parts[0], ".")
    hours, minutes, seconds = _split_fields(text, parts[1], ":")

    zone = _resolve_zone(tz)
    # Out-of-range fields surface as OverflowError or OSError, not ValueError
    try:
        moment = datetime(year, month, day, hours, minutes, seconds, tzinfo=zone)
        seconds_since_epoch = int(moment.timestamp())
    except (ValueError, OverflowError, OSError) as e:
        raise ParseError.malformed_date_time(text) from e

    return seconds_since_epoch * 1000


def format_date_time(
    timestamp_millis: int,
    with_seconds: bool = False,
    tz: Optional[tzinfo | str] = None,
) -> str:
    """
    Format a timestamp as a short axis label, ``DD.MM, HH:MM[:SS]``.

    Args:
        timestamp_millis: Milliseconds since the epoch.
        with_seconds: Append seconds (tooltip style).
        tz: Reference zone, resolved as in parse_date_time.
    """
    zone = _resolve_zone(tz)
    moment = datetime.fromtimestamp(timestamp_millis / 1000, tz=timezone.utc)
    moment = moment.astimezone(zone) if zone is not None else moment.astimezone()
    pattern = "%d.%m, %H:%M:%S" if with_seconds else "%d.%m, %H:%M"
    return moment.strftime(pattern)


def to_timestamped_samples(
    curve: CalibrationCurve,
    raw_samples: Sequence[RawSample],
    tz: Optional[tzinfo | str] = None,
) -> list[TimestampedSample]:
    """
    Derive the timestamped view of a raw series.

    Each label is parsed and each code converted through the curve. Samples
    whose label is not a valid date/time are left out of the view; they are
    not an error for the series as a whole.

    Args:
        curve: Calibration curve used for code to volume conversion.
        raw_samples: Parsed raw series.
        tz: Reference zone for labels.

    Returns:
        Timestamped samples in input order.
    """
    zone = _resolve_zone(tz)
    result: list[TimestampedSample] = []
    for sample in raw_samples:
        try:
            millis = parse_date_time(sample.raw_label, zone)
        except ParseError as e:
            logger.warning(f"Skipping sample {sample.sequence_index}: {e.message}")
            continue
        result.append(
            TimestampedSample(
                timestamp_millis=millis,
                volume=curve.interpolate(sample.code),
                raw_label=sample.raw_label,
                code=sample.code,
            )
        )
    return result
