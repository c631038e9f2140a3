"""
Parser for raw fuel sensor readings exported as delimited text.

Each record is ``<date time>,<sensor code>``, e.g. ``28.06.2025 07:03:29,2535``.
An optional header row is detected by time/date keywords.
"""

import csv
import math
from pathlib import Path
from typing import Optional

from fuel_calibration.config import SeriesSettings, get_settings
from fuel_calibration.core.exceptions import ParseError
from fuel_calibration.core.logging import get_logger
from fuel_calibration.core.models import RawSample

logger = get_logger(__name__)


class RawSeriesParser:
    """
    Parser for raw sensor series.

    Rows whose code is not numeric are dropped; rows with fewer than two
    fields abort the parse with a row-numbered ParseError.
    """

    def __init__(
        self,
        delimiter: Optional[str] = None,
        header_keywords: Optional[list[str]] = None,
        settings: Optional[SeriesSettings] = None,
    ):
        """
        Initialize the parser.

        Args:
            delimiter: Field delimiter. Defaults to the configured one.
            header_keywords: Lowercase substrings marking a header line.
            settings: Series settings. Defaults to global settings.
        """
        settings = settings or get_settings().series
        self.delimiter = delimiter or settings.delimiter
        if header_keywords is None:
            header_keywords = settings.header_keyword_list
        self.header_keywords = [keyword.lower() for keyword in header_keywords]

    def parse(self, path: Path) -> list[RawSample]:
        """
        Parse a raw series file.

        Args:
            path: Path to the CSV/TXT file.

        Returns:
            Samples in input order.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return self.parse_string(path.read_text(encoding="utf-8-sig"))

    def parse_string(self, content: str) -> list[RawSample]:
        """
        Parse raw series text.

        Args:
            content: Delimited text, one record per line.

        Returns:
            Samples in input order with consecutive sequence indices.

        Raises:
            ParseError: MALFORMED_ROW for a line with fewer than two fields,
                EMPTY_RESULT if no row survives.
        """
        lines = content.lstrip("\ufeff").strip().splitlines()
        if lines and self.is_header(lines[0]):
            lines = lines[1:]

        samples: list[RawSample] = []
        dropped = 0
        for row_number, line in enumerate(lines, 1):
            fields = self.split_fields(line)
            if len(fields) < 2:
                raise ParseError.malformed_row(row_number, line)

            code = self._parse_code(fields[1])
            if code is None:
                dropped += 1
                logger.debug(f"Dropping row {row_number}: non-numeric code {fields[1]!r}")
                continue

            samples.append(
                RawSample(sequence_index=len(samples), code=code, raw_label=fields[0])
            )

        if not samples:
            raise ParseError.empty_result("raw data")

        if dropped:
            logger.info(f"Parsed {len(samples)} raw samples, dropped {dropped} non-numeric rows")
        else:
            logger.debug(f"Parsed {len(samples)} raw samples")
        return samples

    def is_header(self, line: str) -> bool:
        """A first line is a header if it is delimited and mentions time/date."""
        if self.delimiter not in line:
            return False
        lowered = line.lower()
        return any(keyword in lowered for keyword in self.header_keywords)

    def split_fields(self, line: str) -> list[str]:
        """Split one line into unquoted, trimmed fields."""
        try:
            row = next(csv.reader([line], delimiter=self.delimiter, skipinitialspace=True), [])
        except csv.Error:
            return []
        return [field.replace('"', "").strip() for field in row]

    @staticmethod
    def _parse_code(text: str) -> Optional[float]:
        try:
            value = float(text)
        except ValueError:
            return None
        return value if math.isfinite(value) else None


def parse_raw_series(content: str) -> list[RawSample]:
    """
    Parse raw series text with default settings.

    Args:
        content: Delimited text, one record per line.

    Returns:
        Samples in input order.
    """
    return RawSeriesParser().parse_string(content)


def load_raw_series_file(path: Path) -> list[RawSample]:
    """
    Convenience function to load a raw series file.

    Args:
        path: Path to the CSV/TXT file.

    Returns:
        Samples in input order.
    """
    return RawSeriesParser().parse(path)
