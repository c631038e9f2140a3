"""
Parser for fuel sensor calibration (tarirovka) XML documents.

A calibration document holds a calibration date and one or more sensor
groups, each with ``<value code="...">volume</value>`` entries:

    <vehicle>
      <calibrationDate>01.06.2025</calibrationDate>
      <sensor number="0">
        <value code="0">0</value>
        <value code="289">100</value>
      </sensor>
    </vehicle>
"""

import math
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

from fuel_calibration.config import CalibrationSettings, get_settings
from fuel_calibration.core.exceptions import ParseError
from fuel_calibration.core.logging import get_logger
from fuel_calibration.core.models import CalibrationDocument, CalibrationMeta, CalibrationPoint

logger = get_logger(__name__)


def _parse_code(text: str) -> Optional[int]:
    """Integer sensor code; accepts '289' and '289.0', rejects negatives."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not value.is_integer() or value < 0:
        return None
    return int(value)


def _parse_volume(text: str) -> Optional[float]:
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class CalibrationParser:
    """
    Parser for calibration XML documents.

    Entries are visited in document order; point labels use that order
    (1-based), the returned points are sorted ascending by code.
    """

    def __init__(self, settings: Optional[CalibrationSettings] = None):
        """
        Initialize the parser.

        Args:
            settings: Tag/attribute names and label prefix. Defaults to global settings.
        """
        self.settings = settings or get_settings().calibration

    def parse(self, path: Path) -> CalibrationDocument:
        """
        Parse a calibration file.

        Args:
            path: Path to the XML file.

        Returns:
            CalibrationDocument with sorted points and metadata.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return self.parse_string(path.read_text(encoding="utf-8-sig"))

    def parse_string(self, content: str) -> CalibrationDocument:
        """
        Parse calibration document text.

        Args:
            content: XML document text.

        Returns:
            CalibrationDocument with sorted points and metadata.

        Raises:
            ParseError: MALFORMED_DOCUMENT if the text is not well-formed XML,
                EMPTY_RESULT if no usable entries were found.
        """
        root = self._parse_xml(content)
        meta = CalibrationMeta(calibration_date=self._find_calibration_date(root))

        points: list[CalibrationPoint] = []
        for index, element in enumerate(self._iter_entries(root)):
            point = self._parse_entry(element, index)
            if point is not None:
                points.append(point)

        if not points:
            raise ParseError.empty_result("calibration data")

        points.sort(key=lambda p: p.code)
        logger.debug(
            f"Parsed {len(points)} calibration points",
            extra={"calibration_date": meta.calibration_date},
        )
        return CalibrationDocument(points=tuple(points), meta=meta)

    def _parse_xml(self, content: str) -> ET.Element:
        # A leading BOM would hide the XML declaration from expat
        text = content.lstrip("\ufeff")
        try:
            return ET.fromstring(text)
        except ET.ParseError as e:
            raise ParseError.malformed_document(str(e)) from e

    def _find_calibration_date(self, root: ET.Element) -> str:
        element = next(root.iter(self.settings.date_tag), None)
        if element is None:
            return ""
        return "".join(element.itertext()).strip()

    def _iter_entries(self, element: ET.Element, in_group: bool = False) -> Iterator[ET.Element]:
        """Yield entry elements that sit inside a group, in document order."""
        in_group = in_group or element.tag == self.settings.group_tag
        for child in element:
            if in_group and child.tag == self.settings.entry_tag:
                yield child
            yield from self._iter_entries(child, in_group)

    def _parse_entry(self, element: ET.Element, index: int) -> Optional[CalibrationPoint]:
        code_text = element.get(self.settings.code_attribute)
        body = "".join(element.itertext()).strip()
        if not code_text or not body:
            return None

        code = _parse_code(code_text)
        volume = _parse_volume(body)
        if code is None or volume is None:
            logger.warning(
                f"Skipping calibration entry {index + 1}: code={code_text!r}, value={body!r}"
            )
            return None

        return CalibrationPoint(
            code=code,
            volume=volume,
            original_volume=volume,
            label=f"{self.settings.label_prefix} {index + 1}",
        )


def parse_calibration(content: str) -> CalibrationDocument:
    """
    Parse calibration document text with default settings.

    Args:
        content: XML document text.

    Returns:
        CalibrationDocument with sorted points and metadata.
    """
    return CalibrationParser().parse_string(content)


def load_calibration_file(path: Path) -> CalibrationDocument:
    """
    Convenience function to load a calibration XML file.

    Args:
        path: Path to the XML file.

    Returns:
        CalibrationDocument with sorted points and metadata.
    """
    return CalibrationParser().parse(path)
