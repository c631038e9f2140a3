"""
Template documents for both input formats.

Users download these as a starting point; both parse cleanly with the
package parsers.
"""

from pathlib import Path

# (code, volume) pairs of the sample tank table
TEMPLATE_CALIBRATION_POINTS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (289, 100),
    (437, 200),
    (617, 300),
    (725, 400),
    (863, 500),
    (980, 600),
    (1134, 700),
    (1302, 800),
    (1445, 900),
    (1575, 1000),
)

TEMPLATE_RAW_ROWS: tuple[tuple[str, int], ...] = (
    ("28.06.2025 07:03:29", 2535),
    ("28.06.2025 07:05:29", 2534),
    ("28.06.2025 07:07:29", 2535),
    ("28.06.2025 07:09:29", 2535),
)

CALIBRATION_TEMPLATE_FILENAME = "calibration-template.xml"
RAW_SERIES_TEMPLATE_FILENAME = "raw-data-template.csv"


def calibration_template(sensor_number: int = 0) -> str:
    """Return the calibration XML template."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        "<vehicle>",
        f'  <sensor number="{sensor_number}">',
    ]
    for code, volume in TEMPLATE_CALIBRATION_POINTS:
        lines.append(f'    <value code="{code}">{volume}</value>')
    lines.extend(["  </sensor>", "</vehicle>"])
    return "\n".join(lines)


def raw_series_template(delimiter: str = ",") -> str:
    """Return the raw series CSV template (no header row)."""
    return "\n".join(f"{label}{delimiter}{code}" for label, code in TEMPLATE_RAW_ROWS)


def write_templates(directory: Path) -> tuple[Path, Path]:
    """
    Write both templates into a directory.

    Args:
        directory: Target directory, created if missing.

    Returns:
        Paths of the calibration and raw series templates.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    calibration_path = directory / CALIBRATION_TEMPLATE_FILENAME
    raw_path = directory / RAW_SERIES_TEMPLATE_FILENAME
    calibration_path.write_text(calibration_template(), encoding="utf-8")
    raw_path.write_text(raw_series_template(), encoding="utf-8")
    return calibration_path, raw_path
