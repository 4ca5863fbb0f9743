"""
Sysfs metric reader - read, parse and convert one sensor value
"""

import re
from enum import Enum
from pathlib import Path
from typing import Callable, Union

from .errors import MetricParseError, SysfsReadError

Number = Union[int, float]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Representation(Enum):
    """On-disk encoding of a sensor value"""
    INTEGER = "integer"
    FLOAT = "float"


def read_text(path: Path) -> str:
    """Read a sysfs file, converting OS failures to SysfsReadError"""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise SysfsReadError(path, reason) from e


def parse_value(raw: str, representation: Representation, path: Path) -> Number:
    """Parse trimmed sysfs text as the given representation"""
    text = raw.strip()

    if representation is Representation.INTEGER:
        if not _INTEGER_RE.fullmatch(text):
            raise MetricParseError(path, text, "integer")
        return int(text)

    # float() tolerates digit separators and non-ASCII digits, sysfs writes neither
    if not text or "_" in text or not text.isascii():
        raise MetricParseError(path, text, "float")
    try:
        return float(text)
    except ValueError as e:
        raise MetricParseError(path, text, "float") from e


def read_metric(
    base: Path,
    rel_path: str,
    representation: Representation,
    transform: Callable[[Number], float],
) -> float:
    """
    Read one metric from sysfs.

    Args:
        base: Directory the metric path is relative to (card or hwmon dir)
        rel_path: Path of the sensor file below ``base``
        representation: How the file encodes its number
        transform: Converts the raw number to natural units

    Returns:
        The transformed value.

    Raises:
        SysfsReadError: The file is missing or unreadable.
        MetricParseError: The content is not a number of the expected kind.
    """
    path = Path(base) / rel_path
    raw = read_text(path)
    return transform(parse_value(raw, representation, path))
