"""Error types for GPU telemetry collection."""

from pathlib import Path
from typing import Optional


class GpuInfoError(Exception):
    """Base error for anything that stops a GPU from being reported."""


class SysfsReadError(GpuInfoError):
    """A sysfs file or directory is missing or unreadable."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class MetricParseError(GpuInfoError, ValueError):
    """A sysfs file does not hold a number of the expected kind."""

    def __init__(self, path: Path, raw: str, expected: str):
        self.path = Path(path)
        self.raw = raw
        self.expected = expected
        super().__init__(f"{self.path}: invalid {expected} value {raw!r}")


class HwmonNotFoundError(GpuInfoError):
    """No hwmon directory exposing a temperature sensor was found."""

    def __init__(self, device: Path, reason: Optional[str] = None):
        self.device = Path(device)
        message = f"No hwmon directory found for {self.device}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
