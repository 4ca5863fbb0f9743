"""
Data structures for GPU telemetry
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import JSON_KEYS
from .errors import GpuInfoError


@dataclass(frozen=True)
class GPUMetrics:
    """Formatted telemetry for one GPU, every field ready for display"""
    temperature: str
    core_clock: str
    power_usage: str
    gpu_load: str
    vram_used: str
    vram_total: str

    def to_dict(self) -> dict[str, str]:
        """Map output keys to values, in output order"""
        return {key: getattr(self, field) for field, key in JSON_KEYS.items()}

    def to_json(self) -> str:
        """Single-line JSON object"""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class DeviceResult:
    """Outcome of collecting one device: metrics or the error that stopped it"""
    device: Path
    metrics: Optional[GPUMetrics] = None
    error: Optional[GpuInfoError] = None

    @property
    def ok(self) -> bool:
        return self.metrics is not None
