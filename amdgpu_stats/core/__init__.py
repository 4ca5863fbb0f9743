"""
AMDGPU Stats Core Module
"""

from .errors import GpuInfoError, HwmonNotFoundError, MetricParseError, SysfsReadError
from .units import Unit, format_units
from .sysfs import Representation, read_metric
from .discovery import detect_amd_gpus, find_hwmon_dir
from .metrics import DeviceResult, GPUMetrics
from .gpu_monitor import GPUMonitor, read_gpu_data

__all__ = [
    "GpuInfoError", "HwmonNotFoundError", "MetricParseError", "SysfsReadError",
    "Unit", "format_units", "Representation", "read_metric",
    "detect_amd_gpus", "find_hwmon_dir", "DeviceResult", "GPUMetrics",
    "GPUMonitor", "read_gpu_data",
]
