"""
GPU Monitor - collects telemetry for every AMD GPU concurrently
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config import (
    BUSY_FILE,
    DRM_CLASS_DIR,
    FREQ_FILE,
    POWER_FILE,
    TEMP_FILE,
    VRAM_TOTAL_FILE,
    VRAM_USED_FILE,
)
from ..utils.logging_config import get_logger, timed
from .discovery import detect_amd_gpus, find_hwmon_dir
from .errors import GpuInfoError
from .metrics import DeviceResult, GPUMetrics
from .sysfs import Representation, read_metric
from .units import Unit, format_units

logger = get_logger('gpu_monitor')


def read_gpu_data(gpu_path: Path, hwmon_dir: Path) -> GPUMetrics:
    """
    Read and format the six telemetry values of one GPU.

    Any failed read aborts the whole record.
    """
    temperature = read_metric(hwmon_dir, TEMP_FILE, Representation.INTEGER,
                              lambda millideg: millideg / 1000.0)
    core_clock = read_metric(hwmon_dir, FREQ_FILE, Representation.FLOAT,
                             lambda hz: hz)
    # Power is reported in microwatts
    power = read_metric(hwmon_dir, POWER_FILE, Representation.FLOAT,
                        lambda uw: uw / 1_000_000.0)
    load = read_metric(gpu_path, BUSY_FILE, Representation.FLOAT,
                       lambda pct: pct / 100.0)
    vram_used = read_metric(gpu_path, VRAM_USED_FILE, Representation.FLOAT,
                            lambda b: b)
    vram_total = read_metric(gpu_path, VRAM_TOTAL_FILE, Representation.FLOAT,
                             lambda b: b)

    return GPUMetrics(
        temperature=format_units(Unit.TEMPERATURE, temperature),
        core_clock=format_units(Unit.FREQUENCY, core_clock),
        power_usage=format_units(Unit.POWER, power),
        gpu_load=format_units(Unit.UTILIZATION, load),
        vram_used=format_units(Unit.MEMORY, vram_used),
        vram_total=format_units(Unit.MEMORY, vram_total),
    )


def collect_device(gpu_path: Path) -> GPUMetrics:
    """Locate the sensors of one GPU and read its telemetry"""
    hwmon_dir = find_hwmon_dir(gpu_path)
    return read_gpu_data(gpu_path, hwmon_dir)


class GPUMonitor:
    """
    Collects telemetry for all AMD GPUs found under a DRM class directory.

    Each GPU is read on its own worker thread. Results come back in discovery
    order, one per GPU, holding either metrics or the error that stopped it.
    """

    def __init__(self, drm_root: Path = DRM_CLASS_DIR):
        self.drm_root = Path(drm_root)

    def detect(self) -> list[Path]:
        """Discover AMD GPUs; SysfsReadError if the DRM dir can't be listed"""
        return detect_amd_gpus(self.drm_root)

    @timed
    def collect(self) -> list[DeviceResult]:
        """Discover GPUs and read all of them concurrently"""
        gpus = self.detect()
        if not gpus:
            return []

        with ThreadPoolExecutor(max_workers=len(gpus), thread_name_prefix="gpu") as pool:
            futures = [(gpu, pool.submit(collect_device, gpu)) for gpu in gpus]

            results = []
            for gpu, future in futures:
                try:
                    results.append(DeviceResult(device=gpu, metrics=future.result()))
                except GpuInfoError as e:
                    logger.warning(f"{gpu.name}: {e}")
                    results.append(DeviceResult(device=gpu, error=e))

        logger.info(f"Collected {sum(r.ok for r in results)}/{len(results)} GPU(s)")
        return results
