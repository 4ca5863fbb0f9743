"""
GPU discovery - find AMD cards under the DRM class and their hwmon sensors
"""

from pathlib import Path

from ..config import (
    AMD_VENDOR_ID,
    CARD_PREFIX,
    DRM_CLASS_DIR,
    HWMON_PROBE_FILE,
    HWMON_SUBDIR,
    VENDOR_FILE,
)
from ..utils.logging_config import get_logger, PerfTimer
from .errors import HwmonNotFoundError, SysfsReadError

logger = get_logger('discovery')


def is_amd_gpu(card_path: Path) -> bool:
    """
    Check the PCI vendor ID of a DRM card.

    A missing or unreadable vendor file just means "not ours".
    """
    vendor_file = card_path / VENDOR_FILE
    try:
        vendor = vendor_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Skipping {card_path.name}: cannot read vendor ({e})")
        return False

    if vendor != AMD_VENDOR_ID:
        logger.debug(f"Skipping {card_path.name}: vendor {vendor!r}")
        return False
    return True


def detect_amd_gpus(drm_root: Path = DRM_CLASS_DIR) -> list[Path]:
    """
    List AMD GPU card directories under the DRM class directory.

    Returns:
        Card paths in directory listing order.

    Raises:
        SysfsReadError: The DRM class directory itself cannot be listed.
    """
    drm_root = Path(drm_root)
    try:
        with PerfTimer(f"list {drm_root}", logger):
            entries = list(drm_root.iterdir())
    except OSError as e:
        raise SysfsReadError(drm_root, e.strerror or str(e)) from e

    gpus = [
        entry for entry in entries
        if entry.name.startswith(CARD_PREFIX) and is_amd_gpu(entry)
    ]
    logger.info(f"Found {len(gpus)} AMD GPU(s) among {len(entries)} DRM entries")
    return gpus


def find_hwmon_dir(gpu_path: Path) -> Path:
    """
    Find the hwmon directory that carries the GPU temperature sensor.

    Raises:
        HwmonNotFoundError: No hwmon child has the probe file, or the hwmon
            directory can't be listed.
    """
    base = Path(gpu_path) / HWMON_SUBDIR
    try:
        candidates = list(base.iterdir())
    except OSError as e:
        raise HwmonNotFoundError(gpu_path, e.strerror or str(e)) from e

    for candidate in candidates:
        if (candidate / HWMON_PROBE_FILE).is_file():
            logger.debug(f"{gpu_path.name}: using {candidate}")
            return candidate

    raise HwmonNotFoundError(gpu_path)
