#!/usr/bin/env python3
"""
AMDGPU Stats - AMD GPU telemetry from sysfs

Reads temperature, core clock, power draw, load and VRAM usage of every AMD
GPU and prints one JSON object per GPU. Failed GPUs get an error line on
stderr instead.

Usage:
    amdgpu-stats
    python -m amdgpu_stats
"""

import sys
from pathlib import Path
from typing import Optional, TextIO

from .config import DEVICE_ERROR_PREFIX, DRM_CLASS_DIR, FATAL_PREFIX, NO_GPUS_MESSAGE
from .core import GPUMonitor, GpuInfoError
from .utils.logging_config import get_log_file_path, get_logger, setup_logging

logger = get_logger('main')


def run(
    drm_root: Path = DRM_CLASS_DIR,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Collect and print telemetry for every AMD GPU.

    Returns:
        Process exit code: 0 once discovery succeeded, 1 if it failed.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    monitor = GPUMonitor(drm_root)
    try:
        results = monitor.collect()
    except GpuInfoError as e:
        logger.error(f"Discovery failed: {e}")
        print(f"{FATAL_PREFIX}: {e}", file=err)
        return 1

    if not results:
        print(NO_GPUS_MESSAGE, file=out)
        return 0

    for result in results:
        if result.ok:
            print(result.metrics.to_json(), file=out)
        else:
            print(f"{DEVICE_ERROR_PREFIX}: {result.error}", file=err)
    return 0


def main():
    """Main entry point for AMDGPU Stats."""
    setup_logging()
    logger.info(f"AMDGPU Stats starting up (log file: {get_log_file_path()})")

    exit_code = run()

    logger.info(f"AMDGPU Stats finished (exit code: {exit_code})")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
