"""
AMDGPU Stats Configuration
"""

from pathlib import Path

# DRM device class directory
DRM_CLASS_DIR = Path("/sys/class/drm")

# Only card entries are GPUs (renderD*, version, connectors filtered by vendor)
CARD_PREFIX = "card"

# PCI vendor ID for AMD/ATI
AMD_VENDOR_ID = "0x1002"
VENDOR_FILE = "device/vendor"

# hwmon directories are numbered at boot, so they have to be probed
HWMON_SUBDIR = "device/hwmon"
HWMON_PROBE_FILE = "temp1_input"

# Sensor files relative to the hwmon directory
TEMP_FILE = "temp1_input"            # millidegrees Celsius
FREQ_FILE = "freq1_input"            # Hz
POWER_FILE = "power1_average"        # microwatts

# Sensor files relative to the DRM card directory
BUSY_FILE = "device/gpu_busy_percent"
VRAM_USED_FILE = "device/mem_info_vram_used"
VRAM_TOTAL_FILE = "device/mem_info_vram_total"

# Output keys, in emission order
JSON_KEYS = {
    "temperature": "GPU Temperature",
    "gpu_load": "GPU Load",
    "core_clock": "GPU Core Clock",
    "power_usage": "GPU Power Usage",
    "vram_used": "GPU VRAM Usage",
    "vram_total": "GPU VRAM Total",
}

# Messages
NO_GPUS_MESSAGE = "No AMD GPUs detected."
DEVICE_ERROR_PREFIX = "Error reading GPU data"
FATAL_PREFIX = "Fatal"

# Logging
APP_NAME = "amdgpu_stats"
LOG_DIR = Path.home() / ".amdgpu_stats" / "logs"
SLOW_OPERATION_MS = 100

# One rotating log file, the tool runs once per poll
LOG_FILE_NAME = f"{APP_NAME}.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
