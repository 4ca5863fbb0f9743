"""
Unit formatting - turns raw sensor values into display strings
"""

from enum import Enum


class Unit(Enum):
    TEMPERATURE = "temperature"  # °C
    MEMORY = "memory"            # bytes -> KB/MB/...
    UTILIZATION = "utilization"  # 0.0-1.0 -> %
    POWER = "power"              # W
    FREQUENCY = "frequency"      # Hz -> kHz/MHz/...


# (suffix, threshold) pairs, largest first.
# Sizes under 1 KB print as a plain byte count, so there is no "B" row.
BYTE_SUFFIXES: tuple[tuple[str, float], ...] = (
    ("TB", 1024.0 ** 4),
    ("GB", 1024.0 ** 3),
    ("MB", 1024.0 ** 2),
    ("KB", 1024.0),
)

HERTZ_SUFFIXES: tuple[tuple[str, float], ...] = (
    ("GHz", 1_000_000_000.0),
    ("MHz", 1_000_000.0),
    ("kHz", 1_000.0),
    ("Hz", 1.0),
)


def format_scaled(value: float, suffixes: tuple[tuple[str, float], ...]) -> str:
    """
    Scale a value by the first threshold it reaches and append that suffix.

    Values below every threshold are printed as a bare whole number.
    """
    for suffix, threshold in suffixes:
        if value >= threshold:
            return f"{value / threshold:.2f} {suffix}"
    return f"{value:.0f}"


def format_units(unit: Unit, value: float) -> str:
    """Format a value in the given unit for display"""
    if unit is Unit.TEMPERATURE:
        return f"{value:.1f} °C"
    if unit is Unit.UTILIZATION:
        return f"{value * 100:.1f}%"
    if unit is Unit.POWER:
        return f"{value:.1f} W"
    if unit is Unit.MEMORY:
        return format_scaled(value, BYTE_SUFFIXES)
    if unit is Unit.FREQUENCY:
        return format_scaled(value, HERTZ_SUFFIXES)
    raise ValueError(f"Unknown unit: {unit!r}")
