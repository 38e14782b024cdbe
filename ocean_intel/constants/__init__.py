"""
Constants Package

- thresholds: fixed weights, bands and level thresholds of the engine
- parameters: observation parameter keys for live and archive series
"""

from ocean_intel.constants.thresholds import (
    DEFAULT_MA_WINDOW,
    CLIMATE_BREAKPOINTS,
    round_half_up,
    clamp,
    sustainability_label,
    sustainability_level,
    risk_level,
)
from ocean_intel.constants.parameters import (
    TIMESTAMP_KEY,
    ARCHIVE_PARAMETERS,
)

__all__ = [
    "DEFAULT_MA_WINDOW",
    "CLIMATE_BREAKPOINTS",
    "round_half_up",
    "clamp",
    "sustainability_label",
    "sustainability_level",
    "risk_level",
    "TIMESTAMP_KEY",
    "ARCHIVE_PARAMETERS",
]
