"""
Preset reference levels (1 Vrms, 0 dBFS, -10 dBu, ...).
"""

from eelevels.presets.default_levels import (
    FREQUENCY_1_KHZ,
    LEVEL_0_DBFS,
    LEVEL_0_DBU,
    LEVEL_0_FS,
    LEVEL_0_VRMS,
    LEVEL_1_VRMS,
    LEVEL_2_83_VRMS,
    LEVEL_MINUS_10_DBU,
    LEVEL_MINUS_12_DBFS,
    LEVEL_MINUS_40_DBU,
    RATIO_0_DB,
)

__all__ = [
    "FREQUENCY_1_KHZ",
    "LEVEL_0_DBFS",
    "LEVEL_0_DBU",
    "LEVEL_0_FS",
    "LEVEL_0_VRMS",
    "LEVEL_1_VRMS",
    "LEVEL_2_83_VRMS",
    "LEVEL_MINUS_10_DBU",
    "LEVEL_MINUS_12_DBFS",
    "LEVEL_MINUS_40_DBU",
    "RATIO_0_DB",
]
