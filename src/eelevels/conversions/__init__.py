"""
Conversion engine: linear ↔ logarithmic levels, power and RMS representations.
"""

from eelevels.conversions.engine import (
    DBU_REFERENCE_VRMS,
    DBV_REFERENCE_VRMS,
    RMS_RATIOS,
    rms_ratio,
    rms_translate,
    to_dbu,
    to_dbv,
    to_vrms,
    to_watt,
)

__all__ = [
    "DBU_REFERENCE_VRMS",
    "DBV_REFERENCE_VRMS",
    "RMS_RATIOS",
    "rms_ratio",
    "rms_translate",
    "to_dbu",
    "to_dbv",
    "to_vrms",
    "to_watt",
]
