"""
eelevels — electrical and acoustic levels as typed values.

Parse level text ("10 mV", "-12 dBFS", "1.5 kHz"), convert between
representations (dBu / dBV / Vrms / W, RMS / Peak / Peak-Peak) and
render back with automatic SI-prefix scaling.
"""

import logging

from eelevels.core.domain import (
    DBFS,
    DBU,
    DBV,
    HERTZ,
    VOLT,
    WATT,
    FailureReason,
    FormatOptions,
    Quantity,
    QuantityError,
    Result,
    RmsKind,
    UnitDescriptor,
    format_quantity,
    parse_unit,
)
from eelevels.conversions import rms_translate, to_dbu, to_dbv, to_vrms, to_watt

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DBFS",
    "DBU",
    "DBV",
    "HERTZ",
    "VOLT",
    "WATT",
    "FailureReason",
    "FormatOptions",
    "Quantity",
    "QuantityError",
    "Result",
    "RmsKind",
    "UnitDescriptor",
    "format_quantity",
    "parse_unit",
    "rms_translate",
    "to_dbu",
    "to_dbv",
    "to_vrms",
    "to_watt",
]
