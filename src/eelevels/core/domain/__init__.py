"""
Domain models and value objects.

Contains the SI prefix table, the unit catalog and parser, Quantity,
the tagged Result type and the auto-scaling formatter.
"""

from eelevels.core.domain.prefix import (
    MAX_PREFIX_EXPONENT,
    PREFIXES,
    UNITY,
    Prefix,
    exponent_for_symbol,
    prefix_for_exponent,
    prefix_for_symbol,
)
from eelevels.core.domain.result import (
    FailureReason,
    FormattingInvariantViolation,
    QuantityError,
    Result,
)
from eelevels.core.domain.unit import (
    AMPERE,
    DBFS,
    DBM,
    DBU,
    DBV,
    DECIBEL,
    FULL_SCALE,
    FULL_SCALE_PERCENT,
    HERTZ,
    MILLIAMPERE,
    MILLISECOND,
    MILLIVOLT,
    PERCENT,
    SECOND,
    SUPPORTED_UNITS,
    VOLT,
    WATT,
    RmsKind,
    UnitDescriptor,
    UnitDomain,
    UnitKind,
    lookup_base_symbol,
    parse_unit,
    suffix_for_rms_kind,
)
from eelevels.core.domain.formatting import (
    DEFAULT_FORMAT_OPTIONS,
    FormatOptions,
    format_magnitude,
    format_quantity,
    split_formatted,
)
from eelevels.core.domain.quantity import Quantity, cap_magnitude
from eelevels.core.domain.comparison import ComparisonCriterion, satisfies

__all__ = [
    # Prefix table
    "MAX_PREFIX_EXPONENT",
    "PREFIXES",
    "UNITY",
    "Prefix",
    "exponent_for_symbol",
    "prefix_for_exponent",
    "prefix_for_symbol",
    # Results
    "FailureReason",
    "FormattingInvariantViolation",
    "QuantityError",
    "Result",
    # Unit catalog
    "AMPERE",
    "DBFS",
    "DBM",
    "DBU",
    "DBV",
    "DECIBEL",
    "FULL_SCALE",
    "FULL_SCALE_PERCENT",
    "HERTZ",
    "MILLIAMPERE",
    "MILLISECOND",
    "MILLIVOLT",
    "PERCENT",
    "SECOND",
    "SUPPORTED_UNITS",
    "VOLT",
    "WATT",
    "RmsKind",
    "UnitDescriptor",
    "UnitDomain",
    "UnitKind",
    "lookup_base_symbol",
    "parse_unit",
    "suffix_for_rms_kind",
    # Formatter
    "DEFAULT_FORMAT_OPTIONS",
    "FormatOptions",
    "format_magnitude",
    "format_quantity",
    "split_formatted",
    # Quantity
    "Quantity",
    "cap_magnitude",
    # Comparison
    "ComparisonCriterion",
    "satisfies",
]
