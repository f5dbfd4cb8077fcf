"""Core module for oraclemap package."""

from oraclemap.core.exceptions import (
    ConfigLoadError,
    ConfigurationError,
    ConversionError,
    ConversionInexactError,
    InvalidInputError,
    OracleMapError,
    UnsupportedColumnError,
    ValueExceedsLimitsError,
)
from oraclemap.core.numeric import (
    MAX_DECIMAL_PRECISION,
    ConversionPolicy,
    TargetKind,
    TargetSpec,
    convert,
    convert_column,
    decimal_to_varchar,
    encode_unscaled,
    round_decimal,
    round_decimal_to_type,
    round_double,
)
from oraclemap.core.type_mapping import TypeMapper

__all__ = [
    "OracleMapError",
    "InvalidInputError",
    "ConfigurationError",
    "ConfigLoadError",
    "UnsupportedColumnError",
    "ConversionError",
    "ConversionInexactError",
    "ValueExceedsLimitsError",
    "MAX_DECIMAL_PRECISION",
    "ConversionPolicy",
    "TargetKind",
    "TargetSpec",
    "convert",
    "convert_column",
    "decimal_to_varchar",
    "encode_unscaled",
    "round_decimal",
    "round_decimal_to_type",
    "round_double",
    "TypeMapper",
]
