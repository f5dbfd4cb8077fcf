"""Models module for connector configuration."""

from oraclemap.models.duration import format_duration, parse_duration
from oraclemap.models.enums import (
    NumberExceedsLimitsMode,
    NumberType,
    RoundMode,
    UnsupportedTypeStrategy,
)
from oraclemap.models.loader import load_config, load_properties
from oraclemap.models.oracle_config import (
    PROPERTY_SETTERS,
    UNDEFINED_SCALE,
    OracleConfig,
    OracleConfigBuilder,
)

__all__ = [
    "OracleConfig",
    "OracleConfigBuilder",
    "PROPERTY_SETTERS",
    "UNDEFINED_SCALE",
    "NumberExceedsLimitsMode",
    "NumberType",
    "RoundMode",
    "UnsupportedTypeStrategy",
    "parse_duration",
    "format_duration",
    "load_config",
    "load_properties",
]
