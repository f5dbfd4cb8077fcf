"""oraclemap - Oracle NUMBER type mapping and connector configuration.

Decides how Oracle NUMBER, DECIMAL and FLOAT columns are represented as
Arrow types, validates the connector settings that drive that choice, and
converts decoded decimal values to the chosen representation.
"""

__version__ = "0.1.0"

# Exceptions
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

# Conversion
from oraclemap.core.numeric import ConversionPolicy, TargetKind, TargetSpec, convert

# Configuration
from oraclemap.models.enums import (
    NumberExceedsLimitsMode,
    NumberType,
    RoundMode,
    UnsupportedTypeStrategy,
)
from oraclemap.models.loader import load_config
from oraclemap.models.oracle_config import UNDEFINED_SCALE, OracleConfig, OracleConfigBuilder

# Type mapping
from oraclemap.connectors.oracle import (
    ColumnMapping,
    OracleTypeMapper,
    resolve_number_mapping,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "OracleConfig",
    "OracleConfigBuilder",
    "UNDEFINED_SCALE",
    "NumberExceedsLimitsMode",
    "NumberType",
    "RoundMode",
    "UnsupportedTypeStrategy",
    "load_config",
    # Conversion
    "ConversionPolicy",
    "TargetKind",
    "TargetSpec",
    "convert",
    # Type mapping
    "ColumnMapping",
    "OracleTypeMapper",
    "resolve_number_mapping",
    # Exceptions
    "OracleMapError",
    "InvalidInputError",
    "ConfigurationError",
    "ConfigLoadError",
    "UnsupportedColumnError",
    "ConversionError",
    "ConversionInexactError",
    "ValueExceedsLimitsError",
]
