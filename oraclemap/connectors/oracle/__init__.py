"""Oracle connector module."""

from oraclemap.connectors.oracle.number_mapping import (
    ColumnMapping,
    choose_number_type,
    default_decimal_scale,
    resolve_number_mapping,
    unsupported_column_mapping,
)
from oraclemap.connectors.oracle.type_mapper import OracleTypeMapper

__all__ = [
    "ColumnMapping",
    "OracleTypeMapper",
    "choose_number_type",
    "default_decimal_scale",
    "resolve_number_mapping",
    "unsupported_column_mapping",
]
