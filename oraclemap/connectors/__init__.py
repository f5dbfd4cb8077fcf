"""Connector type mapping for oraclemap."""

from oraclemap.connectors.oracle import (
    ColumnMapping,
    OracleTypeMapper,
    resolve_number_mapping,
)

__all__ = [
    "ColumnMapping",
    "OracleTypeMapper",
    "resolve_number_mapping",
]
