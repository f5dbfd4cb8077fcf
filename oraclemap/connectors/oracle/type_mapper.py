"""Type mapper for Oracle connector."""

import re
from typing import Optional

import pyarrow as pa

from oraclemap.connectors.oracle.number_mapping import (
    ColumnMapping,
    resolve_number_mapping,
    unsupported_column_mapping,
)
from oraclemap.core.exceptions import InvalidInputError
from oraclemap.core.numeric import ConversionPolicy, TargetSpec
from oraclemap.models.oracle_config import UNDEFINED_SCALE, OracleConfig

_TYPE_PATTERN = re.compile(
    r"^\s*(?P<name>[A-Z_0-9 ]+?)\s*"
    r"(?:\(\s*(?P<precision>\*|\d+)\s*(?:,\s*(?P<scale>-?\d+)\s*)?(?:BYTE|CHAR)?\s*\))?"
    r"\s*(?P<suffix>WITH (?:LOCAL )?TIME ZONE)?\s*$",
    re.IGNORECASE,
)

_NUMBER_TYPES = ("NUMBER", "NUMERIC", "DECIMAL", "DEC")
_INTEGER_TYPES = ("INTEGER", "INT", "SMALLINT")
# Default binary precision per FLOAT alias
_FLOAT_TYPES = {"FLOAT": 126, "REAL": 63, "DOUBLE PRECISION": 126}
_NATIVE_FLOAT_TYPES = ("BINARY_FLOAT", "BINARY_DOUBLE")
_STRING_TYPES = (
    "VARCHAR2",
    "NVARCHAR2",
    "VARCHAR",
    "CHAR",
    "NCHAR",
    "CLOB",
    "NCLOB",
    "LONG",
    "ROWID",
    "UROWID",
)
_BINARY_TYPES = ("RAW", "LONG RAW", "BLOB")


class OracleTypeMapper:
    """Type mapper for Oracle connector.

    NUMBER-family types are resolved with the configured number handling;
    types without a mapping follow the unsupported-type strategy.
    """

    def __init__(self, config: Optional[OracleConfig] = None):
        self.config = config or OracleConfig()

    def column_mapping(self, connector_type: str) -> ColumnMapping:
        """Resolve the value conversion for a numeric Oracle type.

        FLOAT, REAL and DOUBLE PRECISION are NUMBERs without a scale and follow
        the same rules as a plain NUMBER. BINARY_FLOAT and BINARY_DOUBLE are
        read as doubles.

        Args:
            connector_type: Oracle type string (e.g., "NUMBER(10,2)", "FLOAT")

        Returns:
            ColumnMapping

        Raises:
            InvalidInputError: If the type string cannot be parsed or is not numeric
            UnsupportedColumnError: If the column cannot be mapped under a FAIL policy
        """
        name, precision, scale = self._parse(connector_type)

        if name in _NUMBER_TYPES:
            if precision == "*":
                precision = None
            elif precision is not None and scale is None:
                # NUMBER(p) is NUMBER(p,0)
                scale = 0
            return resolve_number_mapping(
                int(precision) if precision is not None else None,
                int(scale) if scale is not None else None,
                self.config,
            )
        if name in _INTEGER_TYPES:
            return resolve_number_mapping(38, 0, self.config)
        if name in _FLOAT_TYPES:
            # FLOAT is a NUMBER with binary precision and no scale
            if precision is None or precision == "*":
                precision = _FLOAT_TYPES[name]
            return resolve_number_mapping(int(precision), None, self.config)
        if name in _NATIVE_FLOAT_TYPES:
            double_scale = self.config.double_default_scale
            return ColumnMapping(
                TargetSpec.double(None if double_scale == UNDEFINED_SCALE else double_scale),
                ConversionPolicy.from_config(self.config),
            )
        raise InvalidInputError(
            f"Not a numeric Oracle type: {connector_type}",
            context={"type": name},
        )

    def arrow_to_connector_type(self, arrow_type: pa.DataType) -> str:
        """Map Arrow type to Oracle type.

        Args:
            arrow_type: PyArrow DataType

        Returns:
            Oracle type string (e.g., "VARCHAR2(4000)", "NUMBER(10,2)")
        """
        if pa.types.is_string(arrow_type) or pa.types.is_large_string(arrow_type):
            return "VARCHAR2(4000)"
        elif pa.types.is_decimal(arrow_type):
            return f"NUMBER({arrow_type.precision},{arrow_type.scale})"
        elif pa.types.is_integer(arrow_type):
            if pa.types.is_int64(arrow_type) or pa.types.is_uint64(arrow_type):
                return "NUMBER(19)"
            elif pa.types.is_int32(arrow_type) or pa.types.is_uint32(arrow_type):
                return "NUMBER(10)"
            elif pa.types.is_int16(arrow_type) or pa.types.is_uint16(arrow_type):
                return "NUMBER(5)"
            else:
                return "NUMBER(3)"
        elif pa.types.is_floating(arrow_type):
            if pa.types.is_float32(arrow_type):
                return "BINARY_FLOAT"
            else:
                return "BINARY_DOUBLE"
        elif pa.types.is_boolean(arrow_type):
            return "NUMBER(1)"
        elif pa.types.is_timestamp(arrow_type):
            if arrow_type.tz is not None:
                return "TIMESTAMP WITH TIME ZONE"
            return "TIMESTAMP"
        elif pa.types.is_date(arrow_type):
            return "DATE"
        elif pa.types.is_binary(arrow_type) or pa.types.is_large_binary(arrow_type):
            return "BLOB"
        else:
            # Default to VARCHAR2 for unknown types
            return "VARCHAR2(4000)"

    def connector_type_to_arrow(self, connector_type: str) -> Optional[pa.DataType]:
        """Map Oracle type to Arrow type.

        Args:
            connector_type: Oracle type string (e.g., "NUMBER(10,2)", "VARCHAR2(20)")

        Returns:
            PyArrow DataType, or None if the column should be skipped

        Raises:
            UnsupportedColumnError: If the column cannot be mapped under a FAIL policy
        """
        match = _TYPE_PATTERN.match(connector_type)
        if match is None:
            mapping = unsupported_column_mapping(self.config, connector_type)
            return mapping.arrow_type if mapping is not None else None
        name, _, _ = self._parse(connector_type)

        if name in _NUMBER_TYPES or name in _INTEGER_TYPES or name in _FLOAT_TYPES:
            return self.column_mapping(connector_type).arrow_type
        elif name == "BINARY_FLOAT":
            return pa.float32()
        elif name == "BINARY_DOUBLE":
            return pa.float64()
        elif name in _STRING_TYPES:
            return pa.string()
        elif name in _BINARY_TYPES:
            return pa.binary()
        elif name == "DATE":
            # Oracle DATE carries a time of day
            return pa.timestamp("s")
        elif name == "TIMESTAMP":
            if match.group("suffix") is not None:
                return pa.timestamp("us", tz="UTC")
            return pa.timestamp("us")
        else:
            mapping = unsupported_column_mapping(self.config, connector_type)
            return mapping.arrow_type if mapping is not None else None

    def _parse(self, connector_type: str):
        match = _TYPE_PATTERN.match(connector_type)
        if match is None:
            raise InvalidInputError(f"Cannot parse Oracle type: {connector_type!r}")
        name = " ".join(match.group("name").upper().split())
        return name, match.group("precision"), match.group("scale")

