"""Type mapping protocol shared by connectors."""

from typing import Optional, Protocol, runtime_checkable

import pyarrow as pa


@runtime_checkable
class TypeMapper(Protocol):
    """Protocol for connector-specific type mapping.

    Connectors implement this protocol to provide bidirectional type mapping
    between Arrow types and connector-specific type representations.
    """

    def arrow_to_connector_type(self, arrow_type: pa.DataType) -> str:
        """Map Arrow type to connector-specific type string.

        Args:
            arrow_type: PyArrow DataType

        Returns:
            Connector-specific type string (e.g., "VARCHAR2(4000)", "NUMBER(10,2)")
        """
        ...

    def connector_type_to_arrow(self, connector_type: str) -> Optional[pa.DataType]:
        """Map connector-specific type to Arrow type.

        Args:
            connector_type: Connector-specific type string

        Returns:
            PyArrow DataType, or None if the column should be skipped
        """
        ...
