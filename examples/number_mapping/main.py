"""Map a sample Oracle table to Arrow.

Resolves every column of a made-up ``ACCOUNTS`` table with the settings in
oracle.properties and converts a few driver rows into an Arrow table.
"""

from __future__ import annotations

import argparse
from decimal import Decimal
from pathlib import Path

import pyarrow as pa

from oraclemap import OracleTypeMapper, load_config
from oraclemap.core.logging import configure_logging

COLUMNS = {
    "ID": "NUMBER(10)",
    "BALANCE": "NUMBER(12,2)",
    "RATE": "NUMBER",
    "WEIGHT": "FLOAT(126)",
    "SCORE": "BINARY_DOUBLE",
    "HUGE": "NUMBER(45,20)",
}

ROWS = [
    [
        1,
        Decimal("1050.255"),
        Decimal("0.0312345"),
        Decimal("72.5"),
        7.123456,
        Decimal("1.5"),
    ],
    [
        2,
        Decimal("-3.10"),
        None,
        Decimal("0.0000004"),
        100.0,
        Decimal("12345678901234567890.123456789"),
    ],
]


def build_table(mapper: OracleTypeMapper) -> pa.Table:
    arrays = []
    names = []
    for index, (name, oracle_type) in enumerate(COLUMNS.items()):
        mapping = mapper.column_mapping(oracle_type)
        names.append(name)
        arrays.append(mapping.to_arrow(row[index] for row in ROWS))
    return pa.Table.from_arrays(arrays, names=names)


def main() -> None:
    parser = argparse.ArgumentParser(description="Map a sample Oracle table to Arrow")
    parser.add_argument(
        "--config",
        default=str(Path(__file__).parent / "oracle.properties"),
        help="Connector properties file",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    configure_logging(level=args.log_level)
    table = build_table(OracleTypeMapper(load_config(args.config)))
    print(table.schema)
    print(table.to_pylist())


if __name__ == "__main__":
    main()
