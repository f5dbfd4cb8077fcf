"""CLI command for mapping Oracle types to Arrow types."""

import sys

import click

from oraclemap.cli.commands.options import (
    build_config,
    config_option,
    json_logs_option,
    log_level_option,
    set_option,
)
from oraclemap.connectors.oracle import OracleTypeMapper
from oraclemap.core.exceptions import OracleMapError
from oraclemap.core.logging import configure_logging


@click.command("map")
@click.argument("oracle_types", nargs=-1, required=True)
@config_option
@set_option
@log_level_option
@json_logs_option
def map_types(
    oracle_types: tuple,
    config_path: str,
    overrides: tuple,
    log_level: str,
    json_logs: bool,
):
    """Show the Arrow type chosen for each Oracle type.

    Examples:

        oraclemap map "NUMBER(10,2)" "NUMBER" FLOAT
        oraclemap map NUMBER --set oracle.number.default-scale.decimal=8
    """
    configure_logging(level=log_level, json_format=json_logs)

    mapper = OracleTypeMapper(build_config(config_path, overrides))
    failed = False
    for oracle_type in oracle_types:
        try:
            arrow_type = mapper.connector_type_to_arrow(oracle_type)
        except OracleMapError as e:
            click.echo(f"{oracle_type} -> ✗ {e}", err=True)
            failed = True
            continue
        click.echo(f"{oracle_type} -> {arrow_type if arrow_type is not None else '(ignored)'}")

    if failed:
        sys.exit(1)
