"""CLI command for converting a decimal value for an Oracle column type."""

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


@click.command("convert")
@click.argument("oracle_type")
@click.argument("values", nargs=-1, required=True)
@config_option
@set_option
@log_level_option
@json_logs_option
def convert_value(
    oracle_type: str,
    values: tuple,
    config_path: str,
    overrides: tuple,
    log_level: str,
    json_logs: bool,
):
    """Convert decimal literals as they would be read from a numeric column.

    Examples:

        oraclemap convert "NUMBER(10,2)" 123.456
        oraclemap convert "NUMBER(50,20)" 1.5 --set oracle.number.round-mode=DOWN
    """
    configure_logging(level=log_level, json_format=json_logs)

    mapper = OracleTypeMapper(build_config(config_path, overrides))
    try:
        mapping = mapper.column_mapping(oracle_type)
    except OracleMapError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(f"{oracle_type} -> {mapping.target}")
    failed = False
    for value in values:
        try:
            click.echo(f"  {value} -> {mapping.read(value)}")
        except OracleMapError as e:
            click.echo(f"  {value} -> ✗ {e}", err=True)
            failed = True

    if failed:
        sys.exit(1)
