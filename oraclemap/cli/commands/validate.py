"""CLI command for validating connector configuration."""

import click

from oraclemap.cli.commands.options import (
    build_config,
    json_logs_option,
    log_level_option,
    set_option,
)
from oraclemap.core.logging import configure_logging


@click.command()
@click.argument("config_path", type=click.Path(exists=True))
@set_option
@log_level_option
@json_logs_option
def validate(config_path: str, overrides: tuple, log_level: str, json_logs: bool):
    """Validate a connector configuration file.

    Checks:
    - Known property keys
    - Value domains (enums, scales, durations)
    - Conflicting settings

    Examples:

        oraclemap validate oracle.properties
        oraclemap validate oracle.properties --set oracle.number.round-mode=UP
    """
    configure_logging(level=log_level, json_format=json_logs)

    config = build_config(config_path, overrides)

    click.echo("✓ Configuration is valid")
    for key, value in config.to_properties().items():
        click.echo(f"  {key}={value}")
