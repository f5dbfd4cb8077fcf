"""Options and helpers shared by CLI commands."""

import sys
from typing import Optional

import click

from oraclemap.core.exceptions import OracleMapError
from oraclemap.models.loader import load_properties
from oraclemap.models.oracle_config import OracleConfig

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    help="Path to a .properties or YAML connector config (default: built-in defaults)",
)
set_option = click.option(
    "--set",
    "overrides",
    multiple=True,
    help="Property overrides in key=value format (can be used multiple times)",
)
log_level_option = click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
json_logs_option = click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)


def build_config(config_path: Optional[str], overrides: tuple) -> OracleConfig:
    """Load config properties, apply ``--set`` overrides and validate.

    Exits with status 1 on malformed overrides or invalid configuration.
    """
    try:
        properties = load_properties(config_path) if config_path else {}
        for override in overrides:
            if "=" not in override:
                click.echo(
                    f"Error: Invalid override format: {override}. Use key=value",
                    err=True,
                )
                sys.exit(1)
            key, value = override.split("=", 1)
            properties[key.strip()] = value.strip()
        return OracleConfig.from_properties(properties)
    except OracleMapError as e:
        click.echo(f"✗ Invalid configuration: {e}", err=True)
        sys.exit(1)
