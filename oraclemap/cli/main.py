"""Main CLI entry point for oraclemap."""

import click

from oraclemap import __version__
from oraclemap.cli.commands.convert import convert_value
from oraclemap.cli.commands.map_types import map_types
from oraclemap.cli.commands.validate import validate


@click.group()
@click.version_option(version=__version__)
def main():
    """oraclemap - Oracle NUMBER type mapping and connector configuration."""
    pass


# Register commands
main.add_command(validate)
main.add_command(map_types)
main.add_command(convert_value)


if __name__ == "__main__":
    main()
