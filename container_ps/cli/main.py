"""Main CLI entry point for Container PS."""

import logging
import sys

import click

from ..core.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV
from .commands.config import config
from .commands.ps import ps


@click.group()
@click.option('--log-level', envvar=LOG_LEVEL_ENV, default=DEFAULT_LOG_LEVEL, show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging verbosity')
def cli(log_level):
    """Container PS - List engine containers with pluggable sort keys"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


# Register commands
cli.add_command(ps)
cli.add_command(config)


if __name__ == '__main__':
    cli()
