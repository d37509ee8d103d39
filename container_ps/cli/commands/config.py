"""Configuration management commands for Container PS."""

import json

import click
from pydantic import ValidationError

from ...core.sorting import get_sort_key
from ...models.config import PsDefaults
from ...services.exceptions import SortError
from ...utils.config_manager import ConfigManager


@click.group()
def config():
    """Manage stored ps defaults"""
    pass


@config.command()
def show():
    """Display current defaults"""
    config_manager = ConfigManager()
    defaults = config_manager.load_defaults()

    click.echo(f"Defaults ({config_manager.config_file}):")
    click.echo(json.dumps(defaults.model_dump(), indent=2))


@config.command(name='set')
@click.argument('key', type=click.Choice(list(PsDefaults.model_fields)))
@click.argument('value')
def set_value(key, value):
    """Set a default used when the matching ps flag is not given"""
    if key == 'sort' and value:
        try:
            get_sort_key(value)
        except SortError as e:
            raise click.BadParameter(str(e), param_hint="'VALUE'")

    config_manager = ConfigManager()
    try:
        config_manager.set_value(key, value)
    except ValidationError as e:
        raise click.BadParameter(e.errors()[0]['msg'], param_hint="'VALUE'")
    click.echo(f"Set {key}={value}")


@config.command()
def reset():
    """Reset defaults to built-in values"""
    config_manager = ConfigManager()
    config_manager.reset()
    click.echo("Defaults reset")
