"""List containers command."""

import logging
import sys

import click
from click.core import ParameterSource

from ..helpers import format_container_ids, format_container_json, format_container_table
from ...core.constants import OUTPUT_FORMATS
from ...core.container_query import ContainerQuery, ListOptions
from ...core.sorting import SORT_KEYS, get_sort_key, sort_by
from ...services.docker_service import DockerService
from ...services.exceptions import DockerServiceError, SortError
from ...utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def parse_filters(values):
    """Turn repeated KEY=VALUE options into an engine filter dict."""
    filters = {}
    for value in values:
        key, sep, filter_value = value.partition('=')
        if not sep or not key:
            raise click.BadParameter(f"'{value}' is not in KEY=VALUE form", param_hint="'--filter'")
        filters.setdefault(key, []).append(filter_value)
    return filters


@click.command()
@click.option('--all', '-a', 'show_all', is_flag=True,
              help='Show all containers, not only running ones')
@click.option('--size', '-s', is_flag=True, help='Display the total file sizes')
@click.option('--namespace', '--ns', 'namespaces', is_flag=True,
              help='Display namespace information')
@click.option('--pod', '-p', is_flag=True, help='Print the pod the containers belong to')
@click.option('--latest', '-l', is_flag=True, help='Show the latest container created (all states)')
@click.option('--last', '-n', type=click.IntRange(min=1), default=None,
              help='Print the n last created containers (all states)')
@click.option('--filter', '-f', 'filters', multiple=True, metavar='KEY=VALUE',
              help='Filter output based on conditions given')
@click.option('--sort', 'sort_key', default=None,
              help=f"Sort output by {', '.join(SORT_KEYS)}")
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS), default=None,
              help='Output format')
@click.option('--quiet', '-q', is_flag=True, help='Print the numeric IDs of the containers only')
@click.option('--no-trunc', is_flag=True, help='Display the extended information')
def ps(show_all, size, namespaces, pod, latest, last, filters, sort_key, output_format, quiet, no_trunc):
    """List containers"""
    ctx = click.get_current_context()
    defaults = ConfigManager().load_defaults()
    if ctx.get_parameter_source("show_all") == ParameterSource.DEFAULT:
        show_all = defaults.all
    if ctx.get_parameter_source("no_trunc") == ParameterSource.DEFAULT:
        no_trunc = defaults.no_trunc
    output_format = output_format or defaults.format
    sort_key = sort_key or defaults.sort

    if latest and last is not None:
        raise click.UsageError("--last and --latest cannot be used together")

    # Unknown keys fail before the engine is queried
    if sort_key:
        try:
            get_sort_key(sort_key)
        except SortError as e:
            raise click.UsageError(str(e))
        if sort_key == 'size':
            size = True

    options = ListOptions(
        all=show_all,
        size=size,
        namespaces=namespaces,
        latest=latest,
        last=last,
        filters=parse_filters(filters),
    )

    try:
        docker_service = DockerService()
        containers = ContainerQuery(docker_service).list(options)
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if sort_key:
        try:
            sort_by(sort_key, containers)
        except SortError as e:
            raise click.UsageError(str(e))

    logger.debug(f"Listing {len(containers)} containers")

    if quiet:
        if containers:
            click.echo(format_container_ids(containers, no_trunc=no_trunc))
        return

    if output_format == 'json':
        click.echo(format_container_json(containers))
        return

    click.echo(format_container_table(
        containers,
        size=size,
        pod=pod,
        namespaces=namespaces,
        no_trunc=no_trunc,
    ))
