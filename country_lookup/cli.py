"""
Command-line interface for Country Lookup.

Provides commands for looking up names and codes and for checking tables.
"""

import sys
from pathlib import Path

import click
import yaml

from country_lookup.config import (
    ConfigurationError,
    LookupConfig,
    TableConfig,
    load_config,
    validate_config,
)
from country_lookup.reference import ReferenceTableError, ReferenceTableIndex, load_table
from country_lookup.reference.models import TAB
from country_lookup.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


def _load(table: TableConfig) -> ReferenceTableIndex:
    return load_table(table.resource_name, table.layout, table.search_paths)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Output logs as JSON",
)
@click.pass_context
def main(ctx, config, verbose, json_logs):
    """Look up countries by name or ISO alpha-3 code."""
    ctx.ensure_object(dict)

    try:
        lookup_config = load_config(config)
        warnings = validate_config(lookup_config)
    except (ConfigurationError, ValueError, OSError, yaml.YAMLError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    # Logging goes to stderr; stdout carries only command output.
    log_level = "DEBUG" if verbose else lookup_config.logging.level
    configure_logging(level=log_level, json_output=json_logs or lookup_config.logging.json_output)
    for warning in warnings:
        logger.warning("config_warning", message=warning)

    logger.debug("config_loaded", path=config)
    ctx.obj["config"] = lookup_config


@main.command()
@click.argument("code")
@click.pass_context
def name(ctx, code):
    """Print the country name for a CODE."""
    config: LookupConfig = ctx.obj["config"]

    try:
        index = _load(config.countries)
    except ReferenceTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = index.name_for_code(code)
    if result is None:
        click.echo(f"no country found for code {code!r}", err=True)
        sys.exit(1)

    click.echo(result)


@main.command()
@click.argument("country")
@click.pass_context
def code(ctx, country):
    """Print the alpha-3 code for a COUNTRY name."""
    config: LookupConfig = ctx.obj["config"]

    try:
        index = _load(config.countries)
    except ReferenceTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = index.code_for_name(country)
    if result is None:
        click.echo(f"no country found named {country!r}", err=True)
        sys.exit(1)

    click.echo(result)


@main.command("list")
@click.option(
    "--languages",
    is_flag=True,
    help="List the language table instead of countries",
)
@click.pass_context
def list_entries(ctx, languages):
    """List every code and name, sorted by code."""
    config: LookupConfig = ctx.obj["config"]
    table = config.languages if languages else config.countries

    try:
        index = _load(table)
    except ReferenceTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for entry in index.entries():
        click.echo(f"{entry.code}\t{entry.name}")


@main.command()
@click.option(
    "--file", "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Check this table file instead of the configured country table",
)
@click.option(
    "--languages",
    is_flag=True,
    help="Read the header with the language layout",
)
@click.pass_context
def check(ctx, file_path, languages):
    """Load a table and report what was parsed."""
    config: LookupConfig = ctx.obj["config"]
    table = config.languages if languages else config.countries

    try:
        if file_path is not None:
            index = ReferenceTableIndex.load(
                file_path.name, [file_path.parent], layout=table.layout
            )
        else:
            index = _load(table)
    except ReferenceTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    delimiter = "tab" if index.delimiter == TAB else "comma"
    click.echo(f"Source: {index.source}")
    click.echo(f"Delimiter: {delimiter}")
    click.echo(f"Entries: {index.size():,}")


if __name__ == "__main__":
    main()
