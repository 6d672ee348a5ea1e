"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

CLI entry point for the NDC client.

Loads configuration, applies command-line overrides and sets up logging
before running a connector operation.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from ndc_client._version import __version__
from ndc_client.cli.context import CLIContext, pass_context
from ndc_client.cli.operations import capabilities, explain, mutation, query, schema
from ndc_client.config.settings import get_default_config_path, load_config, validate_config
from ndc_client.exceptions import InvalidConfigurationError
from ndc_client.logging_config import get_logger, setup_logging


def _parse_headers(values: Tuple[str, ...]) -> dict:
    headers = {}
    for item in values:
        if '=' not in item:
            raise click.BadParameter(
                f"invalid header '{item}', expected NAME=VALUE", param_hint="--header"
            )
        name, value = item.split('=', 1)
        headers[name.strip()] = value.strip()
    return headers


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option('--base-url', '-u', default=None, help='Connector base URL (overrides config)')
@click.option('--user-agent', default=None, help='User-Agent header value (overrides config)')
@click.option(
    '--header',
    '-H',
    multiple=True,
    help='Static header NAME=VALUE (can be specified multiple times)',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (overrides config)',
)
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.version_option(version=__version__, prog_name='ndc-client')
@pass_context
def cli(
    ctx: CLIContext,
    config: Optional[Path],
    base_url: Optional[str],
    user_agent: Optional[str],
    header: Tuple[str, ...],
    log_level: Optional[str],
    json_logs: bool,
    verbose: bool,
):
    """
    NDC Client - call the operations of a data connector over HTTP.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    # Route logs to stderr while the configuration is read; stdout carries results
    setup_logging(level=log_level or "WARNING", json_format=json_logs)

    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(2)

    if base_url:
        ctx.config.connector.base_url = base_url
    if user_agent:
        ctx.config.connector.user_agent = user_agent
    headers = ctx.config.connector.headers
    for name, value in _parse_headers(header).items():
        # replace a configured header of the same name regardless of case
        for existing in [k for k in headers if k.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value

    try:
        validate_config(ctx.config)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(2)

    effective_log_level = (log_level or ctx.config.logging.level).upper()
    if verbose and log_level is None:
        effective_log_level = "DEBUG"
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None
    setup_logging(
        level=effective_log_level,
        log_file=log_file,
        json_format=json_logs or ctx.config.logging.format == "json",
    )

    if verbose:
        logger = get_logger("cli")
        logger.info(
            "cli_configured",
            config_path=ctx.config_path or "defaults",
            base_url=ctx.config.connector.base_url,
            log_level=effective_log_level,
        )


cli.add_command(capabilities)
cli.add_command(schema)
cli.add_command(query)
cli.add_command(explain)
cli.add_command(mutation)


def main():
    """Console script entry point."""
    cli()


if __name__ == '__main__':
    main()
