"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

CLI commands for the connector operations.

Each command makes one call and prints the JSON response on stdout.
Exit codes: 0 on success, 1 when the connector returns an error envelope,
2 for any other client error.
"""

import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Type

import click
from pydantic import BaseModel, ValidationError

from ndc_client.cli.context import CLIContext, pass_context
from ndc_client.client import ConnectorClient
from ndc_client.exceptions import ConnectorError, NdcClientError
from ndc_client.models import MutationRequest, QueryRequest


def _load_request(source, model: Type[BaseModel]) -> BaseModel:
    """Parse a JSON request file into ``model``."""
    try:
        data = json.load(source)
    except ValueError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="FILE")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise click.BadParameter(
            f"does not match {model.__name__}:\n{e}", param_hint="FILE"
        )


def _run(
    cli_ctx: CLIContext,
    call: Callable[[ConnectorClient], Awaitable[BaseModel]],
) -> None:
    async def runner() -> Any:
        async with cli_ctx.make_client() as client:
            return await call(client)

    try:
        result = asyncio.run(runner())
    except ConnectorError as e:
        cli_ctx.err_console.print(
            f"[bold red]Connector error {e.status_code}:[/bold red] {e.error_response.message}"
        )
        if e.error_response.details is not None:
            cli_ctx.err_console.print_json(data=e.error_response.details)
        sys.exit(1)
    except NdcClientError as e:
        cli_ctx.err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(2)

    cli_ctx.console.print_json(data=result.model_dump(mode="json"))


@click.command('capabilities')
@pass_context
def capabilities(cli_ctx: CLIContext):
    """Show the connector's capabilities."""
    _run(cli_ctx, lambda client: client.capabilities())


@click.command('schema')
@pass_context
def schema(cli_ctx: CLIContext):
    """Show the connector's schema."""
    _run(cli_ctx, lambda client: client.schema())


@click.command('query')
@click.argument('request_file', metavar='FILE', type=click.File('r'))
@pass_context
def query(cli_ctx: CLIContext, request_file):
    """
    Run the query request in FILE (use - for stdin).

    Example:

        ndc-client --base-url http://localhost:8080 query request.json
    """
    request = _load_request(request_file, QueryRequest)
    _run(cli_ctx, lambda client: client.query(request))


@click.command('explain')
@click.argument('request_file', metavar='FILE', type=click.File('r'))
@pass_context
def explain(cli_ctx: CLIContext, request_file):
    """Explain the query request in FILE (use - for stdin)."""
    request = _load_request(request_file, QueryRequest)
    _run(cli_ctx, lambda client: client.explain(request))


@click.command('mutation')
@click.argument('request_file', metavar='FILE', type=click.File('r'))
@pass_context
def mutation(cli_ctx: CLIContext, request_file):
    """Run the mutation request in FILE (use - for stdin)."""
    request = _load_request(request_file, MutationRequest)
    _run(cli_ctx, lambda client: client.mutation(request))
