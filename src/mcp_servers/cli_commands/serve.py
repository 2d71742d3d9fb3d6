"""``mcp-servers serve`` — run an MCP server on stdin/stdout."""

from __future__ import annotations

import asyncio

import click

from mcp_servers.cli_commands._output import setup_logging
from mcp_servers.tools import SERVERS


@click.command()
@click.option(
    "--server",
    type=click.Choice(SERVERS),
    default="twitter",
    show_default=True,
    help="Which tool set to expose.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level (stderr).")
@click.option("--otel-console", is_flag=True, help="Print finished spans to stderr.")
@click.option(
    "--otel-endpoint",
    default=None,
    help="Export traces via OTLP/gRPC to this endpoint.",
)
def serve(server: str, verbose: bool, otel_console: bool, otel_endpoint: str | None) -> None:
    """Serve SERVER's tools as newline-delimited JSON-RPC on stdio.

    Runs until standard input is closed. Tracing options need the
    ``otel`` extra.
    """
    from mcp_servers.server import run_server

    setup_logging(verbose=verbose)

    if otel_console or otel_endpoint:
        from mcp_servers.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(console=otel_console, otlp_endpoint=otel_endpoint)
        except ImportError as exc:
            raise click.ClickException(str(exc)) from exc

    asyncio.run(run_server(server))
