"""``mcp-servers tools`` — list the tools a server exposes."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import click

from mcp_servers.cli_commands._output import console, print_tools_table
from mcp_servers.tools import SERVERS

if TYPE_CHECKING:
    from mcp_servers.protocol.models import ToolDescriptor


@click.command()
@click.option(
    "--server",
    type=click.Choice(SERVERS),
    default="twitter",
    show_default=True,
    help="Which tool set to list.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the tools/list payload as JSON.")
def tools(server: str, as_json: bool) -> None:
    """Show the tools SERVER would advertise, without contacting any API."""
    from mcp_servers.server import open_registry

    async def _descriptors() -> list[ToolDescriptor]:
        async with open_registry(server) as registry:
            return registry.descriptors()

    descriptors = asyncio.run(_descriptors())

    if as_json:
        console.print_json(json.dumps({"tools": [d.to_wire() for d in descriptors]}))
        return

    print_tools_table(descriptors, title=f"{server} tools")
