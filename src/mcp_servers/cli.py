"""mcp-servers CLI entrypoint."""

from __future__ import annotations

import click
from dotenv import find_dotenv, load_dotenv

from mcp_servers import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcp-servers")
def main() -> None:
    """mcp-servers — X and GitHub tools for MCP clients."""
    load_dotenv(find_dotenv(usecwd=True))


# Register subcommands
from mcp_servers.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
