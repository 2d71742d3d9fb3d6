"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcp_servers.cli_commands.serve import serve
    from mcp_servers.cli_commands.tools import tools
    from mcp_servers.cli_commands.tweet_commit import tweet_commit

    cli.add_command(serve)
    cli.add_command(tools)
    cli.add_command(tweet_commit)
