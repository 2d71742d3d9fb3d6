"""``mcp-servers tweet-commit`` — post about your latest commits."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click
import httpx

from mcp_servers.cli_commands._output import console
from mcp_servers.clients.errors import ClientError
from mcp_servers.commit_story import MAX_POST_LENGTH, GitError, compose_post, recent_commits


@click.command("tweet-commit")
@click.option(
    "--path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Git repository path (default: current directory).",
)
@click.option("--commits", "count", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--dry-run", is_flag=True, help="Show the post without publishing it.")
@click.option("--yes", "-y", is_flag=True, help="Publish without asking for confirmation.")
def tweet_commit(path: Path | None, count: int, dry_run: bool, yes: bool) -> None:
    """Generate a post about recent git commits and publish it to X."""
    repo = (path or Path.cwd()).resolve()

    try:
        commits = recent_commits(repo, count)
    except GitError as exc:
        raise click.ClickException(f"git failed: {exc}") from exc

    if not commits:
        console.print("[red]No commits found in the repository.[/red]")
        sys.exit(1)

    console.print("[bold]Recent commits:[/bold]")
    for commit in commits:
        console.print(f"  - {commit.message} ({commit.hash})", markup=False)

    text = compose_post(commits, repo.name)
    console.print("\n[bold]Generated post:[/bold]")
    console.print(text, markup=False)
    console.print(f"Characters: {len(text)}/{MAX_POST_LENGTH}")

    if dry_run:
        console.print("[yellow]Dry run - post not published.[/yellow]")
        return

    if not yes and not click.confirm("Post this?"):
        console.print("[yellow]Post cancelled.[/yellow]")
        return

    try:
        result = asyncio.run(_publish(text))
    except (ClientError, httpx.HTTPError) as exc:
        raise click.ClickException(f"Post failed: {exc}") from exc

    post_id = (result.get("data") or {}).get("id") if isinstance(result, dict) else None
    if post_id:
        console.print("[green]Posted successfully![/green]")
        console.print(f"Post ID: {post_id}")
        return

    console.print("[red]Failed to post:[/red]")
    console.print(json.dumps(result), markup=False)
    sys.exit(1)


async def _publish(text: str) -> Any:
    from mcp_servers.clients.x import XClient
    from mcp_servers.config import XSettings

    async with XClient.from_settings(XSettings.from_env()) as client:
        return await client.post(text)
