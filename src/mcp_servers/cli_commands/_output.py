"""Shared CLI output: rich consoles, logging setup and formatters.

``console`` writes to stdout for interactive commands; ``err_console``
writes to stderr and is the only output the ``serve`` command uses
besides its JSON-RPC responses.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from mcp_servers.protocol.models import ToolDescriptor

console = Console()
err_console = Console(stderr=True)


def setup_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def print_tools_table(descriptors: list[ToolDescriptor], *, title: str = "Tools") -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for descriptor in descriptors:
        required = descriptor.input_schema.get("required", [])
        table.add_row(
            descriptor.name,
            _truncate(descriptor.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
