"""Process wiring: settings -> clients -> registry -> engine."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from mcp_servers.clients.github import GitHubClient
from mcp_servers.clients.x import XClient
from mcp_servers.config import GitHubSettings, XSettings
from mcp_servers.protocol.engine import JsonRpcEngine
from mcp_servers.protocol.transport import StdioServerTransport
from mcp_servers.tools import SERVERS, build_registry
from mcp_servers.utils.telemetry import ATTR_SERVER, get_tracer

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mcp_servers.protocol.transport import ServerTransport
    from mcp_servers.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


@asynccontextmanager
async def open_registry(
    server: str,
    *,
    x_settings: XSettings | None = None,
    github_settings: GitHubSettings | None = None,
) -> AsyncIterator[ToolRegistry]:
    """Create the client for *server* and yield its bound registry.

    The client (and its HTTP connection pool) lives as long as the
    context; it is closed on exit.
    """
    if server == "twitter":
        async with XClient.from_settings(x_settings or XSettings.from_env()) as feed:
            yield build_registry(server, feed=feed)
    elif server == "github":
        settings = github_settings or GitHubSettings.from_env()
        async with GitHubClient.from_settings(settings) as tracker:
            yield build_registry(server, tracker=tracker)
    else:
        msg = f"Unknown server: {server!r} (expected one of {', '.join(SERVERS)})"
        raise ValueError(msg)


async def run_server(
    server: str,
    transport: ServerTransport | None = None,
    *,
    x_settings: XSettings | None = None,
    github_settings: GitHubSettings | None = None,
) -> None:
    """Serve *server*'s tools on *transport* (stdio by default) until EOF."""
    async with open_registry(
        server, x_settings=x_settings, github_settings=github_settings
    ) as registry:
        logger.info("Starting %s MCP server", server)
        engine = JsonRpcEngine(registry)
        with _tracer.start_as_current_span("mcp.serve") as span:
            span.set_attribute(ATTR_SERVER, server)
            await engine.serve(transport or StdioServerTransport())
