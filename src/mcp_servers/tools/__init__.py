"""Tool registries — one per server variant, selected at startup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp_servers.tools.github_tools import GitHubTool, build_github_registry
from mcp_servers.tools.registry import ToolRegistry, ToolSpec
from mcp_servers.tools.x_tools import XTool, build_x_registry

if TYPE_CHECKING:
    from mcp_servers.clients.base import IssueTracker, SocialFeed

SERVERS = ("twitter", "github")


def build_registry(
    server: str,
    *,
    feed: SocialFeed | None = None,
    tracker: IssueTracker | None = None,
) -> ToolRegistry:
    """Return the registry for *server*, bound to the matching client."""
    if server == "twitter":
        if feed is None:
            msg = "The twitter server needs a social feed client"
            raise ValueError(msg)
        return build_x_registry(feed)
    if server == "github":
        if tracker is None:
            msg = "The github server needs an issue tracker client"
            raise ValueError(msg)
        return build_github_registry(tracker)
    msg = f"Unknown server: {server!r} (expected one of {', '.join(SERVERS)})"
    raise ValueError(msg)


__all__ = [
    "SERVERS",
    "GitHubTool",
    "ToolRegistry",
    "ToolSpec",
    "XTool",
    "build_github_registry",
    "build_registry",
    "build_x_registry",
]
