"""MCP servers — remote-control tools for X (Twitter) and GitHub over stdio."""

from __future__ import annotations

__version__ = "2.0.0"

SERVER_NAME = "mcp-servers"
