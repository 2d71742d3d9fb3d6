"""Argument extraction helpers for tool handlers.

Tool input schemas are descriptive only; handlers pull the values they
need with these helpers and a missing required value fails the call.
"""

from __future__ import annotations

from typing import Any

from mcp_servers.protocol.errors import MissingArgumentError


def require(arguments: dict[str, Any], name: str) -> Any:
    """Return ``arguments[name]`` or raise :class:`MissingArgumentError`."""
    value = arguments.get(name)
    if value is None:
        raise MissingArgumentError(name)
    return value


def optional(arguments: dict[str, Any], name: str, default: Any = None) -> Any:
    """Return ``arguments[name]``, substituting *default* when absent or null."""
    value = arguments.get(name)
    return default if value is None else value
