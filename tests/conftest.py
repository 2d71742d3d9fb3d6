"""Shared fixtures: a scripted transport and a small echo registry."""

from __future__ import annotations

import json
from typing import Any

import pytest

from mcp_servers.tools.registry import ToolRegistry, ToolSpec


class ScriptedTransport:
    """Feeds fixed input lines and records every response sent."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.sent: list[dict[str, Any]] = []

    async def receive(self) -> str | None:
        if not self._lines:
            return None
        return self._lines.pop(0)

    async def send(self, message: dict[str, Any]) -> None:
        # Round-trip through JSON like the real stdio transport.
        self.sent.append(json.loads(json.dumps(message)))


async def _echo(arguments: dict[str, Any]) -> Any:
    return {"echo": arguments}


async def _boom(arguments: dict[str, Any]) -> Any:
    raise RuntimeError("upstream exploded")


@pytest.fixture
def echo_registry() -> ToolRegistry:
    return ToolRegistry(
        [
            ToolSpec(
                "echo",
                "Echo the arguments back",
                {"type": "object", "properties": {"text": {"type": "string"}}},
                _echo,
            ),
            ToolSpec("boom", "Always fails", {"type": "object", "properties": {}}, _boom),
        ]
    )


@pytest.fixture
def make_transport() -> type[ScriptedTransport]:
    return ScriptedTransport
