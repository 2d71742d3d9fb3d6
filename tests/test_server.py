"""Tests for settings-to-engine wiring."""

from __future__ import annotations

from typing import Any

import pytest

from mcp_servers.config import GitHubSettings, XSettings
from mcp_servers.server import open_registry, run_server
from mcp_servers.tools import GitHubTool, XTool, build_registry


class TestOpenRegistry:
    async def test_twitter(self) -> None:
        async with open_registry("twitter", x_settings=XSettings()) as registry:
            assert registry.names() == [t.value for t in XTool]

    async def test_github(self) -> None:
        async with open_registry("github", github_settings=GitHubSettings()) as registry:
            assert registry.names() == [t.value for t in GitHubTool]

    async def test_unknown_server(self) -> None:
        with pytest.raises(ValueError, match="Unknown server"):
            async with open_registry("mastodon"):
                pass


class TestBuildRegistry:
    def test_requires_matching_client(self) -> None:
        with pytest.raises(ValueError, match="social feed client"):
            build_registry("twitter")
        with pytest.raises(ValueError, match="issue tracker client"):
            build_registry("github")


class TestRunServer:
    async def test_serves_until_eof(self, make_transport: Any) -> None:
        transport = make_transport(
            [
                '{"jsonrpc":"2.0","id":1,"method":"initialize","params":{}}',
                '{"jsonrpc":"2.0","method":"notifications/initialized"}',
                '{"jsonrpc":"2.0","id":2,"method":"tools/list"}',
            ]
        )
        await run_server("github", transport, github_settings=GitHubSettings())

        assert [m["id"] for m in transport.sent] == [1, 2]
        assert transport.sent[0]["result"]["serverInfo"] == {"name": "mcp-servers", "version": "2.0.0"}
        names = [t["name"] for t in transport.sent[1]["result"]["tools"]]
        assert names[0] == "create_issue"
        assert len(names) == 9

    async def test_unconfigured_call_is_an_error_response(self, make_transport: Any) -> None:
        transport = make_transport(
            ['{"jsonrpc":"2.0","id":"a","method":"tools/call","params":{"name":"tweet","arguments":{"text":"hi"}}}']
        )
        await run_server("twitter", transport, x_settings=XSettings())

        (response,) = transport.sent
        assert response["id"] == "a"
        assert response["error"]["code"] == -32603
        assert "missing OAuth credentials" in response["error"]["message"]
