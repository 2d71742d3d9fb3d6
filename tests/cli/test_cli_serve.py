"""Tests for ``mcp-servers serve`` CLI command."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from mcp_servers.cli import main


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestServeCommand:
    def test_runs_selected_server(self) -> None:
        with patch("mcp_servers.server.run_server", new=AsyncMock()) as run:
            result = CliRunner().invoke(main, ["serve", "--server", "github"])

        assert result.exit_code == 0
        run.assert_awaited_once_with("github")

    def test_default_server_is_twitter(self) -> None:
        with patch("mcp_servers.server.run_server", new=AsyncMock()) as run:
            result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 0
        run.assert_awaited_once_with("twitter")

    def test_rejects_unknown_server(self) -> None:
        result = CliRunner().invoke(main, ["serve", "--server", "mastodon"])
        assert result.exit_code != 0

    def test_otel_without_sdk(self) -> None:
        with (
            patch("mcp_servers.server.run_server", new=AsyncMock()) as run,
            patch(
                "mcp_servers.utils.telemetry.configure_telemetry",
                side_effect=ImportError("opentelemetry-sdk is required"),
            ),
        ):
            result = CliRunner().invoke(main, ["serve", "--otel-endpoint", "http://localhost:4317"])

        assert result.exit_code == 1
        assert "opentelemetry-sdk is required" in result.output
        run.assert_not_awaited()

    def test_answers_requests_on_stdio(self) -> None:
        lines = "\n".join(
            [
                '{"jsonrpc":"2.0","id":1,"method":"ping"}',
                '{"jsonrpc":"2.0","method":"notifications/initialized"}',
                '{"jsonrpc":"2.0","id":2,"method":"nope"}',
            ]
        )
        result = CliRunner().invoke(main, ["serve", "--server", "github"], input=lines + "\n")

        assert result.exit_code == 0
        assert '{"jsonrpc": "2.0", "id": 1, "result": {"pong": true}}' in result.output
        assert '"code": -32601, "message": "Method not found: nope"' in result.output

    def test_otel_console_configures_stderr_spans(self) -> None:
        with (
            patch("mcp_servers.server.run_server", new=AsyncMock()) as run,
            patch("mcp_servers.utils.telemetry.configure_telemetry") as configure,
        ):
            result = CliRunner().invoke(main, ["serve", "--otel-console"])

        assert result.exit_code == 0
        configure.assert_called_once_with(console=True, otlp_endpoint=None)
        run.assert_awaited_once_with("twitter")

    def test_no_tracing_by_default(self) -> None:
        with (
            patch("mcp_servers.server.run_server", new=AsyncMock()),
            patch("mcp_servers.utils.telemetry.configure_telemetry") as configure,
        ):
            CliRunner().invoke(main, ["serve"])

        configure.assert_not_called()
