"""Tests for the stdio server transport."""

import io
import json
from unittest.mock import patch

from mcp_servers.protocol.transport import ServerTransport, StdioServerTransport


class TestStdioServerTransport:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(StdioServerTransport(io.StringIO(), io.StringIO()), ServerTransport)

    async def test_receive_reads_lines_until_eof(self) -> None:
        transport = StdioServerTransport(io.StringIO('{"a": 1}\n\nlast'), io.StringIO())
        assert await transport.receive() == '{"a": 1}\n'
        assert await transport.receive() == "\n"
        assert await transport.receive() == "last"
        assert await transport.receive() is None

    async def test_send_writes_one_flushed_line(self) -> None:
        class FlushCounter(io.StringIO):
            flushes = 0

            def flush(self) -> None:
                self.flushes += 1
                super().flush()

        out = FlushCounter()
        transport = StdioServerTransport(io.StringIO(), out)
        await transport.send({"jsonrpc": "2.0", "id": 1, "result": {"pong": True}})
        await transport.send({"jsonrpc": "2.0", "id": 2, "result": {}})

        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["id"] == 1
        assert out.getvalue().endswith("\n")
        assert out.flushes == 2


class TestUndecodableInput:
    async def test_binary_reader_replaces_invalid_utf8(self) -> None:
        transport = StdioServerTransport(io.BytesIO(b"\xff\xfe\nok \xc3\xa9\n"), io.StringIO())
        assert await transport.receive() == "\ufffd\ufffd\n"
        assert await transport.receive() == "ok é\n"
        assert await transport.receive() is None

    async def test_invalid_line_answered_and_loop_continues(self, echo_registry) -> None:
        from mcp_servers.protocol.engine import JsonRpcEngine

        reader = io.BytesIO(b'\xff\xfe\n{"jsonrpc":"2.0","id":1,"method":"ping"}\n')
        out = io.StringIO()
        await JsonRpcEngine(echo_registry).serve(StdioServerTransport(reader, out))

        first, second = (json.loads(line) for line in out.getvalue().splitlines())
        assert first["id"] is None
        assert first["error"]["code"] == -32603
        assert second == {"jsonrpc": "2.0", "id": 1, "result": {"pong": True}}

    def test_defaults_to_binary_stdin(self) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n"))
        with patch("sys.stdin", stdin):
            transport = StdioServerTransport(writer=io.StringIO())
        assert transport._reader is stdin.buffer
