"""Server-side MCP transport — newline-delimited JSON over stdio.

Each transport satisfies the :class:`ServerTransport` protocol, providing
``receive`` and ``send`` methods.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import IO, Any, Protocol, runtime_checkable


@runtime_checkable
class ServerTransport(Protocol):
    """Abstract line transport for an MCP server."""

    async def receive(self) -> str | None: ...
    async def send(self, message: dict[str, Any]) -> None: ...


class StdioServerTransport:
    """Reads requests from stdin and writes responses to stdout.

    Reads happen off the event loop so a blocking ``readline`` never
    stalls pending work; every response is flushed as soon as it is
    written.

    By default stdin is read as bytes and each line is decoded as UTF-8
    with invalid sequences replaced, so a corrupt line reaches the engine
    as malformed JSON instead of ending the read loop.
    """

    def __init__(
        self,
        reader: IO[str] | IO[bytes] | None = None,
        writer: IO[str] | None = None,
    ) -> None:
        self._reader = reader if reader is not None else sys.stdin.buffer
        self._writer = writer if writer is not None else sys.stdout

    async def receive(self) -> str | None:
        """Return the next input line, or ``None`` at end of input."""
        line = await asyncio.to_thread(self._reader.readline)
        if not line:
            return None
        if isinstance(line, bytes):
            return line.decode("utf-8", errors="replace")
        return line

    async def send(self, message: dict[str, Any]) -> None:
        """Write one JSON object as a single line and flush it."""
        self._writer.write(json.dumps(message) + "\n")
        self._writer.flush()
