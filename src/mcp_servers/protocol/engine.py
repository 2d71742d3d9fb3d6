"""JsonRpcEngine — the read-dispatch-write loop of an MCP server.

One request is read per line, dispatched against a :class:`ToolRegistry`
and answered with exactly one response line.  Notifications (no ``id`` or
a ``notifications/*`` method) are logged and never answered.  Every
per-request failure is converted to an error response; only end of input
stops the loop.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from mcp_servers import SERVER_NAME, __version__
from mcp_servers.protocol.errors import (
    INTERNAL_ERROR,
    MethodNotFoundError,
    ToolNotFoundError,
    error_code,
    error_message,
)
from mcp_servers.protocol.models import (
    NOTIFICATION_PREFIX,
    PROTOCOL_VERSION,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    text_content,
)
from mcp_servers.utils.telemetry import (
    ATTR_ERROR_CODE,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from mcp_servers.protocol.transport import ServerTransport
    from mcp_servers.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class JsonRpcEngine:
    """Answers MCP requests for a single, immutable tool registry.

    Usage::

        engine = JsonRpcEngine(registry)
        await engine.serve(StdioServerTransport())
    """

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        server_info: ServerInfo | None = None,
    ) -> None:
        self._registry = registry
        self._server_info = server_info or ServerInfo(name=SERVER_NAME, version=__version__)

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def serve(self, transport: ServerTransport) -> None:
        """Process lines from *transport* until end of input."""
        logger.info(
            "Serving %d tool(s): %s", len(self._registry), ", ".join(self._registry.names())
        )
        while True:
            line = await transport.receive()
            if line is None:
                break
            try:
                response = await self.handle_line(line)
            except Exception as exc:
                logger.exception("Unhandled failure on input line")
                response = JsonRpcResponse.failure(None, INTERNAL_ERROR, error_message(exc)).to_wire()
            if response is not None:
                await transport.send(response)
        logger.info("Input closed, shutting down")

    async def handle_line(self, line: str) -> dict[str, Any] | None:
        """Parse and answer one input line.

        Returns the wire response, or ``None`` for blank lines and
        notifications.
        """
        line = line.strip()
        if not line:
            return None

        try:
            payload = json.loads(line)
        except (ValueError, RecursionError) as exc:
            logger.warning("Malformed input line: %s", exc)
            return JsonRpcResponse.failure(None, INTERNAL_ERROR, error_message(exc)).to_wire()

        return await self.handle_request(payload)

    async def handle_request(self, payload: Any) -> dict[str, Any] | None:
        """Dispatch an already-decoded request object."""
        if not isinstance(payload, dict):
            msg = f"Request must be a JSON object, got {type(payload).__name__}"
            return JsonRpcResponse.failure(None, INTERNAL_ERROR, msg).to_wire()

        request_id = payload.get("id")
        method = payload.get("method")
        if request_id is None or (
            isinstance(method, str) and method.startswith(NOTIFICATION_PREFIX)
        ):
            logger.info("Notification received: %s", method)
            return None

        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValueError as exc:
            return JsonRpcResponse.failure(request_id, INTERNAL_ERROR, error_message(exc)).to_wire()

        try:
            result = await self._dispatch(request)
        except Exception as exc:
            code = error_code(exc)
            if code == INTERNAL_ERROR:
                logger.exception("Request %r (%s) failed", request.id, request.method)
            else:
                logger.warning("Request %r (%s) rejected: %s", request.id, request.method, exc)
            return JsonRpcResponse.failure(request.id, code, error_message(exc)).to_wire()

        return JsonRpcResponse.success(request.id, result).to_wire()

    async def _dispatch(self, request: JsonRpcRequest) -> dict[str, Any]:
        logger.debug("Dispatching %s (id=%r)", request.method, request.id)
        if request.method == "initialize":
            return self._initialize()
        if request.method == "tools/list":
            return {"tools": [d.to_wire() for d in self._registry.descriptors()]}
        if request.method == "tools/call":
            return await self._call_tool(request)
        if request.method == "ping":
            return {"pong": True}
        raise MethodNotFoundError(request.method)

    def _initialize(self) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": self._server_info.model_dump(),
        }

    async def _call_tool(self, request: JsonRpcRequest) -> dict[str, Any]:
        """Run the named tool and wrap its result as text content."""
        params = request.params
        name = params.get("name")
        spec = self._registry.get(name) if isinstance(name, str) else None
        if spec is None:
            raise ToolNotFoundError("" if name is None else str(name))

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}

        with _tracer.start_as_current_span("mcp.tools.call") as span:
            span.set_attribute(ATTR_METHOD, "tools/call")
            span.set_attribute(ATTR_REQUEST_ID, str(request.id))
            span.set_attribute(ATTR_TOOL_NAME, spec.name)
            try:
                result = await spec.handler(arguments)
            except Exception as exc:
                span.set_attribute(ATTR_ERROR_CODE, error_code(exc))
                raise

        return text_content(result)
