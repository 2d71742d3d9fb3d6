"""Protocol layer — JSON-RPC 2.0 engine and stdio transport."""

from mcp_servers.protocol.engine import JsonRpcEngine
from mcp_servers.protocol.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    MethodNotFoundError,
    MissingArgumentError,
    ProtocolError,
    ToolExecutionError,
    ToolNotFoundError,
)
from mcp_servers.protocol.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ServerInfo,
    ToolDescriptor,
)
from mcp_servers.protocol.transport import ServerTransport, StdioServerTransport

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "METHOD_NOT_FOUND",
    "JsonRpcEngine",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MethodNotFoundError",
    "MissingArgumentError",
    "ProtocolError",
    "ServerInfo",
    "ServerTransport",
    "StdioServerTransport",
    "ToolDescriptor",
    "ToolExecutionError",
    "ToolNotFoundError",
]
