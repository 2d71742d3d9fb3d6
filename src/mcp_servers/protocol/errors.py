"""Error types for the JSON-RPC protocol layer.

Each error carries the JSON-RPC ``code`` it is reported with.
"""

from __future__ import annotations

METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""

    code: int = INTERNAL_ERROR


class MethodNotFoundError(ProtocolError):
    """The request named a method the server does not implement."""

    code = METHOD_NOT_FOUND

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method not found: {method}")


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the active registry."""

    code = INVALID_PARAMS

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolExecutionError(ProtocolError):
    """A tool handler failed while running."""

    code = INTERNAL_ERROR


class MissingArgumentError(ToolExecutionError):
    """A tool was called without one of its required arguments."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required argument: {name}")


def error_code(exc: BaseException) -> int:
    """Return the JSON-RPC code an exception is reported with."""
    if isinstance(exc, ProtocolError):
        return exc.code
    return INTERNAL_ERROR


def error_message(exc: BaseException) -> str:
    """Return the message text for an exception, never empty."""
    return str(exc) or type(exc).__name__
