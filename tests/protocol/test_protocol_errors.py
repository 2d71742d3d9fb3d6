"""Tests for the protocol error hierarchy."""

from mcp_servers.protocol.errors import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    MethodNotFoundError,
    MissingArgumentError,
    ProtocolError,
    ToolExecutionError,
    ToolNotFoundError,
    error_code,
    error_message,
)


class TestErrorHierarchy:
    def test_all_are_protocol_errors(self) -> None:
        for cls in (MethodNotFoundError, ToolNotFoundError, ToolExecutionError):
            assert issubclass(cls, ProtocolError)

    def test_missing_argument_is_execution_error(self) -> None:
        assert issubclass(MissingArgumentError, ToolExecutionError)


class TestCodes:
    def test_method_not_found(self) -> None:
        err = MethodNotFoundError("frobnicate")
        assert err.code == METHOD_NOT_FOUND == -32601
        assert str(err) == "Method not found: frobnicate"

    def test_tool_not_found(self) -> None:
        err = ToolNotFoundError("nope")
        assert err.code == INVALID_PARAMS == -32602
        assert err.name == "nope"
        assert "nope" in str(err)

    def test_missing_argument(self) -> None:
        err = MissingArgumentError("text")
        assert err.code == INTERNAL_ERROR == -32603
        assert str(err) == "Missing required argument: text"

    def test_foreign_exception_maps_to_internal(self) -> None:
        assert error_code(KeyError("x")) == INTERNAL_ERROR
        assert error_code(ToolNotFoundError("x")) == INVALID_PARAMS


class TestErrorMessage:
    def test_uses_text(self) -> None:
        assert error_message(RuntimeError("boom")) == "boom"

    def test_falls_back_to_class_name(self) -> None:
        assert error_message(TimeoutError()) == "TimeoutError"
