"""Tracing for the JSON-RPC engine.

Spans are created through ``opentelemetry-api`` and cost nothing until a
provider is installed.  ``serve --otel-console`` / ``--otel-endpoint``
install one via :func:`configure_telemetry`; that needs the ``otel`` extra.

Span layout::

    mcp.serve              one per process, mcp.server = twitter | github
      mcp.tools.call       one per tools/call request
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import TracerProvider

ATTR_SERVER = "mcp.server"
ATTR_METHOD = "mcp.method"
ATTR_REQUEST_ID = "mcp.request.id"
ATTR_TOOL_NAME = "mcp.tool.name"
ATTR_ERROR_CODE = "mcp.error.code"

_INSTRUMENTATION_NAME = "mcp_servers"
_OTEL_EXTRA_HINT = "Install it with: pip install mcp-servers[otel]"


def get_tracer(name: str | None = None) -> trace.Tracer:
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def build_tracer_provider(
    *,
    service_name: str = "mcp-servers",
    console: bool = False,
    otlp_endpoint: str | None = None,
) -> TracerProvider:
    """Create an SDK provider with the requested exporters attached.

    Console spans are written to stderr: stdout carries the JSON-RPC
    responses and must stay clean.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = f"opentelemetry-sdk is required for tracing. {_OTEL_EXTRA_HINT}"
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    if console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter(out=sys.stderr)))
    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError as exc:
            msg = f"opentelemetry-exporter-otlp is required for OTLP export. {_OTEL_EXTRA_HINT}"
            raise ImportError(msg) from exc
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    return provider


def configure_telemetry(
    *,
    service_name: str = "mcp-servers",
    console: bool = False,
    otlp_endpoint: str | None = None,
) -> None:
    """Install a global provider (see :func:`build_tracer_provider`)."""
    trace.set_tracer_provider(
        build_tracer_provider(
            service_name=service_name, console=console, otlp_endpoint=otlp_endpoint
        )
    )
