"""ToolRegistry — the static name-to-handler table a server exposes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterable, Iterator

from mcp_servers.protocol.models import ToolDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping

ToolHandler = Callable[[dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolSpec:
    """A tool's descriptor together with its bound handler."""

    name: str
    description: str
    input_schema: Mapping[str, Any]
    handler: ToolHandler

    def __post_init__(self) -> None:
        # Enum members are stored by value so lookups by plain string match.
        if isinstance(self.name, Enum):
            object.__setattr__(self, "name", str(self.name.value))

    def descriptor(self) -> ToolDescriptor:
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=dict(self.input_schema),
        )


class ToolRegistry:
    """Ordered, read-only collection of :class:`ToolSpec` keyed by name.

    Usage::

        registry = ToolRegistry.from_enum(XTool, specs)
        registry.descriptors()        # tools/list payload, registration order
        spec = registry.get("tweet")  # None for unknown names
    """

    def __init__(self, specs: Iterable[ToolSpec]) -> None:
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs:
            name = spec.name
            if name in self._specs:
                msg = f"Duplicate tool name: {name}"
                raise ValueError(msg)
            self._specs[name] = spec
        self._descriptors = tuple(spec.descriptor() for spec in self._specs.values())

    @classmethod
    def from_enum(cls, tool_ids: type[Enum], specs: Iterable[ToolSpec]) -> ToolRegistry:
        """Build a registry whose names are exactly the members of *tool_ids*."""
        registry = cls(specs)
        expected = {str(member.value) for member in tool_ids}
        actual = set(registry.names())
        if expected != actual:
            missing = sorted(expected - actual)
            extra = sorted(actual - expected)
            msg = f"{tool_ids.__name__} registry mismatch: missing={missing} extra={extra}"
            raise ValueError(msg)
        return registry

    def get(self, name: str) -> ToolSpec | None:
        return self._specs.get(name)

    def names(self) -> list[str]:
        return list(self._specs)

    def descriptors(self) -> list[ToolDescriptor]:
        """Return every tool descriptor in registration order."""
        return list(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)
