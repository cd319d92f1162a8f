"""Tool registry: descriptors paired with handlers, fixed at startup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Sequence

from mcp.types import Tool

from layout_mcp.exceptions import RegistryError
from layout_mcp.mcp_server.tool_types import ToolHandler


@dataclass(frozen=True)
class ToolEntry:
    descriptor: Tool
    handler: ToolHandler

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Ordered, duplicate-free mapping from tool name to ToolEntry.

    Registration order is preserved and is the order reported by
    tools/list. Once frozen the registry rejects further registration.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ToolEntry] = {}
        self._frozen = False

    def register(self, descriptor: Tool, handler: ToolHandler) -> ToolEntry:
        if self._frozen:
            raise RegistryError(
                f"Cannot register '{descriptor.name}': registry is frozen",
                details={"tool": descriptor.name},
            )
        if descriptor.name in self._entries:
            raise RegistryError(
                f"Duplicate tool name: {descriptor.name}",
                details={"tool": descriptor.name},
            )
        entry = ToolEntry(descriptor=descriptor.model_copy(deep=True), handler=handler)
        self._entries[descriptor.name] = entry
        return entry

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Optional[ToolEntry]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def descriptors(self) -> List[Tool]:
        return [entry.descriptor.model_copy(deep=True) for entry in self._entries.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[ToolEntry]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)


def build_registry(
    tools: Optional[Sequence[Tool]] = None,
    handlers: Optional[Mapping[str, ToolHandler]] = None,
) -> ToolRegistry:
    """Pair every descriptor with its handler and freeze the result.

    Raises:
        RegistryError: on a duplicate name, a descriptor without a handler,
            or a handler without a descriptor
    """
    if tools is None:
        from layout_mcp.mcp_server.tool_schemas import build_tools

        tools = build_tools()
    if handlers is None:
        from layout_mcp.mcp_server.routing import HANDLERS

        handlers = HANDLERS

    registry = ToolRegistry()
    for descriptor in tools:
        handler = handlers.get(descriptor.name)
        if handler is None:
            raise RegistryError(
                f"No handler for tool '{descriptor.name}'",
                details={"tool": descriptor.name},
            )
        registry.register(descriptor, handler)

    orphans = sorted(set(handlers) - set(registry.names()))
    if orphans:
        raise RegistryError(
            f"Handlers without a tool descriptor: {', '.join(orphans)}",
            details={"tools": orphans},
        )
    return registry.freeze()
