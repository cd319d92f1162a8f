"""Tests for tool registry construction."""

import pytest
from mcp.types import Tool

from layout_mcp.exceptions import RegistryError
from layout_mcp.mcp_server.registry import ToolRegistry, build_registry
from layout_mcp.mcp_server.routing import HANDLERS
from layout_mcp.mcp_server.tool_schemas import build_tools


async def _tool_noop(arguments, context):
    return None


def _tool(name: str) -> Tool:
    return Tool(name=name, description=name, inputSchema={"type": "object", "properties": {}})


class TestBuildRegistry:
    def test_every_descriptor_has_a_handler(self):
        registry = build_registry()

        assert len(registry) == len(build_tools()) == len(HANDLERS)
        assert registry.names() == [tool.name for tool in build_tools()]
        assert registry.frozen is True

    def test_duplicate_descriptor_is_a_startup_fault(self):
        with pytest.raises(RegistryError, match="Duplicate tool name: a"):
            build_registry([_tool("a"), _tool("a")], {"a": _tool_noop})

    def test_descriptor_without_handler(self):
        with pytest.raises(RegistryError, match="No handler for tool 'b'"):
            build_registry([_tool("a"), _tool("b")], {"a": _tool_noop})

    def test_handler_without_descriptor(self):
        with pytest.raises(RegistryError, match="without a tool descriptor: b"):
            build_registry([_tool("a")], {"a": _tool_noop, "b": _tool_noop})


class TestToolRegistry:
    def test_preserves_registration_order(self):
        registry = ToolRegistry()
        for name in ["zeta", "alpha", "mid"]:
            registry.register(_tool(name), _tool_noop)

        assert registry.names() == ["zeta", "alpha", "mid"]
        assert [tool.name for tool in registry.descriptors()] == ["zeta", "alpha", "mid"]
        assert "alpha" in registry
        assert registry.get("missing") is None

    def test_frozen_registry_rejects_registration(self):
        registry = ToolRegistry().freeze()

        with pytest.raises(RegistryError, match="frozen"):
            registry.register(_tool("late"), _tool_noop)

    def test_descriptors_are_copies(self):
        registry = build_registry()

        registry.descriptors()[0].description = "tampered"

        assert registry.descriptors()[0].description != "tampered"
