"""MCP server package: dispatcher, registry, routing and tool handlers."""

from layout_mcp.mcp_server.server import main, serve

__all__ = ["main", "serve"]
