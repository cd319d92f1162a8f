from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict

from layout_mcp.bridge import HostBridge
from layout_mcp.logger import Logger
from layout_mcp.mcp_server.responses import ToolResult
from layout_mcp.sessions import SessionStore


@dataclass
class ToolContext:
    """Explicit handle given to every handler invocation."""

    session: SessionStore
    bridge: HostBridge
    logger: Logger


ToolHandler = Callable[[Dict[str, Any], ToolContext], Awaitable[ToolResult]]
