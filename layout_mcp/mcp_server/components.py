"""Component initialization for the MCP server.

Builds the registry, session store, host bridge and dispatcher used by
the stdio server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from layout_mcp import __version__
from layout_mcp.bridge import HostBridge, create_bridge
from layout_mcp.config import ServerConfig
from layout_mcp.logger import Logger
from layout_mcp.mcp_server.dispatcher import RequestDispatcher
from layout_mcp.mcp_server.registry import ToolRegistry, build_registry
from layout_mcp.sessions import SessionStore

SERVER_NAME = "layout-mcp"


@dataclass
class ServerComponents:
    config: ServerConfig
    registry: ToolRegistry
    session_store: SessionStore
    bridge: HostBridge
    dispatcher: RequestDispatcher


def initialize_components(
    *,
    config: ServerConfig,
    logger: Logger,
    bridge: Optional[HostBridge] = None,
    registry: Optional[ToolRegistry] = None,
) -> ServerComponents:
    """Initialize all server components.

    Args:
            config: Server configuration
            logger: Logger
            bridge: Optional bridge override (tests)
            registry: Optional registry override (tests)

    Raises:
            RegistryError: if the tool registry cannot be built
    """
    registry = registry or build_registry()
    logger.info("Tool registry built", tools=len(registry))

    bridge = bridge or create_bridge(config, logger)
    session_store = SessionStore(logger=logger)
    dispatcher = RequestDispatcher(
        registry=registry,
        session=session_store,
        bridge=bridge,
        logger=logger,
        server_name=SERVER_NAME,
        server_version=__version__,
    )
    return ServerComponents(
        config=config,
        registry=registry,
        session_store=session_store,
        bridge=bridge,
        dispatcher=dispatcher,
    )
