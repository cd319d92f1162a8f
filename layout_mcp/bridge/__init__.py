"""Host automation bridges."""
from layout_mcp.bridge.applescript import AppleScriptBridge
from layout_mcp.bridge.base import HostBridge
from layout_mcp.bridge.dry_run import DryRunBridge
from layout_mcp.bridge.factory import create_bridge

__all__ = ["HostBridge", "AppleScriptBridge", "DryRunBridge", "create_bridge"]
