"""Bridge selection from configuration."""

import shutil
import sys

from layout_mcp.bridge.applescript import AppleScriptBridge
from layout_mcp.bridge.base import HostBridge
from layout_mcp.bridge.dry_run import DryRunBridge
from layout_mcp.config import ServerConfig
from layout_mcp.logger import Logger


def osascript_available() -> bool:
    return sys.platform == "darwin" and shutil.which("osascript") is not None


def create_bridge(config: ServerConfig, logger: Logger) -> HostBridge:
    """Build the bridge named by ``config.bridge``.

    ``auto`` picks the AppleScript bridge when ``osascript`` is usable and
    otherwise falls back to the dry-run bridge.
    """
    choice = config.bridge
    if choice == "auto":
        if osascript_available():
            choice = "applescript"
        else:
            logger.warning(
                "osascript not available; host commands will not be executed",
                bridge="dry-run",
                platform=sys.platform,
            )
            choice = "dry-run"

    if choice == "applescript":
        logger.info("Using AppleScript bridge", host_app=config.host_app, timeout=config.bridge_timeout)
        return AppleScriptBridge(
            host_app=config.host_app, logger=logger, timeout=config.bridge_timeout
        )
    logger.info("Using dry-run bridge")
    return DryRunBridge(logger=logger)
