"""Bridge that records scripts instead of running them."""

from typing import List

from layout_mcp.bridge.base import HostBridge
from layout_mcp.logger import Logger


class DryRunBridge(HostBridge):
    """Accepts every command and answers ``OK``.

    Used where no host application is reachable, so the protocol engine
    and the session lifecycle can still be exercised end to end.
    """

    name = "dry-run"

    def __init__(self, logger: Logger) -> None:
        self.logger = logger
        self.commands: List[str] = []

    def execute(self, command: str) -> str:
        self.commands.append(command)
        self.logger.debug("Dry-run bridge recorded script", count=len(self.commands))
        return "OK"
