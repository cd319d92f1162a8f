"""Bridge that drives the host application through ``osascript``."""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Optional

from layout_mcp.bridge.base import HostBridge
from layout_mcp.exceptions import HostAutomationError
from layout_mcp.logger import Logger


def _applescript_literal(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class AppleScriptBridge(HostBridge):
    """Writes each ExtendScript to a temporary ``.jsx`` file and asks the
    host application to run it with ``do script ... language javascript``.
    """

    name = "applescript"

    def __init__(
        self,
        host_app: str,
        logger: Logger,
        timeout: Optional[float] = None,
        osascript: str = "osascript",
    ) -> None:
        self.host_app = host_app
        self.logger = logger
        self.timeout = timeout
        self.osascript = osascript

    def build_applescript(self, script_path: str) -> str:
        return (
            f'tell application "{_applescript_literal(self.host_app)}"\n'
            f'  do script POSIX file "{_applescript_literal(script_path)}" language javascript\n'
            "end tell"
        )

    def execute(self, command: str) -> str:
        fd, script_path = tempfile.mkstemp(prefix="layout_mcp_", suffix=".jsx")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(command)

            self.logger.debug("Running host script", path=script_path, size=len(command))
            try:
                completed = subprocess.run(
                    [self.osascript, "-e", self.build_applescript(script_path)],
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except FileNotFoundError as exc:
                raise HostAutomationError(
                    f"{self.osascript} not found; the AppleScript bridge requires macOS",
                    details={"executable": self.osascript},
                ) from exc
            except subprocess.TimeoutExpired as exc:
                raise HostAutomationError(
                    f"Host script timed out after {self.timeout} seconds",
                    details={"timeout": self.timeout},
                ) from exc

            if completed.returncode != 0:
                message = completed.stderr.strip() or f"osascript exited with status {completed.returncode}"
                raise HostAutomationError(
                    message, details={"returncode": completed.returncode}
                )
            return self.check_output(completed.stdout)
        finally:
            try:
                os.remove(script_path)
            except OSError as exc:
                self.logger.warning(
                    "Failed to remove temporary script", path=script_path, error=str(exc)
                )
