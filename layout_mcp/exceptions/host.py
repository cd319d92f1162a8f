"""Host automation exceptions."""

from typing import Any, Dict, Optional

from layout_mcp.exceptions.base import ToolError


class HostAutomationError(ToolError):
    """The host application (or the channel to it) rejected a command."""

    default_code = "HOST_AUTOMATION_FAILED"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Host automation failed: {message}", details=details)
        self.host_message = message
