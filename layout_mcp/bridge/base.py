"""Host automation bridge interface."""

from abc import ABC, abstractmethod

from layout_mcp.exceptions import HostAutomationError

ERROR_PREFIX = "ERROR:"


class HostBridge(ABC):
    """Runs a script in the host application and returns its text output.

    Implementations raise HostAutomationError when the host, or the channel
    used to reach it, rejects the command.
    """

    name = "bridge"

    @abstractmethod
    def execute(self, command: str) -> str:
        pass

    @staticmethod
    def check_output(output: str) -> str:
        """Scripts report handled failures as text starting with ``ERROR:``."""
        text = output.strip()
        if text.startswith(ERROR_PREFIX):
            raise HostAutomationError(text[len(ERROR_PREFIX):].strip(), details={"output": text})
        return text
