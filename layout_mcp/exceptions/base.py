"""Base exception classes for layout-mcp.

Every error carries a machine-readable ``code``, a human-readable
``message`` and optional ``details``. Tool-level errors are converted
into failed ToolResults at the dispatch boundary; protocol errors become
the outer JSON-RPC ``error`` object.
"""

from typing import Any, Dict, Optional


class LayoutMcpError(Exception):
    """Root of the layout-mcp exception hierarchy."""

    default_code = "LAYOUT_MCP_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ToolError(LayoutMcpError):
    """Failure of a tool's own business logic, reported in-band."""

    default_code = "TOOL_ERROR"


class ValidationError(ToolError):
    """Arguments failed a type or range check."""

    default_code = "VALIDATION_ERROR"


class ConfigurationError(LayoutMcpError):
    """Invalid server configuration detected at startup."""

    default_code = "CONFIGURATION_ERROR"


class RegistryError(LayoutMcpError):
    """Tool registry could not be built or was modified after freezing."""

    default_code = "REGISTRY_ERROR"
