"""Exceptions for the layout-mcp server.

Two families exist. ``ToolError`` subclasses describe business failures
of a single tool call and are reported inside a ToolResult. ``ProtocolError``
subclasses describe requests that could not be interpreted at all and are
reported as the JSON-RPC ``error`` object.
"""

from layout_mcp.exceptions.base import (
    ConfigurationError,
    LayoutMcpError,
    RegistryError,
    ToolError,
    ValidationError,
)
from layout_mcp.exceptions.host import HostAutomationError
from layout_mcp.exceptions.protocol import (
    FramingError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ProtocolError,
    UnknownToolError,
)
from layout_mcp.exceptions.session import (
    NO_DOCUMENT_MESSAGE,
    NoDocumentOpenError,
    StateError,
)

__all__ = [
    "LayoutMcpError",
    "ToolError",
    "ValidationError",
    "ConfigurationError",
    "RegistryError",
    "StateError",
    "NoDocumentOpenError",
    "NO_DOCUMENT_MESSAGE",
    "HostAutomationError",
    "ProtocolError",
    "FramingError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "UnknownToolError",
]
