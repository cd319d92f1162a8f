"""Protocol-level exceptions.

These never reach a tool handler; the dispatcher turns them into the
outer JSON-RPC ``error`` object.
"""

from typing import Any, Optional

from mcp.types import INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, PARSE_ERROR

from layout_mcp.exceptions.base import LayoutMcpError


class ProtocolError(LayoutMcpError):
    """Malformed frame, invalid envelope, unknown method or unknown tool."""

    default_code = "PROTOCOL_ERROR"
    rpc_code = INVALID_REQUEST

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.data = data


class FramingError(ProtocolError):
    rpc_code = PARSE_ERROR


class InvalidRequestError(ProtocolError):
    rpc_code = INVALID_REQUEST


class MethodNotFoundError(ProtocolError):
    rpc_code = METHOD_NOT_FOUND

    def __init__(self, method: str):
        super().__init__(f"Method not found: {method}", data={"method": method})
        self.method = method


class InvalidParamsError(ProtocolError):
    rpc_code = INVALID_PARAMS


class UnknownToolError(InvalidParamsError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", data={"tool": name})
        self.tool = name
