"""JSON-RPC request dispatcher.

Turns one decoded frame into at most one reply. Protocol problems
(malformed envelope, unknown method or tool) become ProtocolFault
outcomes; everything a tool does, including failing, becomes an Ok
outcome carrying its ToolResult.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Deque, Dict, Optional, Union

from mcp.shared.version import SUPPORTED_PROTOCOL_VERSIONS
from mcp.types import (
    INTERNAL_ERROR,
    LATEST_PROTOCOL_VERSION,
    Implementation,
    InitializeResult,
    ServerCapabilities,
    ToolsCapability,
)

from layout_mcp.bridge import HostBridge
from layout_mcp.exceptions import (
    InvalidParamsError,
    InvalidRequestError,
    MethodNotFoundError,
    ProtocolError,
    UnknownToolError,
)
from layout_mcp.logger import Logger
from layout_mcp.mcp_server.registry import ToolRegistry
from layout_mcp.mcp_server.responses import (
    JSONRPC_VERSION,
    RequestId,
    error_envelope,
    success_envelope,
    tool_call_result,
)
from layout_mcp.mcp_server.routing import invoke_tool
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.sessions import SessionStore

NOTIFICATION_PREFIX = "notifications/"
RECENT_ID_WINDOW = 256


@dataclass(frozen=True)
class Ok:
    result: Dict[str, Any]


@dataclass(frozen=True)
class ProtocolFault:
    code: int
    message: str

    @classmethod
    def from_error(cls, exc: ProtocolError) -> "ProtocolFault":
        return cls(code=exc.rpc_code, message=exc.message)


Outcome = Union[Ok, ProtocolFault]


@dataclass(frozen=True)
class Reply:
    request_id: RequestId
    outcome: Outcome

    def to_message(self) -> Dict[str, Any]:
        if isinstance(self.outcome, Ok):
            return success_envelope(self.request_id, self.outcome.result)
        return error_envelope(self.request_id, self.outcome.code, self.outcome.message)


MethodHandler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


def _valid_id(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return value is None or isinstance(value, (str, int))


class RequestDispatcher:
    """Validates envelopes and routes methods for one session.

    Each dispatcher owns its SessionStore; two dispatchers never share
    document state.
    """

    def __init__(
        self,
        *,
        registry: ToolRegistry,
        session: SessionStore,
        bridge: HostBridge,
        logger: Logger,
        server_name: str = "layout-mcp",
        server_version: str = "0.0.0",
    ) -> None:
        self.registry = registry
        self.session = session
        self.bridge = bridge
        self.logger = logger
        self.server_name = server_name
        self.server_version = server_version
        self.context = ToolContext(session=session, bridge=bridge, logger=logger)
        self._recent_ids: Deque[RequestId] = deque(maxlen=RECENT_ID_WINDOW)
        self._methods: Dict[str, MethodHandler] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
        }

    async def handle(self, message: Any) -> Optional[Reply]:
        """Process one decoded frame; None means nothing is sent back."""
        if not isinstance(message, dict):
            return self._fault(None, InvalidRequestError("Invalid Request: expected a JSON object"))

        has_id = "id" in message
        request_id = message.get("id")
        if not _valid_id(request_id):
            return self._fault(
                None, InvalidRequestError("Invalid Request: id must be a string, number or null")
            )
        if "jsonrpc" in message and message["jsonrpc"] != JSONRPC_VERSION:
            return self._fault(
                request_id, InvalidRequestError('Invalid Request: jsonrpc must be "2.0"')
            )
        method = message.get("method")
        if not isinstance(method, str):
            return self._fault(
                request_id, InvalidRequestError("Invalid Request: method must be a string")
            )
        params = message.get("params")
        if params is None:
            params = {}
        elif not isinstance(params, dict):
            return self._fault(
                request_id, InvalidRequestError("Invalid Request: params must be an object")
            )

        if not has_id and method.startswith(NOTIFICATION_PREFIX):
            self.logger.debug("Notification received", method=method)
            return None

        if has_id and request_id is not None:
            self._track_id(request_id)

        try:
            handler = self._methods.get(method)
            if handler is None:
                raise MethodNotFoundError(method)
            result = await handler(params)
        except ProtocolError as exc:
            return self._fault(request_id, exc)
        except Exception as exc:
            self.logger.error(
                "Unexpected dispatcher failure",
                method=method,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return Reply(request_id, ProtocolFault(INTERNAL_ERROR, f"Internal error: {exc}"))
        return Reply(request_id, Ok(result))

    def fault_reply(self, exc: ProtocolError) -> Reply:
        """Reply for a fault detected before an id could be read."""
        return Reply(None, ProtocolFault.from_error(exc))

    def _fault(self, request_id: RequestId, exc: ProtocolError) -> Reply:
        self.logger.warning(
            "Protocol fault", id=request_id, code=exc.rpc_code, error=exc.message
        )
        return Reply(request_id, ProtocolFault.from_error(exc))

    def _track_id(self, request_id: RequestId) -> None:
        if request_id in self._recent_ids:
            self.logger.warning("Duplicate request id", id=request_id)
        self._recent_ids.append(request_id)

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    async def _initialize(self, params: Dict[str, Any]) -> Dict[str, Any]:
        requested = params.get("protocolVersion")
        if requested in SUPPORTED_PROTOCOL_VERSIONS:
            version = requested
        else:
            version = LATEST_PROTOCOL_VERSION
        client = params.get("clientInfo") or {}
        self.logger.info(
            "Client initialized",
            client=client.get("name") if isinstance(client, dict) else None,
            protocol_version=version,
        )
        result = InitializeResult(
            protocolVersion=version,
            capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False)),
            serverInfo=Implementation(name=self.server_name, version=self.server_version),
        )
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)

    async def _ping(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    async def _tools_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "tools": [
                tool.model_dump(mode="json", by_alias=True, exclude_none=True)
                for tool in self.registry.descriptors()
            ]
        }

    async def _tools_call(self, params: Dict[str, Any]) -> Dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("Invalid params: tools/call requires a string 'name'")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParamsError("Invalid params: 'arguments' must be an object")

        entry = self.registry.get(name)
        if entry is None:
            raise UnknownToolError(name)

        result = await invoke_tool(
            name=name, handler=entry.handler, arguments=arguments, context=self.context
        )
        return tool_call_result(result)
