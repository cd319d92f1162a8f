"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a deterministic fake host bridge,
a logger that records structured calls, a session store, the tool
registry, a dispatcher wired to all of them, and helpers for issuing
JSON-RPC requests.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest

from layout_mcp.bridge import HostBridge
from layout_mcp.exceptions import HostAutomationError
from layout_mcp.logger import Logger
from layout_mcp.mcp_server.dispatcher import RequestDispatcher
from layout_mcp.mcp_server.registry import build_registry
from layout_mcp.sessions import SessionStore

# Smallest valid PNG: signature, IHDR, IDAT, IEND
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


class RecordingLogger(Logger):
    """Logger that keeps every call for later assertions."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, message: str, kwargs: Dict[str, Any]) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, kwargs)

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [message for lvl, message, _ in self.records if level is None or lvl == level]


class FakeBridge(HostBridge):
    """Deterministic bridge: records scripts, replays queued responses.

    ``fail_with`` makes every call raise HostAutomationError; queued
    responses go through the same ``ERROR:`` check as the real bridges.
    """

    name = "fake"

    def __init__(self) -> None:
        self.commands: List[str] = []
        self.responses: List[str] = []
        self.fail_with: Optional[str] = None

    def execute(self, command: str) -> str:
        self.commands.append(command)
        if self.fail_with is not None:
            raise HostAutomationError(self.fail_with)
        if self.responses:
            return self.check_output(self.responses.pop(0))
        return "OK"


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def bridge() -> FakeBridge:
    return FakeBridge()


@pytest.fixture
def session_store(logger) -> SessionStore:
    return SessionStore(logger=logger)


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def dispatcher(registry, session_store, bridge, logger) -> RequestDispatcher:
    return RequestDispatcher(
        registry=registry,
        session=session_store,
        bridge=bridge,
        logger=logger,
        server_name="layout-mcp-test",
        server_version="0.0.1",
    )


@pytest.fixture
def rpc(dispatcher):
    """Send one JSON-RPC request and return the response message."""

    async def _rpc(method: str, params: Optional[Dict[str, Any]] = None, request_id: Any = 1):
        message: Dict[str, Any] = {"jsonrpc": "2.0", "id": request_id, "method": method}
        if params is not None:
            message["params"] = params
        reply = await dispatcher.handle(message)
        assert reply is not None, f"no reply for {method}"
        return reply.to_message()

    return _rpc


@pytest.fixture
def call_tool(rpc):
    """Call a tool and return its decoded ToolResult payload."""

    async def _call(name: str, arguments: Optional[Dict[str, Any]] = None, request_id: Any = 1):
        response = await rpc("tools/call", {"name": name, "arguments": arguments or {}}, request_id)
        assert "error" not in response, response
        content = response["result"]["content"]
        assert len(content) == 1
        assert content[0]["type"] == "text"
        return json.loads(content[0]["text"])

    return _call


@pytest.fixture
def sample_image(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(PNG_BYTES)
    return path
