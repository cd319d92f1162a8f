"""Tests for JSON-RPC envelope handling in the request dispatcher."""

import pytest
from mcp.types import INVALID_PARAMS, INVALID_REQUEST, LATEST_PROTOCOL_VERSION, METHOD_NOT_FOUND

from layout_mcp.mcp_server.dispatcher import Ok, ProtocolFault
from layout_mcp.mcp_server.routing import HANDLERS

EXPECTED_TOOL_ORDER = [
    "create_document",
    "open_document",
    "get_document_info",
    "save_document",
    "close_document",
    "add_page",
    "delete_page",
    "navigate_to_page",
    "get_page_info",
    "create_text_frame",
    "create_rectangle",
    "list_page_items",
    "create_paragraph_style",
    "create_character_style",
    "list_styles",
    "place_image",
    "get_image_info",
    "export_pdf",
    "execute_script",
    "get_session_info",
    "clear_session",
    "help",
]


class TestToolsList:
    """tools/list returns the registry's descriptors in registration order."""

    @pytest.mark.asyncio
    async def test_lists_every_registered_tool(self, rpc):
        response = await rpc("tools/list", {})

        tools = response["result"]["tools"]
        assert len(tools) == len(HANDLERS) == 22
        assert [tool["name"] for tool in tools] == EXPECTED_TOOL_ORDER
        for tool in tools:
            assert set(tool) >= {"name", "description", "inputSchema"}
            assert tool["inputSchema"]["type"] == "object"

    @pytest.mark.asyncio
    async def test_order_is_stable_across_calls(self, rpc):
        first = await rpc("tools/list", {}, request_id=1)
        second = await rpc("tools/list", request_id=2)

        assert first["result"] == second["result"]

    @pytest.mark.asyncio
    async def test_schemas_use_camel_case_argument_names(self, rpc):
        response = await rpc("tools/list")
        schemas = {tool["name"]: tool["inputSchema"] for tool in response["result"]["tools"]}

        assert schemas["place_image"]["required"] == ["filePath"]
        assert "pageIndex" in schemas["navigate_to_page"]["properties"]
        assert "marginTop" in schemas["create_document"]["properties"]


class TestToolsCall:
    """tools/call answers with a single text content item or a protocol error."""

    @pytest.mark.asyncio
    async def test_registered_tool_yields_single_content_item(self, rpc):
        response = await rpc("tools/call", {"name": "get_session_info", "arguments": {}}, "abc")

        assert response["jsonrpc"] == "2.0"
        assert response["id"] == "abc"
        assert "error" not in response
        content = response["result"]["content"]
        assert len(content) == 1
        assert content[0]["type"] == "text"

    @pytest.mark.asyncio
    async def test_business_failure_is_protocol_success(self, rpc):
        response = await rpc("tools/call", {"name": "get_document_info", "arguments": {}})

        assert "error" not in response
        assert len(response["result"]["content"]) == 1

    @pytest.mark.asyncio
    async def test_unknown_tool_yields_error_shape(self, rpc, session_store):
        before = session_store.snapshot()

        response = await rpc("tools/call", {"name": "make_coffee", "arguments": {}}, 7)

        assert "result" not in response
        assert response["id"] == 7
        assert response["error"]["code"] == INVALID_PARAMS
        assert "Unknown tool" in response["error"]["message"]
        assert "make_coffee" in response["error"]["message"]
        assert session_store.snapshot() == before

    @pytest.mark.asyncio
    async def test_missing_arguments_default_to_empty_object(self, rpc):
        response = await rpc("tools/call", {"name": "get_session_info"})

        assert "result" in response

    @pytest.mark.asyncio
    async def test_non_object_arguments_are_invalid_params(self, rpc):
        response = await rpc("tools/call", {"name": "help", "arguments": [1, 2]})

        assert response["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_missing_tool_name_is_invalid_params(self, rpc):
        response = await rpc("tools/call", {"arguments": {}})

        assert response["error"]["code"] == INVALID_PARAMS

    @pytest.mark.asyncio
    async def test_operation_names_the_tool(self, call_tool):
        result = await call_tool("get_session_info")

        assert result["success"] is True
        assert result["operation"] == "Get Session Info"


class TestEnvelopeValidation:
    """Malformed envelopes are answered with Invalid Request."""

    @pytest.mark.asyncio
    async def test_unknown_method(self, rpc):
        response = await rpc("resources/list", {})

        assert response["error"]["code"] == METHOD_NOT_FOUND
        assert "resources/list" in response["error"]["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "message",
        [
            [1, 2, 3],
            "tools/list",
            {"jsonrpc": "1.0", "id": 1, "method": "tools/list"},
            {"jsonrpc": "2.0", "id": 1, "method": 42},
            {"jsonrpc": "2.0", "id": 1},
            {"jsonrpc": "2.0", "id": 1, "method": "tools/list", "params": [1]},
            {"jsonrpc": "2.0", "id": {"nested": True}, "method": "tools/list"},
            {"jsonrpc": "2.0", "id": True, "method": "tools/list"},
            {"jsonrpc": "2.0", "id": float("nan"), "method": "ping"},
            {"jsonrpc": "2.0", "id": float("inf"), "method": "ping"},
        ],
    )
    async def test_invalid_requests(self, dispatcher, message):
        reply = await dispatcher.handle(message)

        assert isinstance(reply.outcome, ProtocolFault)
        assert reply.outcome.code == INVALID_REQUEST
        assert reply.to_message()["error"]["code"] == INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_invalid_id_is_answered_with_null_id(self, dispatcher):
        reply = await dispatcher.handle({"jsonrpc": "2.0", "id": [1], "method": "ping"})

        assert reply.to_message()["id"] is None

    @pytest.mark.asyncio
    async def test_jsonrpc_member_may_be_absent(self, dispatcher):
        reply = await dispatcher.handle({"id": 3, "method": "ping"})

        assert isinstance(reply.outcome, Ok)
        assert reply.to_message() == {"jsonrpc": "2.0", "id": 3, "result": {}}


class TestRequestIds:
    """Ids are opaque: echoed back, never deduplicated."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("request_id", ["req-1", 0, 17, 1.5, None])
    async def test_id_is_echoed(self, rpc, request_id):
        response = await rpc("ping", request_id=request_id)

        assert response["id"] == request_id

    @pytest.mark.asyncio
    async def test_duplicate_ids_are_processed_and_logged(self, call_tool, logger):
        first = await call_tool("create_document", {}, request_id=1700000000000)
        second = await call_tool("add_page", {}, request_id=1700000000000)

        assert first["success"] is True
        assert second["success"] is True
        assert second["result"]["pageCount"] == 2
        assert "Duplicate request id" in logger.messages("WARNING")


class TestLifecycleMethods:
    """initialize, ping and notifications."""

    @pytest.mark.asyncio
    async def test_initialize_echoes_known_protocol_version(self, rpc):
        response = await rpc(
            "initialize",
            {
                "protocolVersion": LATEST_PROTOCOL_VERSION,
                "capabilities": {},
                "clientInfo": {"name": "test-client", "version": "1.0"},
            },
        )

        result = response["result"]
        assert result["protocolVersion"] == LATEST_PROTOCOL_VERSION
        assert result["capabilities"]["tools"] == {"listChanged": False}
        assert result["serverInfo"] == {"name": "layout-mcp-test", "version": "0.0.1"}

    @pytest.mark.asyncio
    async def test_initialize_falls_back_to_latest_version(self, rpc):
        response = await rpc("initialize", {"protocolVersion": "1999-01-01"})

        assert response["result"]["protocolVersion"] == LATEST_PROTOCOL_VERSION

    @pytest.mark.asyncio
    async def test_ping(self, rpc):
        response = await rpc("ping")

        assert response["result"] == {}

    @pytest.mark.asyncio
    async def test_notifications_get_no_reply(self, dispatcher):
        reply = await dispatcher.handle(
            {"jsonrpc": "2.0", "method": "notifications/initialized"}
        )

        assert reply is None

    @pytest.mark.asyncio
    async def test_request_without_id_is_still_answered(self, dispatcher):
        reply = await dispatcher.handle({"jsonrpc": "2.0", "method": "ping"})

        assert reply is not None
        assert reply.to_message()["id"] is None
