"""Utility tool handlers: raw scripts, session inspection, help."""

from __future__ import annotations

from typing import Any, Dict

from layout_mcp.exceptions import ValidationError
from layout_mcp.mcp_server.preconditions import requires_document
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_schemas import build_tools
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.validation.inputs import EmptyInput, ExecuteScriptInput, HelpInput

WORKFLOW = [
    "Call create_document (or open_document) first; most tools need an open document.",
    "Use add_page, navigate_to_page and get_page_info to manage pages.",
    "Create paragraph and character styles before referencing them from create_text_frame.",
    "Place content with create_text_frame, create_rectangle and place_image. "
    "Geometry is in millimetres; x and y default to the page margins.",
    "Export with export_pdf and persist with save_document.",
    "close_document or clear_session resets the session to its initial state.",
]


async def _tool_execute_script(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = ExecuteScriptInput.model_validate(arguments)
    context.logger.info("Executing raw host script", size=len(payload.code))
    output = context.bridge.execute(payload.code)
    return _success({"output": output})


async def _tool_get_session_info(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    EmptyInput.model_validate(arguments)
    return _success(context.session.summary())


async def _tool_clear_session(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    EmptyInput.model_validate(arguments)
    context.session.reset()
    return _success({"message": "Session cleared"})


async def _tool_help(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = HelpInput.model_validate(arguments)
    tools = {tool.name: tool for tool in build_tools()}

    if payload.tool is not None:
        tool = tools.get(payload.tool)
        if tool is None:
            raise ValidationError(
                f"No help available for unknown tool '{payload.tool}'",
                code="UNKNOWN_TOOL_NAME",
                details={"tool": payload.tool, "available": list(tools)},
            )
        return _success(
            {
                "name": tool.name,
                "description": tool.description,
                "requiresDocument": requires_document(tool.name),
                "inputSchema": tool.inputSchema,
            }
        )

    return _success(
        {
            "workflow": WORKFLOW,
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "requiresDocument": requires_document(tool.name),
                }
                for tool in tools.values()
            ],
        }
    )
