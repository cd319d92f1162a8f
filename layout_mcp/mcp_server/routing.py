"""Tool routing and fault containment for the MCP server."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from layout_mcp.exceptions import ToolError
from layout_mcp.mcp_server.preconditions import verify_preconditions
from layout_mcp.mcp_server.responses import ToolResult, _error, _handle_validation_error
from layout_mcp.mcp_server.tool_types import ToolContext, ToolHandler

from layout_mcp.mcp_server.tools.documents import (
    _tool_close_document,
    _tool_create_document,
    _tool_get_document_info,
    _tool_open_document,
    _tool_save_document,
)
from layout_mcp.mcp_server.tools.export import _tool_export_pdf
from layout_mcp.mcp_server.tools.frames import (
    _tool_create_rectangle,
    _tool_create_text_frame,
    _tool_list_page_items,
)
from layout_mcp.mcp_server.tools.images import _tool_get_image_info, _tool_place_image
from layout_mcp.mcp_server.tools.pages import (
    _tool_add_page,
    _tool_delete_page,
    _tool_get_page_info,
    _tool_navigate_to_page,
)
from layout_mcp.mcp_server.tools.styles import (
    _tool_create_character_style,
    _tool_create_paragraph_style,
    _tool_list_styles,
)
from layout_mcp.mcp_server.tools.utility import (
    _tool_clear_session,
    _tool_execute_script,
    _tool_get_session_info,
    _tool_help,
)


HANDLERS: Dict[str, ToolHandler] = {
    "create_document": _tool_create_document,
    "open_document": _tool_open_document,
    "get_document_info": _tool_get_document_info,
    "save_document": _tool_save_document,
    "close_document": _tool_close_document,
    "add_page": _tool_add_page,
    "delete_page": _tool_delete_page,
    "navigate_to_page": _tool_navigate_to_page,
    "get_page_info": _tool_get_page_info,
    "create_text_frame": _tool_create_text_frame,
    "create_rectangle": _tool_create_rectangle,
    "list_page_items": _tool_list_page_items,
    "create_paragraph_style": _tool_create_paragraph_style,
    "create_character_style": _tool_create_character_style,
    "list_styles": _tool_list_styles,
    "place_image": _tool_place_image,
    "get_image_info": _tool_get_image_info,
    "export_pdf": _tool_export_pdf,
    "execute_script": _tool_execute_script,
    "get_session_info": _tool_get_session_info,
    "clear_session": _tool_clear_session,
    "help": _tool_help,
}


def operation_name(tool_name: str) -> str:
    return tool_name.replace("_", " ").title()


async def invoke_tool(
    *,
    name: str,
    handler: ToolHandler,
    arguments: Dict[str, Any],
    context: ToolContext,
) -> ToolResult:
    """Run one handler and return its ToolResult.

    Every exception is converted into a failed ToolResult here; only
    BaseException subclasses such as cancellation pass through.
    """
    logger = context.logger
    logger.info("Tool invocation started", tool=name, args_keys=list(arguments.keys()))

    result = verify_preconditions(name, context.session)
    if result is not None:
        logger.warning("Tool refused: no open document", tool=name)
    else:
        result = await _run_handler(name, handler, dict(arguments), context)

    if result.operation is None:
        result.operation = operation_name(name)
    return result


async def _run_handler(
    name: str, handler: ToolHandler, arguments: Dict[str, Any], context: ToolContext
) -> ToolResult:
    logger = context.logger
    try:
        result = await handler(arguments, context)
        logger.info("Tool completed successfully", tool=name)
        return result
    except PydanticValidationError as exc:
        logger.error(
            "Validation error",
            tool=name,
            error_count=len(exc.errors()),
            errors=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
        )
        return _handle_validation_error(exc)
    except ToolError as exc:
        logger.error(
            "Domain error",
            tool=name,
            error_code=exc.code,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return _error(code=exc.code, message=exc.message, details=exc.details)
    except ValueError as exc:
        logger.error(
            "Business rule violation",
            tool=name,
            error_type="ValueError",
            error=str(exc),
        )
        return _error(code="VALIDATION_ERROR", message=str(exc))
    except Exception as exc:
        logger.error(
            "Unexpected tool failure",
            tool=name,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return _error(
            code="INTERNAL_ERROR",
            message=f"Unexpected error: {exc}",
            details={"error_type": type(exc).__name__},
        )
