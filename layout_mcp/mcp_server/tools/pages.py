"""Page tool handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from layout_mcp.bridge import scripts
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.validation.inputs import AddPageInput, PageIndexInput


async def _tool_add_page(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = AddPageInput.model_validate(arguments)
    index = context.session.insertion_index(payload.position, payload.reference_page)

    context.bridge.execute(scripts.add_page(payload.position, payload.reference_page))
    page_count = context.session.insert_page(index)
    return _success(
        {
            "message": f"Page added at index {index}",
        "pageIndex": index,
            "pageCount": page_count,
            "position": payload.position,
        }
    )


async def _tool_delete_page(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = PageIndexInput.model_validate(arguments)
    index = context.session.check_page_removable(payload.page_index)

    context.bridge.execute(scripts.delete_page(index))
    page_count = context.session.remove_page(index)
    return _success(
        {
            "message": f"Page {index} deleted",
            "pageCount": page_count,
            "currentPageIndex": context.session.session.current_page_index,
        }
    )


async def _tool_navigate_to_page(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = PageIndexInput.model_validate(arguments)
    index = context.session.check_page_index(payload.page_index)

    context.bridge.execute(scripts.navigate_to_page(index))
    context.session.set_current_page(index)
    return _success({"message": f"Navigated to page {index}", "currentPageIndex": index})


def _parse_page_summary(output: str) -> Tuple[Optional[str], Optional[int]]:
    """Host output is ``name|itemCount``; anything else yields (None, None)."""
    parts = output.strip().split("|")
    if len(parts) == 2:
        try:
            return parts[0], int(parts[1])
        except ValueError:
            pass
    return None, None


async def _tool_get_page_info(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = PageIndexInput.model_validate(arguments)
    index = context.session.check_page_index(payload.page_index)
    session = context.session.session

    output = context.bridge.execute(scripts.get_page_info(index))
    page_name, host_item_count = _parse_page_summary(output)
    info = {
        "pageIndex": index,
        "pageNumber": index + 1,
        "width": session.width,
        "height": session.height,
        "isCurrent": session.current_page_index == index,
        "itemCount": len(context.session.page_items(index)),
        "imageCount": sum(1 for image in session.images if image.page_index == index),
    }
    if page_name is not None:
        info["pageName"] = page_name
        info["hostItemCount"] = host_item_count
    return _success(info)
