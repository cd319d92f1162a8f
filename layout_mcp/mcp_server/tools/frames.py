"""Text frame and rectangle tool handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from layout_mcp.bridge import scripts
from layout_mcp.exceptions import ValidationError
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.mcp_server.tools.common import placement_bounds
from layout_mcp.sessions import SessionStore
from layout_mcp.sessions.models import StyleKind
from layout_mcp.validation.inputs import (
    CreateRectangleInput,
    CreateTextFrameInput,
    ListPageItemsInput,
)


def _require_style(session: SessionStore, kind: StyleKind, name: Optional[str]) -> None:
    # Bracketed names such as "[Basic Paragraph]" are the host's built-in styles
    if not name or name.startswith("["):
        return
    if not session.has_style(kind, name):
        raise ValidationError(
            f"{kind.capitalize()} style '{name}' does not exist. Create it with "
            f"create_{kind}_style first.",
            code="STYLE_NOT_FOUND",
            details={"name": name, "kind": kind},
        )


async def _tool_create_text_frame(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = CreateTextFrameInput.model_validate(arguments)
    page_index = context.session.resolve_page_index(payload.page_index)
    _require_style(context.session, "paragraph", payload.paragraph_style)
    _require_style(context.session, "character", payload.character_style)
    bounds = placement_bounds(payload, context.session.session)

    context.bridge.execute(
        scripts.create_text_frame(
            page_index=page_index,
            x=bounds.x,
            y=bounds.y,
            width=bounds.width,
            height=bounds.height,
            content=payload.content,
            font_size=payload.font_size,
            font_name=payload.font_name,
            text_color=payload.text_color,
            alignment=payload.alignment,
            paragraph_style=payload.paragraph_style,
            character_style=payload.character_style,
        )
    )
    item_index = context.session.add_page_item(
        "text_frame",
        page_index,
        bounds,
        content=payload.content,
        paragraphStyle=payload.paragraph_style,
        characterStyle=payload.character_style,
    )
    return _success(
        {
            "message": "Text frame created",
            "itemIndex": item_index,
            "pageIndex": page_index,
            "bounds": bounds.to_wire(),
        }
    )


async def _tool_create_rectangle(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = CreateRectangleInput.model_validate(arguments)
    page_index = context.session.resolve_page_index(payload.page_index)
    bounds = placement_bounds(payload, context.session.session)

    context.bridge.execute(
        scripts.create_rectangle(
            page_index=page_index,
            x=bounds.x,
            y=bounds.y,
            width=bounds.width,
            height=bounds.height,
            fill_color=payload.fill_color,
            stroke_color=payload.stroke_color,
            stroke_width=payload.stroke_width,
            corner_radius=payload.corner_radius,
        )
    )
    item_index = context.session.add_page_item(
        "rectangle",
        page_index,
        bounds,
        fillColor=payload.fill_color,
        strokeColor=payload.stroke_color,
        strokeWidth=payload.stroke_width,
        cornerRadius=payload.corner_radius,
    )
    return _success(
        {
            "message": "Rectangle created",
            "itemIndex": item_index,
            "pageIndex": page_index,
            "bounds": bounds.to_wire(),
        }
    )


async def _tool_list_page_items(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = ListPageItemsInput.model_validate(arguments)
    page_index = context.session.resolve_page_index(payload.page_index)

    items = [
        {"itemIndex": index, **item.to_wire()}
        for index, item in enumerate(context.session.session.page_items)
        if item.page_index == page_index
    ]
    return _success({"pageIndex": page_index, "count": len(items), "items": items})
