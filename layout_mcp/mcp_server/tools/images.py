"""Image placement tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from layout_mcp.bridge import scripts
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.mcp_server.tools.common import existing_file, placement_bounds
from layout_mcp.sessions.models import PlacedImage
from layout_mcp.validation.inputs import GetImageInfoInput, PlaceImageInput


async def _tool_place_image(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = PlaceImageInput.model_validate(arguments)
    path = existing_file(payload.file_path)
    page_index = context.session.resolve_page_index(payload.page_index)
    bounds = placement_bounds(payload, context.session.session)

    context.bridge.execute(
        scripts.place_image(
            page_index=page_index,
            file_path=str(path),
            x=bounds.x,
            y=bounds.y,
            width=bounds.width,
            height=bounds.height,
            fit_mode=payload.fit_mode,
            scale=payload.scale,
            link_image=payload.link_image,
        )
    )
    item_index = context.session.add_image(
        PlacedImage(
            file_path=str(path),
            page_index=page_index,
            bounds=bounds,
            fit_mode=payload.fit_mode,
            scale=payload.scale,
        )
    )
    return _success(
        {
            "message": "Image placed",
            "itemIndex": item_index,
            "pageIndex": page_index,
            "filePath": str(path),
            "bounds": bounds.to_wire(),
        }
    )


async def _tool_get_image_info(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = GetImageInfoInput.model_validate(arguments)
    image = context.session.get_image(payload.item_index)
    return _success({"itemIndex": payload.item_index, **image.to_wire()})
