"""Document lifecycle tool handlers."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from layout_mcp.bridge import scripts
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.mcp_server.tools.common import (
    document_geometry,
    existing_file,
    host_output,
    writable_destination,
)
from layout_mcp.sessions.models import Bleed, Margins
from layout_mcp.validation.inputs import (
    CreateDocumentInput,
    EmptyInput,
    OpenDocumentInput,
    SaveDocumentInput,
)

DEFAULT_DOCUMENT_NAME = "Untitled"


async def _tool_create_document(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = CreateDocumentInput.model_validate(arguments)
    margins = Margins(
        top=payload.margin_top,
        bottom=payload.margin_bottom,
        left=payload.margin_left,
        right=payload.margin_right,
    )
    bleed = Bleed(
        top=payload.bleed_top,
        bottom=payload.bleed_bottom,
        inside=payload.bleed_inside,
        outside=payload.bleed_outside,
    )

    output = context.bridge.execute(
        scripts.create_document(
            width=payload.width,
            height=payload.height,
            pages=payload.pages,
            facing_pages=payload.facing_pages,
            page_orientation=payload.page_orientation,
            bleed=bleed.model_dump(),
            margins=margins.model_dump(),
        )
    )

    session = context.session.open_document(
        name=payload.name or DEFAULT_DOCUMENT_NAME,
        path=None,
        width=payload.width,
        height=payload.height,
        page_count=payload.pages,
        margins=margins,
        bleed=bleed,
        facing_pages=payload.facing_pages,
        page_orientation=payload.page_orientation,
    )
    return _success(
        {
            "message": "Document created",
            "document": document_geometry(session),
            "hostResponse": host_output(output),
        }
    )


def _parse_document_summary(
    output: str, path: Path
) -> Tuple[str, Optional[float], Optional[float], int]:
    """Host output is ``name|width|height|pages``; anything else falls back
    to the file name with unknown geometry."""
    parts = output.strip().split("|")
    if len(parts) == 4:
        try:
            width, height = float(parts[1]), float(parts[2])
            pages = int(parts[3])
        except ValueError:
            pass
        else:
            if math.isfinite(width) and math.isfinite(height):
                return parts[0], width, height, max(pages, 1)
    return path.name, None, None, 1


async def _tool_open_document(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = OpenDocumentInput.model_validate(arguments)
    path = existing_file(payload.file_path)

    output = context.bridge.execute(scripts.open_document(str(path)))
    name, width, height, pages = _parse_document_summary(output, path)

    session = context.session.open_document(
        name=name,
        path=str(path),
        width=width,
        height=height,
        page_count=pages,
    )
    return _success({"message": "Document opened", "document": document_geometry(session)})


async def _tool_get_document_info(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    EmptyInput.model_validate(arguments)
    session = context.session.require_open_document()
    return _success(document_geometry(session))


async def _tool_save_document(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = SaveDocumentInput.model_validate(arguments)
    path = writable_destination(payload.file_path)
    context.session.require_open_document()

    context.bridge.execute(scripts.save_document(str(path)))
    context.session.set_path(str(path))
    return _success({"message": "Document saved", "filePath": str(path)})


async def _tool_close_document(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    EmptyInput.model_validate(arguments)
    session = context.session.require_open_document()
    name = session.name

    context.bridge.execute(scripts.close_document())
    context.session.reset()
    return _success({"message": "Document closed", "name": name})
