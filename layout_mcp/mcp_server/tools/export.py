"""PDF export tool handler."""

from __future__ import annotations

import re
from typing import Any, Dict

from layout_mcp.bridge import scripts
from layout_mcp.exceptions import ValidationError
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.mcp_server.tools.common import writable_destination
from layout_mcp.validation.inputs import ExportPdfInput

PAGE_RANGE_PATTERN = re.compile(r"^\d+(-\d+)?(,\s*\d+(-\d+)?)*$")


def _check_page_range(pages: str) -> str:
    pages = pages.strip()
    if pages.lower() == "all" or PAGE_RANGE_PATTERN.match(pages):
        return pages
    raise ValidationError(
        f"Invalid page range '{pages}'. Use 'all' or a range such as '1-5' or '1,3,5-7'.",
        code="INVALID_PAGE_RANGE",
        details={"field": "pages", "value": pages},
    )


async def _tool_export_pdf(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = ExportPdfInput.model_validate(arguments)
    path = writable_destination(payload.file_path)
    pages = _check_page_range(payload.pages)

    context.bridge.execute(
        scripts.export_pdf(
            file_path=str(path),
            quality=payload.quality,
            include_marks=payload.include_marks,
            include_bleed=payload.include_bleed,
            pages=pages,
        )
    )
    return _success(
        {
            "message": "PDF exported",
            "filePath": str(path),
            "quality": payload.quality,
            "pages": pages,
        }
    )
