"""Paragraph and character style tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from layout_mcp.bridge import scripts
from layout_mcp.exceptions import ValidationError
from layout_mcp.mcp_server.responses import ToolResult, _success
from layout_mcp.mcp_server.tool_types import ToolContext
from layout_mcp.validation.inputs import (
    CreateCharacterStyleInput,
    CreateParagraphStyleInput,
    ListStylesInput,
)


def _ensure_unique(context: ToolContext, kind: str, name: str) -> None:
    if context.session.has_style(kind, name):  # type: ignore[arg-type]
        raise ValidationError(
            f"A {kind} style named '{name}' already exists.",
            code="STYLE_EXISTS",
            details={"name": name, "kind": kind},
        )


async def _tool_create_paragraph_style(
    arguments: Dict[str, Any], context: ToolContext
) -> ToolResult:
    payload = CreateParagraphStyleInput.model_validate(arguments)
    _ensure_unique(context, "paragraph", payload.name)
    properties = payload.model_dump(by_alias=True, exclude={"name"}, exclude_none=True)

    context.bridge.execute(scripts.create_paragraph_style(payload.name, properties))
    entry = context.session.register_style("paragraph", payload.name, properties)
    return _success({"message": f"Paragraph style '{entry.name}' created", "style": entry.to_wire()})


async def _tool_create_character_style(
    arguments: Dict[str, Any], context: ToolContext
) -> ToolResult:
    payload = CreateCharacterStyleInput.model_validate(arguments)
    _ensure_unique(context, "character", payload.name)
    properties = payload.model_dump(by_alias=True, exclude={"name"}, exclude_none=True)

    context.bridge.execute(scripts.create_character_style(payload.name, properties))
    entry = context.session.register_style("character", payload.name, properties)
    return _success({"message": f"Character style '{entry.name}' created", "style": entry.to_wire()})


async def _tool_list_styles(arguments: Dict[str, Any], context: ToolContext) -> ToolResult:
    payload = ListStylesInput.model_validate(arguments)
    kind = None if payload.style_type == "ALL" else payload.style_type.lower()

    styles = [entry.to_wire() for entry in context.session.styles(kind)]  # type: ignore[arg-type]
    return _success({"styleType": payload.style_type, "count": len(styles), "styles": styles})
