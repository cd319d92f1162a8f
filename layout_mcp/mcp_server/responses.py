"""MCP server response helpers.

This module holds the low-level helpers used by tool handlers, routing and
the dispatcher:
- the ToolResult model and its success/error constructors
- Pydantic validation error formatting
- JSON-RPC envelope builders for results and protocol faults
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from mcp.types import ErrorData, TextContent
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int, float, None]


class ToolResult(BaseModel):
    """Outcome of one tool invocation, carried as JSON text in the response.

    ``result`` is the payload on success and the human-readable message on
    failure. There is no timestamp, so identical failures serialize
    identically.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    operation: Optional[str] = None
    result: Any = None
    error_code: Optional[str] = Field(default=None, alias="errorCode")
    details: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _json_text(payload: Dict[str, Any]) -> TextContent:
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=True, allow_nan=False),
    )


def _success(result: Any, operation: Optional[str] = None) -> ToolResult:
    return ToolResult(success=True, operation=operation, result=result)


def _error(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> ToolResult:
    return ToolResult(success=False, result=message, error_code=code, details=details or None)


def _validation_errors(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {"loc": [str(part) for part in e["loc"]], "msg": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]


def _handle_validation_error(exc: PydanticValidationError) -> ToolResult:
    errors = _validation_errors(exc)

    missing_fields = [e["loc"][0] for e in errors if e["type"] == "missing" and e["loc"]]
    invalid_fields = [e["loc"][0] for e in errors if e["type"] != "missing" and e["loc"]]

    message = f"Input payload failed validation. {len(errors)} error(s) found."
    if missing_fields:
        message += f" MISSING REQUIRED FIELDS: {', '.join(missing_fields)}."
    if invalid_fields:
        message += f" INVALID VALUES: {', '.join(invalid_fields)}."

    return _error(
        code="INVALID_ARGUMENTS",
        message=message,
        details={"validation_errors": errors},
    )


# ---------------------------------------------------------------------------
# JSON-RPC envelopes
# ---------------------------------------------------------------------------


def tool_call_result(result: ToolResult) -> Dict[str, Any]:
    """The ``result`` member of a tools/call response: one text content item."""
    content = _json_text(result.to_payload())
    return {"content": [content.model_dump(mode="json", by_alias=True, exclude_none=True)]}


def success_envelope(request_id: RequestId, result: Dict[str, Any]) -> Dict[str, Any]:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_envelope(request_id: RequestId, code: int, message: str) -> Dict[str, Any]:
    error = ErrorData(code=code, message=message)
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error.model_dump(mode="json", exclude_none=True),
    }
