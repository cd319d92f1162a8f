"""Session precondition checks for tool calls.

Tools that need an open document are refused before their handler runs,
and before their arguments are validated, so the session is never touched.
"""

from __future__ import annotations

from typing import Optional

from layout_mcp.exceptions import NO_DOCUMENT_MESSAGE
from layout_mcp.mcp_server.responses import ToolResult, _error
from layout_mcp.sessions import SessionStore


DOCUMENT_OPTIONAL_TOOLS = {
    "create_document",
    "open_document",
    "execute_script",
    "get_session_info",
    "clear_session",
    "help",
}


def requires_document(name: str) -> bool:
    return name not in DOCUMENT_OPTIONAL_TOOLS


def verify_preconditions(name: str, session: SessionStore) -> Optional[ToolResult]:
    """Return a failed ToolResult if ``name`` cannot run in the current session."""
    if not requires_document(name) or session.document_open:
        return None
    return _error(
        code="NO_DOCUMENT_OPEN",
        message=NO_DOCUMENT_MESSAGE,
        details={"tool": name},
    )
