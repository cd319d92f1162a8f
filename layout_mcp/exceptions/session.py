"""Session-related exceptions."""

from typing import Any, Dict, Optional

from layout_mcp.exceptions.base import ToolError

NO_DOCUMENT_MESSAGE = (
    "No document is open. Call create_document or open_document before using this tool."
)


class StateError(ToolError):
    """A tool was invoked without the session precondition it needs."""

    default_code = "INVALID_SESSION_STATE"


class NoDocumentOpenError(StateError):
    """Raised when a document-dependent tool runs with no open document."""

    default_code = "NO_DOCUMENT_OPEN"

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__(NO_DOCUMENT_MESSAGE, details=details)
