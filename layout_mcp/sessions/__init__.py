"""Session management package."""
from layout_mcp.sessions.models import DocumentSession
from layout_mcp.sessions.store import SessionStore

__all__ = ["DocumentSession", "SessionStore"]
