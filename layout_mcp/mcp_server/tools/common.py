"""Shared helpers for layout tool handlers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from layout_mcp.exceptions import ValidationError
from layout_mcp.sessions import DocumentSession
from layout_mcp.sessions.models import Bounds
from layout_mcp.validation.inputs import PlacementInput


def existing_file(file_path: str, field: str = "filePath") -> Path:
    """Resolve ``file_path`` and require a readable regular file."""
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise ValidationError(
            f"File not found: {file_path}",
            code="FILE_NOT_FOUND",
            details={"field": field, "value": file_path},
        )
    if not os.access(path, os.R_OK):
        raise ValidationError(
            f"File is not readable: {file_path}",
            code="FILE_NOT_READABLE",
            details={"field": field, "value": file_path},
        )
    return path.resolve()


def writable_destination(file_path: str, field: str = "filePath") -> Path:
    """Resolve ``file_path`` and require its parent directory to exist."""
    path = Path(file_path).expanduser()
    if not path.parent.is_dir():
        raise ValidationError(
            f"Destination directory does not exist: {path.parent}",
            code="DIRECTORY_NOT_FOUND",
            details={"field": field, "value": file_path},
        )
    return path.resolve()


def placement_bounds(payload: PlacementInput, session: DocumentSession) -> Bounds:
    """Bounds for a new item; x and y default to the left and top margins."""
    left, top = _margin_origin(session)
    return Bounds(
        x=payload.x if payload.x is not None else left,
        y=payload.y if payload.y is not None else top,
        width=payload.width,
        height=payload.height,
    )


def _margin_origin(session: DocumentSession) -> Tuple[float, float]:
    if session.margins is None:
        return 0, 0
    return session.margins.left, session.margins.top


def document_geometry(session: DocumentSession) -> Dict[str, Any]:
    return {
        "name": session.name,
        "path": session.path,
        "width": session.width,
        "height": session.height,
        "pages": session.page_count,
        "margins": session.margins.to_wire() if session.margins else None,
        "bleed": session.bleed.to_wire() if session.bleed else None,
        "facingPages": session.facing_pages,
        "pageOrientation": session.page_orientation,
        "currentPageIndex": session.current_page_index,
    }


def host_output(output: str) -> Optional[str]:
    """Trimmed host text, or None when the host printed nothing."""
    text = output.strip()
    return text or None
