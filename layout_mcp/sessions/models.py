"""Session models for the open-document record."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PageOrientation = Literal["PORTRAIT", "LANDSCAPE"]
StyleKind = Literal["paragraph", "character"]
ItemKind = Literal["text_frame", "rectangle"]


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SessionModel(BaseModel):
    """Base for session records; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class Margins(SessionModel):
    top: float
    bottom: float
    left: float
    right: float


class Bleed(SessionModel):
    top: float
    bottom: float
    inside: float
    outside: float


class Bounds(SessionModel):
    """Item bounds in millimetres, origin at the page's top-left corner."""

    x: float
    y: float
    width: float
    height: float


class PageItem(SessionModel):
    kind: ItemKind
    page_index: int
    bounds: Bounds
    properties: Dict[str, Any] = Field(default_factory=dict)
    created_at: str = Field(default_factory=utc_now)


class PlacedImage(SessionModel):
    file_path: str
    page_index: int
    bounds: Bounds
    fit_mode: str = "PROPORTIONALLY"
    scale: float = 100
    created_at: str = Field(default_factory=utc_now)


class StyleEntry(SessionModel):
    name: str
    kind: StyleKind
    properties: Dict[str, Any] = Field(default_factory=dict)


class DocumentSession(SessionModel):
    """State of the currently open document.

    A freshly constructed instance is the "no document" state; resetting the
    session means replacing the record with a new instance.
    """

    document_open: bool = False
    name: Optional[str] = None
    path: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    margins: Optional[Margins] = None
    bleed: Optional[Bleed] = None
    facing_pages: Optional[bool] = None
    page_orientation: Optional[PageOrientation] = None
    page_count: int = 0
    current_page_index: Optional[int] = None
    style_registry: Dict[str, Dict[str, StyleEntry]] = Field(
        default_factory=lambda: {"paragraph": {}, "character": {}}
    )
    page_items: List[PageItem] = Field(default_factory=list)
    images: List[PlacedImage] = Field(default_factory=list)
    last_created_item: Optional[Dict[str, Any]] = None
    created_at: str = Field(default_factory=utc_now)
    last_modified: Optional[str] = None
