"""In-memory store for the open-document session.

One SessionStore belongs to one dispatcher. Handlers receive it through
their ToolContext and are the only code that mutates it; the dispatcher
runs one handler at a time, so no locking is involved.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from layout_mcp.exceptions import NoDocumentOpenError, ValidationError
from layout_mcp.logger import Logger
from layout_mcp.sessions.models import (
    Bleed,
    Bounds,
    DocumentSession,
    ItemKind,
    Margins,
    PageItem,
    PlacedImage,
    StyleEntry,
    StyleKind,
    utc_now,
)


class SessionStore:
    """Holds the single DocumentSession record and its transitions."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger
        self._session = DocumentSession()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def session(self) -> DocumentSession:
        return self._session

    @property
    def document_open(self) -> bool:
        return self._session.document_open

    def require_open_document(self) -> DocumentSession:
        """Return the session, or raise if no document is open."""
        if not self._session.document_open:
            raise NoDocumentOpenError()
        return self._session

    def open_document(
        self,
        *,
        name: str,
        path: Optional[str],
        width: Optional[float],
        height: Optional[float],
        page_count: int,
        margins: Optional[Margins] = None,
        bleed: Optional[Bleed] = None,
        facing_pages: Optional[bool] = None,
        page_orientation: Optional[str] = None,
    ) -> DocumentSession:
        """Record a newly created or opened document.

        Any previous document record is discarded: the session tracks the
        host's active document only.
        """
        if self._session.document_open and self.logger:
            self.logger.info(
                "Replacing active document in session",
                previous=self._session.name,
                new=name,
            )
        now = utc_now()
        self._session = DocumentSession(
            document_open=True,
            name=name,
            path=path,
            width=width,
            height=height,
            margins=margins,
            bleed=bleed,
            facing_pages=facing_pages,
            page_orientation=page_orientation,
            page_count=page_count,
            current_page_index=0,
            created_at=now,
            last_modified=now,
        )
        if self.logger:
            self.logger.info("Document opened in session", name=name, pages=page_count)
        return self._session

    def reset(self) -> None:
        """Return to the initial "no document" state."""
        self._session = DocumentSession()
        if self.logger:
            self.logger.info("Session reset")

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    def check_page_index(self, index: int, field: str = "pageIndex") -> int:
        session = self.require_open_document()
        if index < 0 or index >= session.page_count:
            raise ValidationError(
                f"Page index {index} is out of range; the document has "
                f"{session.page_count} page(s) (valid indexes 0-{session.page_count - 1}).",
                code="PAGE_OUT_OF_RANGE",
                details={"field": field, "value": index, "pageCount": session.page_count},
            )
        return index

    def resolve_page_index(self, index: Optional[int]) -> int:
        """Explicit page index, or the current page when omitted."""
        session = self.require_open_document()
        if index is None:
            return session.current_page_index or 0
        return self.check_page_index(index)

    def insertion_index(self, position: str, reference_page: Optional[int]) -> int:
        """Index a new page will occupy for a given location option."""
        session = self.require_open_document()
        if position == "AT_END":
            return session.page_count
        if position == "AT_BEGINNING":
            return 0
        if reference_page is None:
            raise ValidationError(
                f"referencePage is required when position is {position}",
                code="MISSING_REFERENCE_PAGE",
                details={"field": "referencePage"},
            )
        self.check_page_index(reference_page, field="referencePage")
        return reference_page if position == "BEFORE" else reference_page + 1

    def insert_page(self, index: int) -> int:
        """Insert a page at ``index``; returns the new page count."""
        session = self.require_open_document()
        for item in session.page_items:
            if item.page_index >= index:
                item.page_index += 1
        for image in session.images:
            if image.page_index >= index:
                image.page_index += 1
        if session.current_page_index is not None and session.current_page_index >= index:
            session.current_page_index += 1
        session.page_count += 1
        self._touch()
        return session.page_count

    def check_page_removable(self, index: int) -> int:
        session = self.require_open_document()
        self.check_page_index(index)
        if session.page_count == 1:
            raise ValidationError(
                "Cannot delete the only page of a document.",
                code="LAST_PAGE",
                details={"pageIndex": index},
            )
        return index

    def remove_page(self, index: int) -> int:
        """Remove the page at ``index`` and everything placed on it."""
        session = self.require_open_document()
        self.check_page_removable(index)
        session.page_items = [item for item in session.page_items if item.page_index != index]
        session.images = [image for image in session.images if image.page_index != index]
        for item in session.page_items:
            if item.page_index > index:
                item.page_index -= 1
        for image in session.images:
            if image.page_index > index:
                image.page_index -= 1
        session.page_count -= 1
        current = session.current_page_index or 0
        if current > index or current >= session.page_count:
            session.current_page_index = max(current - 1, 0)
        self._touch()
        return session.page_count

    def set_current_page(self, index: int) -> None:
        session = self.require_open_document()
        session.current_page_index = self.check_page_index(index)
        self._touch()

    def set_path(self, path: str) -> None:
        session = self.require_open_document()
        session.path = path
        self._touch()

    # ------------------------------------------------------------------
    # Items, images and styles
    # ------------------------------------------------------------------

    def add_page_item(
        self, kind: ItemKind, page_index: int, bounds: Bounds, **properties: Any
    ) -> int:
        session = self.require_open_document()
        item = PageItem(kind=kind, page_index=page_index, bounds=bounds, properties=properties)
        session.page_items.append(item)
        session.last_created_item = {"type": kind, "pageIndex": page_index, **bounds.to_wire()}
        self._touch()
        return len(session.page_items) - 1

    def page_items(self, page_index: Optional[int] = None) -> List[PageItem]:
        session = self.require_open_document()
        if page_index is None:
            return list(session.page_items)
        return [item for item in session.page_items if item.page_index == page_index]

    def add_image(self, image: PlacedImage) -> int:
        session = self.require_open_document()
        session.images.append(image)
        session.last_created_item = {
            "type": "image",
            "filePath": image.file_path,
            "pageIndex": image.page_index,
            **image.bounds.to_wire(),
        }
        self._touch()
        return len(session.images) - 1

    def get_image(self, index: int) -> PlacedImage:
        session = self.require_open_document()
        if index < 0 or index >= len(session.images):
            raise ValidationError(
                f"Image index {index} not found. Total images: {len(session.images)}",
                code="IMAGE_NOT_FOUND",
                details={"itemIndex": index, "imageCount": len(session.images)},
            )
        return session.images[index]

    def has_style(self, kind: StyleKind, name: str) -> bool:
        return name in self._session.style_registry.get(kind, {})

    def register_style(
        self, kind: StyleKind, name: str, properties: Dict[str, Any]
    ) -> StyleEntry:
        session = self.require_open_document()
        if self.has_style(kind, name):
            raise ValidationError(
                f"A {kind} style named '{name}' already exists.",
                code="STYLE_EXISTS",
                details={"name": name, "kind": kind},
            )
        entry = StyleEntry(name=name, kind=kind, properties=properties)
        session.style_registry[kind][name] = entry
        self._touch()
        return entry

    def styles(self, kind: Optional[StyleKind] = None) -> List[StyleEntry]:
        session = self.require_open_document()
        kinds = [kind] if kind else list(session.style_registry)
        return [entry for k in kinds for entry in session.style_registry[k].values()]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def summary(self) -> Dict[str, Any]:
        """Session overview; valid with or without an open document."""
        session = self._session
        return {
            "hasActiveDocument": session.document_open,
            "activeDocument": (
                {"name": session.name, "path": session.path} if session.document_open else None
            ),
            "pageDimensions": (
                {"width": session.width, "height": session.height}
                if session.width is not None and session.height is not None
                else None
            ),
            "pageCount": session.page_count,
            "currentPageIndex": session.current_page_index,
            "styleCount": sum(len(styles) for styles in session.style_registry.values()),
            "pageItemCount": len(session.page_items),
            "imageCount": len(session.images),
            "lastCreatedItem": session.last_created_item,
            "timestamps": {
                "createdAt": session.created_at,
                "lastModified": session.last_modified,
            },
        }

    def snapshot(self) -> Dict[str, Any]:
        return self._session.to_wire()

    def _touch(self) -> None:
        self._session.last_modified = utc_now()
