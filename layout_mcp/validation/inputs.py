"""Pydantic input models for the layout tools.

Field names are snake_case in Python and camelCase on the wire
(``filePath``, ``pageIndex``, ``marginTop``). Unknown arguments are ignored.
Geometry is in millimetres.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Alignment = Literal["LEFT", "CENTER", "RIGHT", "JUSTIFY"]
PagePosition = Literal["AT_END", "AT_BEGINNING", "BEFORE", "AFTER"]
FitMode = Literal["PROPORTIONALLY", "FILL_FRAME", "FIT_CONTENT", "FIT_FRAME"]
PdfQuality = Literal["PRESS", "PRINT", "SCREEN", "DIGITAL"]
StyleType = Literal["PARAGRAPH", "CHARACTER", "ALL"]


class ToolInput(BaseModel):
    model_config = ConfigDict(
        extra="ignore", alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class EmptyInput(ToolInput):
    """For tools that take no arguments."""


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class CreateDocumentInput(ToolInput):
    """Input for create_document.

    Args:
        width/height: Page size in mm (A4 portrait by default)
        pages: Initial page count
        facing_pages: Enable spreads
        page_orientation: PORTRAIT or LANDSCAPE
        bleed_*: Bleed offsets in mm
        margin_*: Margins in mm
        name: Name recorded for the document in the session
    """

    width: float = Field(default=210, gt=0)
    height: float = Field(default=297, gt=0)
    pages: int = Field(default=1, ge=1)
    facing_pages: bool = False
    page_orientation: Literal["PORTRAIT", "LANDSCAPE"] = "PORTRAIT"
    bleed_top: float = Field(default=3, ge=0)
    bleed_bottom: float = Field(default=3, ge=0)
    bleed_inside: float = Field(default=3, ge=0)
    bleed_outside: float = Field(default=3, ge=0)
    margin_top: float = Field(default=20, ge=0)
    margin_bottom: float = Field(default=20, ge=0)
    margin_left: float = Field(default=20, ge=0)
    margin_right: float = Field(default=20, ge=0)
    name: Optional[str] = Field(default=None, min_length=1)


class OpenDocumentInput(ToolInput):
    file_path: str = Field(min_length=1)


class SaveDocumentInput(ToolInput):
    file_path: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


class AddPageInput(ToolInput):
    position: PagePosition = "AT_END"
    reference_page: Optional[int] = None


class PageIndexInput(ToolInput):
    """Input for delete_page, navigate_to_page, get_page_info."""

    page_index: int


class ListPageItemsInput(ToolInput):
    page_index: Optional[int] = None


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------


class PlacementInput(ToolInput):
    """Common placement fields; x and y default to the page margins."""

    page_index: Optional[int] = None
    x: Optional[float] = None
    y: Optional[float] = None
    width: float = Field(default=100, gt=0)
    height: float = Field(default=50, gt=0)


class CreateTextFrameInput(PlacementInput):
    content: str
    font_size: float = Field(default=12, gt=0)
    font_name: str = "Arial\tRegular"
    text_color: str = "Black"
    alignment: Alignment = "LEFT"
    paragraph_style: Optional[str] = None
    character_style: Optional[str] = None


class CreateRectangleInput(PlacementInput):
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: float = Field(default=1, ge=0)
    corner_radius: float = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class CreateParagraphStyleInput(ToolInput):
    name: str = Field(min_length=1)
    font_family: str = "Arial\tRegular"
    font_size: float = Field(default=12, gt=0)
    text_color: str = "Black"
    alignment: Literal["LEFT_ALIGN", "CENTER_ALIGN", "RIGHT_ALIGN", "JUSTIFY"] = "LEFT_ALIGN"
    leading: Optional[float] = Field(default=None, gt=0)
    space_before: Optional[float] = Field(default=None, ge=0)
    space_after: Optional[float] = Field(default=None, ge=0)


class CreateCharacterStyleInput(ToolInput):
    name: str = Field(min_length=1)
    font_family: str = "Arial\tRegular"
    font_size: float = Field(default=12, gt=0)
    text_color: str = "Black"
    bold: bool = False
    italic: bool = False
    underline: bool = False


class ListStylesInput(ToolInput):
    style_type: StyleType = "ALL"


# ---------------------------------------------------------------------------
# Images and export
# ---------------------------------------------------------------------------


class PlaceImageInput(PlacementInput):
    file_path: str = Field(min_length=1)
    link_image: bool = True
    scale: float = Field(default=100, ge=1, le=1000)
    fit_mode: FitMode = "PROPORTIONALLY"


class GetImageInfoInput(ToolInput):
    item_index: int = Field(default=0, ge=0)


class ExportPdfInput(ToolInput):
    file_path: str = Field(min_length=1)
    quality: PdfQuality = "PRINT"
    include_marks: bool = False
    include_bleed: bool = False
    pages: str = "all"


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------


class ExecuteScriptInput(ToolInput):
    code: str = Field(min_length=1)


class HelpInput(ToolInput):
    tool: Optional[str] = None
