"""MCP tool schemas (tools/list) for the layout service.

The list order is the registration order reported by tools/list.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.types import Tool

_NUMBER = "number"

_PAGE_INDEX = {"type": "integer", "description": "Zero-based page index."}
_OPTIONAL_PAGE_INDEX = {
    "type": "integer",
    "description": "Zero-based page index. Defaults to the current page.",
}


def _placement(width_default: float = 100, height_default: float = 50) -> Dict[str, Any]:
    return {
        "pageIndex": _OPTIONAL_PAGE_INDEX,
        "x": {"type": _NUMBER, "description": "X position in mm. Defaults to the left margin."},
        "y": {"type": _NUMBER, "description": "Y position in mm. Defaults to the top margin."},
        "width": {"type": _NUMBER, "description": "Width in mm.", "default": width_default},
        "height": {"type": _NUMBER, "description": "Height in mm.", "default": height_default},
    }


def _no_arguments() -> Dict[str, Any]:
    return {"type": "object", "properties": {}}


def build_tools() -> List[Tool]:
    return [
        # Documents
        Tool(
            name="create_document",
            description=(
                "Create Document - Create a new document in the host application and make it the session's active document. "
                "WORKFLOW: Call this first. Every page, frame, style, image and export tool requires an open document. "
                "Replaces any document already tracked by the session. "
                "Returns: the recorded document geometry (size, pages, margins, bleed)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "width": {"type": _NUMBER, "description": "Page width in mm.", "default": 210},
                    "height": {"type": _NUMBER, "description": "Page height in mm.", "default": 297},
                    "pages": {"type": "integer", "description": "Number of pages.", "default": 1},
                    "facingPages": {"type": "boolean", "description": "Enable facing pages.", "default": False},
                    "pageOrientation": {
                        "type": "string",
                        "enum": ["PORTRAIT", "LANDSCAPE"],
                        "default": "PORTRAIT",
                    },
                    "bleedTop": {"type": _NUMBER, "description": "Top bleed in mm.", "default": 3},
                    "bleedBottom": {"type": _NUMBER, "description": "Bottom bleed in mm.", "default": 3},
                    "bleedInside": {"type": _NUMBER, "description": "Inside bleed in mm.", "default": 3},
                    "bleedOutside": {"type": _NUMBER, "description": "Outside bleed in mm.", "default": 3},
                    "marginTop": {"type": _NUMBER, "description": "Top margin in mm.", "default": 20},
                    "marginBottom": {"type": _NUMBER, "description": "Bottom margin in mm.", "default": 20},
                    "marginLeft": {"type": _NUMBER, "description": "Left margin in mm.", "default": 20},
                    "marginRight": {"type": _NUMBER, "description": "Right margin in mm.", "default": 20},
                    "name": {"type": "string", "description": "Name recorded for the document."},
                },
            },
        ),
        Tool(
            name="open_document",
            description=(
                "Open Document - Open an existing document file and make it the session's active document. "
                "The file must exist on the server's file system. "
                "Returns: the document name, path and the geometry reported by the host."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "filePath": {"type": "string", "description": "Path to the document file."},
                },
                "required": ["filePath"],
            },
        ),
        Tool(
            name="get_document_info",
            description=(
                "Document Inspection - Get the active document's name, path, page size, page count, "
                "margins, bleed, facing pages, orientation and current page. Requires an open document."
            ),
            inputSchema=_no_arguments(),
        ),
        Tool(
            name="save_document",
            description=(
                "Save Document - Save the active document to a file. The destination directory must exist. "
                "The saved path becomes the session's document path."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "filePath": {"type": "string", "description": "Path where the document is saved."},
                },
                "required": ["filePath"],
            },
        ),
        Tool(
            name="close_document",
            description=(
                "Close Document - Close the active document without saving and reset the session. "
                "Afterwards document-dependent tools fail until a document is created or opened again."
            ),
            inputSchema=_no_arguments(),
        ),
        # Pages
        Tool(
            name="add_page",
            description=(
                "Add Page - Insert a new page. BEFORE and AFTER require referencePage. "
                "Returns: the new page's index and the page count."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "position": {
                        "type": "string",
                        "enum": ["AT_END", "AT_BEGINNING", "BEFORE", "AFTER"],
                        "default": "AT_END",
                    },
                    "referencePage": {
                        "type": "integer",
                        "description": "Reference page index for BEFORE/AFTER positioning.",
                    },
                },
            },
        ),
        Tool(
            name="delete_page",
            description=(
                "Delete Page - Remove a page and the items placed on it. The last remaining page cannot be deleted."
            ),
            inputSchema={
                "type": "object",
                "properties": {"pageIndex": _PAGE_INDEX},
                "required": ["pageIndex"],
            },
        ),
        Tool(
            name="navigate_to_page",
            description=(
                "Navigate To Page - Make a page the current page. New frames and images are placed "
                "on the current page when no pageIndex is given."
            ),
            inputSchema={
                "type": "object",
                "properties": {"pageIndex": _PAGE_INDEX},
                "required": ["pageIndex"],
            },
        ),
        Tool(
            name="get_page_info",
            description=(
                "Page Inspection - Get a page's number, size, whether it is current, and how many items "
                "and images the session has placed on it. When the host reports them, also returns the "
                "page name and the host's own item count."
            ),
            inputSchema={
                "type": "object",
                "properties": {"pageIndex": _PAGE_INDEX},
                "required": ["pageIndex"],
            },
        ),
        # Frames
        Tool(
            name="create_text_frame",
            description=(
                "Create Text Frame - Add a text frame to a page. Referenced paragraph and character styles "
                "must already exist (create them first) unless they are built-in names in brackets. "
                "Returns: the frame's item index and bounds."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "content": {"type": "string", "description": "Text content for the frame."},
                    **_placement(),
                    "fontSize": {"type": _NUMBER, "description": "Font size in points.", "default": 12},
                    "fontName": {
                        "type": "string",
                        "description": "Font name (format: FontName\\tStyle).",
                        "default": "Arial\tRegular",
                    },
                    "textColor": {"type": "string", "description": "Swatch name.", "default": "Black"},
                    "alignment": {
                        "type": "string",
                        "enum": ["LEFT", "CENTER", "RIGHT", "JUSTIFY"],
                        "default": "LEFT",
                    },
                    "paragraphStyle": {"type": "string", "description": "Paragraph style to apply."},
                    "characterStyle": {"type": "string", "description": "Character style to apply."},
                },
                "required": ["content"],
            },
        ),
        Tool(
            name="create_rectangle",
            description="Create Rectangle - Add a rectangle to a page. Returns: the item index and bounds.",
            inputSchema={
                "type": "object",
                "properties": {
                    **_placement(),
                    "fillColor": {"type": "string", "description": "Fill swatch name."},
                    "strokeColor": {"type": "string", "description": "Stroke swatch name."},
                    "strokeWidth": {"type": _NUMBER, "description": "Stroke width in points.", "default": 1},
                    "cornerRadius": {"type": _NUMBER, "description": "Corner radius in mm.", "default": 0},
                },
            },
        ),
        Tool(
            name="list_page_items",
            description=(
                "List Page Items - List the text frames and rectangles the session has created on a page."
            ),
            inputSchema={
                "type": "object",
                "properties": {"pageIndex": _OPTIONAL_PAGE_INDEX},
            },
        ),
        # Styles
        Tool(
            name="create_paragraph_style",
            description=(
                "Create Paragraph Style - Define a named paragraph style. Names are unique per style kind; "
                "creating an existing name fails with STYLE_EXISTS."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Style name."},
                    "fontFamily": {"type": "string", "default": "Arial\tRegular"},
                    "fontSize": {"type": _NUMBER, "description": "Font size in points.", "default": 12},
                    "textColor": {"type": "string", "default": "Black"},
                    "alignment": {
                        "type": "string",
                        "enum": ["LEFT_ALIGN", "CENTER_ALIGN", "RIGHT_ALIGN", "JUSTIFY"],
                        "default": "LEFT_ALIGN",
                    },
                    "leading": {"type": _NUMBER, "description": "Line spacing in points."},
                    "spaceBefore": {"type": _NUMBER, "description": "Space before in points."},
                    "spaceAfter": {"type": _NUMBER, "description": "Space after in points."},
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="create_character_style",
            description=(
                "Create Character Style - Define a named character style. Names are unique per style kind."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Style name."},
                    "fontFamily": {"type": "string", "default": "Arial\tRegular"},
                    "fontSize": {"type": _NUMBER, "description": "Font size in points.", "default": 12},
                    "textColor": {"type": "string", "default": "Black"},
                    "bold": {"type": "boolean", "default": False},
                    "italic": {"type": "boolean", "default": False},
                    "underline": {"type": "boolean", "default": False},
                },
                "required": ["name"],
            },
        ),
        Tool(
            name="list_styles",
            description="List Styles - List the paragraph and/or character styles created in this session.",
            inputSchema={
                "type": "object",
                "properties": {
                    "styleType": {
                        "type": "string",
                        "enum": ["PARAGRAPH", "CHARACTER", "ALL"],
                        "default": "ALL",
                    },
                },
            },
        ),
        # Images
        Tool(
            name="place_image",
            description=(
                "Place Image - Place an image file on a page. The file must exist and be readable; "
                "width and height must be positive. Returns: the image's item index and bounds."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "filePath": {"type": "string", "description": "Path to the image file."},
                    **_placement(),
                    "linkImage": {"type": "boolean", "default": True},
                    "scale": {"type": _NUMBER, "description": "Scale percentage (1-1000).", "default": 100},
                    "fitMode": {
                        "type": "string",
                        "enum": ["PROPORTIONALLY", "FILL_FRAME", "FIT_CONTENT", "FIT_FRAME"],
                        "default": "PROPORTIONALLY",
                    },
                },
                "required": ["filePath"],
            },
        ),
        Tool(
            name="get_image_info",
            description="Image Inspection - Get the file, page, bounds and fitting of a placed image.",
            inputSchema={
                "type": "object",
                "properties": {
                    "itemIndex": {"type": "integer", "description": "Image index.", "default": 0},
                },
            },
        ),
        # Export
        Tool(
            name="export_pdf",
            description=(
                "Export PDF - Export the active document to a PDF file. The destination directory must exist."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "filePath": {"type": "string", "description": "Output PDF file path."},
                    "quality": {
                        "type": "string",
                        "enum": ["PRESS", "PRINT", "SCREEN", "DIGITAL"],
                        "default": "PRINT",
                    },
                    "includeMarks": {"type": "boolean", "default": False},
                    "includeBleed": {"type": "boolean", "default": False},
                    "pages": {
                        "type": "string",
                        "description": "Page range such as '1-5' or 'all'.",
                        "default": "all",
                    },
                },
                "required": ["filePath"],
            },
        ),
        # Utility
        Tool(
            name="execute_script",
            description=(
                "Execute Script - Run raw ExtendScript in the host application and return its output. "
                "Does not change the session."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {"type": "string", "description": "ExtendScript code to execute."},
                },
                "required": ["code"],
            },
        ),
        Tool(
            name="get_session_info",
            description=(
                "Session Inspection - Get the session summary: active document, page dimensions, page count, "
                "counts of styles, items and images, and timestamps. Works with or without an open document."
            ),
            inputSchema=_no_arguments(),
        ),
        Tool(
            name="clear_session",
            description="Clear Session - Forget the active document and everything recorded about it.",
            inputSchema=_no_arguments(),
        ),
        Tool(
            name="help",
            description=(
                "Help - Workflow guidance and the list of tools. Pass 'tool' for one tool's schema."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "tool": {"type": "string", "description": "Tool name to describe."},
                },
            },
        ),
    ]
