"""ExtendScript builders for the host application.

Every builder returns a complete script whose last expression is the text
handed back by the host. Failures inside the script are reported as text
starting with ``ERROR:``, which the bridge turns into HostAutomationError.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

_PREAMBLE = "app.scriptPreferences.measurementUnit = MeasurementUnits.MILLIMETERS;"


def escape_jsx_string(value: Any) -> str:
    """Escape text for use inside a double-quoted ExtendScript literal."""
    if not isinstance(value, str):
        return ""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if value is None:
        return "null"
    return f'"{escape_jsx_string(value)}"'


def _guarded(body: Iterable[str]) -> str:
    lines = [_PREAMBLE, "try {"]
    lines.extend("  " + line for line in body)
    lines.extend(["} catch (error) {", '  "ERROR: " + error.message;', "}"])
    return "\n".join(lines)


def _with_document(body: Iterable[str]) -> str:
    lines = [
        "if (app.documents.length === 0) {",
        '  "ERROR: No document is open in the host application";',
        "} else {",
        "  var doc = app.activeDocument;",
    ]
    lines.extend("  " + line for line in body)
    lines.append("}")
    return _guarded(lines)


_JUSTIFICATION = {
    "LEFT": "LEFT_ALIGN",
    "CENTER": "CENTER_ALIGN",
    "RIGHT": "RIGHT_ALIGN",
    "JUSTIFY": "LEFT_JUSTIFIED",
    "LEFT_ALIGN": "LEFT_ALIGN",
    "CENTER_ALIGN": "CENTER_ALIGN",
    "RIGHT_ALIGN": "RIGHT_ALIGN",
}


def _bounds(x: float, y: float, width: float, height: float) -> str:
    # geometricBounds are [top, left, bottom, right]
    return f"[{y!r}, {x!r}, {y + height!r}, {x + width!r}]"


def _page(page_index: int) -> str:
    return f"var page = doc.pages[{int(page_index)}];"


def create_document(
    *,
    width: float,
    height: float,
    pages: int,
    facing_pages: bool,
    page_orientation: str,
    bleed: Dict[str, float],
    margins: Dict[str, float],
) -> str:
    return _guarded(
        [
            "var doc = app.documents.add();",
            f"doc.documentPreferences.pageWidth = {width!r};",
            f"doc.documentPreferences.pageHeight = {height!r};",
            f"doc.documentPreferences.pagesPerDocument = {int(pages)};",
            f"doc.documentPreferences.facingPages = {_literal(facing_pages)};",
            f"doc.documentPreferences.pageOrientation = PageOrientation.{page_orientation};",
            f"doc.documentPreferences.documentBleedTopOffset = {bleed['top']!r};",
            f"doc.documentPreferences.documentBleedBottomOffset = {bleed['bottom']!r};",
            f"doc.documentPreferences.documentBleedInsideOrLeftOffset = {bleed['inside']!r};",
            f"doc.documentPreferences.documentBleedOutsideOrRightOffset = {bleed['outside']!r};",
            f"doc.marginPreferences.top = {margins['top']!r};",
            f"doc.marginPreferences.bottom = {margins['bottom']!r};",
            f"doc.marginPreferences.left = {margins['left']!r};",
            f"doc.marginPreferences.right = {margins['right']!r};",
            "app.activeDocument = doc;",
            "doc.name;",
        ]
    )


def open_document(file_path: str) -> str:
    return _guarded(
        [
            f"var doc = app.open(File({_literal(file_path)}));",
            "var prefs = doc.documentPreferences;",
            "doc.name + '|' + prefs.pageWidth + '|' + prefs.pageHeight + '|' + doc.pages.length;",
        ]
    )


def save_document(file_path: str) -> str:
    return _with_document([f"doc.save(File({_literal(file_path)}));", "doc.fullName.fsName;"])


def close_document() -> str:
    return _with_document(["doc.close(SaveOptions.NO);", '"Document closed";'])


def add_page(position: str, reference_page: Optional[int]) -> str:
    if position in ("BEFORE", "AFTER") and reference_page is not None:
        location = f"LocationOptions.{position}, doc.pages[{int(reference_page)}]"
    else:
        location = f"LocationOptions.{position}"
    return _with_document([f"var page = doc.pages.add({location});", "page.name;"])


def delete_page(page_index: int) -> str:
    return _with_document([_page(page_index), "page.remove();", "doc.pages.length;"])


def navigate_to_page(page_index: int) -> str:
    return _with_document(
        [_page(page_index), "app.activeWindow.activePage = page;", "page.name;"]
    )


def get_page_info(page_index: int) -> str:
    return _with_document(
        [_page(page_index), "page.name + '|' + page.allPageItems.length;"]
    )


def create_text_frame(
    *,
    page_index: int,
    x: float,
    y: float,
    width: float,
    height: float,
    content: str,
    font_size: float,
    font_name: str,
    text_color: str,
    alignment: str,
    paragraph_style: Optional[str] = None,
    character_style: Optional[str] = None,
) -> str:
    body = [
        _page(page_index),
        "var frame = page.textFrames.add();",
        f"frame.geometricBounds = {_bounds(x, y, width, height)};",
        f"frame.contents = {_literal(content)};",
        "var text = frame.texts[0];",
        f"text.pointSize = {font_size!r};",
        f"try {{ text.appliedFont = app.fonts.item({_literal(font_name)}); }} catch (fontError) {{}}",
        f"try {{ text.fillColor = doc.colors.item({_literal(text_color)}); }} catch (colorError) {{}}",
        f"text.justification = Justification.{_JUSTIFICATION[alignment]};",
    ]
    if paragraph_style:
        body.append(
            f"text.appliedParagraphStyle = doc.paragraphStyles.item({_literal(paragraph_style)});"
        )
    if character_style:
        body.append(
            f"text.appliedCharacterStyle = doc.characterStyles.item({_literal(character_style)});"
        )
    body.append("frame.id;")
    return _with_document(body)


def create_rectangle(
    *,
    page_index: int,
    x: float,
    y: float,
    width: float,
    height: float,
    fill_color: Optional[str],
    stroke_color: Optional[str],
    stroke_width: float,
    corner_radius: float,
) -> str:
    body = [
        _page(page_index),
        "var rect = page.rectangles.add();",
        f"rect.geometricBounds = {_bounds(x, y, width, height)};",
        f"rect.strokeWeight = {stroke_width!r};",
    ]
    if fill_color:
        body.append(f"rect.fillColor = doc.colors.item({_literal(fill_color)});")
    if stroke_color:
        body.append(f"rect.strokeColor = doc.colors.item({_literal(stroke_color)});")
    if corner_radius:
        body.extend(
            [
                "rect.topLeftCornerOption = rect.topRightCornerOption = CornerOptions.ROUNDED_CORNER;",
                "rect.bottomLeftCornerOption = rect.bottomRightCornerOption = CornerOptions.ROUNDED_CORNER;",
                f"rect.topLeftCornerRadius = rect.topRightCornerRadius = {corner_radius!r};",
                f"rect.bottomLeftCornerRadius = rect.bottomRightCornerRadius = {corner_radius!r};",
            ]
        )
    body.append("rect.id;")
    return _with_document(body)



def create_paragraph_style(name: str, properties: Dict[str, Any]) -> str:
    return _create_style("paragraphStyles", name, properties)


def create_character_style(name: str, properties: Dict[str, Any]) -> str:
    return _create_style("characterStyles", name, properties)


_STYLE_PROPERTIES = {
    "fontFamily": "appliedFont",
    "fontSize": "pointSize",
    "leading": "leading",
    "spaceBefore": "spaceBefore",
    "spaceAfter": "spaceAfter",
    "underline": "underline",
}


def _create_style(collection: str, name: str, properties: Dict[str, Any]) -> str:
    body = [
        f"if (doc.{collection}.itemByName({_literal(name)}).isValid) {{",
        f'  "ERROR: Style already exists: {escape_jsx_string(name)}";',
        "} else {",
        f"  var style = doc.{collection}.add({{name: {_literal(name)}}});",
    ]
    for key, value in properties.items():
        if value is None:
            continue
        if key in _STYLE_PROPERTIES:
            body.append(f"  style.{_STYLE_PROPERTIES[key]} = {_literal(value)};")
        elif key == "alignment":
            body.append(f"  style.justification = Justification.{_JUSTIFICATION[value]};")
        elif key == "textColor":
            body.append(
                f"  try {{ style.fillColor = doc.colors.item({_literal(value)}); }} catch (colorError) {{}}"
            )
    font_style = " ".join(
        label for label, key in (("Bold", "bold"), ("Italic", "italic")) if properties.get(key)
    )
    if font_style:
        body.append(f"  style.fontStyle = {_literal(font_style)};")
    body.extend(["  style.name;", "}"])
    return _with_document(body)


def place_image(
    *,
    page_index: int,
    file_path: str,
    x: float,
    y: float,
    width: float,
    height: float,
    fit_mode: str,
    scale: float,
    link_image: bool,
) -> str:
    body = [
        _page(page_index),
        "var frame = page.rectangles.add();",
        f"frame.geometricBounds = {_bounds(x, y, width, height)};",
        f"var placed = frame.place(File({_literal(file_path)}))[0];",
        f"frame.fit(FitOptions.{fit_mode});",
    ]
    if scale != 100:
        body.append(f"placed.horizontalScale = placed.verticalScale = {scale!r};")
    if not link_image:
        body.append("try { placed.itemLink.unlink(); } catch (linkError) {}")
    body.append("frame.id;")
    return _with_document(body)


def export_pdf(
    *,
    file_path: str,
    quality: str,
    include_marks: bool,
    include_bleed: bool,
    pages: str,
) -> str:
    preset_names = {
        "PRESS": "[Press Quality]",
        "PRINT": "[High Quality Print]",
        "SCREEN": "[Smallest File Size]",
        "DIGITAL": "[Smallest File Size]",
    }
    page_range = "PageRange.ALL_PAGES" if pages.lower() == "all" else _literal(pages)
    return _with_document(
        [
            f"var preset = app.pdfExportPresets.item({_literal(preset_names[quality])});",
            f"app.pdfExportPreferences.pageRange = {page_range};",
            f"app.pdfExportPreferences.cropMarks = {_literal(include_marks)};",
            f"app.pdfExportPreferences.useDocumentBleedWithPDF = {_literal(include_bleed)};",
            f"doc.exportFile(ExportFormat.PDF_TYPE, File({_literal(file_path)}), false, preset);",
            f"{_literal(file_path)};",
        ]
    )

