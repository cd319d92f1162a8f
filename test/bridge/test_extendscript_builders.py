"""Tests for ExtendScript generation."""

from layout_mcp.bridge import scripts


class TestEscaping:
    def test_escape_special_characters(self):
        assert scripts.escape_jsx_string('a\\b"c\nd\re\tf') == 'a\\\\b\\"c\\nd\\re\\tf'

    def test_line_and_paragraph_separators_are_escaped(self):
        assert scripts.escape_jsx_string("a\u2028b\u2029c") == "a\\u2028b\\u2029c"

    def test_non_string_becomes_empty(self):
        assert scripts.escape_jsx_string(None) == ""
        assert scripts.escape_jsx_string(42) == ""


class TestBuilders:
    def test_document_scripts_are_guarded(self):
        script = scripts.save_document('/tmp/a "quoted" name.indd')

        assert script.startswith("app.scriptPreferences.measurementUnit")
        assert "app.documents.length === 0" in script
        assert 'File("/tmp/a \\"quoted\\" name.indd")' in script
        assert '"ERROR: " + error.message;' in script

    def test_bounds_are_top_left_bottom_right(self):
        script = scripts.create_rectangle(
            page_index=1,
            x=10,
            y=20,
            width=30,
            height=40,
            fill_color=None,
            stroke_color=None,
            stroke_width=1,
            corner_radius=0,
        )

        assert "doc.pages[1]" in script
        assert "rect.geometricBounds = [20, 10, 60, 40];" in script
        assert "fillColor" not in script

    def test_add_page_with_reference(self):
        script = scripts.add_page("AFTER", 2)

        assert "doc.pages.add(LocationOptions.AFTER, doc.pages[2])" in script

    def test_text_frame_alignment(self):
        script = scripts.create_text_frame(
            page_index=0,
            x=0,
            y=0,
            width=10,
            height=10,
            content="x",
            font_size=12,
            font_name="Arial\tRegular",
            text_color="Black",
            alignment="JUSTIFY",
        )

        assert "Justification.LEFT_JUSTIFIED" in script
        assert 'app.fonts.item("Arial\\tRegular")' in script

    def test_character_style_font_style(self):
        script = scripts.create_character_style("Strong", {"bold": True, "italic": True})

        assert 'style.fontStyle = "Bold Italic";' in script

    def test_export_pdf_page_range(self):
        script = scripts.export_pdf(
            file_path="/tmp/o.pdf", quality="PRESS", include_marks=True, include_bleed=False, pages="all"
        )

        assert "PageRange.ALL_PAGES" in script
        assert "[Press Quality]" in script
        assert "cropMarks = true" in script
