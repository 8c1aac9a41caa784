"""
Unit tests for PDF serialization.
"""

import io

import fitz
import pytest
from pypdf import PdfReader

from repo_pdf.builder.config import RenderConfig, Theme
from repo_pdf.builder.layout import LayoutResult, PagePlan, TextRun, paginate
from repo_pdf.builder.output import render_to_bytes, render_to_pdf
from repo_pdf.core.models import Document

A4_WIDTH_PT = 595.2756
A4_HEIGHT_PT = 841.8898


def _layout(document, metrics, theme=Theme.LIGHT):
    return paginate(document, RenderConfig(theme=theme), metrics)


def _document(make_file, lines):
    return Document(title="Long", table_of_contents=("x.ts",), files=(make_file("x.ts", lines),))


class TestRenderToBytes:
    """Tests for render_to_bytes."""

    def test_render_when_layout_then_one_a4_page_per_plan(self, make_file, fixed_metrics):
        # Arrange
        lines = [[(f"line{i}", "#000000")] for i in range(150)]
        layout = _layout(_document(make_file, lines), fixed_metrics)

        # Act
        data = render_to_bytes(layout)

        # Assert
        reader = PdfReader(io.BytesIO(data))
        assert len(reader.pages) == layout.page_count
        for page in reader.pages:
            assert float(page.mediabox.width) == pytest.approx(A4_WIDTH_PT, abs=0.01)
            assert float(page.mediabox.height) == pytest.approx(A4_HEIGHT_PT, abs=0.01)

    def test_render_when_same_layout_then_byte_identical(self, demo_document, fixed_metrics):
        layout = _layout(demo_document, fixed_metrics)

        assert render_to_bytes(layout) == render_to_bytes(layout)

    def test_render_when_title_then_stored_in_info(self, demo_document, fixed_metrics):
        data = render_to_bytes(_layout(demo_document, fixed_metrics))

        reader = PdfReader(io.BytesIO(data))
        assert reader.metadata.title == "Code Documentation for demo"
        assert reader.metadata.creator.startswith("repo_pdf v")

    def test_render_when_runs_then_text_extractable(self, demo_document, fixed_metrics):
        data = render_to_bytes(_layout(demo_document, fixed_metrics))

        with fitz.open(stream=data, filetype="pdf") as doc:
            text = doc[0].get_text()

        assert "Table of Contents" in text
        assert "File: x.ts (typescript)" in text
        assert "const" in text

    def test_render_when_run_then_drawn_at_mm_position(self):
        # Arrange
        run = TextRun(text="Hello", x=15.0, y=40.0, color="#000000", font_name="Courier", font_size=9)
        layout = LayoutResult(pages=(PagePlan(index=0, runs=(run,)),))

        # Act
        data = render_to_bytes(layout)

        # Assert: baseline is 40mm below the top edge
        with fitz.open(stream=data, filetype="pdf") as doc:
            spans = [
                span
                for block in doc[0].get_text("dict")["blocks"]
                for line in block.get("lines", [])
                for span in line["spans"]
            ]
        span = next(s for s in spans if s["text"] == "Hello")
        assert span["origin"][0] == pytest.approx(15 * 72 / 25.4, abs=0.5)
        assert span["origin"][1] == pytest.approx(40 * 72 / 25.4, abs=0.5)

    def test_render_when_dark_theme_then_page_filled_with_background(self, demo_document, fixed_metrics):
        data = render_to_bytes(_layout(demo_document, fixed_metrics, Theme.DARK))

        with fitz.open(stream=data, filetype="pdf") as doc:
            pixel = doc[0].get_pixmap(dpi=20).pixel(1, 1)

        assert pixel[:3] == pytest.approx((0x1E, 0x29, 0x3B), abs=2)

    def test_render_when_light_theme_then_page_left_white(self, demo_document, fixed_metrics):
        data = render_to_bytes(_layout(demo_document, fixed_metrics))

        with fitz.open(stream=data, filetype="pdf") as doc:
            pixel = doc[0].get_pixmap(dpi=20).pixel(1, 1)

        assert pixel[:3] == (255, 255, 255)


class TestRenderToPdf:
    """Tests for render_to_pdf."""

    def test_render_to_pdf_when_nested_path_then_creates_parents(self, tmp_path, demo_document, fixed_metrics):
        output = tmp_path / "nested" / "out.pdf"

        render_to_pdf(_layout(demo_document, fixed_metrics), output)

        assert output.read_bytes().startswith(b"%PDF-")
