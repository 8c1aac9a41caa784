"""
End-to-end tests: JSON document in, PDF out, using real reportlab metrics.
"""

import json

import fitz
import pytest

from repo_pdf.builder import RenderConfig, Theme, build_document_pdf
from repo_pdf.builder.layout import ReportLabTextMetrics, paginate
from repo_pdf.core.models import Document
from repo_pdf.core.utils import load_document_json

MM = 72 / 25.4


def _words(pdf_path):
    with fitz.open(pdf_path) as doc:
        return [[word[4] for word in page.get_text("words")] for page in doc]


def _spans(page):
    return [
        span
        for block in page.get_text("dict")["blocks"]
        for line in block.get("lines", [])
        for span in line["spans"]
    ]


class TestSingleFileDocument:
    """The single-file demo on one page."""

    def test_layout_when_courier_9pt_then_tokens_abut(self, demo_document):
        # Act
        result = paginate(demo_document, RenderConfig(), ReportLabTextMetrics())

        # Assert: Courier advances 0.6 em, 9pt -> 5.4pt per char
        code = [run for run in result.pages[0].runs if run.text in ("const", " ", "a")]
        char_mm = 5.4 / MM
        assert [run.x for run in code] == pytest.approx([15, 15 + 5 * char_mm, 15 + 6 * char_mm])
        assert all(run.y == pytest.approx(70.175) for run in code)
        assert result.page_count == 1

    def test_build_when_demo_then_one_page_with_colored_code(self, tmp_path, demo_document):
        # Act
        result = build_document_pdf(demo_document, RenderConfig(), tmp_path / "demo.pdf")

        # Assert
        assert result.page_count == 1
        with fitz.open(result.pdf_path) as doc:
            assert doc.page_count == 1
            spans = _spans(doc[0])

        const = next(span for span in spans if span["text"].strip() == "const")
        assert const["color"] == 0x800080
        assert const["origin"][0] == pytest.approx(15 * MM, abs=0.5)
        assert const["origin"][1] == pytest.approx(70.175 * MM, abs=0.5)
        assert any(span["text"].strip() == "a" and span["color"] == 0x0000FF for span in spans)


class TestMultiFileDocument:
    """Loading the upstream JSON shape and rendering several pages."""

    def test_build_when_json_input_then_files_in_toc_order(self, tmp_path, demo_payload):
        # Arrange
        source = tmp_path / "doc.json"
        source.write_text(json.dumps(demo_payload), encoding="utf-8")
        document = load_document_json(source)

        # Act
        result = build_document_pdf(document, RenderConfig(theme=Theme.DARK), tmp_path / "doc.pdf")

        # Assert
        words = _words(result.pdf_path)[0]
        assert words.index("b.ts") < words.index("a.ts")
        text = " ".join(words)
        assert text.index("File: b.ts") < text.index("File: a.ts")
        assert [entry["path"] for entry in result.metadata["manifest"]] == ["b.ts", "a.ts"]

    def test_build_when_long_file_then_every_line_rendered_across_pages(self, tmp_path, make_file):
        # Arrange
        lines = [[("row", "#0000FF"), (f"{i:04d}", "#000000")] for i in range(200)]
        document = Document(title="Long", table_of_contents=("big.ts",), files=(make_file("big.ts", lines),))

        # Act
        result = build_document_pdf(document, RenderConfig(), tmp_path / "big.pdf")

        # Assert
        assert result.page_count > 1
        numbers = [
            word[-4:]
            for page_words in _words(result.pdf_path)
            for word in page_words
            if word.startswith("row")
        ]
        assert numbers == [f"{i:04d}" for i in range(200)]
        assert result.metadata["manifest"][0]["pages"] == list(range(1, result.page_count + 1))
