import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import repo_pdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from repo_pdf.core.models import ColoredFile, Document, Line, Token


class FixedWidthMetrics:
    """
    Deterministic metrics for layout tests.

    Every character is char_width units wide regardless of font or size,
    on an A4 page in millimetres.
    """

    def __init__(self, char_width: float = 1.0, page_width: float = 210.0, page_height: float = 297.0):
        self.char_width = char_width
        self._page_width = page_width
        self._page_height = page_height
        self.calls: list[tuple[str, str, float]] = []

    @property
    def page_width(self) -> float:
        return self._page_width

    @property
    def page_height(self) -> float:
        return self._page_height

    def text_width(self, text: str, font_name: str, font_size: float) -> float:
        self.calls.append((text, font_name, font_size))
        return len(text) * self.char_width


# Common test fixtures
@pytest.fixture
def fixed_metrics():
    """Metrics where every character is 1 unit wide."""
    return FixedWidthMetrics()


@pytest.fixture
def metrics_factory():
    """Factory for metrics with a custom character width."""
    def _create(char_width: float = 1.0) -> FixedWidthMetrics:
        return FixedWidthMetrics(char_width=char_width)
    return _create


@pytest.fixture
def make_file():
    """Factory for ColoredFiles from plain (text, color) tuples."""
    def _create(path: str, lines: list[list[tuple[str, str]]], language: str = "typescript") -> ColoredFile:
        return ColoredFile(
            path=path,
            language=language,
            lines=tuple(Line(tuple(Token(text, color) for text, color in line)) for line in lines),
        )
    return _create


@pytest.fixture
def demo_document(make_file):
    """Single-file document from the end-to-end scenario."""
    colored = make_file("x.ts", [[("const", "#800080"), (" ", "#000000"), ("a", "#0000FF")]])
    return Document(
        title="Code Documentation for demo",
        table_of_contents=("x.ts",),
        files=(colored,),
    )


@pytest.fixture
def demo_payload():
    """Raw JSON payload in the upstream wire shape."""
    return {
        "title": "Code Documentation for demo",
        "tableOfContents": ["b.ts", "a.ts"],
        "files": [
            {
                "path": "a.ts",
                "language": "typescript",
                "lines": [
                    {"tokens": [{"text": "let", "color": "#0000FF"}, {"text": " x", "color": "black"}]},
                    {"tokens": []},
                ],
            },
            {
                "path": "b.ts",
                "language": "typescript",
                "lines": [{"tokens": [{"text": "export", "color": "fuchsia"}]}],
            },
        ],
    }
