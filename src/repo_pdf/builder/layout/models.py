"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing the render cursor, positioned
    text runs and finished pages.

Key Classes:
    - Cursor: Render-time position, advanced by pure transitions
    - TextRun: Colored text positioned on a page
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Cursor:
    """
    Position of the render pass (immutable).

    Every transition returns a new Cursor. Pages only advance forward and
    y only grows within a page; advance_page() resets both axes.

    Attributes:
        page_index: Current page (0-indexed)
        y: Baseline of the current visual row, from page top
        x: Left edge of the next token

    Example:
        >>> c = Cursor(page_index=0, y=15, x=15).place(10)
        >>> c.x
        25
    """

    page_index: int
    y: float
    x: float

    def place(self, width: float) -> Cursor:
        """Move right past a placed token."""
        return replace(self, x=self.x + width)

    def advance(self, dy: float) -> Cursor:
        """Move down without touching x."""
        return replace(self, y=self.y + dy)

    def carriage_return(self, left: float) -> Cursor:
        """Return to the left margin on the same row."""
        return replace(self, x=left)

    def advance_row(self, line_height: float, left: float) -> Cursor:
        """Start a new visual row."""
        return replace(self, y=self.y + line_height, x=left)

    def advance_page(self, top: float, left: float) -> Cursor:
        """Start a new page at the top-left of the content area."""
        return Cursor(page_index=self.page_index + 1, y=top, x=left)


@dataclass(frozen=True)
class TextRun:
    """
    Text drawn at one position in one color.

    Attributes:
        text: Text to draw
        x: Left edge, from page left
        y: Baseline, from page top
        color: Resolved "#RRGGBB" color
        font_name: PDF font name (e.g. "Courier-Bold")
        font_size: Size in points
    """

    text: str
    x: float
    y: float
    color: str
    font_name: str
    font_size: float


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        runs: Text runs in emission order
        has_background: Whether a themed background fill is drawn first

    Example:
        >>> page = PagePlan(index=0, runs=(r1, r2), has_background=False)
        >>> page.run_count
        2
    """

    index: int
    runs: tuple[TextRun, ...]
    has_background: bool = False

    @property
    def run_count(self) -> int:
        """Number of runs on this page."""
        return len(self.runs)

    @property
    def is_empty(self) -> bool:
        """Check if page has no runs."""
        return len(self.runs) == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans (always at least one)
        warnings: Warning messages (token overflow, empty input)
        file_page_map: Mapping of file path to page indices its section uses
        title: Document title, used for PDF metadata

    Example:
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    file_page_map: dict[str, list[int]] = field(default_factory=dict)
    title: str = ""

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_runs(self) -> int:
        """Total number of text runs across all pages."""
        return sum(p.run_count for p in self.pages)
