"""
Module: builder.layout.config

Purpose:
    Page geometry and block sizes for the layout engine.
    All lengths are page units (millimetres).

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.paginator: Page arrangement
    - builder.output.renderer: Page size and unit conversion
"""

from __future__ import annotations

from dataclasses import dataclass


# Standard A4 page in millimetres
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
DEFAULT_MARGIN_MM = 15.0


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for page layout (immutable).

    Controls page dimensions, margins and the fixed sizes of the
    title, table of contents and file separator blocks. Body text size
    and line height come from RenderConfig instead.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Top margin; first baseline of every page
        margin_bottom: Bottom margin
        margin_left: Left margin; start of every visual row
        margin_right: Right margin; wrap boundary
        title_font_size: Title size in points (bold)
        title_line_step: Vertical advance per wrapped title line
        title_gap: Extra space after the title block
        toc_heading_font_size: "Table of Contents" size in points (bold)
        toc_heading_step: Advance after the heading
        toc_heading_reserve: Space reserved before drawing the heading
        file_gap: Blank gap before each file section
        separator_font_size: "File: ..." size in points (bold)
        separator_line_step: Advance per wrapped separator line
        separator_gap: Extra space after the separator
        separator_reserve: Minimum space reserved before a separator

    Example:
        >>> config = LayoutConfig()
        >>> config.available_width
        180.0
    """

    # Page dimensions
    page_width: float = A4_WIDTH_MM
    page_height: float = A4_HEIGHT_MM

    # Margins
    margin_top: float = DEFAULT_MARGIN_MM
    margin_bottom: float = DEFAULT_MARGIN_MM
    margin_left: float = DEFAULT_MARGIN_MM
    margin_right: float = DEFAULT_MARGIN_MM

    # Title block
    title_font_size: float = 24
    title_line_step: float = 12
    title_gap: float = 10

    # Table of contents
    toc_heading_text: str = "Table of Contents"
    toc_heading_font_size: float = 16
    toc_heading_step: float = 8
    toc_heading_reserve: float = 20

    # File sections
    file_gap: float = 10
    separator_font_size: float = 12
    separator_line_step: float = 6
    separator_gap: float = 4
    separator_reserve: float = 20

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.available_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.available_height <= 0:
            raise ValueError("Margins exceed page height")

    @property
    def available_width(self) -> float:
        """Width available for content (excluding margins)."""
        return self.page_width - self.margin_left - self.margin_right

    @property
    def available_height(self) -> float:
        """Height available for content (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def content_right(self) -> float:
        """X coordinate of the right margin."""
        return self.page_width - self.margin_right

    @property
    def page_bottom(self) -> float:
        """Lowest Y a run may occupy."""
        return self.page_height - self.margin_bottom
