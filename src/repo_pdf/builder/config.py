"""
Module: builder.config

Purpose:
    Configuration for one render. Immutable with validation on
    construction. Page size and margins are NOT configurable here; they
    live in builder.layout.config.LayoutConfig.

Key Classes:
    - RenderConfig: Font, size, spacing and theme for a render
    - FontFamily: Standard PDF font families
    - Theme: Light or dark color policy
    - LineSpacing: Named line-spacing presets

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.paginator: Line height, fonts, palette
    - builder.controller: Pipeline orchestration
    - repo_pdf.cli: Argument parsing
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FontFamily(Enum):
    """
    Font family used for every block of the document.

    Only glyph metrics change between families; layout rules are the same.

    Attributes:
        COURIER: Monospaced
        HELVETICA: Humanist sans
        TIMES: Serif
    """

    COURIER = "courier"
    HELVETICA = "helvetica"
    TIMES = "times"


class Theme(Enum):
    """
    Color policy applied uniformly across a render.

    Attributes:
        LIGHT: No background fill, black default text
        DARK: Slate page fill, light default text
    """

    LIGHT = "light"
    DARK = "dark"


class LineSpacing(float, Enum):
    """Line-spacing multiplier presets offered to users."""

    COMPACT = 1.0
    NORMAL = 1.15
    SPACIOUS = 1.5


# Ratio of line height (page units) to font size (pt)
LINE_HEIGHT_FACTOR = 0.5


@dataclass(frozen=True)
class RenderConfig:
    """
    Configuration for rendering a document (immutable).

    Attributes:
        font_family: Font family for all text
        font_size_pt: Body font size for TOC entries and code lines
        line_spacing: Multiplier applied to the base line height
        theme: Light or dark color policy

    Example:
        >>> config = RenderConfig(font_size_pt=9, line_spacing=1.15)
        >>> round(config.line_height, 3)
        5.175
    """

    font_family: FontFamily = FontFamily.COURIER
    font_size_pt: float = 9
    line_spacing: float = LineSpacing.NORMAL.value
    theme: Theme = Theme.LIGHT

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.font_family, FontFamily):
            raise ValueError(f"Unknown font family: {self.font_family!r}")
        if not isinstance(self.theme, Theme):
            raise ValueError(f"Unknown theme: {self.theme!r}")
        if self.font_size_pt <= 0:
            raise ValueError(f"font_size_pt must be positive: {self.font_size_pt}")
        if self.line_spacing <= 0:
            raise ValueError(f"line_spacing must be positive: {self.line_spacing}")

    @property
    def line_height(self) -> float:
        """Vertical advance of one visual row, in page units."""
        return self.font_size_pt * LINE_HEIGHT_FACTOR * float(self.line_spacing)

    def to_dict(self) -> dict:
        return {
            "font_family": self.font_family.value,
            "font_size_pt": self.font_size_pt,
            "line_spacing": float(self.line_spacing),
            "theme": self.theme.value,
        }
