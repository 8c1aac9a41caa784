"""
Module: builder.layout

Purpose:
    Page layout for colored source documents.
    Converts a Document into positioned, colored text runs per page.

Key Functions:
    - paginate(): Flow a document onto pages
    - split_text_to_size(): Word wrap for prose blocks
    - resolve_token_color(): Per-token color policy

Key Classes:
    - LayoutConfig: Page geometry and block sizes
    - Cursor: Render-time position
    - TextRun: Positioned colored text
    - PagePlan: Single page layout plan
    - LayoutResult: All pages plus diagnostics
    - TextMetrics / ReportLabTextMetrics: Text measurement

Dependencies:
    - reportlab: Font metrics
    - repo_pdf.core.models: Document, ColoredFile, Line, Token

Used By:
    - builder.controller: Main build controller
"""

from .config import LayoutConfig
from .models import Cursor, TextRun, PagePlan, LayoutResult
from .metrics import TextMetrics, ReportLabTextMetrics, font_name
from .theme import ThemePalette, get_palette, resolve_token_color
from .wrapping import split_text_to_size
from .paginator import paginate

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "Cursor",
    "TextRun",
    "PagePlan",
    "LayoutResult",
    # Metrics
    "TextMetrics",
    "ReportLabTextMetrics",
    "font_name",
    # Theme
    "ThemePalette",
    "get_palette",
    "resolve_token_color",
    # Functions
    "split_text_to_size",
    "paginate",
]
