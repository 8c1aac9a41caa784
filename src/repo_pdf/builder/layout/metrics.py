"""
Module: builder.layout.metrics

Purpose:
    Text measurement service used by the layout engine. The paginator
    only depends on the TextMetrics protocol, so tests can inject a
    deterministic fake and other font back-ends can be swapped in.

Key Classes:
    - TextMetrics: Protocol for width/page-size lookups
    - ReportLabTextMetrics: Standard PDF font metrics via reportlab

Key Functions:
    - font_name(): Map a FontFamily (+ weight) to a PDF font name

Dependencies:
    - reportlab: Standard Type 1 font metrics

Used By:
    - builder.layout.paginator
    - builder.controller
"""

from __future__ import annotations

from typing import Protocol

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth

from repo_pdf.builder.config import FontFamily


_REGULAR_FONTS = {
    FontFamily.COURIER: "Courier",
    FontFamily.HELVETICA: "Helvetica",
    FontFamily.TIMES: "Times-Roman",
}

_BOLD_FONTS = {
    FontFamily.COURIER: "Courier-Bold",
    FontFamily.HELVETICA: "Helvetica-Bold",
    FontFamily.TIMES: "Times-Bold",
}


def font_name(family: FontFamily, *, bold: bool = False) -> str:
    """
    Get the PDF standard font name for a family.

    Args:
        family: Font family
        bold: Whether to use the bold weight

    Returns:
        Font name known to every PDF reader, e.g. "Times-Bold"
    """
    table = _BOLD_FONTS if bold else _REGULAR_FONTS
    return table[family]


class TextMetrics(Protocol):
    """
    Measures text and reports the page size, in page units.

    Implementations must be stateless per call so independent renders
    can share one instance.
    """

    @property
    def page_width(self) -> float: ...

    @property
    def page_height(self) -> float: ...

    def text_width(self, text: str, font_name: str, font_size: float) -> float: ...


class ReportLabTextMetrics:
    """
    TextMetrics backed by reportlab's built-in AFM widths.

    Page units are millimetres; widths are converted from points.

    Example:
        >>> metrics = ReportLabTextMetrics()
        >>> round(metrics.text_width("abc", "Courier", 10), 3)
        6.35
    """

    def __init__(self, page_size: tuple[float, float] = A4):
        self._page_width_pt, self._page_height_pt = page_size

    @property
    def page_width(self) -> float:
        return self._page_width_pt / mm

    @property
    def page_height(self) -> float:
        return self._page_height_pt / mm

    def text_width(self, text: str, font_name: str, font_size: float) -> float:
        """Rendered width of text; 0 for an empty string."""
        if not text:
            return 0.0
        return stringWidth(text, font_name, font_size) / mm
