"""
Module: builder.output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page with its text runs drawn at
    their laid-out positions.

Key Functions:
    - render_to_bytes(): Serialize a layout to PDF bytes
    - render_to_pdf(): Serialize a layout to a PDF file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult, PagePlan, TextRun

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.lib.colors import HexColor
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from repo_pdf.builder.layout.config import LayoutConfig
from repo_pdf.builder.layout.models import LayoutResult, PagePlan, TextRun
from repo_pdf.builder.layout.theme import DARK_MODE_BACKGROUND

logger = logging.getLogger(__name__)


def _get_creator() -> str:
    """Creator string stored in the PDF info dictionary."""
    from repo_pdf import __version__
    return f"repo_pdf v{__version__}"


def render_to_bytes(
    layout: LayoutResult,
    layout_config: Optional[LayoutConfig] = None,
    *,
    background_color: str = DARK_MODE_BACKGROUND,
) -> bytes:
    """
    Render layout result to PDF bytes.

    The canvas is created with ``invariant=1`` so identical layouts
    always produce byte-identical documents (no timestamps or random
    document IDs).

    Args:
        layout: Layout result from paginator
        layout_config: Page geometry used for the layout
        background_color: Fill for pages flagged has_background

    Returns:
        Complete PDF document

    Example:
        >>> pdf = render_to_bytes(layout)
        >>> pdf[:5]
        b'%PDF-'
    """
    layout_config = layout_config or LayoutConfig()
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    page_width_pt = _mm_to_pt(layout_config.page_width)
    page_height_pt = _mm_to_pt(layout_config.page_height)

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(page_width_pt, page_height_pt), invariant=1)
    c.setTitle(layout.title)
    c.setCreator(_get_creator())

    for page in layout.pages:
        _render_page(c, page, page_width_pt, page_height_pt, background_color)
        c.showPage()

    c.save()
    data = buf.getvalue()

    logger.info(f"Rendered {layout.page_count} pages ({layout.total_runs} runs, {len(data)} bytes)")
    return data


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    layout_config: Optional[LayoutConfig] = None,
    *,
    background_color: str = DARK_MODE_BACKGROUND,
) -> None:
    """
    Render layout result to PDF file.

    Args:
        layout: Layout result from paginator
        output_path: Path to write PDF
        layout_config: Page geometry used for the layout
        background_color: Fill for pages flagged has_background

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/repo.pdf"))
    """
    data = render_to_bytes(layout, layout_config, background_color=background_color)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.info(f"Wrote {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    page_width_pt: float,
    page_height_pt: float,
    background_color: str,
) -> None:
    """
    Render a single page to the canvas.

    Args:
        c: ReportLab canvas
        page: Page plan with runs
        page_width_pt: Page width in points
        page_height_pt: Page height in points
        background_color: Fill used when page.has_background
    """
    c.saveState()

    if page.has_background:
        c.setFillColor(HexColor(background_color))
        c.rect(0, 0, page_width_pt, page_height_pt, stroke=0, fill=1)

    for run in page.runs:
        _draw_run(c, run, page_height_pt)

    c.restoreState()


def _draw_run(c: canvas.Canvas, run: TextRun, page_height_pt: float) -> None:
    """Draw one text run at its baseline."""
    c.setFont(run.font_name, run.font_size)
    c.setFillColor(HexColor(run.color))
    c.drawString(
        _mm_to_pt(run.x),
        _transform_y(page_height_pt, run.y),
        run.text,
    )


def _mm_to_pt(value: float) -> float:
    """
    Convert page units (millimetres) to PDF points.

    PDF points are 1/72 inch.
    """
    return value * mm


def _transform_y(page_height_pt: float, y_from_top: float) -> float:
    """
    Convert top-down page-unit Y to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        y_from_top: Baseline position from the page top (page units)

    Returns:
        Baseline position from the page bottom in points
    """
    return page_height_pt - _mm_to_pt(y_from_top)
