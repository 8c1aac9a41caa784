"""
Module: builder.layout.paginator

Purpose:
    Flow a Document onto fixed-size pages in a single forward pass.
    Produces positioned, colored TextRuns per page; no backtracking.

Key Functions:
    - paginate(): Main pagination function

Algorithm:
    1. Title block, "Table of Contents" heading, TOC entries (word wrapped)
    2. For each file in TOC order: gap, bold separator, then every line
    3. Code lines use token flow: tokens are placed left to right and a
       token that would cross the right margin starts a new visual row,
       unless it is the first token on the row (then it overflows).
       Tokens are never split.
    4. Before anything is placed, one predicate decides whether the
       needed height still fits above the bottom margin; if not, the
       page is closed and a new one is opened.

Dependencies:
    - builder.layout.models: Cursor, TextRun, PagePlan, LayoutResult
    - builder.layout.config: LayoutConfig
    - builder.layout.metrics: TextMetrics
    - builder.layout.theme: Color policy

Used By:
    - builder.controller: render_document(), build_document_pdf()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from repo_pdf.builder.config import RenderConfig
from repo_pdf.core.models import ColoredFile, Document, Line

from .config import LayoutConfig
from .metrics import TextMetrics, font_name
from .models import Cursor, LayoutResult, PagePlan, TextRun
from .theme import ThemePalette, get_palette, is_known_color, resolve_token_color
from .wrapping import split_text_to_size

logger = logging.getLogger(__name__)


class _PageBook:
    """Collects runs for the open page and keeps closed pages."""

    def __init__(self, has_background: bool):
        self._has_background = has_background
        self._closed: List[PagePlan] = []
        self._runs: List[TextRun] = []

    def add(self, run: TextRun) -> None:
        self._runs.append(run)

    def new_page(self) -> None:
        self._closed.append(PagePlan(
            index=len(self._closed),
            runs=tuple(self._runs),
            has_background=self._has_background,
        ))
        self._runs = []

    def finish(self) -> tuple[PagePlan, ...]:
        self.new_page()
        return tuple(self._closed)


@dataclass
class _RenderPass:
    """Read-only settings for one pass plus the page sink."""

    config: RenderConfig
    layout: LayoutConfig
    metrics: TextMetrics
    palette: ThemePalette
    book: _PageBook
    body_font: str
    bold_font: str


def paginate(
    document: Document,
    config: RenderConfig,
    metrics: TextMetrics,
    layout_config: Optional[LayoutConfig] = None,
) -> LayoutResult:
    """
    Lay out a document onto pages.

    Output is fully determined by the inputs.

    Args:
        document: Title, table of contents and colored files
        config: Font, size, spacing and theme
        metrics: Text measurement service
        layout_config: Page geometry; defaults to the metrics page size
            with standard margins

    Returns:
        LayoutResult with at least one page
    """
    layout = layout_config or LayoutConfig(
        page_width=metrics.page_width,
        page_height=metrics.page_height,
    )
    palette = get_palette(config.theme)
    rp = _RenderPass(
        config=config,
        layout=layout,
        metrics=metrics,
        palette=palette,
        book=_PageBook(palette.has_background),
        body_font=font_name(config.font_family),
        bold_font=font_name(config.font_family, bold=True),
    )
    warnings: List[str] = []
    file_page_map: dict[str, list[int]] = {}

    cursor = Cursor(page_index=0, y=layout.margin_top, x=layout.margin_left)

    # 1. Title
    title_lines = _wrap(rp, document.title, rp.bold_font, layout.title_font_size)
    cursor = _emit_block(
        cursor, rp, title_lines,
        font=rp.bold_font,
        size=layout.title_font_size,
        step=layout.title_line_step,
        reserve=len(title_lines) * layout.title_line_step,
    )
    cursor = cursor.advance(layout.title_gap)

    # 2. Table of contents
    cursor = _emit_block(
        cursor, rp, [layout.toc_heading_text],
        font=rp.bold_font,
        size=layout.toc_heading_font_size,
        step=layout.toc_heading_step,
        reserve=layout.toc_heading_reserve,
    )
    line_height = config.line_height
    for path in document.table_of_contents:
        entry_lines = _wrap(rp, path, rp.body_font, config.font_size_pt)
        cursor = _emit_block(
            cursor, rp, entry_lines,
            font=rp.body_font,
            size=config.font_size_pt,
            step=line_height,
            reserve=len(entry_lines) * line_height,
        )

    # 3. File sections
    if document.is_empty:
        message = "Document has no files; rendering title and table of contents only"
        logger.warning(message)
        warnings.append(message)

    for colored_file in document.ordered_files():
        start_page = cursor.page_index
        cursor, overflowed = _emit_file(cursor, rp, colored_file)
        pages = file_page_map.setdefault(colored_file.path, [])
        for index in range(start_page, cursor.page_index + 1):
            if index not in pages:
                pages.append(index)
        if overflowed:
            message = (
                f"{colored_file.path}: {overflowed} token(s) wider than the "
                f"content width overflow the right margin"
            )
            logger.warning(message)
            warnings.append(message)

    pages = rp.book.finish()
    logger.info(
        f"Paginated {document.file_count} files onto {len(pages)} pages "
        f"({config.theme.value} theme, {config.font_size_pt}pt)"
    )

    return LayoutResult(
        pages=pages,
        warnings=warnings,
        file_page_map=file_page_map,
        title=document.title,
    )


def _ensure_space(cursor: Cursor, needed: float, rp: _RenderPass) -> Cursor:
    """
    Page-break predicate shared by every block type.

    Closes the page when needed height would cross the bottom margin.
    A page whose cursor is still at the top margin is never closed:
    the block cannot fit on any page and is placed anyway.
    """
    layout = rp.layout
    if cursor.y + needed <= layout.page_bottom:
        return cursor

    if cursor.y <= layout.margin_top:
        logger.warning(
            f"Block of {needed:.1f} units exceeds page {cursor.page_index} "
            f"({layout.available_height:.1f} units available)"
        )
        return cursor

    rp.book.new_page()
    return cursor.advance_page(layout.margin_top, layout.margin_left)


def _wrap(rp: _RenderPass, text: str, font: str, size: float) -> List[str]:
    """Word-wrap prose to the content width."""
    return split_text_to_size(
        text,
        rp.layout.available_width,
        lambda s: rp.metrics.text_width(s, font, size),
    )


def _emit_block(
    cursor: Cursor,
    rp: _RenderPass,
    lines: Sequence[str],
    *,
    font: str,
    size: float,
    step: float,
    reserve: float,
) -> Cursor:
    """
    Emit wrapped prose lines in the theme's default text color.

    The whole block is kept together when it fits on one page; each
    line is re-checked so a block taller than a page still breaks.
    """
    left = rp.layout.margin_left
    cursor = _ensure_space(cursor, reserve, rp)
    for text in lines:
        cursor = _ensure_space(cursor, step, rp)
        if text:
            rp.book.add(TextRun(
                text=text,
                x=left,
                y=cursor.y,
                color=rp.palette.text,
                font_name=font,
                font_size=size,
            ))
        cursor = cursor.advance(step)
    return cursor.carriage_return(left)


def _emit_file(
    cursor: Cursor,
    rp: _RenderPass,
    colored_file: ColoredFile,
) -> tuple[Cursor, int]:
    """
    Emit one file section.

    Returns:
        Tuple of (cursor after the section, number of overflowing tokens)
    """
    layout = rp.layout
    cursor = cursor.advance(layout.file_gap)

    separator_lines = _wrap(rp, colored_file.separator_text, rp.bold_font, layout.separator_font_size)
    separator_height = len(separator_lines) * layout.separator_line_step + layout.separator_gap
    cursor = _emit_block(
        cursor, rp, separator_lines,
        font=rp.bold_font,
        size=layout.separator_font_size,
        step=layout.separator_line_step,
        reserve=max(layout.separator_reserve, separator_height),
    )
    cursor = cursor.advance(layout.separator_gap)

    overflowed = 0
    substituted = 0
    for line in colored_file.lines:
        cursor, line_overflow, line_substituted = _flow_line(cursor, rp, line)
        overflowed += line_overflow
        substituted += line_substituted

    if substituted:
        logger.debug(
            f"{colored_file.path}: {substituted} malformed token color(s) "
            f"replaced with {rp.palette.text}"
        )
    logger.debug(f"Laid out {colored_file.path}: {colored_file.line_count} lines")
    return cursor, overflowed


def _flow_line(cursor: Cursor, rp: _RenderPass, line: Line) -> tuple[Cursor, int, int]:
    """
    Place one logical line using token flow.

    Wrap rule: a token wraps only when the row already holds a token and
    x + width > right margin (strictly greater; an exact fit stays).
    After the last token y advances by exactly one line height, so a
    blank line still occupies one row.

    Returns:
        Tuple of (cursor, overflowing tokens, substituted colors)
    """
    layout = rp.layout
    left = layout.margin_left
    right = layout.content_right
    line_height = rp.config.line_height
    font_size = rp.config.font_size_pt

    overflowed = 0
    substituted = 0

    cursor = _ensure_space(cursor, line_height, rp).carriage_return(left)

    for token in line:
        if token.is_empty:
            continue

        width = rp.metrics.text_width(token.text, rp.body_font, font_size)
        if cursor.x > left and cursor.x + width > right:
            cursor = cursor.advance_row(line_height, left)
            cursor = _ensure_space(cursor, line_height, rp)

        if width > layout.available_width:
            overflowed += 1
        if not is_known_color(token.color, rp.palette):
            substituted += 1

        rp.book.add(TextRun(
            text=token.text,
            x=cursor.x,
            y=cursor.y,
            color=resolve_token_color(token.color, rp.palette),
            font_name=rp.body_font,
            font_size=font_size,
        ))
        cursor = cursor.place(width)

    return cursor.advance_row(line_height, left), overflowed, substituted
