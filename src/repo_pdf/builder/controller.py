"""
Module: builder.controller

Purpose:
    Orchestrate the document rendering pipeline.
    Order files → Paginate → Serialize (→ Write + metadata)

Key Functions:
    - render_document(): Pure render, Document in, PDF bytes out
    - build_document_pdf(): Render and write PDF plus build metadata

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.layout: Pagination
    - builder.output: PDF rendering

Used By:
    - repo_pdf.cli: Command line entry point
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from repo_pdf.core.models import Document

from .config import RenderConfig
from .layout import LayoutConfig, LayoutResult, ReportLabTextMetrics, TextMetrics, get_palette, paginate
from .layout.theme import DARK_MODE_BACKGROUND
from .output import render_to_bytes

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        pdf_path: Path to generated PDF
        metadata_path: Path to <stem>_metadata.json (if written)
        page_count: Number of pages generated
        metadata: Build metadata dictionary
        warnings: Any warnings during layout

    Example:
        >>> result = build_document_pdf(document, config, Path("out/repo.pdf"))
        >>> print(f"Generated {result.page_count} pages")
    """
    pdf_path: Path
    metadata_path: Optional[Path]
    page_count: int
    metadata: dict
    warnings: tuple[str, ...]


def render_document(
    document: Document,
    config: RenderConfig,
    metrics: Optional[TextMetrics] = None,
) -> bytes:
    """
    Render a document to PDF bytes.

    Deterministic: identical inputs give byte-identical output.
    A metrics failure propagates; no partial document is returned.

    Args:
        document: Title, table of contents and colored files
        config: Font, size, spacing and theme
        metrics: Text measurement service (default: reportlab metrics)

    Returns:
        PDF document bytes
    """
    data, _ = _render(document, config, metrics)
    return data


def build_document_pdf(
    document: Document,
    config: RenderConfig,
    output_path: Path,
    *,
    metrics: Optional[TextMetrics] = None,
    write_metadata: bool = True,
) -> BuildResult:
    """
    Render a document and write it to disk.

    Pipeline:
    1. Paginate document
    2. Serialize to PDF bytes
    3. Write PDF
    4. (Optional) Write <stem>_metadata.json next to the PDF

    Args:
        document: Document to render
        config: Render configuration
        output_path: Where to write the PDF
        metrics: Text measurement service (default: reportlab metrics)
        write_metadata: Whether to write the metadata JSON

    Returns:
        BuildResult with paths and metadata

    Raises:
        BuildError: If the PDF or metadata cannot be written

    Example:
        >>> result = build_document_pdf(doc, RenderConfig(), Path("out/demo.pdf"))
        >>> result.pdf_path.exists()
        True
    """
    start_time = time.perf_counter()
    logger.info(f"Starting build for {document.title!r} ({document.file_count} files)")

    data, layout = _render(document, config, metrics)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise BuildError(f"Failed to write PDF to {output_path}: {e}") from e
    logger.info(f"Wrote PDF: {output_path}")

    metadata = _build_metadata(document, config, layout, output_path)
    metadata_path = None
    if write_metadata:
        metadata_path = output_path.with_name(f"{output_path.stem}_metadata.json")
        _write_metadata(metadata_path, metadata)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Document generation completed in {elapsed:.2f}s")

    return BuildResult(
        pdf_path=output_path,
        metadata_path=metadata_path,
        page_count=layout.page_count,
        metadata=metadata,
        warnings=tuple(layout.warnings),
    )


def _render(
    document: Document,
    config: RenderConfig,
    metrics: Optional[TextMetrics],
) -> tuple[bytes, LayoutResult]:
    """Paginate and serialize with one consistent page geometry."""
    metrics = metrics or ReportLabTextMetrics()
    layout_config = LayoutConfig(
        page_width=metrics.page_width,
        page_height=metrics.page_height,
    )

    layout = paginate(document, config, metrics, layout_config)
    background = get_palette(config.theme).background or DARK_MODE_BACKGROUND
    data = render_to_bytes(layout, layout_config, background_color=background)
    return data, layout


def _build_metadata(
    document: Document,
    config: RenderConfig,
    layout: LayoutResult,
    output_path: Path,
) -> dict:
    """
    Build metadata dictionary for a generated PDF.

    Contains:
    - Render configuration
    - Per-file page manifest (1-indexed pages)
    - Layout warnings
    - Timestamp

    Args:
        document: Rendered document
        config: Render configuration used
        layout: Layout result
        output_path: PDF path

    Returns:
        Metadata dictionary ready for JSON serialization
    """
    manifest = []
    for colored_file in document.ordered_files():
        pages = layout.file_page_map.get(colored_file.path, [])
        manifest.append({
            "path": colored_file.path,
            "language": colored_file.language,
            "lines": colored_file.line_count,
            "pages": [index + 1 for index in pages],  # 1-indexed for humans
        })

    return {
        "generated_at": datetime.now().isoformat(),
        "title": document.title,
        "pdf": output_path.name,
        "page_count": layout.page_count,
        "file_count": document.file_count,
        "render_config": config.to_dict(),
        "warnings": list(layout.warnings),
        "manifest": manifest,
    }


def _write_metadata(metadata_path: Path, metadata: dict) -> None:
    """
    Write metadata JSON file.

    Raises:
        BuildError: If writing fails
    """
    try:
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2)
        logger.debug(f"Wrote metadata to {metadata_path}")
    except OSError as e:
        raise BuildError(f"Failed to write metadata: {e}") from e
