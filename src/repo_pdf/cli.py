"""
Command line entry point: render a colored-document JSON file to PDF.

Usage:
    python -m repo_pdf document.json -o repo.pdf --theme dark --font-size 10
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from repo_pdf import __version__
from repo_pdf.builder import BuildError, FontFamily, LineSpacing, RenderConfig, Theme, build_document_pdf
from repo_pdf.core.schemas import ValidationError
from repo_pdf.core.utils import load_document_json

logger = logging.getLogger("repo_pdf")


def _line_spacing(value: str) -> float:
    """Accept a preset name (compact/normal/spacious) or a positive number."""
    try:
        return LineSpacing[value.upper()].value
    except KeyError:
        pass
    try:
        spacing = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected compact, normal, spacious or a number, got {value!r}"
        ) from None
    if spacing <= 0:
        raise argparse.ArgumentTypeError(f"line spacing must be positive, got {spacing}")
    return spacing


def _font_size(value: str) -> float:
    size = float(value)
    if size <= 0:
        raise argparse.ArgumentTypeError(f"font size must be positive, got {value}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo_pdf",
        description="Render a syntax-colored source document (JSON) to a paginated PDF",
    )
    parser.add_argument("input", type=Path, help="Document JSON (title, tableOfContents, files)")
    parser.add_argument("-o", "--output", type=Path, help="Output PDF (default: INPUT with .pdf suffix)")
    parser.add_argument(
        "--font",
        choices=[f.value for f in FontFamily],
        default=FontFamily.COURIER.value,
        help="Font family (default: courier)",
    )
    parser.add_argument("--font-size", type=_font_size, default=9, help="Body font size in points (default: 9)")
    parser.add_argument(
        "--line-spacing",
        type=_line_spacing,
        default=LineSpacing.NORMAL.value,
        help="compact, normal, spacious or a multiplier (default: normal)",
    )
    parser.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=Theme.LIGHT.value,
        help="Color theme (default: light)",
    )
    parser.add_argument(
        "--metadata",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Write <output>_metadata.json next to the PDF",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = RenderConfig(
        font_family=FontFamily(args.font),
        font_size_pt=args.font_size,
        line_spacing=args.line_spacing,
        theme=Theme(args.theme),
    )
    output_path = args.output or args.input.with_suffix(".pdf")

    try:
        document = load_document_json(args.input)
        result = build_document_pdf(document, config, output_path, write_metadata=args.metadata)
    except OSError as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid document: {e}")
        for problem in e.errors:
            logger.debug(f"  {problem}")
        return 1
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    for warning in result.warnings:
        logger.warning(f"[WARNING] {warning}")
    logger.info(f"[OK] {result.pdf_path} ({result.page_count} pages)")
    return 0
