"""
Module: builder

Purpose:
    Rendering pipeline for colored source documents. Lays a Document out
    onto fixed-size pages and serializes the result to PDF.

Key Functions:
    - render_document(): Document → PDF bytes
    - build_document_pdf(): Document → PDF file + build metadata

Key Classes:
    - RenderConfig: Font, size, spacing and theme
    - BuildResult / BuildError: Build outcome and failure

Dependencies:
    - reportlab: Font metrics and PDF generation
    - repo_pdf.core.models: Document

Used By:
    - repo_pdf.cli: Command line entry point
"""

from .config import RenderConfig, FontFamily, Theme, LineSpacing
from .controller import render_document, build_document_pdf, BuildResult, BuildError

__all__ = [
    # Config
    "RenderConfig",
    "FontFamily",
    "Theme",
    "LineSpacing",
    # Controller
    "render_document",
    "build_document_pdf",
    "BuildResult",
    "BuildError",
]
