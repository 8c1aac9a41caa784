"""
Module: builder.output

Purpose:
    PDF serialization for laid-out documents.
    Converts LayoutResult to PDF bytes or files using ReportLab.

Key Functions:
    - render_to_bytes(): Render layout to PDF bytes
    - render_to_pdf(): Render layout to a PDF file

Dependencies:
    - reportlab: PDF generation
    - builder.layout.models: LayoutResult

Used By:
    - builder.controller: Pipeline orchestration
"""

from .renderer import render_to_bytes, render_to_pdf

__all__ = [
    "render_to_bytes",
    "render_to_pdf",
]
