"""
repo_pdf Core Package

Shared data models and input utilities used by the builder.

- models: Token, Line, ColoredFile, Document
- schemas: structural validation of raw JSON documents
- utils: JSON (de)serialization
"""

from .models import Token, Line, ColoredFile, Document

__all__ = [
    "Token",
    "Line",
    "ColoredFile",
    "Document",
]
