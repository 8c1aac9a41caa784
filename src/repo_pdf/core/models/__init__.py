"""
Core Models Package

Immutable data models for the documents handed to the renderer.

All models in this package are frozen dataclasses. A document is built
once by the caller and read by the render pass without modification,
so the same instance can be rendered by independent calls.
"""

from .tokens import Token, Line, ColoredFile
from .document import Document

__all__ = [
    "Token",
    "Line",
    "ColoredFile",
    "Document",
]
