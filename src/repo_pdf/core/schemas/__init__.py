"""
Schemas Package

Structural validation of raw document payloads.
"""

from .validator import validate_document, ValidationError

__all__ = [
    "validate_document",
    "ValidationError",
]
