"""
Serialization Utilities

Provides to/from JSON utilities for document models.

The on-disk shape is the one the upstream structuring step emits:

    {
      "title": "...",
      "tableOfContents": ["a.ts", ...],
      "files": [
        {"path": "a.ts", "language": "typescript",
         "lines": [{"tokens": [{"text": "const", "color": "#C678DD"}]}]}
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.document import Document
from ..models.tokens import ColoredFile
from ..schemas.validator import validate_document, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Document Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_document(document: Document) -> dict[str, Any]:
    """
    Serialize a Document to a dictionary.

    Args:
        document: Document instance to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return document.to_dict()


def deserialize_document(
    data: dict[str, Any],
    *,
    validate: bool = True,
) -> Document:
    """
    Deserialize a Document from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate structure first

    Returns:
        Document instance

    Raises:
        ValidationError: If validate=True and data is invalid
        KeyError: If validate=False and required keys are missing
    """
    if validate:
        validate_document(data)

    toc = data.get("tableOfContents", data.get("table_of_contents", []))

    return Document(
        title=data["title"],
        table_of_contents=tuple(toc),
        files=tuple(ColoredFile.from_dict(f) for f in data["files"]),
    )


# ─────────────────────────────────────────────────────────────────────────────
# JSON Files
# ─────────────────────────────────────────────────────────────────────────────

def load_document_json(path: Path, *, validate: bool = True) -> Document:
    """
    Load a document from a JSON file.

    Args:
        path: Path to the document JSON
        validate: Whether to validate structure

    Returns:
        Document instance

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If the path cannot be read (e.g. it is a directory)
        ValidationError: If the file is not UTF-8 JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON at line {e.lineno}: {e.msg}",
                path=str(path),
            ) from e
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"File is not UTF-8 text (byte {e.start})",
                path=str(path),
            ) from e

    return deserialize_document(data, validate=validate)


def save_document_json(document: Document, path: Path) -> None:
    """
    Save a document to a JSON file.

    Args:
        document: Document to save
        path: Output path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_document(document), f, indent=2, ensure_ascii=False)
