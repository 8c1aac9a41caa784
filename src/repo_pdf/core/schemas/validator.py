"""
Document Validation Utilities

Validates raw JSON documents before they are turned into models.

Only structure is checked here (required keys and value types). Token
colors are deliberately left alone: they come from an upstream
classifier and are corrected by the renderer, not rejected.
"""

from __future__ import annotations

from typing import Any


class ValidationError(Exception):
    """Raised when document data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_document(data: Any) -> None:
    """
    Validate a raw document payload.

    Accepts the camelCase wire shape (``tableOfContents``) as well as
    ``table_of_contents``.

    Args:
        data: Parsed JSON value

    Raises:
        ValidationError: If data is structurally invalid. ``errors`` holds
            every problem found, ``path`` the first one.
    """
    if not isinstance(data, dict):
        raise ValidationError("Document must be a JSON object", path="")

    errors: list[tuple[str, str]] = []

    if "title" not in data:
        errors.append(("title", "Missing field: title"))
    elif not isinstance(data["title"], str):
        errors.append(("title", "title must be a string"))

    toc_key = "tableOfContents" if "tableOfContents" in data else "table_of_contents"
    toc = data.get(toc_key, [])
    if not isinstance(toc, list):
        errors.append((toc_key, f"{toc_key} must be a list"))
    else:
        for i, entry in enumerate(toc):
            if not isinstance(entry, str):
                errors.append((f"{toc_key}[{i}]", "TOC entry must be a string"))

    if "files" not in data:
        errors.append(("files", "Missing field: files"))
    elif not isinstance(data["files"], list):
        errors.append(("files", "files must be a list"))
    else:
        for i, file_data in enumerate(data["files"]):
            errors.extend(_check_file(file_data, f"files[{i}]"))

    if errors:
        first_path, first_message = errors[0]
        raise ValidationError(
            f"Invalid document ({len(errors)} problem(s)): {first_message} at {first_path or '<root>'}",
            path=first_path,
            errors=[f"{path}: {message}" for path, message in errors],
        )


def _check_file(data: Any, path: str) -> list[tuple[str, str]]:
    """Collect problems in one file entry."""
    if not isinstance(data, dict):
        return [(path, "file entry must be an object")]

    errors: list[tuple[str, str]] = []
    file_path = data.get("path")
    if not isinstance(file_path, str) or not file_path:
        errors.append((f"{path}.path", "path must be a non-empty string"))
    if "language" in data and not isinstance(data["language"], str):
        errors.append((f"{path}.language", "language must be a string"))

    lines = data.get("lines", [])
    if not isinstance(lines, list):
        errors.append((f"{path}.lines", "lines must be a list"))
        return errors

    for i, line in enumerate(lines):
        line_path = f"{path}.lines[{i}]"
        if not isinstance(line, dict):
            errors.append((line_path, "line must be an object"))
            continue
        tokens = line.get("tokens", [])
        if not isinstance(tokens, list):
            errors.append((f"{line_path}.tokens", "tokens must be a list"))
            continue
        for j, token in enumerate(tokens):
            token_path = f"{line_path}.tokens[{j}]"
            if not isinstance(token, dict):
                errors.append((token_path, "token must be an object"))
                continue
            if not isinstance(token.get("text"), str):
                errors.append((f"{token_path}.text", "text must be a string"))
            if not isinstance(token.get("color"), str):
                errors.append((f"{token_path}.color", "color must be a string"))
    return errors
