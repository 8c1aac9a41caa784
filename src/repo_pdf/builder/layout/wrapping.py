"""
Module: builder.layout.wrapping

Purpose:
    Word wrapping for the prose blocks of a document (title, TOC entries,
    file separators). Code lines are NOT wrapped here; they use the
    token-flow algorithm in the paginator, which never splits a token.

Key Functions:
    - split_text_to_size(): Greedy word wrap to a maximum width

Used By:
    - builder.layout.paginator
"""

from __future__ import annotations

from typing import Callable, List

Measure = Callable[[str], float]


def split_text_to_size(text: str, max_width: float, measure: Measure) -> List[str]:
    """
    Wrap text into lines no wider than max_width where possible.

    Words are separated by single spaces and placed greedily. A word that
    is wider than max_width on its own is broken between characters.
    Embedded newlines always start a new line.

    Args:
        text: Text to wrap
        max_width: Maximum line width in page units
        measure: Width function for the block's font and size

    Returns:
        Wrapped lines; [""] for empty text so every block keeps at
        least one line of height

    Example:
        >>> split_text_to_size("aa bb cc", 5, len)
        ['aa bb', 'cc']
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(paragraph, max_width, measure))
    return lines or [""]


def _wrap_paragraph(paragraph: str, max_width: float, measure: Measure) -> List[str]:
    """Wrap a single paragraph (no newlines)."""
    words = paragraph.split(" ")
    lines: List[str] = []
    current = ""

    for word in words:
        candidate = word if not current else f"{current} {word}"
        if measure(candidate) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)
            current = ""

        if measure(word) <= max_width:
            current = word
        else:
            pieces = _break_word(word, max_width, measure)
            lines.extend(pieces[:-1])
            current = pieces[-1]

    lines.append(current)
    return lines


def _break_word(word: str, max_width: float, measure: Measure) -> List[str]:
    """Break an over-long word between characters."""
    pieces: List[str] = []
    current = ""
    for char in word:
        if current and measure(current + char) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    pieces.append(current)
    return pieces
