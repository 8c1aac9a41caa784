"""
Module: tokens

Purpose:
    Provides the colored-text building blocks of a document: Token,
    Line and ColoredFile. Colors are carried exactly as produced upstream
    and are only validated at render time.

Key Classes:
    - Token: Smallest colored text unit, laid out atomically
    - Line: One logical source line (possibly empty)
    - ColoredFile: A source file broken into Lines

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.document.Document
    - core.utils.serialization
    - builder.layout.paginator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator


@dataclass(frozen=True, slots=True)
class Token:
    """
    Colored text unit (immutable).

    A token is never split across two visual rows.

    Attributes:
        text: Text to draw (may be empty)
        color: Declared color. Usually "#RRGGBB" but may be any string;
            malformed values are substituted by the theme default.

    Example:
        >>> Token("const", "#C678DD").is_empty
        False
    """

    text: str
    color: str

    @property
    def is_empty(self) -> bool:
        """True when the token has no text to measure or draw."""
        return not self.text

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "color": self.color}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        return cls(text=data["text"], color=data["color"])


@dataclass(frozen=True, slots=True)
class Line:
    """
    One logical source line.

    An empty line still occupies one line height when rendered.

    Attributes:
        tokens: Tokens in left-to-right order
    """

    tokens: tuple[Token, ...] = ()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def is_blank(self) -> bool:
        """True for a line with no tokens."""
        return len(self.tokens) == 0

    def to_dict(self) -> dict[str, Any]:
        return {"tokens": [t.to_dict() for t in self.tokens]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Line:
        return cls(tokens=tuple(Token.from_dict(t) for t in data.get("tokens", [])))


@dataclass(frozen=True, slots=True)
class ColoredFile:
    """
    A source file broken into colored lines (immutable).

    Attributes:
        path: Repository-relative path, used as the TOC join key
        language: Language tag shown in the file separator
        lines: Logical lines in source order

    Example:
        >>> f = ColoredFile("x.ts", "typescript", (Line(),))
        >>> f.line_count
        1
    """

    path: str
    language: str
    lines: tuple[Line, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate file on construction."""
        if not self.path:
            raise ValueError("ColoredFile path cannot be empty")

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def token_count(self) -> int:
        return sum(len(line) for line in self.lines)

    @property
    def separator_text(self) -> str:
        """Heading drawn before the file's lines."""
        return f"File: {self.path} ({self.language})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "language": self.language,
            "lines": [line.to_dict() for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColoredFile:
        return cls(
            path=data["path"],
            language=data.get("language", ""),
            lines=tuple(Line.from_dict(line) for line in data.get("lines", [])),
        )
