"""
Module: document

Purpose:
    Provides the Document dataclass - title, table of contents and the
    colored files to render. The files arrive in whatever order the
    upstream (concurrent) analysis finished them; ordered_files() joins
    them back onto the table of contents.

Key Classes:
    - Document: Complete input for one render

Dependencies:
    - dataclasses (std)
    - .tokens.ColoredFile

Used By:
    - core.utils.serialization
    - builder.layout.paginator
    - builder.controller
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .tokens import ColoredFile


@dataclass(frozen=True, slots=True)
class Document:
    """
    Structured document to paginate (immutable).

    Attributes:
        title: Title shown at the top of page 1
        table_of_contents: File paths in presentation order
        files: Colored files in arrival order (NOT necessarily TOC order)

    Invariants:
        - table_of_contents and files are produced independently; only
          ordered_files() defines the section order

    Example:
        >>> doc = Document("demo", ("b.ts", "a.ts"), (file_a, file_b))
        >>> [f.path for f in doc.ordered_files()]
        ['b.ts', 'a.ts']
    """

    title: str
    table_of_contents: tuple[str, ...] = ()
    files: tuple[ColoredFile, ...] = field(default_factory=tuple)

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def is_empty(self) -> bool:
        """True when there are no file sections to render."""
        return len(self.files) == 0

    def ordered_files(self) -> tuple[ColoredFile, ...]:
        """
        Reorder files to match the table of contents.

        Path equality is the join key. Files whose path is not listed sort
        after all listed files, keeping their arrival order. If a path is
        listed twice, its first position wins.

        Returns:
            Files in section order
        """
        rank: dict[str, int] = {}
        for position, path in enumerate(self.table_of_contents):
            rank.setdefault(path, position)

        unlisted = len(rank)
        # sorted() is stable, so ties keep arrival order
        return tuple(sorted(self.files, key=lambda f: rank.get(f.path, unlisted)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "tableOfContents": list(self.table_of_contents),
            "files": [f.to_dict() for f in self.files],
        }
