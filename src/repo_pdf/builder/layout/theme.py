"""
Module: builder.layout.theme

Purpose:
    Theme palettes and the per-token color policy.

    The policy is narrow: malformed colors fall back to the
    theme's default text color, and only the two canonical collisions
    (black on the dark fill, white on the light page) are remapped. No
    general contrast correction is attempted.

Key Classes:
    - ThemePalette: Foreground/background colors for a Theme

Key Functions:
    - get_palette(): Palette for a Theme
    - resolve_token_color(): Validate and theme-adjust a declared color

Used By:
    - builder.layout.paginator
    - builder.output.renderer
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from repo_pdf.builder.config import Theme


HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

BLACK = "#000000"
WHITE = "#FFFFFF"

_NAMED_ALIASES = {
    "black": BLACK,
    "white": WHITE,
}

# Slate palette for dark pages
DARK_MODE_BACKGROUND = "#1E293B"
DARK_MODE_TEXT = "#E2E8F0"
LIGHT_MODE_TEXT = BLACK


@dataclass(frozen=True)
class ThemePalette:
    """
    Colors for one theme.

    Attributes:
        theme: Theme this palette belongs to
        text: Default text color (title, TOC, separators, bad tokens)
        background: Page fill, or None for no fill
        remap_from: Declared color that is illegible on this theme
        remap_to: Replacement for remap_from
    """

    theme: Theme
    text: str
    background: Optional[str]
    remap_from: str
    remap_to: str

    @property
    def has_background(self) -> bool:
        return self.background is not None


LIGHT_PALETTE = ThemePalette(
    theme=Theme.LIGHT,
    text=LIGHT_MODE_TEXT,
    background=None,
    remap_from=WHITE,
    remap_to=LIGHT_MODE_TEXT,
)

DARK_PALETTE = ThemePalette(
    theme=Theme.DARK,
    text=DARK_MODE_TEXT,
    background=DARK_MODE_BACKGROUND,
    remap_from=BLACK,
    remap_to=DARK_MODE_TEXT,
)


def get_palette(theme: Theme) -> ThemePalette:
    """Return the palette for a theme."""
    return DARK_PALETTE if theme is Theme.DARK else LIGHT_PALETTE


def is_valid_hex_color(color: str) -> bool:
    """True for "#RRGGBB" (either case)."""
    return isinstance(color, str) and HEX_COLOR_RE.match(color) is not None


def _is_remapped(color: str, palette: ThemePalette) -> bool:
    """True when color names the palette's illegible color (hex or alias)."""
    if not isinstance(color, str):
        return False
    key = color.strip().lower()
    return _NAMED_ALIASES.get(key, key.upper()) == palette.remap_from


def is_known_color(color: str, palette: ThemePalette) -> bool:
    """True when color is drawn as declared or remapped, not replaced."""
    return _is_remapped(color, palette) or is_valid_hex_color(color)


def resolve_token_color(color: str, palette: ThemePalette) -> str:
    """
    Resolve a token's declared color for drawing.

    Steps:
    1. The theme's illegible color is remapped (dark: "#000000" or
       "black"; light: "#FFFFFF" or "white", names in any case)
    2. Anything else that is not "#RRGGBB" becomes palette.text,
       so "white" on the dark theme is the default text color
    3. Remaining colors pass through

    Args:
        color: Color as declared upstream (arbitrary string)
        palette: Active theme palette

    Returns:
        Upper-case "#RRGGBB" color

    Example:
        >>> resolve_token_color("#000000", DARK_PALETTE)
        '#E2E8F0'
        >>> resolve_token_color("fuchsia", LIGHT_PALETTE)
        '#000000'
    """
    if _is_remapped(color, palette):
        return palette.remap_to

    if not is_valid_hex_color(color):
        return palette.text

    return color.upper()
