"""
Style

Colors and the fixed palette of the intro and countdown screens.

Design principles:
- No string parsing at draw time (palette is resolved once)
- Colors are plain RGBA tuples, 0.0-1.0
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple


# =============================================================================
# Color
# =============================================================================

# Color can be:
# - Tuple of 3-4 floats (RGB or RGBA, 0.0-1.0)
# - None (transparent)
Color = Optional[Tuple[float, ...]]
RGBA = Tuple[float, float, float, float]


def color_rgba(c: Color) -> RGBA:
    """Normalize color to RGBA tuple."""
    if c is None:
        return (0.0, 0.0, 0.0, 0.0)
    if len(c) == 3:
        return (c[0], c[1], c[2], 1.0)
    return (c[0], c[1], c[2], c[3])


def with_alpha(c: Color, alpha: float) -> RGBA:
    """Same color with its alpha replaced."""
    r, g, b, _ = color_rgba(c)
    return (r, g, b, alpha)


def hex_to_color(hex_str: str) -> RGBA:
    """Convert hex string to color. Supports #RGB, #RGBA, #RRGGBB, #RRGGBBAA."""
    h = hex_str.lstrip('#')
    if len(h) == 3:
        r, g, b = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15
        return (r, g, b, 1.0)
    elif len(h) == 4:
        r, g, b, a = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15, int(h[3], 16) / 15
        return (r, g, b, a)
    elif len(h) == 6:
        r, g, b = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255
        return (r, g, b, 1.0)
    elif len(h) == 8:
        r, g, b, a = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255, int(h[6:8], 16) / 255
        return (r, g, b, a)
    raise ValueError(f"Invalid hex color: {hex_str}")


def argb_to_color(value: int) -> RGBA:
    """Convert a packed 0xAARRGGBB integer to color."""
    a = (value >> 24) & 0xFF
    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return (r / 255, g / 255, b / 255, a / 255)


# =============================================================================
# Palette
# =============================================================================

WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)
BACKGROUND: RGBA = hex_to_color("#121212")
GRID: RGBA = argb_to_color(0x22302041)

HIGHLIGHT_ALPHA = 0.8
IDLE_ALPHA = 0.2


class FontWeight(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"
    EXTRA_BOLD = "extra_bold"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
