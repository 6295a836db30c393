"""
UI - drawing surface and GL rendering.

Components:
- style: Colors, palette, font weight and alignment
- layout: Rect helpers
- draw: Per-frame DrawContext collecting lines and text into a DrawBatch
- renderer: moderngl renderer for DrawBatch
- text: Pillow font atlas and glyph quads

Example usage:

    ctx = DrawContext(width, height)

    # In render loop:
    ctx.clear()
    composer.draw(ctx, Rect(0, 0, width, height))
    renderer.render(ctx.finalize(), width, height)
"""

from cords.ui.style import (
    Color, color_rgba, with_alpha, hex_to_color, argb_to_color,
    WHITE, BACKGROUND, GRID, FontWeight, TextAlign,
)
from cords.ui.layout import Rect
from cords.ui.draw import DrawContext, DrawBatch, DrawLine, DrawText
from cords.ui.renderer import CordsRenderer, build_line_vertices, line_segments
from cords.ui.text import FontAtlas, TextRenderer, layout_text

__all__ = [
    'Color', 'color_rgba', 'with_alpha', 'hex_to_color', 'argb_to_color',
    'WHITE', 'BACKGROUND', 'GRID', 'FontWeight', 'TextAlign',
    'Rect',
    'DrawContext', 'DrawBatch', 'DrawLine', 'DrawText',
    'CordsRenderer', 'build_line_vertices', 'line_segments',
    'FontAtlas', 'TextRenderer', 'layout_text',
]
