# cords/ui/text.py
"""
Text Rendering - Font atlas and text layout.

Uses Pillow for font loading and glyph rasterization, then renders text as
textured quads sampling from a single-channel atlas texture.

Architecture:
- FontAtlas: Packs glyphs into a texture, provides UV lookups
- layout_text: Converts a string to positioned glyph quads
- TextRenderer: Caches one atlas per (size, weight) and draws DrawText
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING
import logging

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from cords.ui.style import FontWeight, TextAlign

if TYPE_CHECKING:
    import moderngl
    from cords.ui.draw import DrawText

logger = logging.getLogger(__name__)


# =============================================================================
# Glyph Data
# =============================================================================

@dataclass
class GlyphMetrics:
    """Metrics for a single glyph."""
    char: str
    width: int          # Glyph width in pixels
    height: int         # Glyph height in pixels
    bearing_x: int      # Offset from cursor to left edge
    bearing_y: int      # Offset from line top to glyph top
    advance: int        # Cursor advance after this glyph

    uv_x0: float = 0.0
    uv_y0: float = 0.0
    uv_x1: float = 0.0
    uv_y1: float = 0.0


# System fonts tried in order, per weight
SYSTEM_FONTS = {
    FontWeight.NORMAL: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "C:/Windows/Fonts/segoeui.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ],
    FontWeight.BOLD: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "C:/Windows/Fonts/segoeuib.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ],
    FontWeight.EXTRA_BOLD: [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "C:/Windows/Fonts/ariblk.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ],
}


# =============================================================================
# Font Atlas
# =============================================================================

class FontAtlas:
    """
    Texture atlas containing rendered glyphs.

    Holds the ASCII printable characters; anything else falls back to '?'.
    """

    DEFAULT_CHARS = (
        " !\"#$%&'()*+,-./0123456789:;<=>?@"
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`"
        "abcdefghijklmnopqrstuvwxyz{|}~"
    )

    ATLAS_WIDTH = 1024
    MARGIN = 2

    def __init__(
        self,
        ctx: moderngl.Context,
        size: int = 24,
        weight: FontWeight = FontWeight.NORMAL,
        font_path: str = None,
        chars: str = None,
        padding: int = 2,
    ):
        self.ctx = ctx
        self.size = size
        self.weight = weight
        self.padding = padding
        self._chars = chars or self.DEFAULT_CHARS

        self._font = self._load_font(font_path, size, weight)
        self._glyphs: Dict[str, GlyphMetrics] = {}
        self._texture: Optional[moderngl.Texture] = None

        self._build_atlas()

    @staticmethod
    def _load_font(font_path: Optional[str], size: int, weight: FontWeight):
        if font_path and Path(font_path).exists():
            return ImageFont.truetype(font_path, size)

        for path in SYSTEM_FONTS.get(weight, []):
            if Path(path).exists():
                return ImageFont.truetype(path, size)

        logger.warning(f"No system font found for {weight.value}, using Pillow default")
        return ImageFont.load_default(size=size)

    def _build_atlas(self):
        """Render all glyphs and pack them into rows of the atlas texture."""
        m = self.MARGIN
        images = {}
        row_height = 0

        for char in self._chars:
            left, top, right, bottom = self._font.getbbox(char)
            width = max(right - left, 1)
            height = max(bottom - top, 1)

            img = Image.new('L', (width + 2 * m, height + 2 * m), 0)
            ImageDraw.Draw(img).text((-left + m, -top + m), char, font=self._font, fill=255)
            images[char] = img

            self._glyphs[char] = GlyphMetrics(
                char=char,
                width=width,
                height=height,
                bearing_x=left,
                bearing_y=top,
                advance=int(round(self._font.getlength(char))),
            )
            row_height = max(row_height, img.height + self.padding)

        # First pass: positions
        positions: Dict[str, Tuple[int, int]] = {}
        x, y = self.padding, self.padding
        for char, img in images.items():
            if x + img.width + self.padding > self.ATLAS_WIDTH:
                x = self.padding
                y += row_height
            positions[char] = (x, y)
            x += img.width + self.padding

        atlas_height = self._next_pow2(y + row_height + self.padding)
        atlas = Image.new('L', (self.ATLAS_WIDTH, atlas_height), 0)

        # Second pass: paste and compute UVs
        for char, img in images.items():
            px, py = positions[char]
            atlas.paste(img, (px, py))
            glyph = self._glyphs[char]
            glyph.uv_x0 = px / self.ATLAS_WIDTH
            glyph.uv_y0 = py / atlas_height
            glyph.uv_x1 = (px + img.width) / self.ATLAS_WIDTH
            glyph.uv_y1 = (py + img.height) / atlas_height

        self._texture = self.ctx.texture((self.ATLAS_WIDTH, atlas_height), 1, atlas.tobytes())
        self._texture.filter = (self.ctx.LINEAR, self.ctx.LINEAR)
        logger.debug(f"Built {self.weight.value} {self.size}px atlas, {len(self._glyphs)} glyphs")

    @staticmethod
    def _next_pow2(n: int) -> int:
        return 1 << (max(n, 1) - 1).bit_length()

    def get_glyph(self, char: str) -> Optional[GlyphMetrics]:
        return self._glyphs.get(char) or self._glyphs.get('?')

    @property
    def texture(self) -> moderngl.Texture:
        return self._texture

    def measure_text(self, text: str) -> int:
        width = 0
        for char in text:
            glyph = self.get_glyph(char)
            if glyph:
                width += glyph.advance
        return width

    def release(self):
        if self._texture:
            self._texture.release()
            self._texture = None


# =============================================================================
# Text Layout
# =============================================================================

@dataclass
class GlyphQuad:
    """A positioned glyph for rendering."""
    x: float
    y: float
    width: float
    height: float
    uv_x0: float
    uv_y0: float
    uv_x1: float
    uv_y1: float


def layout_text(text: str, x: float, y: float, font: FontAtlas, align: TextAlign = TextAlign.LEFT) -> List[GlyphQuad]:
    """Lay out one line of text with its top edge at y."""
    line_width = font.measure_text(text)
    if align == TextAlign.CENTER:
        cursor = x - line_width / 2
    elif align == TextAlign.RIGHT:
        cursor = x - line_width
    else:
        cursor = x

    m = FontAtlas.MARGIN
    quads = []
    for char in text:
        glyph = font.get_glyph(char)
        if glyph is None:
            continue
        if not char.isspace():
            quads.append(GlyphQuad(
                x=cursor + glyph.bearing_x - m,
                y=y + glyph.bearing_y - m,
                width=glyph.width + 2 * m,
                height=glyph.height + 2 * m,
                uv_x0=glyph.uv_x0,
                uv_y0=glyph.uv_y0,
                uv_x1=glyph.uv_x1,
                uv_y1=glyph.uv_y1,
            ))
        cursor += glyph.advance

    return quads


# =============================================================================
# Text Renderer
# =============================================================================

TEXT_VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec2 in_uv;
in vec4 in_color;

out vec2 v_uv;
out vec4 v_color;

uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_uv = in_uv;
    v_color = in_color;
}
"""

TEXT_FRAGMENT_SHADER = """
#version 330
in vec2 v_uv;
in vec4 v_color;
out vec4 frag_color;

uniform sampler2D u_atlas;

void main() {
    float coverage = texture(u_atlas, v_uv).r;
    frag_color = vec4(v_color.rgb, v_color.a * coverage);
}
"""


class TextRenderer:
    """
    Draws DrawText commands, one textured quad (6 vertices) per glyph.

    Atlases are built lazily per (pixel size, weight) and cached.
    """

    FLOATS_PER_VERTEX = 8  # pos(2) + uv(2) + color(4)

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        self._fonts: Dict[Tuple[int, FontWeight], FontAtlas] = {}
        self._program = ctx.program(
            vertex_shader=TEXT_VERTEX_SHADER,
            fragment_shader=TEXT_FRAGMENT_SHADER,
        )
        self._vbo = None
        self._vao = None
        self._capacity = 0

    def font(self, size: float, weight: FontWeight) -> FontAtlas:
        key = (max(1, int(round(size))), weight)
        if key not in self._fonts:
            self._fonts[key] = FontAtlas(self.ctx, size=key[0], weight=weight)
        return self._fonts[key]

    def _ensure_buffer(self, vertices: int):
        if self._capacity >= vertices and self._vbo is not None:
            return

        new_capacity = max(vertices, self._capacity * 2, 256)
        if self._vbo:
            self._vbo.release()
            self._vao.release()

        self._vbo = self.ctx.buffer(reserve=new_capacity * self.FLOATS_PER_VERTEX * 4, dynamic=True)
        self._vao = self.ctx.vertex_array(
            self._program,
            [(self._vbo, "2f 2f 4f", "in_pos", "in_uv", "in_color")],
        )
        self._capacity = new_capacity

    def render(self, texts: List[DrawText], screen_width: int, screen_height: int):
        # One draw per run of commands sharing an atlas, in z order
        run: List[GlyphQuad] = []
        colors: List[Tuple[float, float, float, float]] = []
        run_font: Optional[FontAtlas] = None

        for cmd in texts:
            font = self.font(cmd.font_size, cmd.weight)
            if run_font is not None and font is not run_font:
                self._flush(run, colors, run_font, screen_width, screen_height)
                run, colors = [], []
            run_font = font
            quads = layout_text(cmd.text, cmd.x, cmd.y, font, cmd.align)
            run.extend(quads)
            colors.extend([cmd.color] * len(quads))

        if run_font is not None:
            self._flush(run, colors, run_font, screen_width, screen_height)

    def _flush(self, quads, colors, font: FontAtlas, sw: int, sh: int):
        if not quads:
            return

        self._ensure_buffer(len(quads) * 6)
        vertices = np.zeros((len(quads) * 6, self.FLOATS_PER_VERTEX), dtype=np.float32)

        for i, (q, c) in enumerate(zip(quads, colors)):
            x0, y0 = q.x, q.y
            x1, y1 = q.x + q.width, q.y + q.height
            base = i * 6
            vertices[base + 0] = [x0, y0, q.uv_x0, q.uv_y0, *c]
            vertices[base + 1] = [x1, y0, q.uv_x1, q.uv_y0, *c]
            vertices[base + 2] = [x1, y1, q.uv_x1, q.uv_y1, *c]
            vertices[base + 3] = [x0, y0, q.uv_x0, q.uv_y0, *c]
            vertices[base + 4] = [x1, y1, q.uv_x1, q.uv_y1, *c]
            vertices[base + 5] = [x0, y1, q.uv_x0, q.uv_y1, *c]

        self._vbo.write(vertices.tobytes())
        font.texture.use(location=0)
        self._program["u_screen_size"].value = (sw, sh)
        self._program["u_atlas"].value = 0
        self._vao.render(mode=self.ctx.TRIANGLES, vertices=len(quads) * 6)

    def release(self):
        for font in self._fonts.values():
            font.release()
        self._fonts.clear()
        if self._vbo:
            self._vbo.release()
        if self._vao:
            self._vao.release()
        self._program.release()
