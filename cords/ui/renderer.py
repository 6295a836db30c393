"""
Renderer

Renders a DrawBatch to the screen with moderngl.

Lines are expanded to thick quads on the CPU (GL line width is not
portable) and gradient lines are split at their stops so the per-vertex
colors interpolate between neighbouring stops. Text is delegated to
TextRenderer. Lines are drawn first, text on top.
"""

from __future__ import annotations
from typing import List, TYPE_CHECKING
import numpy as np

from cords.ui.text import TextRenderer

if TYPE_CHECKING:
    import moderngl
    from cords.ui.draw import DrawBatch, DrawLine


LINE_VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec4 in_color;
out vec4 v_color;
uniform vec2 u_screen_size;

void main() {
    vec2 ndc = (in_pos / u_screen_size) * 2.0 - 1.0;
    ndc.y = -ndc.y;
    gl_Position = vec4(ndc, 0.0, 1.0);
    v_color = in_color;
}
"""

LINE_FRAGMENT_SHADER = """
#version 330
in vec4 v_color;
out vec4 frag_color;
void main() { frag_color = v_color; }
"""


def line_segments(line: 'DrawLine'):
    """
    Split a line into (x0, y0, c0, x1, y1, c1) pieces.

    A solid line is one piece; a gradient line yields one piece between
    each pair of adjacent stops, plus flat ends when the stops do not
    cover [0, 1].
    """
    if not line.stops:
        return [(line.x0, line.y0, line.color, line.x1, line.y1, line.color)]

    stops = list(line.stops)
    if stops[0][0] > 0.0:
        stops.insert(0, (0.0, stops[0][1]))
    if stops[-1][0] < 1.0:
        stops.append((1.0, stops[-1][1]))

    dx = line.x1 - line.x0
    dy = line.y1 - line.y0
    pieces = []
    for (t0, c0), (t1, c1) in zip(stops, stops[1:]):
        if t1 <= t0:
            continue
        pieces.append((
            line.x0 + dx * t0, line.y0 + dy * t0, c0,
            line.x0 + dx * t1, line.y0 + dy * t1, c1,
        ))
    return pieces


def build_line_vertices(lines: List['DrawLine']) -> np.ndarray:
    """Triangle vertices (pos(2) + color(4)) for all lines, 6 per piece."""
    rows = []
    for line in lines:
        half = max(line.width, 1.0) / 2.0
        length = line.length
        if length <= 0.0:
            continue
        # Unit normal
        nx = -(line.y1 - line.y0) / length * half
        ny = (line.x1 - line.x0) / length * half

        for x0, y0, c0, x1, y1, c1 in line_segments(line):
            a = [x0 + nx, y0 + ny, *c0]
            b = [x0 - nx, y0 - ny, *c0]
            c = [x1 - nx, y1 - ny, *c1]
            d = [x1 + nx, y1 + ny, *c1]
            rows.extend((a, b, c, a, c, d))

    if not rows:
        return np.zeros((0, 6), dtype=np.float32)
    return np.array(rows, dtype=np.float32)


class CordsRenderer:
    """
    Renders DrawBatch to GPU.

    Usage:
        renderer = CordsRenderer(ctx)

        # Each frame:
        draw_ctx.clear()
        composer.draw(draw_ctx, rect)
        renderer.render(draw_ctx.finalize(), width, height)
    """

    def __init__(self, ctx: 'moderngl.Context'):
        self.ctx = ctx
        self._line_prog = ctx.program(
            vertex_shader=LINE_VERTEX_SHADER,
            fragment_shader=LINE_FRAGMENT_SHADER,
        )
        self._line_vbo = None
        self._line_vao = None
        self._line_capacity = 0
        self.text = TextRenderer(ctx)

    def _ensure_line_buffer(self, vertices: int):
        if self._line_capacity >= vertices and self._line_vbo is not None:
            return

        new_capacity = max(vertices, self._line_capacity * 2, 1024)
        byte_size = new_capacity * 24  # 6 floats * 4 bytes

        if self._line_vbo:
            self._line_vbo.release()
            self._line_vao.release()

        self._line_vbo = self.ctx.buffer(reserve=byte_size, dynamic=True)
        self._line_capacity = new_capacity
        self._line_vao = self.ctx.vertex_array(
            self._line_prog,
            [(self._line_vbo, "2f 4f", "in_pos", "in_color")],
        )

    def render(self, batch: 'DrawBatch', screen_width: int, screen_height: int):
        if not batch.finalized:
            batch.finalize()
        if batch.lines:
            self._render_lines(batch.lines, screen_width, screen_height)
        if batch.texts:
            self.text.render(batch.texts, screen_width, screen_height)

    def _render_lines(self, lines: List['DrawLine'], sw: int, sh: int):
        vertices = build_line_vertices(lines)
        if len(vertices) == 0:
            return

        self._ensure_line_buffer(len(vertices))
        self._line_vbo.write(vertices.tobytes())
        self._line_prog["u_screen_size"].value = (sw, sh)
        self._line_vao.render(mode=self.ctx.TRIANGLES, vertices=len(vertices))

    def release(self):
        if self._line_vbo:
            self._line_vbo.release()
        if self._line_vao:
            self._line_vao.release()
        self._line_prog.release()
        self.text.release()
