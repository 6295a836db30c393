"""
Draw Context

Per-frame redraw description for the 2D drawing surface.

Design:
- Scenes issue draw calls into a DrawContext every frame
- Nothing is retained between frames; clear() resets everything
- finalize() sorts by z-index and hands a DrawBatch to the renderer

Primitives:
- Lines (solid or with gradient stops along the segment)
- Text (size, weight, alignment, color with alpha)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from cords.ui.style import Color, RGBA, color_rgba, FontWeight, TextAlign


# =============================================================================
# Draw Commands (internal representation)
# =============================================================================

GradientStop = Tuple[float, RGBA]


@dataclass
class DrawLine:
    """A line segment. stops, when set, override color along the segment."""
    x0: float
    y0: float
    x1: float
    y1: float
    color: RGBA
    width: float = 1.0
    stops: Optional[Tuple[GradientStop, ...]] = None
    z_index: int = 0

    @property
    def length(self) -> float:
        return ((self.x1 - self.x0) ** 2 + (self.y1 - self.y0) ** 2) ** 0.5


@dataclass
class DrawText:
    """Text to draw. y is the top of the line box."""
    text: str
    x: float
    y: float
    color: RGBA
    font_size: float = 14.0
    weight: FontWeight = FontWeight.NORMAL
    align: TextAlign = TextAlign.LEFT
    z_index: int = 0

    @property
    def alpha(self) -> float:
        return self.color[3]


# =============================================================================
# Draw Batch
# =============================================================================

@dataclass
class DrawBatch:
    """
    Collection of draw commands for one frame.

    After building, call finalize() to sort for rendering.
    """
    lines: List[DrawLine] = field(default_factory=list)
    texts: List[DrawText] = field(default_factory=list)

    _finalized: bool = False

    def add_line(self, line: DrawLine):
        self.lines.append(line)
        self._finalized = False

    def add_text(self, text: DrawText):
        self.texts.append(text)
        self._finalized = False

    def finalize(self):
        """Sort commands by z-index."""
        self.lines.sort(key=lambda l: l.z_index)
        self.texts.sort(key=lambda t: t.z_index)
        self._finalized = True

    def clear(self):
        self.lines.clear()
        self.texts.clear()
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized


# =============================================================================
# Draw Context
# =============================================================================

class DrawContext:
    """
    Context for drawing one frame.

    Maintains an opacity stack; every color passed in is multiplied by the
    current opacity, which is how scenes are faded as a whole.
    """

    def __init__(self, window_width: int, window_height: int):
        self.window_width = window_width
        self.window_height = window_height

        self.batch = DrawBatch()

        # Opacity stack
        self._alpha = 1.0
        self._alpha_stack: List[float] = []

        # Z-index counter (auto-increment for draw order)
        self._z_index = 0

    def set_size(self, window_width: int, window_height: int):
        self.window_width = window_width
        self.window_height = window_height

    # -------------------------------------------------------------------------
    # Opacity Stack
    # -------------------------------------------------------------------------

    def push_alpha(self, alpha: float):
        """Multiply all following colors by alpha until pop_alpha()."""
        self._alpha_stack.append(self._alpha)
        self._alpha *= max(0.0, min(alpha, 1.0))

    def pop_alpha(self):
        if self._alpha_stack:
            self._alpha = self._alpha_stack.pop()

    @property
    def alpha(self) -> float:
        return self._alpha

    def _resolve(self, color: Color) -> RGBA:
        r, g, b, a = color_rgba(color)
        return (r, g, b, a * self._alpha)

    # -------------------------------------------------------------------------
    # Drawing Primitives
    # -------------------------------------------------------------------------

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: Color,
        width: float = 1.0,
    ):
        """Draw a solid line segment."""
        self.batch.add_line(DrawLine(
            x0=x0, y0=y0,
            x1=x1, y1=y1,
            color=self._resolve(color),
            width=width,
            z_index=self._z_index,
        ))
        self._z_index += 1

    def draw_gradient_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        stops: Sequence[Tuple[float, Color]],
        width: float = 1.0,
    ):
        """
        Draw a line whose color is interpolated between stops.

        Stops are (offset, color) pairs with offsets in [0, 1] along the
        segment from (x0, y0) to (x1, y1).
        """
        if not stops:
            raise ValueError("Gradient line needs at least one stop")

        resolved = tuple(
            (max(0.0, min(offset, 1.0)), self._resolve(color))
            for offset, color in sorted(stops, key=lambda s: s[0])
        )
        self.batch.add_line(DrawLine(
            x0=x0, y0=y0,
            x1=x1, y1=y1,
            color=resolved[0][1],
            width=width,
            stops=resolved,
            z_index=self._z_index,
        ))
        self._z_index += 1

    def draw_polyline(
        self,
        points: Sequence[Tuple[float, float]],
        color: Color,
        width: float = 1.0,
        closed: bool = False,
    ):
        """Draw connected segments through points."""
        if len(points) < 2:
            return
        pairs = list(zip(points, points[1:]))
        if closed:
            pairs.append((points[-1], points[0]))
        for (ax, ay), (bx, by) in pairs:
            self.draw_line(ax, ay, bx, by, color, width)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color,
        font_size: float = 14.0,
        weight: FontWeight = FontWeight.NORMAL,
        align: TextAlign = TextAlign.LEFT,
    ):
        """Draw text with its line box top at y."""
        if not text:
            return

        resolved = self._resolve(color)
        if resolved[3] <= 0.0:
            return

        self.batch.add_text(DrawText(
            text=text,
            x=x,
            y=y,
            color=resolved,
            font_size=font_size,
            weight=weight,
            align=align,
            z_index=self._z_index,
        ))
        self._z_index += 1

    # -------------------------------------------------------------------------
    # Finalization
    # -------------------------------------------------------------------------

    def finalize(self) -> DrawBatch:
        """Finalize and return the draw batch."""
        self.batch.finalize()
        return self.batch

    def clear(self):
        """Clear the context for next frame."""
        self.batch.clear()
        self._z_index = 0
        self._alpha = 1.0
        self._alpha_stack.clear()
