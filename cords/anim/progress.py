# cords/anim/progress.py
"""
Progress Indicator - five-step repeating highlight of vertical marks.

Mark groups, from the centre outwards: step 0 lights the centre mark,
steps 1-3 light the k-th mark on both sides, step 4 lights the two outer
edge marks.
"""

from __future__ import annotations
import logging

from cords.core.timeline import Ticker
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.style import WHITE, HIGHLIGHT_ALPHA, IDLE_ALPHA, with_alpha

logger = logging.getLogger(__name__)


class ProgressIndicator:

    def __init__(self, step_ms: float = 400.0, steps: int = 5):
        self.steps = steps
        self._step = 0
        self._ticker = Ticker(step_ms, self._on_tick)

    @property
    def step(self) -> int:
        return self._step

    @property
    def active(self) -> bool:
        return self._ticker.active

    def cancel(self):
        if self._ticker.active:
            logger.debug(f"Progress indicator stopped at step {self._step}")
        self._ticker.cancel()

    def advance(self, dt: float):
        self._ticker.advance(dt)

    def _on_tick(self, tick: int):
        self._step = (self._step + 1) % self.steps

    def alpha_for(self, group: int) -> float:
        return HIGHLIGHT_ALPHA if self._step == group else IDLE_ALPHA

    def draw(self, ctx: DrawContext, rect: Rect, density: float = 1.0):
        outer = self.steps - 1
        inner = outer - 1
        edge = 10.0
        cx = rect.center_x
        thick = 2 * density
        thin = 1 * density

        ctx.draw_line(rect.x + edge, rect.y, rect.x + edge, rect.bottom,
                      with_alpha(WHITE, self.alpha_for(outer)), thick)
        ctx.draw_line(cx, rect.y, cx, rect.bottom,
                      with_alpha(WHITE, self.alpha_for(0)), thick)
        ctx.draw_line(rect.right - edge, rect.y, rect.right - edge, rect.bottom,
                      with_alpha(WHITE, self.alpha_for(outer)), thick)

        distance = (rect.w / 2 - edge) / (inner + 1)
        y_offset = rect.h / 2 - rect.h * 0.75 / 2

        for k in range(1, inner + 1):
            color = with_alpha(WHITE, self.alpha_for(k))
            for x in (cx - k * distance, cx + k * distance):
                ctx.draw_line(x, rect.y + y_offset, x, rect.bottom - y_offset, color, thin)
