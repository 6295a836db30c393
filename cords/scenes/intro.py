# cords/scenes/intro.py
"""
Intro Scene - staged title reveal, logo fade and loading indicator.

Timeline from entry:
- subtitle typewriter starts immediately
- +700 ms: title typewriter
- +500 ms: logo fades in over 800 ms
- +2500 ms: loading indicator is replaced by the launch control
"""

from __future__ import annotations
from typing import Optional
import logging
import math

from cords.anim.progress import ProgressIndicator
from cords.anim.reveal import TextReveal
from cords.core.easing import EasingKind
from cords.core.frame import FrameState
from cords.core.signal import SIGNAL_INTRO_STAGE
from cords.core.timeline import DelaySequence, Tween
from cords.scenes.base import Scene, SceneId
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.style import WHITE, FontWeight, TextAlign, with_alpha

logger = logging.getLogger(__name__)


class IntroScene(Scene):

    scene_id = SceneId.INTRO

    TITLE_SIZE_SP = 60.0
    BODY_SIZE_SP = 14.0
    LOGO_DP = 130.0

    def __init__(self, config=None, bridge=None):
        super().__init__(config, bridge)
        intro = self.config.intro

        self.subtitle = TextReveal(intro.subtitle, self.config.reveal)
        self.title: Optional[TextReveal] = None
        self.logo_alpha: Optional[Tween] = None
        self.progress = ProgressIndicator(intro.progress_step_ms, intro.progress_steps)
        self._loading = True

        self.staging = DelaySequence([
            (intro.title_delay_ms, self._show_title, "title"),
            (intro.logo_delay_ms, self._show_logo, "logo"),
            (intro.loading_ms, self._finish_loading, "loading"),
        ])

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def title_visible(self) -> bool:
        return self.title is not None

    @property
    def logo_visible(self) -> bool:
        return self.logo_alpha is not None

    @property
    def launch_available(self) -> bool:
        return self._active and not self._loading

    def exit(self):
        self.staging.cancel()
        self.progress.cancel()
        super().exit()

    # -------------------------------------------------------------------------
    # Stages
    # -------------------------------------------------------------------------

    def _show_title(self):
        self.title = TextReveal(self.config.intro.title, self.config.reveal)
        self.emit(SIGNAL_INTRO_STAGE, "title")

    def _show_logo(self):
        self.logo_alpha = Tween(0.0, 1.0, self.config.intro.logo_fade_ms, EasingKind.LINEAR)
        self.emit(SIGNAL_INTRO_STAGE, "logo")

    def _finish_loading(self):
        self._loading = False
        self.progress.cancel()
        logger.info("Intro loaded, launch available")
        self.emit(SIGNAL_INTRO_STAGE, "loaded")

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def update(self, frame: FrameState):
        dt = frame.dt
        self.subtitle.advance(dt)
        if self.title is not None:
            self.title.advance(dt)
        if self.logo_alpha is not None:
            self.logo_alpha.advance(dt)
        if self._loading:
            self.progress.advance(dt)

        self.staging.advance(dt)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _content(self, rect: Rect) -> Rect:
        pad = self.config.dp(16)
        return rect.inset(pad, pad, pad, pad)

    def _title_row(self, rect: Rect) -> Rect:
        content = self._content(rect)
        return Rect(content.x, content.y + self.config.dp(40), content.w, self.config.dp(150))

    def _bottom(self, rect: Rect) -> Rect:
        pad = self.config.dp(16)
        return self._content(rect).inset(0, 0, pad, 0)

    def launch_rect(self, rect: Rect) -> Optional[Rect]:
        """Hit area of the launch control, None while loading."""
        if self._loading:
            return None
        return self._bottom(rect).bottom_center(self.config.dp(240), self.config.dp(44))

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self, ctx: DrawContext, rect: Rect):
        cfg = self.config
        row = self._title_row(rect)

        if self.title_visible:
            size = cfg.dp(self.TITLE_SIZE_SP)
            self.title.draw(ctx, row.x, row.center_y - size / 2, font_size=size, weight=FontWeight.EXTRA_BOLD)

            logo = Rect(row.right - cfg.dp(self.LOGO_DP), row.center_y - cfg.dp(self.LOGO_DP) / 2,
                        cfg.dp(self.LOGO_DP), cfg.dp(self.LOGO_DP))
            alpha = self.logo_alpha.value if self.logo_visible else 0.0
            if alpha > 0.0:
                draw_logo(ctx, logo, alpha, cfg.dp(2))

        self.subtitle.draw(ctx, row.x, row.bottom, font_size=cfg.dp(self.BODY_SIZE_SP))

        bottom = self._bottom(rect)
        if self._loading:
            self.progress.draw(ctx, bottom.bottom_center(cfg.dp(250), cfg.dp(30)), cfg.density)
        else:
            self._draw_launch_button(ctx, self.launch_rect(rect))

    def _draw_launch_button(self, ctx: DrawContext, button: Rect):
        cfg = self.config
        cut = cfg.dp(10)
        points = [
            (button.x + cut, button.y),
            (button.right, button.y),
            (button.right, button.bottom - cut),
            (button.right - cut, button.bottom),
            (button.x, button.bottom),
            (button.x, button.y + cut),
        ]
        ctx.draw_polyline(points, with_alpha(WHITE, 0.3), width=cfg.dp(1), closed=True)

        size = cfg.dp(self.BODY_SIZE_SP)
        ctx.draw_text(
            cfg.intro.launch_label,
            button.center_x,
            button.center_y - size / 2,
            with_alpha(WHITE, 0.85),
            font_size=size,
            weight=FontWeight.BOLD,
            align=TextAlign.CENTER,
        )


def draw_logo(ctx: DrawContext, rect: Rect, alpha: float, stroke: float = 2.0):
    """Nested hexagons joined at alternate corners."""
    cx, cy = rect.center_x, rect.center_y
    color = with_alpha(WHITE, 0.85 * alpha)

    def hexagon(radius: float):
        return [
            (cx + radius * math.cos(math.radians(90 + 60 * i)),
             cy - radius * math.sin(math.radians(90 + 60 * i)))
            for i in range(6)
        ]

    outer = hexagon(min(rect.w, rect.h) * 0.45)
    inner = hexagon(min(rect.w, rect.h) * 0.22)
    ctx.draw_polyline(outer, color, stroke, closed=True)
    ctx.draw_polyline(inner, color, stroke, closed=True)
    for i in range(0, 6, 2):
        ctx.draw_line(outer[i][0], outer[i][1], inner[i][0], inner[i][1], color, stroke)
