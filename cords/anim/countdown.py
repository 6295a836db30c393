# cords/anim/countdown.py
"""
Countdown - ticks from 6 down to 0 once per second.

The value starts unset (None). Every tick moves one step down and starts a
fresh fade-in of the displayed digit. Once 0 is reached the countdown is
terminal and the caption switches to the completed message.
"""

from __future__ import annotations
from typing import Optional
import logging

from cords.config import CountdownConfig, RevealConfig
from cords.core.easing import EasingKind
from cords.core.signal import SignalEmitter, SIGNAL_COUNTDOWN_TICK, SIGNAL_COUNTDOWN_COMPLETED
from cords.core.timeline import Tween, Ticker
from cords.anim.reveal import TextReveal
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.style import WHITE, FontWeight, TextAlign, with_alpha

logger = logging.getLogger(__name__)


class Countdown(SignalEmitter):

    def __init__(self, config: CountdownConfig = None, reveal_config: RevealConfig = None):
        self.config = config or CountdownConfig()
        self.reveal_config = reveal_config or RevealConfig()

        self._value: Optional[int] = None
        self._fade: Optional[Tween] = None
        self._caption: Optional[TextReveal] = None
        self._ticker = Ticker(
            self.config.tick_ms,
            self._on_tick,
            max_ticks=self.config.start + 1,
        )

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Optional[int]:
        return self._value

    @property
    def completed(self) -> bool:
        return self._value == 0

    @property
    def digit(self) -> Optional[str]:
        if self._value is None:
            return None
        return str(self._value)

    @property
    def digit_alpha(self) -> float:
        """Current opacity of the digit, 0-1."""
        if self._fade is None:
            return 0.0
        return self._fade.value / 100.0

    @property
    def caption(self) -> Optional[str]:
        if self._value is None:
            return None
        if self._value > 0:
            return self.config.caption_running
        return self.config.caption_done

    @property
    def caption_reveal(self) -> Optional[TextReveal]:
        return self._caption

    # -------------------------------------------------------------------------
    # Update
    # -------------------------------------------------------------------------

    def advance(self, dt: float):
        # Existing animations first so a fade started by this tick begins at 0
        if self._fade is not None:
            self._fade.advance(dt)
        if self._caption is not None:
            self._caption.advance(dt)

        self._ticker.advance(dt)

    def _on_tick(self, tick: int):
        if self._value is None:
            self._value = self.config.start
        else:
            self._value -= 1

        self._fade = Tween(0.0, 100.0, self.config.fade_ms, EasingKind.FAST_OUT_LINEAR_IN)

        caption = self.caption
        if self._caption is None or self._caption.text != caption:
            self._caption = TextReveal(caption, self.reveal_config)

        logger.debug(f"Countdown tick {tick}: {self._value}")
        self.emit(SIGNAL_COUNTDOWN_TICK, self._value)

        if self._value == 0:
            logger.info("Countdown completed")
            self.emit(SIGNAL_COUNTDOWN_COMPLETED)

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self, ctx: DrawContext, rect: Rect, density: float = 1.0):
        if self._value is None:
            return

        digit_size = self.config.digit_size_sp * density
        ctx.draw_text(
            self.digit,
            rect.center_x,
            rect.center_y - digit_size / 2,
            with_alpha(WHITE, self.digit_alpha),
            font_size=digit_size,
            weight=FontWeight.EXTRA_BOLD,
            align=TextAlign.CENTER,
        )

        if self.caption_reveal is not None:
            self.caption_reveal.draw(
                ctx,
                rect.center_x,
                rect.y + 32 * density,
                font_size=14 * density,
                align=TextAlign.CENTER,
            )
