# cords/anim/reveal.py
"""
Text Reveal - dual-speed typewriter effect.

Two layers of the same text are revealed by two tweens started together.
The dim layer runs 0 -> 100 over 400 ms. The bright layer runs -20 -> 100
over 500 ms; its negative start acts as a delay before any character shows,
after which it reveals faster than the dim layer.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from cords.config import RevealConfig
from cords.core.easing import EasingKind
from cords.core.timeline import Tween
from cords.ui.draw import DrawContext
from cords.ui.style import WHITE, FontWeight, TextAlign, with_alpha


@dataclass(frozen=True)
class RevealLayer:
    text: str
    alpha: float


class TextReveal:

    def __init__(self, text: str, config: RevealConfig = None):
        self.config = config or RevealConfig()
        self._text = text
        self.progress1 = Tween(0.0, 100.0, self.config.dim_duration_ms, EasingKind.LINEAR)
        self.progress2 = Tween(self.config.bright_start, 100.0, self.config.bright_duration_ms, EasingKind.LINEAR)

    @property
    def text(self) -> str:
        return self._text

    @property
    def finished(self) -> bool:
        return self.progress1.finished and self.progress2.finished

    def advance(self, dt: float):
        self.progress1.advance(dt)
        self.progress2.advance(dt)

    @property
    def visible_len1(self) -> int:
        return int(len(self._text) * (self.progress1.value / 100.0))

    @property
    def visible_len2(self) -> int:
        if self.progress2.value < 0:
            return 0
        return int(len(self._text) * (self.progress2.value / 100.0))

    @property
    def layers(self) -> List[RevealLayer]:
        """Layers bottom to top."""
        layers = [RevealLayer(self._text[:self.visible_len1], self.config.dim_alpha)]
        if self.progress2.value > 0:
            layers.append(RevealLayer(self._text[:self.visible_len2], self.config.bright_alpha))
        return layers

    def draw(
        self,
        ctx: DrawContext,
        x: float,
        y: float,
        font_size: float = 14.0,
        weight: FontWeight = FontWeight.NORMAL,
        align: TextAlign = TextAlign.LEFT,
    ):
        for layer in self.layers:
            ctx.draw_text(
                layer.text, x, y,
                with_alpha(WHITE, layer.alpha),
                font_size=font_size,
                weight=weight,
                align=align,
            )

    def __repr__(self) -> str:
        return f"TextReveal({self._text!r}, {self.visible_len1}/{self.visible_len2})"
