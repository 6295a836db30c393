# cords/scenes/countdown.py
"""
Countdown Scene - falling cords behind a fading 6..0 countdown.
"""

from __future__ import annotations
import logging

from cords.anim.countdown import Countdown
from cords.anim.particles import CordField
from cords.core.frame import FrameState
from cords.scenes.base import Scene, SceneId
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect

logger = logging.getLogger(__name__)


class CountdownScene(Scene):

    scene_id = SceneId.COUNTDOWN

    def __init__(self, config=None, bridge=None, rng=None):
        super().__init__(config, bridge)
        self.field = CordField(self.config.cords, rng=rng, seed=self.config.seed)
        self.countdown = Countdown(self.config.countdown, self.config.reveal)
        self.countdown.bind_bridge(bridge)

    def update(self, frame: FrameState):
        self.field.advance(frame.dt)
        self.countdown.advance(frame.dt)

    def draw(self, ctx: DrawContext, rect: Rect):
        cfg = self.config
        self.field.draw(ctx, rect, cfg.dp(cfg.grid_dp), stroke=cfg.dp(1))
        self.countdown.draw(ctx, rect, cfg.density)
