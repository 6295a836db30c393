# cords/scenes/composer.py
"""
SceneComposer - top-level coordinator.

Owns the scene selector (INTRO -> COUNTDOWN, one way), routes frames to the
live scene(s) and composes their output into one DrawContext. Switching
scenes crossfades: the outgoing scene keeps animating while it fades out
and is torn down when the fade completes.
"""

from __future__ import annotations
from typing import Optional
import logging

from cords.config import CordsConfig
from cords.core.easing import EasingKind
from cords.core.frame import FrameState
from cords.core.signal import SignalBridge, SignalReceiver, SIGNAL_LAUNCH, SIGNAL_SCENE_CHANGED
from cords.core.timeline import Tween
from cords.scenes.base import Scene, SceneId
from cords.scenes.countdown import CountdownScene
from cords.scenes.intro import IntroScene
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect

logger = logging.getLogger(__name__)


class SceneComposer(SignalReceiver):

    def __init__(self, config: CordsConfig = None, bridge: SignalBridge = None, rng=None):
        self.config = config or CordsConfig()
        self.bridge = bridge or SignalBridge()
        self._rng = rng

        self._selector = SceneId.INTRO
        self._current: Scene = IntroScene(self.config, self.bridge)
        self._outgoing: Optional[Scene] = None
        self._crossfade: Optional[Tween] = None
        self._viewport: Optional[Rect] = None

        self.subscribe(self.bridge, SIGNAL_LAUNCH, self._on_launch_requested)

        self._current.enter()
        logger.info(f"Entered {self._selector.name}")

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def selector(self) -> SceneId:
        return self._selector

    @property
    def current(self) -> Scene:
        return self._current

    @property
    def outgoing(self) -> Optional[Scene]:
        return self._outgoing

    @property
    def crossfading(self) -> bool:
        return self._outgoing is not None

    @property
    def launch_available(self) -> bool:
        return self._selector is SceneId.INTRO and self._current.launch_available

    def launch_hit(self, x: float, y: float) -> bool:
        """True when (x, y) is on the visible launch control."""
        if not self.launch_available or self._viewport is None:
            return False
        button = self._current.launch_rect(self._viewport)
        return button is not None and button.contains(x, y)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _on_launch_requested(self):
        if not self.launch_available:
            logger.debug(f"Launch request ignored in {self._selector.name}, control not shown")
            return
        self.launch()

    def launch(self) -> bool:
        """Switch INTRO -> COUNTDOWN. Later calls are no-ops."""
        if self._selector is not SceneId.INTRO:
            logger.debug(f"Launch ignored, already in {self._selector.name}")
            return False

        old = self._current
        new = CountdownScene(self.config, self.bridge, rng=self._rng)

        self._selector = SceneId.COUNTDOWN
        self._current = new
        self._outgoing = old
        self._crossfade = Tween(0.0, 1.0, self.config.crossfade_ms, EasingKind.FAST_OUT_SLOW_IN)
        new.enter()

        if self._crossfade.finished:
            self._finish_crossfade()

        logger.info(f"Scene changed {old.scene_id.name} -> {new.scene_id.name}")
        self.bridge.emit(SIGNAL_SCENE_CHANGED, old.scene_id, new.scene_id)
        return True

    def _finish_crossfade(self):
        if self._outgoing is not None:
            self._outgoing.exit()
        self._outgoing = None
        self._crossfade = None

    # -------------------------------------------------------------------------
    # Frame
    # -------------------------------------------------------------------------

    def update(self, frame: FrameState):
        self._current.update(frame)

        if self.crossfading:
            self._outgoing.update(frame)
            self._crossfade.advance(frame.dt)
            if self._crossfade.finished:
                self._finish_crossfade()

    def draw(self, ctx: DrawContext, rect: Rect):
        self._viewport = rect.copy()

        if not self.crossfading:
            self._current.draw(ctx, rect)
            return

        fade = self._crossfade.value
        ctx.push_alpha(1.0 - fade)
        self._outgoing.draw(ctx, rect)
        ctx.pop_alpha()

        ctx.push_alpha(fade)
        self._current.draw(ctx, rect)
        ctx.pop_alpha()

    def shutdown(self):
        if self._outgoing is not None:
            self._outgoing.exit()
            self._outgoing = None
        self._current.exit()
        self.unsubscribe_all()
