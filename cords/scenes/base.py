# cords/scenes/base.py
"""
Scene - one full-screen state of the app.

Lifecycle: enter() once, then update()/draw() every frame, then exit()
once when torn down. Scenes are built fresh on every entry.
"""

from __future__ import annotations
from enum import Enum, auto

from cords.config import CordsConfig
from cords.core.frame import FrameState
from cords.core.signal import SignalBridge, SignalEmitter
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect


class SceneId(Enum):
    INTRO = auto()
    COUNTDOWN = auto()


class Scene(SignalEmitter):
    """Base class for scenes."""

    scene_id: SceneId = None

    def __init__(self, config: CordsConfig = None, bridge: SignalBridge = None):
        self.config = config or CordsConfig()
        self.bind_bridge(bridge)
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def enter(self):
        self._active = True

    def exit(self):
        self._active = False

    def update(self, frame: FrameState):
        pass

    def draw(self, ctx: DrawContext, rect: Rect):
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(active={self._active})"
