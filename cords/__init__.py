# cords/__init__.py
"""
CORDS - animated intro and launch countdown.

Core components:
- FrameClock: Display refresh timestamps -> FrameState
- Tween / DelaySequence / Ticker: Frame-driven timing
- CordField: Falling cord particle field
- TextReveal: Dual-layer typewriter reveal
- Countdown: 6..0 launch countdown
- SceneComposer: Intro -> Countdown scene switching
"""

from cords.config import CordsConfig, load_config
from cords.core import (
    FrameState, FrameClock,
    SignalBridge,
    EasingKind, ease,
    Tween, DelaySequence, Ticker,
)
from cords.anim import Cord, CordField, TextReveal, Countdown, ProgressIndicator
from cords.scenes import SceneId, SceneComposer, IntroScene, CountdownScene

__version__ = '0.1.0'

__all__ = [
    'CordsConfig', 'load_config',
    'FrameState', 'FrameClock',
    'SignalBridge',
    'EasingKind', 'ease',
    'Tween', 'DelaySequence', 'Ticker',
    'Cord', 'CordField', 'TextReveal', 'Countdown', 'ProgressIndicator',
    'SceneId', 'SceneComposer', 'IntroScene', 'CountdownScene',
]
