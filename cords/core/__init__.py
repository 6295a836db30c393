"""
Core - frame timing, signals, easing and timelines.
"""

from cords.core.frame import FrameState, FrameClock
from cords.core.signal import (
    SignalBridge,
    SignalEmitter,
    SignalReceiver,
    Connection,
    SIGNAL_LAUNCH,
    SIGNAL_SCENE_CHANGED,
    SIGNAL_INTRO_STAGE,
    SIGNAL_COUNTDOWN_TICK,
    SIGNAL_COUNTDOWN_COMPLETED,
)
from cords.core.easing import EasingKind, CubicBezier, ease, clamp
from cords.core.timeline import Tween, DelaySequence, DelayStep, Ticker

__all__ = [
    'FrameState', 'FrameClock',
    'SignalBridge', 'SignalEmitter', 'SignalReceiver', 'Connection',
    'SIGNAL_LAUNCH', 'SIGNAL_SCENE_CHANGED', 'SIGNAL_INTRO_STAGE',
    'SIGNAL_COUNTDOWN_TICK', 'SIGNAL_COUNTDOWN_COMPLETED',
    'EasingKind', 'CubicBezier', 'ease', 'clamp',
    'Tween', 'DelaySequence', 'DelayStep', 'Ticker',
]
