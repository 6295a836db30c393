"""
Frame State

Immutable state passed to systems each frame.
Contains timing info and frame identification.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameState:
    """
    Immutable frame information passed to all systems.
    """
    frame_id: int   # Monotonically increasing frame counter
    dt: float       # Delta time since last frame (seconds), never negative
    t: float        # Total elapsed time since the first frame (seconds)

    @property
    def dt_ms(self) -> float:
        return self.dt * 1000.0


class FrameClock:
    """
    Turns display refresh timestamps into FrameState.

    The first tick has dt == 0. Timestamps that go backwards produce
    dt == 0 rather than a negative delta.
    """

    def __init__(self, hitch_threshold: float = 0.25):
        self.hitch_threshold = hitch_threshold
        self._start: Optional[float] = None
        self._prev: Optional[float] = None
        self._frame_id = 0

    def tick(self, timestamp: float) -> FrameState:
        if self._start is None:
            self._start = timestamp
            self._prev = timestamp

        dt = max(0.0, timestamp - self._prev)
        self._prev = max(self._prev, timestamp)
        self._frame_id += 1

        frame = FrameState(
            frame_id=self._frame_id,
            dt=dt,
            t=self._prev - self._start,
        )

        if dt > self.hitch_threshold:
            logger.warning(f"Frame {frame.frame_id} took {frame.dt_ms:.0f} ms (skipped frames)")

        return frame
