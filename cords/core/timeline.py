# cords/core/timeline.py
"""
Timeline - Frame-driven tweens and timed sequences.

Everything here is advanced explicitly with the frame delta (seconds), so
"wait N milliseconds" is accumulated frame time rather than a sleeping
thread. Time past a step carries into the next delay, so steps stay on
the wall-clock schedule whatever the frame rate. A step fires at most once
per advance() and the carried time is capped at one delay, so a long hitch
fires one late step instead of a burst.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple
import logging

from cords.core.easing import EasingKind, ease

logger = logging.getLogger(__name__)

# Summed frame deltas land a hair short of round numbers (60 x 1/60 s)
TIME_EPSILON_MS = 1e-6


def _carry(remainder_ms: float, limit_ms: float) -> float:
    return max(0.0, min(remainder_ms, limit_ms))


# =============================================================================
# Tween
# =============================================================================

class Tween:
    """
    One running interpolation from start to target.

    value follows start + (target - start) * ease(elapsed / duration) and is
    pinned to target once the duration has elapsed.
    """

    def __init__(
        self,
        start: float,
        target: float,
        duration_ms: float,
        easing: EasingKind = EasingKind.LINEAR,
    ):
        self.start = start
        self.target = target
        self.duration_ms = duration_ms
        self.easing = easing
        self._elapsed_ms = 0.0
        self._value = start
        self._finished = False

        if duration_ms <= 0:
            self._value = target
            self._finished = True

    @property
    def value(self) -> float:
        return self._value

    @property
    def finished(self) -> bool:
        return self._finished

    def advance(self, dt: float) -> float:
        if self._finished:
            return self._value

        self._elapsed_ms += max(0.0, dt) * 1000.0

        if self._elapsed_ms + TIME_EPSILON_MS >= self.duration_ms:
            self._value = self.target
            self._finished = True
        else:
            fraction = self._elapsed_ms / self.duration_ms
            self._value = self.start + (self.target - self.start) * ease(fraction, self.easing)

        return self._value

    def __repr__(self) -> str:
        return (
            f"Tween({self.start} -> {self.target}, {self.duration_ms}ms, "
            f"{self.easing.name}, value={self._value:.3f})"
        )


# =============================================================================
# Delay Sequence
# =============================================================================

@dataclass
class DelayStep:
    delay_ms: float
    action: Callable[[], None]
    name: str = ""


class DelaySequence:
    """
    Ordered list of (delay, action) steps.

    Each delay is measured from the moment the previous step was due.
    cancel() abandons the remaining steps.
    """

    def __init__(self, steps: Sequence[Tuple[float, Callable[[], None], str]] = ()):
        self._steps: List[DelayStep] = []
        self._index = 0
        self._elapsed_ms = 0.0
        self._cancelled = False

        for delay_ms, action, name in steps:
            self.then(delay_ms, action, name)

    def then(self, delay_ms: float, action: Callable[[], None], name: str = "") -> DelaySequence:
        if delay_ms < 0:
            raise ValueError(f"Delay must be non-negative, got {delay_ms}")
        self._steps.append(DelayStep(delay_ms, action, name))
        return self

    @property
    def done(self) -> bool:
        return self._cancelled or self._index >= len(self._steps)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> int:
        """Number of steps that have run."""
        return self._index

    def cancel(self):
        if not self.done:
            logger.debug(f"Delay sequence cancelled after {self._index}/{len(self._steps)} steps")
        self._cancelled = True

    def advance(self, dt: float):
        if self.done:
            return

        self._elapsed_ms += max(0.0, dt) * 1000.0
        step = self._steps[self._index]

        if self._elapsed_ms + TIME_EPSILON_MS >= step.delay_ms:
            self._index += 1
            limit = 0.0 if self.done else self._steps[self._index].delay_ms
            self._elapsed_ms = _carry(self._elapsed_ms - step.delay_ms, limit)
            if step.name:
                logger.debug(f"Delay step '{step.name}' fired")
            step.action()


# =============================================================================
# Ticker
# =============================================================================

class Ticker:
    """
    Periodic action every interval_ms.

    Runs until cancelled, or until max_ticks ticks have fired when given.
    """

    def __init__(
        self,
        interval_ms: float,
        action: Callable[[int], None],
        max_ticks: Optional[int] = None,
    ):
        if interval_ms <= 0:
            raise ValueError(f"Ticker interval must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.action = action
        self.max_ticks = max_ticks
        self._ticks = 0
        self._elapsed_ms = 0.0
        self._cancelled = False

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def active(self) -> bool:
        if self._cancelled:
            return False
        return self.max_ticks is None or self._ticks < self.max_ticks

    def cancel(self):
        self._cancelled = True

    def advance(self, dt: float):
        if not self.active:
            return

        self._elapsed_ms += max(0.0, dt) * 1000.0

        if self._elapsed_ms + TIME_EPSILON_MS >= self.interval_ms:
            self._elapsed_ms = _carry(self._elapsed_ms - self.interval_ms, self.interval_ms)
            self._ticks += 1
            self.action(self._ticks)
