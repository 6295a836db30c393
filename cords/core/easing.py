# cords/core/easing.py
"""
Easing - Pure time-to-progress curves.

Every curve maps t in [0, 1] to [0, 1], starts at 0, ends at 1 and is
monotonically non-decreasing.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Callable, Dict


class EasingKind(Enum):
    LINEAR = auto()
    EASE_OUT = auto()
    FAST_OUT_LINEAR_IN = auto()
    FAST_OUT_SLOW_IN = auto()


# =============================================================================
# Scalar Helpers
# =============================================================================

def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(value, max_val))


# =============================================================================
# Cubic Bezier
# =============================================================================

class CubicBezier:
    """
    Cubic Bezier easing through (0, 0), (x1, y1), (x2, y2), (1, 1).

    x1 and x2 must lie in [0, 1] so that x(s) is monotonic and can be
    inverted by bisection. A fixed number of steps keeps the result
    monotone in t.
    """

    STEPS = 48

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
            raise ValueError(f"Bezier x control points must be in [0, 1], got {x1}, {x2}")
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2

    @staticmethod
    def _evaluate(p1: float, p2: float, s: float) -> float:
        inv = 1.0 - s
        return 3.0 * p1 * inv * inv * s + 3.0 * p2 * inv * s * s + s * s * s

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0

        lo, hi = 0.0, 1.0
        for _ in range(self.STEPS):
            mid = (lo + hi) / 2.0
            if self._evaluate(self.x1, self.x2, mid) < t:
                lo = mid
            else:
                hi = mid

        return self._evaluate(self.y1, self.y2, (lo + hi) / 2.0)

    def __repr__(self) -> str:
        return f"CubicBezier({self.x1}, {self.y1}, {self.x2}, {self.y2})"


# =============================================================================
# Easing Functions
# =============================================================================

def ease_linear(t: float) -> float:
    return t

def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3

ease_fast_out_linear_in = CubicBezier(0.4, 0.0, 1.0, 1.0)
ease_fast_out_slow_in = CubicBezier(0.4, 0.0, 0.2, 1.0)


_EASINGS: Dict[EasingKind, Callable[[float], float]] = {
    EasingKind.LINEAR: ease_linear,
    EasingKind.EASE_OUT: ease_out_cubic,
    EasingKind.FAST_OUT_LINEAR_IN: ease_fast_out_linear_in,
    EasingKind.FAST_OUT_SLOW_IN: ease_fast_out_slow_in,
}


def ease(t: float, kind: EasingKind = EasingKind.LINEAR) -> float:
    """Map an elapsed fraction to progress under the named curve."""
    t = clamp(t, 0.0, 1.0)
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return _EASINGS[kind](t)
