"""
Layout helpers

Rectangles in window pixels, origin top-left.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Rect:
    """Rectangle with position and size."""
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < (self.x + self.w) and self.y <= py < (self.y + self.h)

    def inset(self, top: float, right: float, bottom: float, left: float) -> Rect:
        """Return new rect inset by the given amounts."""
        return Rect(
            x=self.x + left,
            y=self.y + top,
            w=max(0, self.w - left - right),
            h=max(0, self.h - top - bottom),
        )

    def bottom_center(self, w: float, h: float, margin: float = 0.0) -> Rect:
        """A w x h rect centred horizontally on the bottom edge."""
        return Rect(self.center_x - w / 2, self.bottom - margin - h, w, h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    def copy(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)
