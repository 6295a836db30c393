# cords/anim/particles.py
"""
Cord Field - falling line segments on a lane grid.

Each cord lives in a lane (grid column) and has a position measured in
percent of screen height. Every frame all cords move by speed * dt, cords
that reach the cull position are dropped, and then at most one new cord
may spawn at the bottom edge.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

import numpy as np

from cords.config import CordFieldConfig
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.style import WHITE, GRID, with_alpha

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cord:
    lane: int
    position: float


class CordField:
    """
    Owns the live cords and advances them once per display frame.

    rng is anything with an integers(high) method; a numpy Generator seeded
    from seed is used by default.
    """

    def __init__(
        self,
        config: CordFieldConfig = None,
        rng=None,
        seed: Optional[int] = None,
    ):
        self.config = config or CordFieldConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self._lanes = np.empty(0, dtype=np.int64)
        self._positions = np.empty(0, dtype=np.float64)
        self._spawned = 0
        self._culled = 0

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def advance(self, elapsed_seconds: float):
        cfg = self.config
        speed = max(0.0, elapsed_seconds) * cfg.speed

        positions = self._positions - speed
        alive = positions > cfg.cull_position
        culled = int(len(positions) - np.count_nonzero(alive))

        self._lanes = self._lanes[alive]
        self._positions = positions[alive]
        self._culled += culled

        if len(self._positions) < cfg.max_cords:
            if int(self.rng.integers(cfg.spawn_roll)) <= cfg.spawn_threshold:
                lane = int(self.rng.integers(cfg.lanes))
                self._lanes = np.append(self._lanes, lane)
                self._positions = np.append(self._positions, cfg.spawn_position)
                self._spawned += 1

    # -------------------------------------------------------------------------
    # Read-only View
    # -------------------------------------------------------------------------

    @property
    def cords(self) -> Tuple[Cord, ...]:
        return tuple(
            Cord(int(lane), float(pos))
            for lane, pos in zip(self._lanes, self._positions)
        )

    @property
    def count(self) -> int:
        return len(self._positions)

    @property
    def spawned(self) -> int:
        """Total cords spawned since creation."""
        return self._spawned

    @property
    def culled(self) -> int:
        """Total cords dropped since creation."""
        return self._culled

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def draw(self, ctx: DrawContext, rect: Rect, grid_size: float, stroke: float = 1.0):
        """Draw the background grid and every live cord as a fading streak."""
        draw_grid(ctx, rect, grid_size, stroke)

        trail = self.config.trail_length
        stops = (
            (0.0, WHITE),
            (0.3, with_alpha(WHITE, 0.9)),
            (1.0, with_alpha(WHITE, 0.0)),
        )

        for lane, pos in zip(self._lanes, self._positions):
            x = rect.x + lane * grid_size
            y0 = rect.y + rect.h * min(pos / 100.0, 1.0)
            y1 = rect.y + rect.h * min((pos + trail) / 100.0, 1.0)
            if y1 <= y0:
                continue
            ctx.draw_gradient_line(x, y0, x, y1, stops, width=stroke)


def draw_grid(ctx: DrawContext, rect: Rect, grid_size: float, stroke: float = 1.0):
    columns = int(rect.w / grid_size)
    rows = int(rect.h / grid_size)

    for i in range(1, rows + 1):
        y = rect.y + i * grid_size
        ctx.draw_line(rect.x, y, rect.right, y, GRID, stroke)

    for i in range(1, columns + 1):
        x = rect.x + i * grid_size
        ctx.draw_line(x, rect.y, x, rect.bottom, GRID, stroke)
