"""
Configuration

Tunable constants for the intro and countdown screens. Defaults reproduce
the shipped look; everything can be overridden from a JSON file or a dict.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import json
import logging

logger = logging.getLogger(__name__)


@dataclass
class CordFieldConfig:
    max_cords: int = 15
    lanes: int = 25
    speed: float = 50.0             # Percent of screen height per second
    spawn_roll: int = 100           # Spawn draws an integer in [0, spawn_roll)
    spawn_threshold: int = 6        # ...and succeeds when it is <= this
    spawn_position: float = 100.0
    cull_position: float = -10.0
    trail_length: float = 7.0       # Drawn cord length, percent of height

    def __post_init__(self):
        if self.max_cords < 0:
            raise ValueError(f"max_cords must be >= 0, got {self.max_cords}")
        if self.lanes <= 0:
            raise ValueError(f"lanes must be > 0, got {self.lanes}")
        if self.spawn_roll <= 0:
            raise ValueError(f"spawn_roll must be > 0, got {self.spawn_roll}")
        if not (-1 <= self.spawn_threshold < self.spawn_roll):
            raise ValueError(
                f"spawn_threshold must be in [-1, {self.spawn_roll}), got {self.spawn_threshold}"
            )
        if self.cull_position >= self.spawn_position:
            raise ValueError("cull_position must be below spawn_position")


@dataclass
class RevealConfig:
    dim_alpha: float = 0.2
    bright_alpha: float = 0.85
    dim_duration_ms: float = 400.0
    bright_duration_ms: float = 500.0
    bright_start: float = -20.0     # Negative start acts as a delay


@dataclass
class CountdownConfig:
    start: int = 6
    tick_ms: float = 1000.0
    fade_ms: float = 1000.0
    caption_running: str = "LAUNCHING IN..."
    caption_done: str = "LAUNCH COMPLETED"
    digit_size_sp: float = 195.0

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Countdown start must be >= 0, got {self.start}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be > 0, got {self.tick_ms}")


@dataclass
class IntroConfig:
    title: str = "CORDS"
    subtitle: str = "COMPOSE RELEASE AND DISTRIBUTION SYSTEM"
    launch_label: str = "LAUNCH A NEW VERSION"
    title_delay_ms: float = 700.0
    logo_delay_ms: float = 500.0
    loading_ms: float = 2500.0
    logo_fade_ms: float = 800.0
    progress_step_ms: float = 400.0
    progress_steps: int = 5

    def __post_init__(self):
        for name in ('title_delay_ms', 'logo_delay_ms', 'loading_ms'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.progress_step_ms <= 0:
            raise ValueError(f"progress_step_ms must be > 0, got {self.progress_step_ms}")
        if self.progress_steps <= 0:
            raise ValueError(f"progress_steps must be > 0, got {self.progress_steps}")


@dataclass
class CordsConfig:
    window_size: Tuple[int, int] = (420, 860)
    density: float = 1.0            # Pixels per dp
    grid_dp: float = 15.0
    crossfade_ms: float = 300.0
    seed: Optional[int] = None
    cords: CordFieldConfig = field(default_factory=CordFieldConfig)
    reveal: RevealConfig = field(default_factory=RevealConfig)
    countdown: CountdownConfig = field(default_factory=CountdownConfig)
    intro: IntroConfig = field(default_factory=IntroConfig)

    def __post_init__(self):
        if self.density <= 0:
            raise ValueError(f"density must be > 0, got {self.density}")
        if self.grid_dp <= 0:
            raise ValueError(f"grid_dp must be > 0, got {self.grid_dp}")

    def dp(self, value: float) -> float:
        return value * self.density

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> CordsConfig:
        nested = {
            'cords': CordFieldConfig,
            'reveal': RevealConfig,
            'countdown': CountdownConfig,
            'intro': IntroConfig,
        }
        known = {f.name for f in fields(CordsConfig)}
        kwargs = {}

        for key, value in data.items():
            if key not in known:
                raise ValueError(f"Unknown config key: {key}")
            if key in nested:
                if not isinstance(value, dict):
                    raise ValueError(f"Config section '{key}' must be an object")
                kwargs[key] = _build_section(nested[key], value, key)
            elif key == 'window_size':
                kwargs[key] = tuple(value)
            else:
                kwargs[key] = value

        return CordsConfig(**kwargs)


def _build_section(cls, data: Dict[str, Any], section: str):
    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown keys in '{section}': {', '.join(sorted(unknown))}")
    return cls(**data)


def load_config(path) -> CordsConfig:
    """Load a CordsConfig from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    config = CordsConfig.from_dict(data)
    logger.info(f"Loaded config from {path}")
    return config
