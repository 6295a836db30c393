"""
CORDS - moderngl-window host

Drives the scene composer from the window's render callback:
- render time -> FrameClock -> FrameState
- SceneComposer.update(frame) then draw() into a DrawContext
- CordsRenderer turns the DrawBatch into GL draws

Input: clicking the launch control (or Space/Enter once it is shown)
emits the launch signal.
"""

from __future__ import annotations
import argparse
import logging

import moderngl_window as mglw

from cords.config import CordsConfig, load_config
from cords.core.frame import FrameClock
from cords.core.signal import SignalBridge, SIGNAL_LAUNCH
from cords.logging_config import setup_logging
from cords.scenes.composer import SceneComposer
from cords.ui.draw import DrawContext
from cords.ui.layout import Rect
from cords.ui.renderer import CordsRenderer
from cords.ui.style import BACKGROUND

logger = logging.getLogger(__name__)


class CordsApp(mglw.WindowConfig):
    """Main application window."""

    gl_version = (3, 3)
    title = "CORDS"
    window_size = CordsConfig().window_size
    aspect_ratio = None
    resizable = True
    vsync = True
    resource_dir = "."

    @classmethod
    def add_arguments(cls, parser):
        parser.add_argument("--seed", type=int, default=None, help="Seed for the cord field")
        parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
        parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
        parser.add_argument("--log-file", type=str, default=None, help="Also write logs to this file")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        args = self.argv
        setup_logging(args.log_level, args.log_file)

        self.config = config_from_args(args.config, args.seed)

        # Enable blending
        self.ctx.enable(self.ctx.BLEND)
        self.ctx.blend_func = self.ctx.SRC_ALPHA, self.ctx.ONE_MINUS_SRC_ALPHA

        # Core systems
        self.bridge = SignalBridge()
        self.composer = SceneComposer(self.config, self.bridge)
        self.clock = FrameClock()
        self.renderer = CordsRenderer(self.ctx)

        w, h = self.wnd.size
        self.draw_ctx = DrawContext(w, h)

        logger.info(f"Window {w}x{h}, seed={self.config.seed}")

    def on_render(self, time: float, frame_time: float):
        """Main render loop."""
        frame = self.clock.tick(time)
        self.composer.update(frame)

        w, h = self.wnd.size
        self.draw_ctx.set_size(w, h)
        self.draw_ctx.clear()
        self.composer.draw(self.draw_ctx, Rect(0, 0, w, h))
        batch = self.draw_ctx.finalize()

        self.ctx.screen.use()
        self.ctx.clear(*BACKGROUND)
        self.renderer.render(batch, w, h)

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def on_mouse_press_event(self, x: int, y: int, button: int):
        if button == 1 and self.composer.launch_hit(x, y):
            self.bridge.emit(SIGNAL_LAUNCH)

    def on_key_event(self, key, action, modifiers):
        keys = self.wnd.keys
        if action != keys.ACTION_PRESS:
            return
        if key in (keys.SPACE, keys.ENTER) and self.composer.launch_available:
            self.bridge.emit(SIGNAL_LAUNCH)

    def on_close(self):
        self.composer.shutdown()
        self.renderer.release()
        logger.info("Window closed")


def config_from_args(config_path=None, seed=None) -> CordsConfig:
    config = load_config(config_path) if config_path else CordsConfig()
    if seed is not None:
        config.seed = seed
    return config


def initial_window_size(args=None):
    """Window size from --config, read before the window is created."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--config", type=str, default=None)
    known, _ = parser.parse_known_args(args)
    return tuple(config_from_args(known.config).window_size)


def main(args=None):
    CordsApp.window_size = initial_window_size(args)
    mglw.run_window_config(CordsApp, args=args)


if __name__ == "__main__":
    main()
