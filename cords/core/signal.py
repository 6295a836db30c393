# cords/core/signal.py
"""
Signals - named notifications between the host, the scenes and the
animations.

Flow:
- the host emits SIGNAL_LAUNCH on click / Space / Enter
- SceneComposer switches scenes and emits SIGNAL_SCENE_CHANGED
- IntroScene reports SIGNAL_INTRO_STAGE as its staged reveals run
- Countdown reports SIGNAL_COUNTDOWN_TICK and SIGNAL_COUNTDOWN_COMPLETED

Handlers run synchronously, in connection order, on the frame thread.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

SIGNAL_LAUNCH = 'launch'                            # ()
SIGNAL_SCENE_CHANGED = 'scene_changed'              # (old_scene_id, new_scene_id)
SIGNAL_INTRO_STAGE = 'intro_stage'                  # (stage_name,)
SIGNAL_COUNTDOWN_TICK = 'countdown_tick'            # (value,)
SIGNAL_COUNTDOWN_COMPLETED = 'countdown_completed'  # ()


class Connection:
    """One handler attached to one signal. disconnect() is idempotent."""

    def __init__(self, bridge: SignalBridge, signal: str, handler: Callable):
        self.signal = signal
        self.handler = handler
        self._bridge: Optional[SignalBridge] = bridge

    @property
    def connected(self) -> bool:
        return self._bridge is not None

    def disconnect(self):
        if self._bridge is not None:
            self._bridge._detach(self)
            self._bridge = None

    def __repr__(self) -> str:
        state = "connected" if self.connected else "disconnected"
        return f"Connection({self.signal!r}, {state})"


class SignalBridge:
    """
    Routes signals by name.

    A handler that raises is logged and the remaining handlers still run.
    Disconnecting inside a handler takes effect at once: a handler removed
    during an emit is not called for the rest of that emit.
    """

    def __init__(self):
        self._handlers: Dict[str, List[Connection]] = {}

    def connect(self, signal: str, handler: Callable) -> Connection:
        conn = Connection(self, signal, handler)
        self._handlers.setdefault(signal, []).append(conn)
        return conn

    def emit(self, signal: str, *args):
        for conn in tuple(self._handlers.get(signal, ())):
            if not conn.connected:
                continue
            try:
                conn.handler(*args)
            except Exception:
                logger.exception(f"Signal handler error [{signal}]")

    def _detach(self, conn: Connection):
        handlers = self._handlers.get(conn.signal)
        if handlers and conn in handlers:
            handlers.remove(conn)


class SignalEmitter:
    """Mixin for objects that announce signals; silent until bound."""

    _bridge: Optional[SignalBridge] = None

    def bind_bridge(self, bridge: Optional[SignalBridge]):
        self._bridge = bridge

    def emit(self, signal: str, *args):
        if self._bridge is not None:
            self._bridge.emit(signal, *args)


class SignalReceiver:
    """Mixin for objects that listen; unsubscribe_all() detaches everything."""

    _subscriptions: List[Connection] = None

    def subscribe(self, bridge: SignalBridge, signal: str, handler: Callable) -> Connection:
        if self._subscriptions is None:
            self._subscriptions = []
        conn = bridge.connect(signal, handler)
        self._subscriptions.append(conn)
        return conn

    def unsubscribe_all(self):
        for conn in self._subscriptions or ():
            conn.disconnect()
        self._subscriptions = []
