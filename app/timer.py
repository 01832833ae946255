from __future__ import annotations
from typing import Callable, Optional

from app.errors import check_duration


class Countdown:
    """
    Whole-second countdown. Something else calls tick() once per second
    (core.chrono.CountdownTimer does it with a QTimer, tests call it directly).
    on_expire fires exactly once per start(); after stop() nothing fires.
    """

    def __init__(self, duration: int = 30):
        self.duration = check_duration(duration)
        self.remaining = self.duration
        self._running = False
        self._on_expire: Optional[Callable[[], None]] = None
        self._on_tick: Optional[Callable[[int], None]] = None

    @property
    def running(self) -> bool:
        return self._running

    def start(
        self,
        duration: int,
        on_expire: Callable[[], None],
        on_tick: Optional[Callable[[int], None]] = None,
    ):
        self.stop()
        self.duration = check_duration(duration)
        self.remaining = self.duration
        self._on_expire = on_expire
        self._on_tick = on_tick
        self._running = True

    def stop(self):
        self._running = False
        self._on_expire = None
        self._on_tick = None

    def set_duration(self, duration: int):
        duration = check_duration(duration)
        if self._running:
            return
        self.duration = duration
        self.remaining = duration

    def tick(self):
        if not self._running:
            return
        self.remaining = max(0, self.remaining - 1)
        on_tick, on_expire = self._on_tick, self._on_expire
        if on_tick is not None:
            on_tick(self.remaining)
        # on_tick may have stopped us
        if not self._running or self.remaining > 0:
            return
        self.stop()
        if on_expire is not None:
            on_expire()
