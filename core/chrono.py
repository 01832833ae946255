# core/chrono.py
from __future__ import annotations
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from app.config import TICK_MS
from app.timer import Countdown


class CountdownTimer(QObject):
    remainingChanged = Signal(int)
    expired = Signal()

    def __init__(self, duration: int = 30, tick_ms: int = TICK_MS, parent=None):
        super().__init__(parent)
        self._countdown = Countdown(duration)

        self._tick = QTimer(self)
        self._tick.setInterval(tick_ms)
        self._tick.timeout.connect(self._on_tick)

    @property
    def running(self) -> bool:
        return self._countdown.running

    @property
    def remaining(self) -> int:
        return self._countdown.remaining

    @property
    def duration(self) -> int:
        return self._countdown.duration

    def start(
        self,
        duration: int,
        on_expire: Callable[[], None],
        on_tick: Optional[Callable[[int], None]] = None,
    ):
        self.stop()

        def _tick(remaining: int):
            if on_tick is not None:
                on_tick(remaining)
            self.remainingChanged.emit(remaining)

        def _expire():
            self._tick.stop()
            on_expire()
            self.expired.emit()

        self._countdown.start(duration, _expire, _tick)
        self.remainingChanged.emit(self._countdown.remaining)
        self._tick.start()

    def stop(self):
        self._tick.stop()
        self._countdown.stop()

    def set_duration(self, duration: int):
        self._countdown.set_duration(duration)
        if not self._countdown.running:
            self.remainingChanged.emit(self._countdown.remaining)

    def tick(self):
        self._on_tick()

    def _on_tick(self):
        # a timeout already queued before stop() lands here with nothing to do
        if not self._countdown.running:
            self._tick.stop()
            return
        self._countdown.tick()
