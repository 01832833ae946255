# services/typing_engine.py
from __future__ import annotations
from typing import Callable, List, Optional
import logging

from app.calculation import Metrics, count_correct, metrics_for
from app.config import DEFAULT_DURATION
from app.errors import check_duration
from app.state import Session, SessionSnapshot, SessionState
from app.timer import Countdown
from app.words import WordStream

log = logging.getLogger(__name__)


class TypingEngine:
    """
    Owns one Session and the countdown that ends it.

    The countdown can be a plain app.timer.Countdown (ticked by hand) or a
    core.chrono.CountdownTimer driven by the Qt event loop; both expose the
    same start/stop/set_duration API. Every countdown run gets an epoch
    number so callbacks from a cancelled run are ignored.
    """

    def __init__(
        self,
        duration: int = DEFAULT_DURATION,
        words: Optional[WordStream] = None,
        timer=None,
    ):
        words = words if words is not None else WordStream()
        self.session = Session(words=words, duration=check_duration(duration))
        self.timer = timer if timer is not None else Countdown(duration)
        self.timer.set_duration(duration)
        self.on_change: Optional[Callable[[SessionSnapshot], None]] = None
        self.on_finished: Optional[Callable[[Metrics], None]] = None
        # cumulative correct words at the end of each elapsed second
        self.progress: List[int] = []
        self._epoch = 0

    # ---------------- read-only views ----------------
    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def duration(self) -> int:
        return self.session.duration

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot()

    def metrics(self) -> Metrics:
        return metrics_for(self.session)

    # ---------------- lifecycle ----------------
    def reset(self):
        self._cancel_timer()
        self.session.reset()
        self.timer.set_duration(self.session.duration)
        self.progress.clear()
        self._changed()

    def set_duration(self, duration: int):
        duration = check_duration(duration)
        self._cancel_timer()
        self.session.reset(duration)
        self.timer.set_duration(duration)
        self.progress.clear()
        log.info("Duration set to %ss", duration)
        self._changed()

    def begin_run(self):
        if self.session.state is not SessionState.IDLE:
            return
        self._cancel_timer()
        self.session.begin_run()
        self.progress.clear()
        epoch = self._epoch
        self.timer.start(
            self.session.duration,
            on_expire=lambda: self._on_expire(epoch),
            on_tick=lambda remaining: self._on_tick(epoch, remaining),
        )
        self._changed()

    def finish(self):
        if self.session.state is not SessionState.RUNNING:
            return
        self._cancel_timer()
        self._finish()

    # ---------------- typing ----------------
    def append_char(self, ch: str):
        if self.session.state is SessionState.IDLE:
            self.begin_run()
        if self.session.state is not SessionState.RUNNING:
            return
        self.session.append_char(ch)
        self._changed()

    def erase_char(self):
        if self.session.state is not SessionState.RUNNING:
            return
        self.session.erase_char()
        self._changed()

    def commit_word(self):
        if self.session.state is not SessionState.RUNNING:
            return
        self.session.commit_word()
        self._changed()

    # ---------------- countdown callbacks ----------------
    def _on_tick(self, epoch: int, remaining: int):
        if epoch != self._epoch:
            return
        self.session.sync_time(remaining)
        if self.session.state is SessionState.RUNNING:
            self.progress.append(
                count_correct(self.session.committed_words, self.session.target_words)
            )
        self._changed()

    def _on_expire(self, epoch: int):
        if epoch != self._epoch:
            log.debug("Ignoring expiry from stale countdown epoch %d", epoch)
            return
        self._epoch += 1
        self._finish()

    def _finish(self):
        self.session.finish()
        result = self.metrics()
        log.info(
            "Result: %d WPM, %d%% accuracy (%d correct / %d typed)",
            result.wpm, result.accuracy, result.correct, result.total_typed,
        )
        self._changed()
        if self.on_finished is not None:
            self.on_finished(result)

    def _cancel_timer(self):
        self.timer.stop()
        self._epoch += 1

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self.session.snapshot())
