from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple
import logging

from app.config import (
    DEFAULT_DURATION,
    GROWTH_BATCH,
    INITIAL_POOL,
    LOOKAHEAD_MARGIN,
    MIN_START_POOL,
)
from app.errors import check_duration
from app.words import WordStream

log = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    duration: int
    target_words: Tuple[str, ...]
    word_index: int
    committed_words: Tuple[str, ...]
    current_buffer: str
    time_left: int

    @property
    def current_word(self) -> str:
        if self.word_index < len(self.target_words):
            return self.target_words[self.word_index]
        return ""


@dataclass
class Session:
    """
    One timed trial. Every operation is defined for every state; calls that
    do not apply to the current state are no-ops.
    """

    words: WordStream = field(default_factory=WordStream)
    duration: int = DEFAULT_DURATION
    state: SessionState = SessionState.IDLE
    target_words: List[str] = field(default_factory=list)
    word_index: int = 0
    committed_words: List[str] = field(default_factory=list)
    current_buffer: str = ""
    time_left: int = -1

    def __post_init__(self):
        check_duration(self.duration)
        if not self.target_words:
            self.target_words = self.words.sample(INITIAL_POOL)
        if self.time_left < 0:
            self.time_left = self.duration

    @property
    def is_running(self) -> bool:
        return self.state is SessionState.RUNNING

    @property
    def is_finished(self) -> bool:
        return self.state is SessionState.FINISHED

    def reset(self, duration: int | None = None):
        if duration is not None:
            self.duration = check_duration(duration)
        self.state = SessionState.IDLE
        self.target_words = self.words.sample(INITIAL_POOL)
        self._clear_progress()
        self.time_left = self.duration
        log.info("Session reset (%ss, %d words)", self.duration, len(self.target_words))

    def begin_run(self):
        if self.state is not SessionState.IDLE:
            return
        self.state = SessionState.RUNNING
        self._clear_progress()
        self.time_left = self.duration
        if len(self.target_words) < MIN_START_POOL:
            self.target_words = self.words.sample(INITIAL_POOL)
        log.info("Session started (%ss)", self.duration)

    def append_char(self, ch: str):
        if self.state is SessionState.IDLE:
            self.begin_run()
        if self.state is not SessionState.RUNNING or not ch:
            return
        self.current_buffer += ch

    def erase_char(self):
        if self.state is not SessionState.RUNNING or not self.current_buffer:
            return
        self.current_buffer = self.current_buffer[:-1]

    def commit_word(self):
        if self.state is not SessionState.RUNNING:
            return
        self.committed_words.append(self.current_buffer)
        self.word_index += 1
        self.current_buffer = ""
        while self.word_index + LOOKAHEAD_MARGIN > len(self.target_words):
            self.target_words.extend(self.words.sample(GROWTH_BATCH))
            log.debug("Word pool grown to %d", len(self.target_words))

    def finish(self):
        if self.state is not SessionState.RUNNING:
            return
        self.state = SessionState.FINISHED
        log.info(
            "Session finished: %d words committed, buffer=%r",
            self.word_index,
            self.current_buffer,
        )

    def sync_time(self, remaining: int):
        if self.state is not SessionState.RUNNING:
            return
        self.time_left = max(0, min(int(remaining), self.duration))

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self.state,
            duration=self.duration,
            target_words=tuple(self.target_words),
            word_index=self.word_index,
            committed_words=tuple(self.committed_words),
            current_buffer=self.current_buffer,
            time_left=self.time_left,
        )

    def _clear_progress(self):
        self.word_index = 0
        self.committed_words.clear()
        self.current_buffer = ""
