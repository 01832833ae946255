# services/input_router.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Protocol

from app.state import SessionState

BACKSPACE = "<BACKSPACE>"


class Intent(str, Enum):
    APPEND = "append"
    ERASE = "erase"
    COMMIT = "commit"


class InputSource(str, Enum):
    FOCUSED = "focused"   # the typing surface itself
    GLOBAL = "global"     # window-level fallback while something else has focus


class SessionTarget(Protocol):
    @property
    def state(self) -> SessionState: ...
    def begin_run(self) -> None: ...
    def append_char(self, ch: str) -> None: ...
    def erase_char(self) -> None: ...
    def commit_word(self) -> None: ...


def classify(key: str) -> Optional[Intent]:
    """Map a normalized key token to what it should do, or None to ignore it."""
    if key == BACKSPACE:
        return Intent.ERASE
    if len(key) != 1:
        return None
    if key.isspace():
        return Intent.COMMIT
    if key.isprintable():
        return Intent.APPEND
    return None


class InputRouter:
    """
    Forwards keystrokes to a session (or a TypingEngine wrapping one).

    Keys arriving through the global channel are dropped while a modifier is
    held, so window/OS shortcuts still work, and while the typing surface has
    focus, because that surface already delivered the same keystroke.
    """

    def __init__(self, target: SessionTarget):
        self.target = target
        self.focused_channel_active = False

    def route(
        self,
        key: str,
        modifiers: bool = False,
        source: InputSource = InputSource.FOCUSED,
    ) -> Optional[Intent]:
        if self.target.state is SessionState.FINISHED:
            return None
        if source is InputSource.GLOBAL and (modifiers or self.focused_channel_active):
            return None

        intent = classify(key)
        if intent is None:
            return None

        if self.target.state is SessionState.IDLE:
            self.target.begin_run()

        if intent is Intent.COMMIT:
            self.target.commit_word()
        elif intent is Intent.ERASE:
            self.target.erase_char()
        else:
            self.target.append_char(key)
        return intent
