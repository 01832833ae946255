from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence
import math

from app.state import Session, SessionSnapshot, SessionState


@dataclass(frozen=True)
class Metrics:
    wpm: int = 0
    accuracy: int = 0
    correct: int = 0
    incorrect: int = 0
    total_typed: int = 0


def _round_half_up(x: float) -> int:
    # round() in Python rounds halves to even; scores round 12.5 up to 13
    return int(math.floor(x + 0.5))


def compute_metrics(
    committed_words: Sequence[str],
    target_words: Sequence[str],
    current_buffer: str,
    word_index: int,
    state: SessionState,
    duration: int,
) -> Metrics:
    """
    Score a session from its committed history.

    The partially typed word only counts once the session has finished, and
    only when something was typed for it. A committed word is correct when it
    equals the target word at the same index, case included.
    """
    partial = state is SessionState.FINISHED and bool(current_buffer)

    total_typed = len(committed_words) + (1 if partial else 0)
    correct = sum(
        1
        for i, typed in enumerate(committed_words)
        if i < len(target_words) and typed == target_words[i]
    )
    if partial and word_index < len(target_words) and current_buffer == target_words[word_index]:
        correct += 1

    wpm = _round_half_up(correct * 60.0 / duration) if duration > 0 else 0
    accuracy = _round_half_up(100.0 * correct / total_typed) if total_typed > 0 else 0
    return Metrics(
        wpm=wpm,
        accuracy=accuracy,
        correct=correct,
        incorrect=total_typed - correct,
        total_typed=total_typed,
    )


def metrics_for(session: Session | SessionSnapshot) -> Metrics:
    return compute_metrics(
        session.committed_words,
        session.target_words,
        session.current_buffer,
        session.word_index,
        session.state,
        session.duration,
    )


def count_correct(committed_words: Sequence[str], target_words: Sequence[str]) -> int:
    return sum(1 for typed, target in zip(committed_words, target_words) if typed == target)


def rolling_wpm(correct_counts: Sequence[int], window: int = 5) -> List[float]:
    """
    WPM over a sliding window of whole seconds.
    `correct_counts[i]` is the cumulative number of correct words after
    second i + 1. Early samples use the shorter window available.
    """
    out: List[float] = []
    for i, total in enumerate(correct_counts):
        start = i - window
        before = correct_counts[start] if start >= 0 else 0
        span = min(window, i + 1)
        out.append((total - before) * 60.0 / span)
    return out


def smooth(values: Sequence[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
