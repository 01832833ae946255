from __future__ import annotations
from pathlib import Path
from typing import Tuple
import logging

from app.config import WORDS_FILE
from app.errors import WordListError
from app.words import DEFAULT_WORDS

log = logging.getLogger(__name__)


def load_word_list(path: str | Path) -> Tuple[str, ...]:
    """Read a corpus file; words may be separated by any whitespace."""
    p = Path(path)
    if not p.exists():
        raise WordListError(f"Word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Cannot read word list {p}: {e}") from e
    words = tuple(text.split())
    if not words:
        raise WordListError(f"Word list is empty: {p}")
    return words


def load_default_words(path: str | Path = WORDS_FILE) -> Tuple[str, ...]:
    if not Path(path).exists():
        return DEFAULT_WORDS
    try:
        words = load_word_list(path)
    except WordListError as e:
        log.warning("Falling back to built-in words: %s", e)
        return DEFAULT_WORDS
    log.info("Loaded %d words from %s", len(words), path)
    return words
