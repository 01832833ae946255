# app/words.py
from __future__ import annotations
import random
from typing import List, Sequence

DEFAULT_WORDS = (
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "I",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
    "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
    "when", "make", "can", "like", "time", "no", "just", "him", "know", "take",
    "people", "into", "year", "your", "good", "some", "could", "them", "see", "other",
    "than", "then", "now", "look", "only", "come", "its", "over", "think", "also",
    "back", "after", "use", "two", "how", "our", "work", "first", "well", "way",
    "even", "new", "want", "because", "any", "these", "give", "day", "most", "us",
)


def generate_word_sequence(
    count: int,
    words: Sequence[str] = DEFAULT_WORDS,
    rng: random.Random | None = None,
) -> List[str]:
    """Draw `count` words with replacement; duplicates are expected."""
    if count < 0:
        raise ValueError("word count must not be negative")
    if not words:
        raise ValueError("cannot sample from an empty word list")
    rng = rng or random
    return rng.choices(words, k=count)


class WordStream:
    """
    Word provider handed to a Session. Every call to sample() returns a fresh
    random batch; pass a seed for repeatable runs.
    """

    def __init__(self, words: Sequence[str] | None = None, seed: int | None = None):
        self.words = tuple(words) if words else DEFAULT_WORDS
        self._rng = random.Random(seed)

    def sample(self, count: int) -> List[str]:
        return generate_word_sequence(count, self.words, self._rng)

    def __len__(self) -> int:
        return len(self.words)
