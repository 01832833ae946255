import random

import pytest

from app.words import DEFAULT_WORDS, WordStream, generate_word_sequence


def test_sample_returns_exact_count():
    stream = WordStream(seed=1)
    assert len(stream.sample(180)) == 180
    assert stream.sample(0) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        WordStream().sample(-1)


def test_words_come_from_corpus():
    stream = WordStream(["alpha", "beta"], seed=3)
    assert set(stream.sample(50)) <= {"alpha", "beta"}


def test_seed_makes_stream_repeatable():
    assert WordStream(seed=9).sample(20) == WordStream(seed=9).sample(20)


def test_default_corpus_has_no_whitespace():
    assert len(DEFAULT_WORDS) == 100
    assert all(w and not any(ch.isspace() for ch in w) for w in DEFAULT_WORDS)


def test_generate_word_sequence_with_rng():
    words = generate_word_sequence(5, ("x",), random.Random(0))
    assert words == ["x"] * 5


def test_empty_corpus_rejected():
    with pytest.raises(ValueError):
        generate_word_sequence(3, ())
