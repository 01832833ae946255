from typing import List

import pytest
from PySide6.QtCore import QCoreApplication

from app.words import WordStream


class CountingWords:
    """Deterministic provider: w0, w1, w2, ... and a record of every request."""

    def __init__(self) -> None:
        self.calls: List[int] = []
        self._next = 0

    def sample(self, count: int) -> List[str]:
        self.calls.append(count)
        out = [f"w{i}" for i in range(self._next, self._next + count)]
        self._next += count
        return out


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def counting_words() -> CountingWords:
    return CountingWords()


@pytest.fixture
def seeded_words() -> WordStream:
    return WordStream(seed=1234)
