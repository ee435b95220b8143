import random

import pytest

from lyric_tally.reducer import LyricReducer


class StubScorer:
    """Sentiment scorer returning a fixed comparative score per lyrics text."""

    def __init__(self, scores: dict[str, float] | None = None, default: float = 0.0):
        self.scores = scores or {}
        self.default = default
        self.calls: list[str] = []

    def analyze(self, text: str) -> dict:
        self.calls.append(text)
        return {"comparative": self.scores.get(text, self.default)}


@pytest.fixture
def scorer():
    return StubScorer()


@pytest.fixture
def reducer(scorer):
    return LyricReducer(scorer, rng=random.Random(1234))
