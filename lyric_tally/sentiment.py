"""Lexicon-based sentiment scoring using the VADER lexicon shipped with NLTK."""

import logging
import re

import nltk

logger = logging.getLogger(__name__)

_VADER_RESOURCE = ("sentiment/vader_lexicon.zip", "vader_lexicon")

RE_NON_WORD = re.compile(r"[^\w\s']")


def load_vader_lexicon() -> dict[str, float]:
    """Return the VADER word -> valence mapping, downloading it on first use."""
    path, name = _VADER_RESOURCE
    try:
        nltk.data.find(path)
    except LookupError:
        logger.info("Downloading NLTK resource %s", name)
        nltk.download(name, quiet=True)

    from nltk.sentiment import SentimentIntensityAnalyzer

    return dict(SentimentIntensityAnalyzer().lexicon)


def tokenize_for_sentiment(text: str) -> list[str]:
    """Lowercase, drop punctuation, and split on whitespace."""
    return RE_NON_WORD.sub(" ", text.lower()).split()


class LexiconScorer:
    """Sum word valences and normalise by token count.

    analyze() returns a dict with "score", "comparative", "tokens",
    "positive" and "negative"; the reducer only reads "comparative".
    """

    def __init__(self, lexicon: dict[str, float] | None = None):
        self._lexicon = lexicon

    @property
    def lexicon(self) -> dict[str, float]:
        if self._lexicon is None:
            self._lexicon = load_vader_lexicon()
        return self._lexicon

    def analyze(self, text: str) -> dict:
        tokens = tokenize_for_sentiment(text)
        lexicon = self.lexicon
        score = 0.0
        positive: list[str] = []
        negative: list[str] = []
        for token in tokens:
            valence = lexicon.get(token)
            if not valence:
                continue
            score += valence
            (positive if valence > 0 else negative).append(token)

        return {
            "score": score,
            "comparative": score / len(tokens) if tokens else 0.0,
            "tokens": tokens,
            "positive": positive,
            "negative": negative,
        }
