"""Incremental word-frequency and sentiment tally over an artist's lyrics."""

from lyric_tally.reducer import LyricReducer
from lyric_tally.state import (
    Failed,
    FoundLyrics,
    FoundNone,
    LyricData,
    LyricsState,
    Reset,
    Song,
    reset_lyric_data,
)
from lyric_tally.text import count_words, lyric_hash, tokenize
from lyric_tally.top_words import select_top_words

__all__ = [
    "Failed",
    "FoundLyrics",
    "FoundNone",
    "LyricData",
    "LyricReducer",
    "LyricsState",
    "Reset",
    "Song",
    "count_words",
    "lyric_hash",
    "reset_lyric_data",
    "select_top_words",
    "tokenize",
]
