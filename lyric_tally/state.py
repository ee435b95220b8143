"""Song records, the aggregate lyric state, and the events that update it.

All records are frozen. Updates build new objects, so any snapshot handed
to a reader stays valid while the next one is computed.
"""

from dataclasses import dataclass, field
from enum import Enum

from lyric_tally.top_words import WordTally


class LyricsState(str, Enum):
    LOADING = "LOADING"
    FOUND_LYRICS = "FOUND_LYRICS"
    FOUND_NONE = "FOUND_NONE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Song:
    """One recording's analysis result.

    word_count, sentiment and lyric_hash are only set for songs with
    analysed (non-instrumental) lyrics.
    """

    title: str
    lyrics_state: LyricsState = LyricsState.LOADING
    instrumental: bool = False
    lyric_hash: int | None = None
    word_count: dict[str, int] | None = None
    sentiment: float | None = None


@dataclass(frozen=True)
class LyricData:
    """Accumulated view of one search session."""

    session: int = 0
    songs: dict[str, Song] = field(default_factory=dict)
    titles_by_lyric_hash: dict[int, str] = field(default_factory=dict)
    aggregate_word_count: dict[str, int] = field(default_factory=dict)
    common: WordTally = ()
    unique: WordTally = ()
    positive: Song | None = None
    negative: Song | None = None


# Events. session=None means "the current session".


@dataclass(frozen=True)
class Reset:
    titles: tuple[str, ...]
    session: int | None = None


@dataclass(frozen=True)
class FoundLyrics:
    title: str
    lyrics: str
    session: int | None = None


@dataclass(frozen=True)
class FoundNone:
    title: str
    session: int | None = None


@dataclass(frozen=True)
class Failed:
    title: str
    session: int | None = None


SongUpdate = Reset | FoundLyrics | FoundNone | Failed


def reset_lyric_data(titles=(), session: int = 0) -> LyricData:
    """Fresh state with every title LOADING. Repeated titles keep the first."""
    songs = {title: Song(title) for title in dict.fromkeys(titles)}
    return LyricData(session=session, songs=songs)
