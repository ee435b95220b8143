"""Fold per-song lyric lookups into the aggregate LyricData state.

The reducer is a pure function of (state, event): the caller applies events
one at a time, in whatever order lookups complete, and renders the latest
state after each fold.
"""

import logging
import random
from dataclasses import replace

from lyric_tally.config import DEFAULTS
from lyric_tally.state import (
    Failed,
    FoundLyrics,
    FoundNone,
    LyricData,
    LyricsState,
    Reset,
    Song,
    SongUpdate,
    reset_lyric_data,
)
from lyric_tally.text import count_words, lyric_hash, tokenize
from lyric_tally.top_words import select_top_words

logger = logging.getLogger(__name__)


class LyricReducer:
    """Apply SongUpdate events to LyricData.

    scorer is any object with analyze(text) -> {"comparative": float}.
    rng drives the least-common word sample; pass a seeded Random for
    reproducible output.
    """

    def __init__(
        self,
        scorer,
        rng: random.Random | None = None,
        top_words: int = DEFAULTS["top_words"],
        positive_threshold: float = DEFAULTS["positive_threshold"],
        negative_threshold: float = DEFAULTS["negative_threshold"],
        instrumental_marker: str = DEFAULTS["instrumental_marker"],
    ):
        self.scorer = scorer
        self.rng = rng or random.Random()
        self.top_words = top_words
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold
        self.instrumental_marker = instrumental_marker

    @classmethod
    def from_config(cls, config: dict, scorer, rng: random.Random | None = None) -> "LyricReducer":
        if rng is None:
            rng = random.Random(config.get("seed"))
        return cls(
            scorer,
            rng=rng,
            top_words=config["top_words"],
            positive_threshold=config["positive_threshold"],
            negative_threshold=config["negative_threshold"],
            instrumental_marker=config["instrumental_marker"],
        )

    def __call__(self, state: LyricData, event: SongUpdate) -> LyricData:
        return self.apply(state, event)

    def apply(self, state: LyricData, event: SongUpdate) -> LyricData:
        if isinstance(event, Reset):
            session = state.session + 1 if event.session is None else event.session
            return reset_lyric_data(event.titles, session=session)

        if event.session is not None and event.session != state.session:
            logger.debug("Dropping %s for stale session %s (current %s)",
                         type(event).__name__, event.session, state.session)
            return state
        if event.title not in state.songs:
            logger.debug("Dropping %s for untracked title %r", type(event).__name__, event.title)
            return state

        if isinstance(event, FoundNone):
            return _set_song(state, Song(event.title, LyricsState.FOUND_NONE))
        if isinstance(event, Failed):
            return _set_song(state, Song(event.title, LyricsState.FAILED))
        if isinstance(event, FoundLyrics):
            return self._found_lyrics(state, event.title, event.lyrics)
        raise TypeError(f"Unknown song update: {event!r}")

    def _found_lyrics(self, state: LyricData, title: str, lyrics: str) -> LyricData:
        if lyrics == self.instrumental_marker:
            return _set_song(state, Song(title, LyricsState.FOUND_LYRICS, instrumental=True))

        words = tokenize(lyrics)
        if not words:
            return _set_song(state, Song(title, LyricsState.FOUND_NONE))

        # hash the raw text, credits included
        hash_ = lyric_hash(lyrics)
        old_title = state.titles_by_lyric_hash.get(hash_)
        if old_title is not None:
            return _collapse_duplicate(state, title, old_title, hash_)

        song = Song(
            title,
            LyricsState.FOUND_LYRICS,
            lyric_hash=hash_,
            word_count=count_words(words),
            sentiment=self.scorer.analyze(lyrics)["comparative"],
        )
        return self._add_song(state, song)

    def _add_song(self, state: LyricData, song: Song) -> LyricData:
        aggregate = dict(state.aggregate_word_count)
        for word, count in song.word_count.items():
            aggregate[word] = aggregate.get(word, 0) + count
        common, unique = select_top_words(aggregate, size=self.top_words, rng=self.rng)

        positive, negative = state.positive, state.negative
        if song.sentiment > self.positive_threshold:
            if positive is None or positive.sentiment < song.sentiment:
                positive = song
        elif song.sentiment < self.negative_threshold:
            if negative is None or negative.sentiment > song.sentiment:
                negative = song

        return replace(
            state,
            songs={**state.songs, song.title: song},
            titles_by_lyric_hash={**state.titles_by_lyric_hash, song.lyric_hash: song.title},
            aggregate_word_count=aggregate,
            common=common,
            unique=unique,
            positive=positive,
            negative=negative,
        )


def _set_song(state: LyricData, song: Song) -> LyricData:
    return replace(state, songs={**state.songs, song.title: song})


def _collapse_duplicate(state: LyricData, title: str, old_title: str, hash_: int) -> LyricData:
    """Keep whichever of two same-lyric titles is shorter.

    Aggregates are left alone: the lyrics were already counted once.
    """
    if old_title == title:
        logger.debug("Dropping repeated lyrics for %r", title)
        return state

    songs = dict(state.songs)
    if len(title) >= len(old_title):
        logger.debug("Dropping %r, duplicate lyrics of %r", title, old_title)
        del songs[title]
        return replace(state, songs=songs)

    logger.debug("Renaming %r to %r, duplicate lyrics", old_title, title)
    old_song = songs.pop(old_title)
    renamed = replace(old_song, title=title)
    songs[title] = renamed
    return replace(
        state,
        songs=songs,
        titles_by_lyric_hash={**state.titles_by_lyric_hash, hash_: title},
        positive=renamed if state.positive is old_song else state.positive,
        negative=renamed if state.negative is old_song else state.negative,
    )
