"""Render LyricData as summary text and a per-song table.

Output per run:
    {output}/songs.csv    — title, status, total_words, unique_words, top words, sentiment
    {output}/summary.txt  — the summary lines printed by the replay CLI
"""

from pathlib import Path

import pandas as pd

from lyric_tally.state import LyricData, LyricsState, Song
from lyric_tally.top_words import WordTally

SONG_COLUMNS = [
    "title", "status", "total_words", "unique_words",
    "top_word_1", "top_word_2", "top_word_3", "sentiment",
]

STATUS_TEXT = {
    LyricsState.LOADING: "Searching...",
    LyricsState.FOUND_NONE: "No Lyrics Found",
    LyricsState.FAILED: "No Lyrics Found",
}


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _found_count(state: LyricData) -> int:
    return sum(1 for s in state.songs.values() if s.lyrics_state is LyricsState.FOUND_LYRICS)


def song_totals(state: LyricData) -> str:
    """Sentence describing how many recordings have lyrics."""
    total = len(state.songs)
    if total == 0:
        return ""
    total_str = "1 recording" if total == 1 else f"{total} recordings"

    instrumental = sum(1 for s in state.songs.values() if s.instrumental)
    if instrumental == 1:
        instrumental_str = "1 song is an instrumental."
    elif instrumental > 1:
        instrumental_str = f"{instrumental} songs are instrumentals."
    else:
        instrumental_str = ""

    found = _found_count(state)
    return f"Found lyrics for {found - instrumental} out of {total_str}. {instrumental_str}".rstrip()


def word_statistics(state: LyricData) -> list[str]:
    """Total and unique word counts, with per-song averages."""
    found = _found_count(state)
    if found == 0:
        return ["", ""]

    total_words = sum(state.aggregate_word_count.values())
    unique_words = len(state.aggregate_word_count)
    return [
        f"The total number of words found is {total_words}, "
        f"an average of {total_words / found:.2f} per song.",
        f"There are {unique_words} unique words in the lyrics, "
        f"an average of {unique_words / found:.2f} per song.",
    ]


def word_tally(words: WordTally) -> str:
    """Format (word, count) pairs as 'Word (3), Other (1)'."""
    return ", ".join(f"{_capitalize(word)} ({count})" for word, count in words)


def summary_lines(artist: str, state: LyricData) -> list[str]:
    lines = [artist, song_totals(state), *word_statistics(state)]
    if state.common:
        lines.append(f"Most common words: {word_tally(state.common)}.")
    if state.unique:
        lines.append(f"Least common words: {word_tally(state.unique)}.")
    if state.positive:
        lines.append(f"Most positive song: {state.positive.title} ({state.positive.sentiment:.2f})")
    if state.negative:
        lines.append(f"Most negative song: {state.negative.title} ({state.negative.sentiment:.2f})")
    return [line for line in lines if line]


def _song_row(song: Song) -> dict:
    row = dict.fromkeys(SONG_COLUMNS)
    row["title"] = song.title
    if song.lyrics_state is not LyricsState.FOUND_LYRICS:
        row["status"] = STATUS_TEXT[song.lyrics_state]
        return row
    if song.instrumental:
        row["status"] = "Instrumental Song"
        return row

    row["status"] = "Lyrics Found"
    row["total_words"] = sum(song.word_count.values())
    row["unique_words"] = len(song.word_count)
    top = sorted(song.word_count.items(), key=lambda item: -item[1])[:3]
    for i, (word, _) in enumerate(top, 1):
        row[f"top_word_{i}"] = _capitalize(word)
    row["sentiment"] = round(song.sentiment, 2)
    return row


def _display_rank(song: Song) -> int:
    # found lyrics, then instrumentals, then anything still without lyrics
    if song.lyrics_state is LyricsState.FOUND_LYRICS:
        return 1 if song.instrumental else 0
    return 2


def songs_frame(state: LyricData) -> pd.DataFrame:
    """One row per tracked song, ordered for display."""
    songs = sorted(state.songs.values(), key=_display_rank)
    return pd.DataFrame([_song_row(s) for s in songs], columns=SONG_COLUMNS)


def write_report(artist: str, state: LyricData, out_dir: Path) -> None:
    """Write songs.csv and summary.txt into out_dir."""
    out_dir.mkdir(parents=True, exist_ok=True)

    csv_path = out_dir / "songs.csv"
    songs_frame(state).to_csv(csv_path, index=False, encoding="utf-8")

    txt_path = out_dir / "summary.txt"
    txt_path.write_text("\n".join(summary_lines(artist, state)) + "\n", encoding="utf-8")
