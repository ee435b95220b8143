#!/usr/bin/env python3
"""Replay a lyrics dataset through concurrent lookups and tally the results.

Reads a JSON list of song records (title, artist, lyrics, optional error),
looks each title up on a worker pool, and folds every result into the
aggregate state as it completes.

Usage:
    python -m lyric_tally songs.json                     # print summary
    python -m lyric_tally songs.json --output report/    # also write songs.csv + summary.txt
    python -m lyric_tally songs.json --seed 7 --workers 8
"""

import argparse
import json
import logging
import random
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from lyric_tally.config import load_config
from lyric_tally.reducer import LyricReducer
from lyric_tally.report import summary_lines, write_report
from lyric_tally.sentiment import LexiconScorer
from lyric_tally.state import Failed, FoundLyrics, FoundNone, LyricData, Reset, SongUpdate

logger = logging.getLogger(__name__)


def load_dataset(dataset_path: Path) -> list[dict]:
    """Load the song records. Exits if the file is missing."""
    if not dataset_path.exists():
        print(f"Error: {dataset_path} not found", file=sys.stderr)
        sys.exit(1)
    with open(dataset_path, "r", encoding="utf-8") as f:
        return json.load(f)


def titles_from_records(records: list[dict]) -> list[str]:
    """Distinct titles in file order."""
    titles = (r.get("title") for r in records if isinstance(r, dict))
    return list(dict.fromkeys(t for t in titles if isinstance(t, str) and t))


def lookup(record: dict, session: int) -> SongUpdate:
    """Translate one song record into the event its lookup produced."""
    title = record["title"]
    if record.get("error"):
        return Failed(title, session)
    lyrics = record.get("lyrics")
    if lyrics is None or lyrics == "":
        return FoundNone(title, session)
    if not isinstance(lyrics, str):
        return Failed(title, session)
    return FoundLyrics(title, lyrics, session)


def run_replay(
    records: list[dict],
    reducer: LyricReducer,
    workers: int = 4,
    state: LyricData | None = None,
) -> LyricData:
    """Reset to the records' titles, then fold lookups as they complete."""
    state = reducer(state or LyricData(), Reset(tuple(titles_from_records(records))))
    session = state.session

    by_title: dict[str, dict] = {}
    for record in records:
        if isinstance(record, dict) and record.get("title") in state.songs:
            by_title.setdefault(record["title"], record)

    if not by_title:
        return state

    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(by_title)))) as pool:
        futures = {pool.submit(lookup, record, session): title for title, record in by_title.items()}
        # folding happens here only, one result at a time
        for done, future in enumerate(as_completed(futures), 1):
            title = futures[future]
            try:
                event = future.result()
            except Exception as e:
                logger.warning("Lookup for %r failed: %s", title, e)
                event = Failed(title, session)
            state = reducer(state, event)
            print(f"  [{done}/{len(futures)}] {title}: {type(event).__name__}")

    return state


def main():
    parser = argparse.ArgumentParser(description="Tally word frequency and sentiment across an artist's lyrics.")
    parser.add_argument("dataset", help="JSON list of song records (title, artist, lyrics)")
    parser.add_argument("--config", help="Path to config YAML (default: config.yaml)")
    parser.add_argument("--artist", help="Artist name for the summary (default: from dataset)")
    parser.add_argument("--workers", type=int, help="Number of parallel lookups (default: from config)")
    parser.add_argument("--seed", type=int, help="Seed for the least-common word sample")
    parser.add_argument("--output", help="Directory for songs.csv and summary.txt")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(Path(args.config) if args.config else None)
    if args.seed is not None:
        config["seed"] = args.seed
    workers = args.workers or config["workers"]

    records = load_dataset(Path(args.dataset))
    artist = args.artist
    if not artist:
        artist = next((r.get("artist") for r in records if isinstance(r, dict) and r.get("artist")), "Unknown")

    reducer = LyricReducer.from_config(config, LexiconScorer(), rng=random.Random(config["seed"]))

    print(f"Tallying {artist}: {len(records)} records, {workers} worker(s)\n")
    start = time.time()
    state = run_replay(records, reducer, workers=workers)
    elapsed = time.time() - start

    print(f"\n{'='*60}")
    for line in summary_lines(artist, state):
        print(line)
    print(f"{'='*60}")
    print(f"Done in {elapsed:.1f}s.")

    if args.output:
        out_dir = Path(args.output)
        write_report(artist, state, out_dir)
        print(f"  -> {out_dir / 'songs.csv'}")
        print(f"  -> {out_dir / 'summary.txt'}")


if __name__ == "__main__":
    main()
