"""Shared configuration loader for lyric tally scripts."""

import sys
from pathlib import Path

import yaml

# repository root, one level up from lyric_tally/
ROOT = Path(__file__).resolve().parent.parent

DEFAULTS = {
    "top_words": 10,
    "positive_threshold": 0.1,
    "negative_threshold": -0.1,
    "instrumental_marker": "Instrumental",
    "workers": 4,
    "seed": None,
}


def load_config(config_path: Path | None = None) -> dict:
    """Load config.yaml and return it merged over DEFAULTS.

    Without an explicit path the root config.yaml is used if present.
    An explicit path that does not exist is a fatal error.
    """
    if config_path is None:
        config_path = ROOT / "config.yaml"
        if not config_path.exists():
            return dict(DEFAULTS)
    elif not config_path.exists():
        print(f"Error: {config_path} not found", file=sys.stderr)
        sys.exit(1)

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = dict(DEFAULTS)
    config.update({k: v for k, v in data.items() if k in DEFAULTS})
    return config
