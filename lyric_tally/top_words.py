"""Pick the most common words and a sample of the least common ones."""

import random

WordTally = tuple[tuple[str, int], ...]


def select_top_words(
    word_count: dict[str, int],
    size: int = 10,
    rng: random.Random | None = None,
) -> tuple[WordTally, WordTally]:
    """Return (common, unique) word lists from an aggregate word count.

    Each list holds up to `size` (word, count) pairs. With fewer than
    2 * size distinct words the budget is split roughly in half instead.
    The unique list is a random sample of words used exactly once; if there
    are not enough of those it falls back to the lowest counts.
    """
    rng = rng or random.Random()
    # sorted() is stable, so ties keep their insertion order
    ranked = sorted(word_count.items(), key=lambda item: -item[1])

    common_len = unique_len = size
    if len(ranked) < 2 * size:
        unique_len = len(ranked) // 2
        common_len = len(ranked) - unique_len

    once = [item for item in ranked if item[1] == 1]
    if len(once) < unique_len:
        unique = ranked[len(ranked) - unique_len:]
    else:
        rng.shuffle(once)
        unique = once[:unique_len]

    return tuple(ranked[:common_len]), tuple(unique)
