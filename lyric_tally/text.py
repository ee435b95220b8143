"""Lyric tokenization, word counting, and content hashing."""

import re
from collections import Counter

# Writing credits at the very start of the text: "(Writer: ...)" and similar
CREDITS_RE = re.compile(r"\([^)]*\)(.*)", re.DOTALL)

# A word is any run of characters that are not whitespace, digits, or these marks
WORD_RE = re.compile(r'[^\s\d.,?!+*"()\\/:~#_\[\]]+')


def tokenize(lyrics: str) -> list[str]:
    """Strip leading credits and split lyrics into words. Case is preserved."""
    credits = CREDITS_RE.match(lyrics)
    if credits:
        lyrics = credits.group(1)
    return WORD_RE.findall(lyrics)


def count_words(words: list[str]) -> dict[str, int]:
    """Count words case-insensitively."""
    return dict(Counter(word.lower() for word in words))


def lyric_hash(text: str) -> int:
    """Cheap 32-bit string hash (h * 31 + code unit) over UTF-16 code units.

    Not cryptographic; collisions are treated as duplicates.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (h * 31 + (data[i] | data[i + 1] << 8)) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h
