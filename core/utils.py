"""Utility functions for N5 Master."""

import random
from urllib.parse import quote

from .config import DICTIONARY_URL, SEARCH_URL


def shuffle(sequence, rng: random.Random = None) -> list:
    """Return a uniformly shuffled copy of sequence. The input is left untouched."""
    if rng is None:
        rng = random.Random()
    items = list(sequence)
    rng.shuffle(items)
    return items


def lookup_url(char: str, category: str) -> str:
    """Build a dictionary lookup URL for a character or word."""
    query = f"{char}#kanji" if category == 'kanji' else char
    return DICTIONARY_URL + quote(query, safe='')


def search_url(char: str) -> str:
    """Build a web search URL asking for the meaning of a character."""
    return SEARCH_URL + quote(f"{char} meaning japanese", safe='')
