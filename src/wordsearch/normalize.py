"""Word normalization and candidate selection."""

import re
from typing import Iterable, List

from .models import ACCENTED_LETTERS, MAX_WORDS, MIN_WORD_LENGTH


_STRIP_RE = re.compile(f"[^A-Z{ACCENTED_LETTERS}{ACCENTED_LETTERS.lower()}]")


def normalize_word(raw: str) -> str:
    """
    Uppercase a word and strip everything that is not a Latin or accented letter.

    Spaces, hyphens, apostrophes and digits are removed, so "ti-bwa" becomes "TIBWA".
    """
    return _STRIP_RE.sub('', raw.upper()).upper()


def select_candidates(
    words: Iterable[str],
    grid_size: int,
    max_words: int = MAX_WORDS,
    min_length: int = MIN_WORD_LENGTH,
) -> List[str]:
    """
    Normalize and filter raw words into the list the generator will try to place.

    Words shorter than min_length or longer than the grid are discarded, as are
    repeats of a word already kept. Caller order is preserved and the result is
    truncated to max_words.

    Args:
        words: Raw words, in the order they should be attempted
        grid_size: Side length of the grid
        max_words: Maximum number of candidates to keep
        min_length: Minimum normalized word length

    Returns:
        The surviving normalized words
    """
    candidates: List[str] = []
    seen = set()

    for raw in words:
        if len(candidates) >= max_words:
            break
        word = normalize_word(raw)
        if not min_length <= len(word) <= grid_size:
            continue
        # Repeats are skipped before truncation so every kept word can be found
        if word in seen:
            continue
        seen.add(word)
        candidates.append(word)

    return candidates
