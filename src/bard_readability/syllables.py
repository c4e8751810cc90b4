from __future__ import annotations

import re
from functools import lru_cache

VOWEL_RUN_RE = re.compile(r"[aeiouy]+")
VOWELS = frozenset("aeiouy")


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a single word.

    Every run of consecutive vowels (``y`` included) counts as one syllable.
    A trailing silent ``e`` is dropped unless it closes a consonant + ``le``
    ending (``table``). Any word containing a letter counts at least one
    syllable; words without letters count zero.
    """
    return _count_lowercase(word.lower())


@lru_cache(maxsize=8192)
def _count_lowercase(word: str) -> int:
    letters = "".join(ch for ch in word if ch.isalpha())
    if not letters:
        return 0

    count = len(VOWEL_RUN_RE.findall(letters))
    if count > 1 and _has_silent_e(letters):
        count -= 1
    return max(count, 1)


def _has_silent_e(letters: str) -> bool:
    if len(letters) < 2 or not letters.endswith("e"):
        return False
    if letters[-2] in VOWELS:
        # "ee", "ie", ... already belong to the preceding vowel run.
        return False
    if letters.endswith("le") and len(letters) > 2 and letters[-3] not in VOWELS:
        return False
    return True
