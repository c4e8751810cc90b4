from __future__ import annotations

import re
import string
from typing import Iterator

from .models import TextStatistics
from .syllables import count_syllables

SENTENCE_END_RE = re.compile(r"[.!?]+")
STRIP_CHARS = string.punctuation + "‘’“”–—…"


def iter_words(text: str) -> Iterator[str]:
    """Yield whitespace-separated tokens, trimmed of punctuation, that contain a letter."""
    for raw in text.split():
        token = raw.strip(STRIP_CHARS)
        if any(ch.isalpha() for ch in token):
            yield token


def count_sentences(text: str) -> int:
    """Count runs of terminal punctuation; ``"?!"`` is a single boundary."""
    return len(SENTENCE_END_RE.findall(text))


def analyze_text(normalized_text: str) -> TextStatistics:
    """
    Count words, sentences and syllables in already normalized text.

    Text without any terminal punctuation is reported as a single sentence so
    the grade level formula never divides by zero sentences. Callers should
    treat ``sentence_count == 1`` as a floor, not an exact count.
    """
    word_count = 0
    syllable_count = 0
    for word in iter_words(normalized_text):
        word_count += 1
        syllable_count += count_syllables(word)

    sentence_count = max(count_sentences(normalized_text), 1)
    return TextStatistics(
        word_count=word_count,
        sentence_count=sentence_count,
        syllable_count=syllable_count,
    )
