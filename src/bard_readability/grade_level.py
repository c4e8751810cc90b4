from __future__ import annotations

from .exceptions import InvalidInputError
from .models import TextStatistics
from .normalization import normalize_text
from .text_stats import analyze_text

WORDS_PER_SENTENCE_WEIGHT = 0.39
SYLLABLES_PER_WORD_WEIGHT = 11.8
GRADE_OFFSET = 15.59


def calculate_grade_level(stats: TextStatistics) -> float:
    """Apply the Flesch-Kincaid grade level formula to ``stats``.

    Raises ``InvalidInputError`` when there are no words (or no sentences)
    to average over. The score is not clamped and may be negative.
    """
    if stats.word_count <= 0:
        raise InvalidInputError("Cannot compute a grade level for text with no words.")
    if stats.sentence_count <= 0:
        raise InvalidInputError(
            "Cannot compute a grade level for text with no sentences."
        )

    words_per_sentence = stats.word_count / stats.sentence_count
    syllables_per_word = stats.syllable_count / stats.word_count
    return (
        WORDS_PER_SENTENCE_WEIGHT * words_per_sentence
        + SYLLABLES_PER_WORD_WEIGHT * syllables_per_word
        - GRADE_OFFSET
    )


def grade_level_for_text(raw_text: str) -> float:
    """Normalize, analyze and score raw play text in one call."""
    return calculate_grade_level(analyze_text(normalize_text(raw_text)))
