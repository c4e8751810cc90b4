from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """A play (or any text) supplied by the caller, keyed by its title."""

    title: str
    raw_text: str


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Word, sentence and syllable counts for a normalized text."""

    word_count: int
    sentence_count: int
    syllable_count: int


@dataclass(frozen=True, slots=True)
class ScoredResult:
    """Flesch-Kincaid grade level computed for one document."""

    title: str
    score: float
