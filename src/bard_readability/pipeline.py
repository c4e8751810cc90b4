from __future__ import annotations

import logging
from typing import List, Mapping

from .config import ReadabilityConfig
from .exceptions import InvalidInputError
from .formatting import format_result
from .grade_level import calculate_grade_level
from .models import Document, ScoredResult
from .normalization import normalize_text
from .ranking import rank_results
from .text_stats import analyze_text

LOGGER = logging.getLogger(__name__)


def score_document(document: Document) -> ScoredResult:
    """Compute the Flesch-Kincaid grade level for a single document."""
    stats = analyze_text(normalize_text(document.raw_text))
    score = calculate_grade_level(stats)
    LOGGER.debug(
        "Scored %s: words=%d sentences=%d syllables=%d score=%.2f",
        document.title,
        stats.word_count,
        stats.sentence_count,
        stats.syllable_count,
        score,
    )
    return ScoredResult(title=document.title, score=score)


def process_document(document: Document) -> str:
    """Score a document and return its formatted result line."""
    result = score_document(document)
    return format_result(result.title, result.score)


def score_corpus(
    corpus: Mapping[str, str], *, skip_invalid: bool = True
) -> List[ScoredResult]:
    """
    Score every title -> text entry sequentially, in the mapping's order.

    Documents that cannot be scored are logged and skipped when
    ``skip_invalid`` is set; otherwise the ``InvalidInputError`` propagates and
    the batch stops.
    """
    results: List[ScoredResult] = []
    for title, raw_text in corpus.items():
        try:
            results.append(score_document(Document(title=title, raw_text=raw_text)))
        except InvalidInputError as exc:
            if not skip_invalid:
                raise
            LOGGER.warning("Skipping %s: %s", title, exc)
    return results


def process_corpus(
    corpus: Mapping[str, str], config: ReadabilityConfig | None = None
) -> List[str]:
    """Score, format and rank every document in ``corpus``."""
    cfg = config or ReadabilityConfig()
    results = score_corpus(corpus, skip_invalid=cfg.skip_invalid)
    return rank_results(format_result(r.title, r.score) for r in results)
