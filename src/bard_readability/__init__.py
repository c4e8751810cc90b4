"""
bard_readability package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .exceptions import CorpusLoadError, InvalidInputError
from .formatting import format_result, ordinal_suffix
from .grade_level import calculate_grade_level, grade_level_for_text
from .loader import load_corpus
from .models import Document, ScoredResult, TextStatistics
from .normalization import normalize_text
from .pipeline import process_corpus, process_document, score_corpus, score_document
from .ranking import rank_results
from .syllables import count_syllables
from .text_stats import analyze_text

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "CorpusLoadError",
    "InvalidInputError",
    "Document",
    "ScoredResult",
    "TextStatistics",
    "normalize_text",
    "count_syllables",
    "analyze_text",
    "calculate_grade_level",
    "grade_level_for_text",
    "format_result",
    "ordinal_suffix",
    "rank_results",
    "load_corpus",
    "score_document",
    "process_document",
    "score_corpus",
    "process_corpus",
]

__version__ = "0.1.0"
