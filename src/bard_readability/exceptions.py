from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when text statistics cannot produce a grade level score."""


class CorpusLoadError(RuntimeError):
    """Raised when a corpus folder cannot be read."""
