from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

from .exceptions import CorpusLoadError

LOGGER = logging.getLogger(__name__)


def load_corpus(
    folder: str | Path, *, suffix: str = ".txt", encoding: str = "utf-8"
) -> Dict[str, str]:
    """
    Read every ``suffix`` file directly under ``folder`` into a title -> text map.

    Parameters
    ----------
    folder:
        Directory holding one file per play.
    suffix:
        File extension to pick up; matched case-insensitively.
    encoding:
        Text encoding; undecodable bytes are replaced rather than rejected.
    """
    base_dir = Path(folder)
    if not base_dir.is_dir():
        raise CorpusLoadError(f"Corpus folder not found: {base_dir}")

    suffix = suffix.lower()
    files = sorted(
        p for p in base_dir.iterdir() if p.is_file() and p.suffix.lower() == suffix
    )
    corpus: Dict[str, str] = {}
    for path in files:
        try:
            corpus[path.stem] = path.read_text(encoding=encoding, errors="replace")
        except OSError as exc:
            raise CorpusLoadError(f"Unable to read {path}: {exc}") from exc

    LOGGER.info("Loaded %d documents from %s", len(corpus), base_dir)
    return corpus
