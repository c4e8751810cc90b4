from __future__ import annotations

from pathlib import Path

HAMLET_OPENING = """ACT I.
SCENE I. Elsinore. A platform before the castle.

[Enter Francisco and Barnardo, two sentinels.]

  BARNARDO. Who's there?

  FRANCISCO. Nay, answer me. Stand and unfold yourself.
"""

HAMLET_NORMALIZED = (
    "Elsinore. A platform before the castle.\n"
    " Who's there?\n"
    " Nay, answer me. Stand and unfold yourself."
)


def write_sample_corpus(
    folder: Path, plays: dict[str, str] | None = None
) -> Path:
    """Create a folder of ``<title>.txt`` plays and return its path."""
    folder.mkdir(parents=True, exist_ok=True)
    if plays is None:
        plays = {
            "hamlet": HAMLET_OPENING,
            "cat": "The cat sat on the mat.",
        }
    for title, text in plays.items():
        (folder / f"{title}.txt").write_text(text, encoding="utf-8")
    return folder
