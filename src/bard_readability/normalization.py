"""
Rules that strip the structural markup of a play script before it is scored.

Each rule is a named regular-expression substitution. ``normalize_text`` runs
them in order and trims the result. Structural removal must run before the
character-name rule, and both before line breaks are collapsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

LINE_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class NormalizationRule:
    """A named substitution applied to the whole text."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""


STRUCTURAL_REMOVAL = NormalizationRule(
    name="structural-removal",
    pattern=re.compile(
        r"ACT [IVX]+\."  # act headers
        r"|Scene [IVX]+\."  # scene headers
        r"|SCENE\."
        r"|\[.*?\]"  # stage directions
        r"|\b\d+\.",  # line numbers
        re.IGNORECASE,
    ),
)

NAME_STRIPPING = NormalizationRule(
    name="name-stripping",
    pattern=re.compile(r"^  [A-Za-z]+\.", re.MULTILINE),
)

LINE_COLLAPSING = NormalizationRule(
    name="line-collapsing",
    pattern=re.compile(r"[\r\n]+"),
    replacement=LINE_SEPARATOR,
)

DEFAULT_RULES: tuple[NormalizationRule, ...] = (
    STRUCTURAL_REMOVAL,
    NAME_STRIPPING,
    LINE_COLLAPSING,
)


def apply_rule(rule: NormalizationRule, text: str) -> str:
    """Apply a single rule to ``text``."""
    return rule.pattern.sub(rule.replacement, text)


def normalize_text(
    text: str, rules: Sequence[NormalizationRule] = DEFAULT_RULES
) -> str:
    """
    Strip non-essential portions of a play, keeping only the spoken lines.

    A removal can splice its neighbours into a fresh match (``A[x]CT I.``), so
    the ordered rules are re-applied until the text stops changing. Rules must
    never lengthen the text.
    """
    while True:
        normalized = text
        for rule in rules:
            normalized = apply_rule(rule, normalized)
        normalized = normalized.strip()
        if normalized == text:
            return normalized
        text = normalized
