from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_SPECIAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}
_CENTS = Decimal("0.01")


def ordinal_suffix(number: int) -> str:
    """Return the English ordinal suffix for ``number`` (sign is ignored)."""
    magnitude = abs(number)
    if magnitude % 100 in (11, 12, 13):
        return "th"
    return _SPECIAL_SUFFIXES.get(magnitude % 10, "th")


def ordinal(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"


def displayed_score(score: float) -> Decimal:
    """Round the shortest decimal form of ``score`` half-up to two places (0.125 -> 0.13)."""
    return Decimal(repr(score)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def grade_of(score: float) -> int:
    """Integer part of the score as displayed with two decimals (9.80 -> 9)."""
    return math.trunc(displayed_score(score))


def format_result(title: str, score: float) -> str:
    """Render a score as ``"<score> (<ordinal> grade) is the score for <title>"``."""
    return (
        f"{displayed_score(score)} ({ordinal(grade_of(score))} grade) "
        f"is the score for {title}"
    )
