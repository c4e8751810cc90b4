from __future__ import annotations

from typing import Iterable, List


def rank_results(lines: Iterable[str]) -> List[str]:
    """
    Order formatted result lines for display.

    Lines are sorted in descending string order, not by numeric score, so
    "9.80 ..." lands ahead of "10.20 ...". Existing reports depend on this
    ordering.
    """
    return sorted(lines, reverse=True)
