"""
Ranking Transformer

Orders normalized names for position-weighted scoring.
"""

from typing import Iterable


def rank_names(names: Iterable[str]) -> list[str]:
    """
    Sort normalized names ascending by character code.

    Returns a new list; duplicates are kept and the empty string sorts first.

    Examples:
        >>> rank_names(["COLIN", "AMY", "BOB"])
        ['AMY', 'BOB', 'COLIN']
        >>> rank_names(["A", ""])
        ['', 'A']
    """
    return sorted(names)
