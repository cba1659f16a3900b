"""
Name Score Transformer

Calculates the position-weighted alphabetical score of a ranked name list.
"""

from typing import Sequence

from schemas.name_score import PositionedName

ALPHABET_OFFSET = ord("A") - 1


def letter_sum(name: str) -> int:
    """
    Sum the alphabetical values of a normalized name (A=1 ... Z=26).

    Examples:
        >>> letter_sum("COLIN")
        53
        >>> letter_sum("")
        0
    """
    return sum(ord(char) - ALPHABET_OFFSET for char in name)


def position_names(ranked: Sequence[str]) -> list[PositionedName]:
    """
    Pair each ranked name with its 1-based position and letter sum.

    Args:
        ranked: Names already sorted by rank_names()

    Returns:
        One PositionedName per input name, in the same order
    """
    return [
        PositionedName(name=name, position=position, letter_sum=letter_sum(name))
        for position, name in enumerate(ranked, start=1)
    ]


def calculate_total_score(ranked: Sequence[str]) -> int:
    """
    Calculate the total name score.

    Scoring breakdown:
        - Each name is worth its letter sum
        - That value is multiplied by the name's 1-based position
        - The products are summed

    Args:
        ranked: Names already sorted by rank_names()

    Returns:
        Total score as integer (0 for an empty list)

    Examples:
        >>> calculate_total_score(["AMY", "BOB", "COLIN"])
        236
    """
    return sum(
        letter_sum(name) * position
        for position, name in enumerate(ranked, start=1)
    )
