"""
Name Transformers

Normalizes raw names from the source into uppercase A-Z strings.
"""

import re
from typing import Iterable

NON_LETTERS = re.compile(r"[^A-Za-z]")


def normalize_name(name: str) -> str:
    """
    Normalize a name to the characters A-Z only.

    Leading and trailing whitespace is stripped, every character that is
    not an ASCII letter is deleted, and the remaining letters are uppercased.
    A name with no letters becomes the empty string.

    Examples:
        >>> normalize_name(" AMY ")
        'AMY'
        >>> normalize_name("bob3")
        'BOB'
        >>> normalize_name("Mary-Jane")
        'MARYJANE'
        >>> normalize_name("José")
        'JOS'
        >>> normalize_name("!!")
        ''
    """
    return NON_LETTERS.sub("", name.strip()).upper()


def normalize_names(names: Iterable[str]) -> list[str]:
    """
    Normalize each name, preserving length and order.

    Empty results are kept so they still take a position when ranked.
    """
    return [normalize_name(name) for name in names]
