"""
Grapheme cluster helpers built on the ``regex`` module's ``\\X`` matcher.
"""

from typing import Final, Iterator, List, Tuple

import regex

GRAPHEME_PATTERN: Final = regex.compile(r"\X")


def iter_graphemes(text: str) -> Iterator[Tuple[int, str]]:
    """
    Iterate over the grapheme clusters of a text.

    Args:
        text (str): The text to segment

    Returns:
        Iterator[Tuple[int, str]]: (code point offset, cluster) pairs in order
    """

    for match in GRAPHEME_PATTERN.finditer(text):
        yield match.start(), match.group()


def split_into_graphemes(text: str) -> List[str]:
    """Split text into its user-perceived characters."""

    if not text:
        return []

    return GRAPHEME_PATTERN.findall(text)


def grapheme_count(text: str) -> int:
    """Count the grapheme clusters in a text."""

    return sum(1 for _ in GRAPHEME_PATTERN.finditer(text))


def grapheme_index_at(text: str, offset: int) -> int:
    """
    Map a code point offset back to a grapheme cluster index.

    Args:
        text (str): The text the offset points into
        offset (int): Code point offset of a cluster start

    Returns:
        int: The index of the cluster starting at offset, or -1 if the
             offset falls inside a cluster or past the end
    """

    for index, (start, _) in enumerate(iter_graphemes(text)):
        if start == offset:
            return index
        if start > offset:
            break

    return -1
