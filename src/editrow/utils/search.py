"""
Search functionality for a single row of text.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from .graphemes import grapheme_index_at

logger = logging.getLogger(__name__)


class SearchDirection(Enum):
    """Which way an interactive find walks from the cursor."""

    FORWARD = "forward"
    BACKWARD = "backward"


def find_literal(graphemes: Sequence[str], query: str, at: int,
                 direction: SearchDirection = SearchDirection.FORWARD) -> Optional[int]:
    """
    Find a literal text fragment in a sequence of grapheme clusters.

    Forward searches the clusters from ``at`` to the end and returns the
    leftmost match. Backward searches the clusters before ``at`` and returns
    the rightmost match.

    Args:
        graphemes (Sequence[str]): The clusters of the line, in order
        query (str): Text to look for, matched literally
        at (int): Cluster index the search starts from
        direction (SearchDirection): Search direction

    Returns:
        Optional[int]: Cluster index of the match within the full line, or
                       None if at is out of range or there is no match on
                       a cluster boundary
    """

    if not 0 <= at <= len(graphemes):
        return None

    if direction is SearchDirection.FORWARD:
        start, end = at, len(graphemes)
    else:
        start, end = 0, at

    substring = ''.join(graphemes[start:end])

    if direction is SearchDirection.FORWARD:
        offset = substring.find(query)
    else:
        offset = substring.rfind(query)

    if offset < 0:
        return None

    index = grapheme_index_at(substring, offset)
    if index < 0:
        logger.debug("Match for %r at offset %d is inside a cluster", query, offset)
        return None

    return start + index
