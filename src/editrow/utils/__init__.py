"""
Utility package for grapheme segmentation and search.
"""

from .graphemes import (
    iter_graphemes,
    split_into_graphemes,
    grapheme_count,
    grapheme_index_at
)
from .search import SearchDirection, find_literal

__all__ = [
    'iter_graphemes',
    'split_into_graphemes',
    'grapheme_count',
    'grapheme_index_at',
    'SearchDirection',
    'find_literal'
]
