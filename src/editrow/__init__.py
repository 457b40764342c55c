"""
EditRow: grapheme aware line buffers for terminal text editors.
"""

from .core import HighlightType, Row
from .utils import SearchDirection

__all__ = ['Row', 'HighlightType', 'SearchDirection']
