"""
Core package for the line buffer.

This package implements the Row class holding one line of editable text and
the highlighting policies that color it, including the Pygments backed
classifier.
"""

from .row import Row
from .syntax import (
    HighlightType,
    HighlightClassifier,
    NumberClassifier,
    PygmentsClassifier,
    classifier_for_filename,
    init_colors
)

__all__ = [
    'Row',
    'HighlightType',
    'HighlightClassifier',
    'NumberClassifier',
    'PygmentsClassifier',
    'classifier_for_filename',
    'init_colors'
]
