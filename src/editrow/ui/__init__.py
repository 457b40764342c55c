"""
UI package for turning highlighted rows into terminal output.
"""

from .style import AnsiStyle, StyleBackend

__all__ = ['AnsiStyle', 'StyleBackend']
