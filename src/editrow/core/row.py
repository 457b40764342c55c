"""
Row module holding one line of editable text.

Positions are grapheme cluster indices everywhere: a cluster such as "e"
followed by a combining accent is one position for insert, delete, split,
find and render, even though it is several code points.
"""

import logging
from itertools import islice
from typing import Final, Iterator, List, Optional, Tuple

from ..ui.style import AnsiStyle, StyleBackend
from ..utils.graphemes import grapheme_count, iter_graphemes, split_into_graphemes
from ..utils.search import SearchDirection, find_literal
from .syntax import HighlightClassifier, HighlightType, NumberClassifier

logger = logging.getLogger(__name__)

TAB_REPLACEMENT: Final[str] = "  "


class Row:
    """
    A single line of text with cached grapheme count and highlighting.

    ``highlighting`` is only rebuilt by :meth:`highlight`. Every mutation
    leaves it as it was, so it may be shorter or longer than the row until
    the next call; a missing entry renders as ``HighlightType.NONE``.
    """

    def __init__(self, text: str = "", classifier: Optional[HighlightClassifier] = None) -> None:
        self.string = text
        self._len = grapheme_count(text)
        self.highlighting: List[HighlightType] = []
        self.classifier: HighlightClassifier = classifier or NumberClassifier()
        self._highlight_stale = bool(text)

    @classmethod
    def from_text(cls, text: str, classifier: Optional[HighlightClassifier] = None) -> "Row":
        """Create a row holding a copy of text."""

        return cls(text, classifier)

    def __len__(self) -> int:
        return self._len

    def __str__(self) -> str:
        return self.string

    def __repr__(self) -> str:
        return f"Row({self.string!r})"

    def is_empty(self) -> bool:
        return self._len == 0

    def as_bytes(self) -> bytes:
        return self.string.encode('utf-8')

    def graphemes(self) -> List[str]:
        """Get the grapheme clusters of the row in order."""

        return split_into_graphemes(self.string)

    def grapheme_at(self, index: int) -> Optional[str]:
        """Get the cluster at index, or None past the end."""

        if not 0 <= index < self._len:
            return None

        return next(islice(iter_graphemes(self.string), index, None))[1]

    @property
    def is_highlight_stale(self) -> bool:
        """Whether the row changed since highlighting was last computed."""

        return self._highlight_stale

    def render(self, start: int, end: int, style: Optional[StyleBackend] = None) -> str:
        """
        Render the clusters in [start, end) with color markers.

        Each cluster is wrapped in its own foreground color and reset
        markers. Tabs become two spaces. Out of range bounds are clamped.

        Args:
            start: First cluster index to render
            end: Cluster index to stop before
            style: Styling backend producing the markers, ANSI by default

        Returns:
            The styled text
        """

        style = style or AnsiStyle()
        result = []

        for grapheme, highlight in self._visible(start, end):
            result.append(style.fg(highlight.to_color()))
            result.append(TAB_REPLACEMENT if grapheme[0] == '\t' else grapheme)
            result.append(style.reset())

        return ''.join(result)

    def render_segments(self, start: int, end: int) -> List[Tuple[str, int]]:
        """
        Render the clusters in [start, end) for curses drawing.

        Returns:
            A list of (text, color pair number) tuples, one per cluster
        """

        return [
            (TAB_REPLACEMENT if grapheme[0] == '\t' else grapheme, highlight.to_pair())
            for grapheme, highlight in self._visible(start, end)
        ]

    def _visible(self, start: int, end: int) -> Iterator[Tuple[str, HighlightType]]:
        end = max(0, min(end, len(self.as_bytes())))
        start = max(0, min(start, end))

        clusters = islice(enumerate(iter_graphemes(self.string)), start, end)
        for index, (_, grapheme) in clusters:
            if index < len(self.highlighting):
                yield grapheme, self.highlighting[index]
            else:
                yield grapheme, HighlightType.NONE

    def insert(self, at: int, c: str) -> None:
        """
        Insert a character before the cluster at index at.

        Inserting at or past the end appends and a negative index inserts at
        the start. Highlighting is not updated.

        Raises:
            ValueError: If c is not a one character str. Positions never raise.
        """

        if not isinstance(c, str) or len(c) != 1:
            raise ValueError("Row.insert takes exactly one character")

        self._highlight_stale = True
        at = max(0, at)

        if at >= self._len:
            # c may extend the last cluster (combining mark, ZWJ sequence, flag).
            self.string += c
            self._len = grapheme_count(self.string)
            return

        result = []
        for index, (_, grapheme) in enumerate(iter_graphemes(self.string)):
            if index == at:
                result.append(c)
            result.append(grapheme)

        self.string = ''.join(result)
        self._len = grapheme_count(self.string)

    def delete(self, at: int) -> None:
        """Remove the cluster at index at. Past the end this does nothing."""

        if not 0 <= at < self._len:
            return

        self.string = ''.join(
            grapheme for index, (_, grapheme) in enumerate(iter_graphemes(self.string))
            if index != at
        )
        self._len = grapheme_count(self.string)
        self._highlight_stale = True

    def append(self, other: "Row") -> None:
        """Concatenate another row's text onto this one."""

        self.string = self.string + other.string
        # The seam may merge clusters, so the counts do not simply add up.
        self._len = grapheme_count(self.string)
        self._highlight_stale = True

        logger.debug("Appended %d clusters, row now has %d", other._len, self._len)

    def split(self, at: int) -> "Row":
        """
        Split the row at cluster index at.

        Clusters before at stay in this row; the rest move into the returned
        row, which starts with empty highlighting and the same classifier.
        """

        kept = []
        moved = []
        for index, (_, grapheme) in enumerate(iter_graphemes(self.string)):
            if index < at:
                kept.append(grapheme)
            else:
                moved.append(grapheme)

        self.string = ''.join(kept)
        self._len = len(kept)
        self._highlight_stale = True

        new_row = Row(''.join(moved), self.classifier)

        logger.debug("Split row at %d: %d and %d clusters", at, self._len, new_row._len)
        return new_row

    def find(self, query: str, at: int,
             direction: SearchDirection = SearchDirection.FORWARD) -> Optional[int]:
        """
        Find a literal text fragment starting from cluster index at.

        Args:
            query: Text to look for
            at: Cluster index to start from
            direction: FORWARD looks in [at, end), BACKWARD in [0, at)

        Returns:
            The cluster index of the closest match, or None
        """

        if not 0 <= at <= self._len:
            return None

        return find_literal(self.graphemes(), query, at, direction)

    def highlight(self, classifier: Optional[HighlightClassifier] = None) -> None:
        """
        Recompute highlighting from the current text.

        Args:
            classifier: Policy to use instead of the row's own
        """

        policy = classifier or self.classifier
        self.highlighting = policy.classify(self.string)
        self._highlight_stale = False

    recompute_highlight = highlight
