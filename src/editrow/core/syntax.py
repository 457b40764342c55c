"""
Highlight classes and the policies that assign them to text, using Pygments
for anything richer than number literals.
"""

import curses
import logging
from enum import Enum
from typing import Any, Dict, Final, List, Protocol

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.token import Comment, Keyword, Name, Number, Operator, String, Text
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)


class HighlightType(Enum):
    """How a position of a row should be colored."""

    NONE = "none"
    NUMBER = "number"
    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    FUNCTION = "function"
    CLASS = "class"
    OPERATOR = "operator"
    VARIABLE = "variable"

    def to_color(self) -> int:
        """Get the curses foreground color for this class."""

        return HIGHLIGHT_COLORS[self]

    def to_pair(self) -> int:
        """Get the curses color pair number registered for this class."""

        return HIGHLIGHT_PAIRS[self]


HIGHLIGHT_COLORS: Final[Dict[HighlightType, int]] = {
    HighlightType.NONE: -1,                     # Default
    HighlightType.NUMBER: curses.COLOR_RED,
    HighlightType.KEYWORD: curses.COLOR_CYAN,
    HighlightType.STRING: curses.COLOR_YELLOW,
    HighlightType.COMMENT: curses.COLOR_GREEN,
    HighlightType.FUNCTION: curses.COLOR_CYAN,
    HighlightType.CLASS: curses.COLOR_MAGENTA,
    HighlightType.OPERATOR: curses.COLOR_WHITE,
    HighlightType.VARIABLE: curses.COLOR_WHITE,
}

HIGHLIGHT_PAIRS: Final[Dict[HighlightType, int]] = {
    HighlightType.NONE: 0,
    HighlightType.KEYWORD: 1,
    HighlightType.STRING: 2,
    HighlightType.COMMENT: 3,
    HighlightType.FUNCTION: 4,
    HighlightType.CLASS: 5,
    HighlightType.NUMBER: 6,
    HighlightType.OPERATOR: 7,
    HighlightType.VARIABLE: 8,
}

TOKEN_HIGHLIGHT_MAP: Final[Dict[Any, HighlightType]] = {
    Keyword: HighlightType.KEYWORD,
    Keyword.Constant: HighlightType.KEYWORD,
    Keyword.Declaration: HighlightType.KEYWORD,
    Keyword.Namespace: HighlightType.KEYWORD,
    Keyword.Type: HighlightType.KEYWORD,

    Name.Class: HighlightType.CLASS,
    Name.Function: HighlightType.FUNCTION,
    Name.Decorator: HighlightType.FUNCTION,

    String: HighlightType.STRING,
    String.Doc: HighlightType.STRING,

    Comment: HighlightType.COMMENT,
    Comment.Hashbang: HighlightType.COMMENT,
    Comment.Preproc: HighlightType.COMMENT,

    Number: HighlightType.NUMBER,

    Operator: HighlightType.OPERATOR,
    Operator.Word: HighlightType.OPERATOR,

    Name.Variable: HighlightType.VARIABLE,

    Text: HighlightType.NONE,
    Text.Whitespace: HighlightType.NONE,
}


class HighlightClassifier(Protocol):
    """
    Produces one highlight class per Unicode scalar value of a text.

    Rows look classes up by grapheme cluster index, so colors are only exact
    for text whose clusters are single code points.
    """

    def classify(self, text: str) -> List[HighlightType]:
        ...


class NumberClassifier:
    """Marks ASCII decimal digits as numbers and everything else as plain."""

    def classify(self, text: str) -> List[HighlightType]:
        return [
            HighlightType.NUMBER if '0' <= c <= '9' else HighlightType.NONE
            for c in text
        ]


class PygmentsClassifier:
    """Classifies a line with a Pygments lexer."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer

    def classify(self, text: str) -> List[HighlightType]:
        """
        Classify a line of code.

        Args:
            text: The line of code to classify

        Returns:
            A list with exactly one class per character of text
        """

        if not text:
            return []

        result: List[HighlightType] = []

        for token_type, value in self.lexer.get_tokens(text):
            highlight = self._get_token_highlight(token_type)
            result.extend(highlight for _ in value)

        # Lexers may append a newline or rewrite line endings.
        result = result[:len(text)]
        result.extend(HighlightType.NONE for _ in range(len(text) - len(result)))

        return result

    def _get_token_highlight(self, token_type: Any) -> HighlightType:
        if token_type in TOKEN_HIGHLIGHT_MAP:
            return TOKEN_HIGHLIGHT_MAP[token_type]

        while token_type.parent:
            token_type = token_type.parent
            if token_type in TOKEN_HIGHLIGHT_MAP:
                return TOKEN_HIGHLIGHT_MAP[token_type]

        return HighlightType.NONE


def classifier_for_filename(filename: str) -> HighlightClassifier:
    """
    Pick a classification policy from a file name.

    Args:
        filename: The name of the file the rows belong to

    Returns:
        A Pygments backed classifier, or the number classifier when Pygments
        has no lexer for the name
    """

    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        logger.debug("No lexer for %s, highlighting numbers only", filename)
        return NumberClassifier()

    logger.debug("Highlighting %s as %s", filename, lexer.name)
    return PygmentsClassifier(lexer)


def init_colors() -> None:
    """Register the highlight palette as curses color pairs."""

    for highlight, pair in HIGHLIGHT_PAIRS.items():
        if pair == 0:
            continue

        curses.init_pair(pair, HIGHLIGHT_COLORS[highlight], -1)
