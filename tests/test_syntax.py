from __future__ import annotations

import curses

import pytest
from pygments.lexers.python import PythonLexer

from editrow import Row
from editrow.core import (
    HighlightType,
    NumberClassifier,
    PygmentsClassifier,
    classifier_for_filename,
    init_colors,
)


def test_number_classifier_only_marks_ascii_digits() -> None:
    classes = NumberClassifier().classify("x\u06637")

    assert classes == [HighlightType.NONE, HighlightType.NONE, HighlightType.NUMBER]


def test_pygments_classifier_maps_python_tokens() -> None:
    text = "x = 42  # hi"

    classes = PygmentsClassifier(PythonLexer()).classify(text)

    assert len(classes) == len(text)
    assert classes[0] is HighlightType.NONE
    assert classes[2] is HighlightType.OPERATOR
    assert classes[4:6] == [HighlightType.NUMBER, HighlightType.NUMBER]
    assert classes[8:] == [HighlightType.COMMENT] * 4


def test_pygments_classifier_walks_token_parents() -> None:
    text = "def f(): pass"

    classes = PygmentsClassifier(PythonLexer()).classify(text)

    assert classes[:3] == [HighlightType.KEYWORD] * 3
    assert classes[4] is HighlightType.FUNCTION
    assert classes[-4:] == [HighlightType.KEYWORD] * 4


def test_pygments_classifier_empty_line() -> None:
    assert PygmentsClassifier(PythonLexer()).classify("") == []


def test_classifier_for_known_filename_uses_pygments() -> None:
    classifier = classifier_for_filename("script.py")

    assert isinstance(classifier, PygmentsClassifier)
    assert classifier.lexer.name == "Python"


def test_classifier_for_unknown_filename_falls_back() -> None:
    assert isinstance(classifier_for_filename("notes.zzqq"), NumberClassifier)


def test_row_uses_its_classifier() -> None:
    row = Row.from_text('s = "a"', classifier=PygmentsClassifier(PythonLexer()))

    row.highlight()

    assert row.render_segments(4, 7) == [('"', 2), ("a", 2), ('"', 2)]


def test_highlight_accepts_override_policy() -> None:
    row = Row.from_text("if 1")

    row.highlight(PygmentsClassifier(PythonLexer()))

    assert row.highlighting[:2] == [HighlightType.KEYWORD] * 2
    assert row.highlighting[3] is HighlightType.NUMBER


def test_split_row_keeps_classifier() -> None:
    classifier = PygmentsClassifier(PythonLexer())
    row = Row.from_text("a = 1", classifier=classifier)

    tail = row.split(2)

    assert tail.classifier is classifier


def test_highlight_type_colors() -> None:
    assert HighlightType.NONE.to_color() == -1
    assert HighlightType.NUMBER.to_color() == curses.COLOR_RED
    assert HighlightType.NUMBER.to_pair() == 6


def test_init_colors_registers_pairs(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[int, int, int]] = []
    monkeypatch.setattr(curses, "init_pair", lambda *args: calls.append(args))

    init_colors()

    assert len(calls) == len(HighlightType) - 1
    assert (6, curses.COLOR_RED, -1) in calls
    assert all(pair != 0 for pair, _, _ in calls)
