"""
Styling backends that turn highlight colors into printable markers.
"""

from typing import Final, Protocol

ESCAPE: Final[str] = "\x1b["
DEFAULT_FOREGROUND: Final[str] = ESCAPE + "39m"


class StyleBackend(Protocol):
    """Anything that can open and close a foreground color run."""

    def fg(self, color: int) -> str:
        ...

    def reset(self) -> str:
        ...


class AnsiStyle:
    """
    Emits SGR escape sequences for curses color numbers.

    Colors 0-7 are the basic ANSI palette (``curses.COLOR_*`` use the same
    numbering), 8-255 use the 256 color form, and -1 selects the
    terminal's default foreground.
    """

    def fg(self, color: int) -> str:
        if color < 0:
            return DEFAULT_FOREGROUND

        if color < 8:
            return f"{ESCAPE}3{color}m"

        return f"{ESCAPE}38;5;{color}m"

    def reset(self) -> str:
        return DEFAULT_FOREGROUND
