"""Keys understood by the dashboard."""

from enum import Enum


class Key(str, Enum):
    """Normalised key presses.

    Values match Textual's key names so the TUI can forward them unchanged.
    """

    TAB = "tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    QUIT = "q"
    THEME = "t"
    FASTER = "minus"
    SLOWER = "plus"
