"""Terminal color pairs and text attributes for the UI."""

from __future__ import annotations

import curses
from typing import Dict, Tuple

from typedash.core.session import CharClass


class Pairs:
    """Color pair ids registered by ``init_colors``."""

    MATCHED = 1
    MISMATCHED = 2
    CURSOR = 3
    TIMER = 4
    WPM = 5
    ACCURACY = 6
    PROGRESS = 7


# pair id -> (foreground, background); -1 keeps the terminal default
PALETTE: Dict[int, Tuple[int, int]] = {
    Pairs.MATCHED: (curses.COLOR_GREEN, -1),
    Pairs.MISMATCHED: (curses.COLOR_RED, -1),
    Pairs.CURSOR: (curses.COLOR_BLACK, curses.COLOR_WHITE),
    Pairs.TIMER: (curses.COLOR_YELLOW, -1),
    Pairs.WPM: (curses.COLOR_CYAN, -1),
    Pairs.ACCURACY: (curses.COLOR_GREEN, -1),
    Pairs.PROGRESS: (curses.COLOR_BLUE, -1),
}

_CHAR_STYLES: Dict[CharClass, Tuple[int, int]] = {
    CharClass.MATCHED: (Pairs.MATCHED, curses.A_NORMAL),
    CharClass.MISMATCHED: (Pairs.MISMATCHED, curses.A_UNDERLINE),
    CharClass.CURSOR: (Pairs.CURSOR, curses.A_NORMAL),
    CharClass.PENDING: (0, curses.A_DIM),
}


def style_for(char_class: CharClass) -> Tuple[int, int]:
    """Return (pair id, attributes) for a classified character."""
    return _CHAR_STYLES[char_class]


def init_colors() -> None:
    """Register the palette. Requires an initialised curses screen."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    for pair, (fg, bg) in PALETTE.items():
        curses.init_pair(pair, fg, bg)
