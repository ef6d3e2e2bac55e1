"""Decoding of curses key values into session events."""

from __future__ import annotations

import curses
from typing import Optional, Union

from typedash.core.events import Backspace, Character, Quit, Restart

ESC = "\x1b"
CTRL_C = "\x03"
CTRL_R = "\x12"

BACKSPACE_KEYS = (curses.KEY_BACKSPACE, "\b", "\x7f", 8, 127)

Event = Union[Character, Backspace, Restart, Quit]


def decode_key(key: Union[str, int]) -> Optional[Event]:
    """Map a ``get_wch()`` value to an event, or None for keys we ignore."""
    if key in (ESC, CTRL_C, 27, 3):
        return Quit()
    if key in (CTRL_R, 18):
        return Restart()
    if key in BACKSPACE_KEYS:
        return Backspace()
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return Character(key)
    return None
