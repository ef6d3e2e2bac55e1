"""Curses front end: polls keys, feeds the session and repaints every frame."""

from __future__ import annotations

import curses
import logging
from typing import List, Tuple

from typedash.core.session import SessionState, TypingSession
from typedash.ui.colors import Pairs, init_colors, style_for
from typedash.ui.keys import decode_key

logger = logging.getLogger(__name__)

MAX_WIDTH = 62
TITLE = "t y p e d a s h"
INSTRUCTIONS = "[Esc] Quit   [Ctrl+R] Restart"

Segment = Tuple[str, int, int]


def layout(text: str, width: int) -> List[Tuple[int, int]]:
    """Word-wrap ``text`` to ``width`` columns; return (row, col) per character."""
    width = max(1, width)
    positions: List[Tuple[int, int]] = []
    row = col = 0
    i = 0
    n = len(text)
    while i < n:
        end = text.find(" ", i)
        if end == -1:
            end = n
        if col > 0 and col + (end - i) > width:
            row, col = row + 1, 0
        # words longer than a line are hard-broken; the trailing space follows
        for _ in range(i, min(end + 1, n)):
            if col >= width:
                row, col = row + 1, 0
            positions.append((row, col))
            col += 1
        i = end + 1
    return positions


def stats_segments(session: TypingSession) -> List[Segment]:
    m = session.metrics()
    line = min(session.sentence_index + 1, session.total_sentences)
    return [
        ("Time ", 0, curses.A_NORMAL),
        (f"{m.elapsed:02}/{session.settings.time_limit}", Pairs.TIMER, curses.A_BOLD),
        ("   ", 0, curses.A_NORMAL),
        (str(int(m.wpm)), Pairs.WPM, curses.A_BOLD),
        (" WPM   ", 0, curses.A_NORMAL),
        (f"{int(m.accuracy)}%", Pairs.ACCURACY, curses.A_BOLD),
        ("   ", 0, curses.A_NORMAL),
        (f"Line {line}/{session.total_sentences}", Pairs.PROGRESS, curses.A_BOLD),
    ]


def result_segments(session: TypingSession) -> List[Segment]:
    return [
        ("Final Results - Errors: ", 0, curses.A_NORMAL),
        (str(session.error_count), Pairs.MISMATCHED, curses.A_BOLD),
        ("  Words: ", 0, curses.A_NORMAL),
        (str(session.words_typed), Pairs.MATCHED, curses.A_BOLD),
    ]


class TerminalApp:
    """Single-threaded loop: poll one key, apply it, tick the timer, repaint."""

    def __init__(self, session: TypingSession) -> None:
        self._session = session

    def run(self) -> None:
        curses.wrapper(self._main)

    def _main(self, stdscr: "curses.window") -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        stdscr.keypad(True)
        stdscr.timeout(self._session.settings.poll_interval_ms)
        init_colors()

        while not self._session.exit_requested:
            self.draw(stdscr)
            self.handle_input(stdscr)
            self._session.poll_timer()

    def handle_input(self, stdscr: "curses.window") -> None:
        try:
            key = stdscr.get_wch()
        except curses.error:
            # no key within the poll interval
            return
        if key == curses.KEY_RESIZE:
            return
        event = decode_key(key)
        if event is not None:
            self._session.apply(event)

    def draw(self, stdscr: "curses.window") -> None:
        stdscr.erase()
        height, width = stdscr.getmaxyx()
        content_width = min(width, MAX_WIDTH)
        left = (width - content_width) // 2
        inner = max(1, content_width - 4)

        def put(y: int, x: int, text: str, pair: int = 0, attrs: int = curses.A_NORMAL) -> int:
            # never write the last column so the bottom-right cell stays untouched
            room = width - 1 - x
            if y >= height or room <= 0:
                return x
            text = text[:room]
            stdscr.addstr(y, x, text, curses.color_pair(pair) | attrs)
            return x + len(text)

        def put_segments(y: int, segments: List[Segment]) -> None:
            x = left + 2
            for text, pair, attrs in segments:
                x = put(y, x, text, pair, attrs)

        put(0, left + max(0, (content_width - len(TITLE)) // 2), TITLE, 0, curses.A_BOLD)

        top = 2
        classified = self._session.classify_window()
        positions = layout("".join(char for char, _ in classified), inner)
        last_row = 0
        for (char, kind), (row, col) in zip(classified, positions):
            pair, attrs = style_for(kind)
            put(top + row, left + 2 + col, char, pair, attrs)
            last_row = row

        y = top + last_row + 2
        put(y, left + 2, "-" * inner, 0, curses.A_DIM)
        put_segments(y + 1, stats_segments(self._session))
        if self._session.state is SessionState.ENDED:
            put_segments(y + 3, result_segments(self._session))

        put(
            min(height - 1, y + 5),
            left + max(0, (content_width - len(INSTRUCTIONS)) // 2),
            INSTRUCTIONS,
            0,
            curses.A_DIM,
        )
        stdscr.refresh()
