"""Tests for typedash.ui.keys – key decoding."""

from __future__ import annotations

import curses

import pytest

from typedash.core.events import Backspace, Character, Quit, Restart
from typedash.ui.keys import decode_key


class TestDecodeKey:
    @pytest.mark.parametrize("key", ["\x1b", "\x03", 27, 3])
    def test_quit(self, key):
        assert decode_key(key) == Quit()

    @pytest.mark.parametrize("key", ["\x12", 18])
    def test_restart(self, key):
        assert decode_key(key) == Restart()

    @pytest.mark.parametrize("key", [curses.KEY_BACKSPACE, "\b", "\x7f", 8, 127])
    def test_backspace(self, key):
        assert decode_key(key) == Backspace()

    @pytest.mark.parametrize("key", ["a", "Z", " ", "7", ";", "é"])
    def test_printable(self, key):
        assert decode_key(key) == Character(key)

    @pytest.mark.parametrize("key", ["\n", "\t", curses.KEY_LEFT, curses.KEY_RESIZE, "ab"])
    def test_ignored(self, key):
        assert decode_key(key) is None
