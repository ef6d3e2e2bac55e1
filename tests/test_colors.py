"""Tests for typedash.ui.colors – palette and character styles."""

from __future__ import annotations

import curses

import pytest

from typedash.core.session import CharClass
from typedash.ui.colors import PALETTE, Pairs, style_for


class TestPalette:
    def test_pairs_are_distinct(self):
        ids = list(PALETTE)
        assert len(ids) == len(set(ids))
        assert 0 not in ids

    def test_every_pair_has_colors(self):
        for name in ("MATCHED", "MISMATCHED", "CURSOR", "TIMER", "WPM", "ACCURACY", "PROGRESS"):
            assert getattr(Pairs, name) in PALETTE

    def test_cursor_is_inverted(self):
        assert PALETTE[Pairs.CURSOR] == (curses.COLOR_BLACK, curses.COLOR_WHITE)


class TestStyleFor:
    @pytest.mark.parametrize("kind", list(CharClass))
    def test_every_class_has_style(self, kind: CharClass):
        pair, attrs = style_for(kind)
        assert pair == 0 or pair in PALETTE
        assert isinstance(attrs, int)

    def test_mismatch_is_underlined(self):
        pair, attrs = style_for(CharClass.MISMATCHED)
        assert pair == Pairs.MISMATCHED
        assert attrs & curses.A_UNDERLINE

    def test_pending_is_dim(self):
        pair, attrs = style_for(CharClass.PENDING)
        assert pair == 0
        assert attrs & curses.A_DIM
