"""Logical input events fed into a typing session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Character:
    char: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class Tick:
    """Whole seconds elapsed since the first keystroke."""

    elapsed: int


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class Quit:
    pass
