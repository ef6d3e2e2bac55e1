from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from typedash.core.events import Backspace, Character, Quit, Restart, Tick
from typedash.core.settings import Settings
from typedash.core.textgen import TaskText, generate_task

logger = logging.getLogger(__name__)


class SessionState(Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    # Reserved: no event leads into or out of it.
    PAUSED = "paused"
    ENDED = "ended"


class CharClass(Enum):
    """How a character of the visible window should be shown."""

    MATCHED = "matched"
    MISMATCHED = "mismatched"
    CURSOR = "cursor"
    PENDING = "pending"


@dataclass(frozen=True)
class Metrics:
    """Derived speed and accuracy figures for the current session."""

    wpm: float
    accuracy: float
    words_typed: int
    errors: int
    elapsed: int


class TypingSession:
    """Timed typing exercise over a randomly generated task text.

    The user types the task one sentence at a time. Each character is compared
    with the expected one; a space typed in the middle of a word skips the rest
    of that word and counts as a single error. Words are counted when a space
    is typed where a space was expected.

    Speed and accuracy:
      * **WPM** – completed words / elapsed minutes.
      * **Accuracy** – (characters typed − errors) / characters typed, as a
        percentage; 100 before anything is typed.

    The session ends when the last sentence is finished or the timer reaches
    ``settings.time_limit``.
    """

    def __init__(
        self,
        words: Sequence[str],
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Generate a task from ``words``; raises EmptyCorpusError if none are usable."""
        self._words = list(words)
        self._settings = settings if settings is not None else Settings()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self.exit_requested = False
        self._reset(self._generate())

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def task_text(self) -> str:
        """The full generated text, every word followed by a space."""
        return self._task.text

    @property
    def sentences(self) -> Tuple[str, ...]:
        return self._task.sentences

    @property
    def total_sentences(self) -> int:
        return len(self._task.sentences)

    @property
    def sentence_index(self) -> int:
        """Index of the sentence being typed (0-based)."""
        return self._sentence_index

    @property
    def sentence_offset(self) -> int:
        """Position of the next expected character within the current sentence."""
        return self._offset

    @property
    def cursor_position(self) -> int:
        """Characters typed across the whole session, net of backspaces."""
        return self._cursor

    @property
    def user_input(self) -> str:
        """What the user has produced for the current sentence."""
        return "".join(self._user_input)

    @property
    def words_typed(self) -> int:
        return self._words_typed

    @property
    def error_count(self) -> int:
        return self._errors

    @property
    def timer(self) -> int:
        """Whole seconds elapsed, frozen before the start and after the end."""
        return self._timer

    @property
    def started_at(self) -> Optional[float]:
        """Clock reading captured on the first keystroke."""
        return self._started_at

    def is_finished(self) -> bool:
        """Return True once every sentence has been typed."""
        return self._sentence_index >= len(self._task.sentences)

    def current_sentence(self) -> Optional[str]:
        if self.is_finished():
            return None
        return self._task.sentences[self._sentence_index]

    def expected_char(self) -> Optional[str]:
        """Next character to type, or None when the text is exhausted."""
        sentence = self.current_sentence()
        if sentence is None or self._offset >= len(sentence):
            return None
        return sentence[self._offset]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def apply(self, event: object) -> SessionState:
        """Dispatch a logical input event and return the resulting state."""
        if isinstance(event, Character):
            return self.submit_char(event.char)
        if isinstance(event, Backspace):
            return self.submit_backspace()
        if isinstance(event, Tick):
            return self.tick(event.elapsed)
        if isinstance(event, Restart):
            return self.restart()
        if isinstance(event, Quit):
            self.exit_requested = True
            return self._state
        raise TypeError(f"Unsupported event: {event!r}")

    def submit_char(self, char: str) -> SessionState:
        """Score one typed character against the expected one."""
        if self.is_finished():
            self._set_state(SessionState.ENDED)
            return self._state
        if self._state is SessionState.NOT_STARTED:
            self._started_at = self._clock()
            self._set_state(SessionState.ACTIVE)
        if self._state is not SessionState.ACTIVE:
            return self._state

        sentence = self._task.sentences[self._sentence_index]
        expected = sentence[self._offset]

        if expected != char:
            self._errors += 1
            if expected != " " and char == " ":
                self._skip_word(sentence)

        if expected == char == " ":
            self._words_typed += 1
        self._user_input.append(char)
        self._offset += 1
        self._cursor += 1

        if self._offset >= len(sentence):
            self._advance_sentence()
        return self._state

    def submit_backspace(self) -> SessionState:
        """Remove the last typed character of the current sentence."""
        if self._state is not SessionState.ACTIVE:
            return self._state
        if not self._user_input or self._cursor == 0:
            return self._state
        self._user_input.pop()
        self._cursor -= 1
        self._offset -= 1
        return self._state

    def tick(self, elapsed_seconds: int) -> SessionState:
        """Set the timer while typing; end the session at the time limit."""
        if self._state is not SessionState.ACTIVE:
            return self._state
        limit = self._settings.time_limit
        self._timer = max(0, int(elapsed_seconds))
        if self._timer >= limit:
            self._timer = limit
            self._end()
        return self._state

    def poll_timer(self) -> SessionState:
        """Tick with the whole seconds elapsed since the first keystroke."""
        if self._state is not SessionState.ACTIVE or self._started_at is None:
            return self._state
        return self.tick(int(self._clock() - self._started_at))

    def restart(self) -> SessionState:
        """Regenerate the task and reset all progress, counters and timer."""
        task = self._generate()
        self._reset(task)
        logger.debug("Session restarted with %d sentences", len(task.sentences))
        return self._state

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def visible_window(self) -> str:
        """The current sentence followed by the next ones, for display."""
        if self.is_finished():
            return ""
        start = self._sentence_index
        end = start + self._settings.visible_sentences
        return "".join(self._task.sentences[start:end])

    def classify_window(self) -> List[Tuple[str, CharClass]]:
        typed = self._user_input
        classified: List[Tuple[str, CharClass]] = []
        for i, char in enumerate(self.visible_window()):
            if i < len(typed):
                kind = CharClass.MATCHED if typed[i] == char else CharClass.MISMATCHED
            elif i == len(typed):
                kind = CharClass.CURSOR
            else:
                kind = CharClass.PENDING
            classified.append((char, kind))
        return classified

    def metrics(self) -> Metrics:
        if self._timer > 0 and self._state is not SessionState.NOT_STARTED:
            wpm = self._words_typed / (self._timer / 60.0)
        else:
            wpm = 0.0

        if self._cursor > 0:
            correct = self._cursor - min(self._cursor, self._errors)
            accuracy = correct / self._cursor * 100.0
        else:
            accuracy = 100.0

        return Metrics(
            wpm=wpm,
            accuracy=accuracy,
            words_typed=self._words_typed,
            errors=self._errors,
            elapsed=self._timer,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generate(self) -> TaskText:
        s = self._settings
        return generate_task(
            self._words,
            self._rng,
            draws=s.task_draws,
            min_words=s.sentence_min_words,
            max_words=s.sentence_max_words,
        )

    def _reset(self, task: TaskText) -> None:
        self._task = task
        self._state = SessionState.NOT_STARTED
        self._user_input: List[str] = []
        self._sentence_index = 0
        self._offset = 0
        self._cursor = 0
        self._words_typed = 0
        self._errors = 0
        self._timer = 0
        self._started_at: Optional[float] = None

    def _skip_word(self, sentence: str) -> None:
        # Fill up to the next space; the typed space then lands on it.
        # A sentence without a trailing space is filled to its end instead.
        space = sentence.find(" ", self._offset)
        target = space if space != -1 else len(sentence) - 1
        fill = target - self._offset
        self._user_input.extend(" " * fill)
        self._offset += fill
        self._cursor += fill

    def _advance_sentence(self) -> None:
        self._sentence_index += 1
        self._offset = 0
        self._user_input.clear()
        if self.is_finished():
            self._end()

    def _end(self) -> None:
        self._set_state(SessionState.ENDED)
        m = self.metrics()
        logger.info(
            "Session ended: %d words, %d errors, %.0f WPM, %.0f%% accuracy in %ds",
            m.words_typed,
            m.errors,
            m.wpm,
            m.accuracy,
            m.elapsed,
        )

    def _set_state(self, state: SessionState) -> None:
        if state is not self._state:
            logger.debug("Session state %s -> %s", self._state.value, state.value)
        self._state = state
