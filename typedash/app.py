"""Application entry point and setup for the typedash typing exercise."""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

from typedash.core.corpus import CorpusLoadError, WordRepository
from typedash.core.session import TypingSession
from typedash.core.settings import load_settings
from typedash.core.textgen import EmptyCorpusError
from typedash.ui.terminal import TerminalApp

DEFAULT_LOG_FILE = Path.home() / ".typedash" / "typedash.log"


def configure_logging(log_file: Optional[Path] = DEFAULT_LOG_FILE) -> None:
    """Configure application-wide logging with a standard format.

    Logs go to a file so they never paint over the curses screen.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        filename=str(log_file) if log_file is not None else None,
    )


def build_session(settings_path: Optional[Path] = None) -> TypingSession:
    """Load settings and the word list, and generate the first task."""
    settings = load_settings(settings_path)
    corpus_path = Path(settings.corpus_path).expanduser() if settings.corpus_path else None
    words = WordRepository(corpus_path).all()
    return TypingSession(words, settings=settings, rng=random.Random())


def run() -> None:
    """Build the session and start the terminal loop."""
    configure_logging()
    try:
        session = build_session()
    except (CorpusLoadError, EmptyCorpusError, FileNotFoundError, ValueError) as e:
        logging.error("Could not start session: %s", e)
        print(f"typedash: {e}", file=sys.stderr)
        sys.exit(1)

    TerminalApp(session).run()
    m = session.metrics()
    logging.info("Exited after %d words at %.0f WPM", m.words_typed, m.wpm)
