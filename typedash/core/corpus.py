from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "words.txt"


class CorpusLoadError(OSError):
    """Raised when the word list cannot be found or read."""


class WordRepository:
    """Word tokens read from a whitespace-separated text file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_CORPUS_PATH
        self._words = self._load_words()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> List[str]:
        return list(self._words)

    def _load_words(self) -> List[str]:
        if not self._path.exists():
            raise CorpusLoadError(f"Word list not found: {self._path}")
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusLoadError(f"Could not read word list {self._path}: {e}") from e

        words = text.split()
        logger.info("Loaded %d words from %s", len(words), self._path)
        return words
