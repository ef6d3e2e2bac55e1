from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class Settings:
    time_limit: int = 30
    task_draws: int = 255
    sentence_min_words: int = 10
    sentence_max_words: int = 15
    visible_sentences: int = 3
    poll_interval_ms: int = 100
    # deployment override of the bundled word list; never set by the UI
    corpus_path: Optional[str] = None


_INT_FIELDS = tuple(f.name for f in fields(Settings) if f.name != "corpus_path")


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load session settings from YAML, falling back to the bundled file."""
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{settings_path.name}: unknown settings {', '.join(map(str, unknown))}")

    values = {}
    for key in _INT_FIELDS:
        if key not in raw:
            continue
        value = raw[key]
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{settings_path.name}: '{key}' must be an integer")
        if value <= 0:
            raise ValueError(f"{settings_path.name}: '{key}' must be positive")
        values[key] = value

    corpus_path = raw.get("corpus_path")
    if corpus_path is not None:
        if not isinstance(corpus_path, str) or not corpus_path.strip():
            raise ValueError(f"{settings_path.name}: 'corpus_path' must be a non-empty string")
        values["corpus_path"] = corpus_path.strip()

    settings = Settings(**values)
    if settings.sentence_min_words > settings.sentence_max_words:
        raise ValueError(
            f"{settings_path.name}: 'sentence_min_words' exceeds 'sentence_max_words'"
        )
    return settings
