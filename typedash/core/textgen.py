"""Random task text generation and sentence segmentation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple


class EmptyCorpusError(ValueError):
    """Raised when the word list has no usable words."""


@dataclass(frozen=True)
class TaskText:
    """Generated exercise: the flat text and its sentence partition."""

    text: str
    sentences: Tuple[str, ...]


def draw_tokens(words: Sequence[str], rng: random.Random, draws: int = 255) -> List[str]:
    """Draw ``draws`` tokens uniformly with replacement, dropping blank ones."""
    if not words or not any(w.strip() for w in words):
        raise EmptyCorpusError("Word list is empty")
    tokens: List[str] = []
    for _ in range(draws):
        word = words[rng.randrange(len(words))].strip()
        if not word:
            continue
        tokens.append(word)
    return tokens


def split_sentences(
    tokens: Sequence[str],
    rng: random.Random,
    min_words: int = 10,
    max_words: int = 15,
) -> List[str]:
    """Group tokens into sentences of ``min_words``..``max_words`` words.

    Every word keeps its trailing space, so the sentences concatenate back to
    the task text.

    The cutoff for each sentence is drawn when it starts. Leftover tokens form
    a final, shorter sentence.
    """
    sentences: List[str] = []
    current: List[str] = []
    cutoff = rng.randint(min_words, max_words)
    for token in tokens:
        current.append(token)
        if len(current) >= cutoff:
            sentences.append("".join(f"{word} " for word in current))
            current = []
            cutoff = rng.randint(min_words, max_words)
    if current:
        sentences.append("".join(f"{word} " for word in current))
    return sentences


def generate_task(
    words: Sequence[str],
    rng: random.Random,
    draws: int = 255,
    min_words: int = 10,
    max_words: int = 15,
) -> TaskText:
    tokens = draw_tokens(words, rng, draws)
    text = "".join(f"{token} " for token in tokens)
    sentences = split_sentences(tokens, rng, min_words, max_words)
    return TaskText(text=text, sentences=tuple(sentences))
