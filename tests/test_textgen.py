"""Tests for typedash.core.textgen – task text generation."""

from __future__ import annotations

import random

import pytest

from typedash.core.textgen import (
    EmptyCorpusError,
    TaskText,
    draw_tokens,
    generate_task,
    split_sentences,
)

WORDS = ["time", "people", "water", "river", "sound", "letter", "house", "point"]


# ---------------------------------------------------------------------------
# draw_tokens
# ---------------------------------------------------------------------------

class TestDrawTokens:
    def test_empty_list_raises(self):
        with pytest.raises(EmptyCorpusError):
            draw_tokens([], random.Random(1))

    def test_blank_only_list_raises(self):
        with pytest.raises(EmptyCorpusError):
            draw_tokens(["", "  ", "\n"], random.Random(1))

    def test_draw_count(self):
        tokens = draw_tokens(WORDS, random.Random(1), draws=255)
        assert len(tokens) == 255
        assert set(tokens) <= set(WORDS)

    def test_blank_tokens_are_skipped(self):
        tokens = draw_tokens(["a", "", " \n"], random.Random(3), draws=100)
        assert tokens
        assert len(tokens) < 100
        assert set(tokens) == {"a"}

    def test_tokens_are_trimmed(self):
        tokens = draw_tokens(["word\n"], random.Random(1), draws=5)
        assert tokens == ["word"] * 5

    def test_same_seed_same_tokens(self):
        assert draw_tokens(WORDS, random.Random(42)) == draw_tokens(WORDS, random.Random(42))


# ---------------------------------------------------------------------------
# split_sentences
# ---------------------------------------------------------------------------

class TestSplitSentences:
    def test_no_tokens(self):
        assert split_sentences([], random.Random(1)) == []

    def test_short_stream_is_one_sentence(self):
        assert split_sentences(["a", "b", "c"], random.Random(1)) == ["a b c "]

    def test_fixed_cutoff(self):
        tokens = [str(i) for i in range(25)]
        sentences = split_sentences(tokens, random.Random(1), min_words=10, max_words=10)
        assert [len(s.split()) for s in sentences] == [10, 10, 5]

    @pytest.mark.parametrize("seed", range(10))
    def test_sentence_lengths_bounded(self, seed: int):
        rng = random.Random(seed)
        tokens = draw_tokens(WORDS, rng)
        sentences = split_sentences(tokens, rng)
        lengths = [len(s.split()) for s in sentences]
        assert all(10 <= n <= 15 for n in lengths[:-1])
        assert 1 <= lengths[-1] <= 15

    def test_sentences_preserve_token_order(self):
        tokens = [str(i) for i in range(40)]
        sentences = split_sentences(tokens, random.Random(5))
        assert "".join(sentences).split() == tokens


# ---------------------------------------------------------------------------
# generate_task
# ---------------------------------------------------------------------------

class TestGenerateTask:
    def test_returns_task_text(self):
        task = generate_task(WORDS, random.Random(1))
        assert isinstance(task, TaskText)
        assert isinstance(task.sentences, tuple)

    def test_text_has_trailing_space_per_word(self):
        task = generate_task(["ab"], random.Random(1), draws=3)
        assert task.text == "ab ab ab "

    def test_text_matches_sentences(self):
        task = generate_task(WORDS, random.Random(9))
        assert "".join(task.sentences) == task.text

    def test_every_word_keeps_its_space(self):
        task = generate_task(WORDS, random.Random(9))
        for sentence in task.sentences:
            assert sentence.endswith(" ")
            assert not sentence.startswith(" ")
            assert "  " not in sentence
            assert sentence.count(" ") == len(sentence.split())

    def test_deterministic_under_seed(self):
        assert generate_task(WORDS, random.Random(4)) == generate_task(WORDS, random.Random(4))

    def test_empty_corpus(self):
        with pytest.raises(EmptyCorpusError):
            generate_task([], random.Random(1))
