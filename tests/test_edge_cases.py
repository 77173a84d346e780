"""
Edge case tests for pgtrigram.

Tests cover:
- None and non-string inputs
- Empty and separator-only strings
- Very long strings
- Unicode edge cases (combining marks, surrogates, emoji, ZWJ)
- Adversarial inputs (repeated patterns)
"""

import pytest

import pgtrigram as pt
from fixtures.real_data import ADDRESSES


class TestNoneHandling:
    """Text arguments must be str."""

    def test_similarity_none_raises(self):
        with pytest.raises(TypeError):
            pt.similarity(None, "hello")
        with pytest.raises(TypeError):
            pt.similarity("hello", None)

    def test_best_match_none_needle(self):
        with pytest.raises(TypeError):
            pt.best_match(None, ["a"])

    def test_best_match_none_haystack(self):
        with pytest.raises(TypeError, match=r"haystacks\[1\]"):
            pt.best_match("a", ["a", None])

    def test_score_all_string_as_haystacks(self):
        with pytest.raises(TypeError):
            pt.score_all("a", "abc", 0.0)

    def test_bytes_rejected(self):
        with pytest.raises(TypeError):
            pt.similarity(b"hello", "hello")


class TestEmptyAndSeparators:
    """Inputs without any words score 0.0."""

    @pytest.mark.parametrize("text", ["", " ", "\t\n", "---", "¿¡", "$%^&*", "_"])
    def test_no_trigrams(self, text):
        assert pt.trigrams(text) == frozenset()
        assert pt.similarity(text, text) == 0.0
        assert pt.similarity(text, "hello") == 0.0


class TestLongStrings:
    """Large inputs stay correct."""

    def test_long_identical(self):
        s = "abcdefghij" * 10_000
        assert pt.similarity(s, s) == 1.0

    def test_many_words(self):
        s = " ".join(f"w{i}" for i in range(5_000))
        assert pt.similarity(s, s) == 1.0
        assert 0.0 < pt.similarity(s, s + " extra") < 1.0


class TestUnicode:
    """Unicode edge cases never raise."""

    def test_combining_mark_vs_precomposed(self):
        decomposed = "cafe\u0301"
        precomposed = "caf\u00e9"
        # Different codepoints, so different trigrams
        assert 0.0 < pt.similarity(decomposed, precomposed) < 1.0

    def test_leading_combining_mark(self):
        assert pt.trigrams("\u0301abc")

    def test_lone_surrogates(self):
        assert pt.similarity("ab\ud800cd", "ab cd") == 1.0
        assert pt.similarity("\udfff", "\udfff") == 0.0

    def test_emoji_is_a_boundary(self):
        assert pt.similarity("pizza🍕time", "pizza time") == 1.0

    def test_zero_width_joiner(self):
        assert pt.normalize("a\u200db") == ["  a ", "  b "]

    def test_control_characters(self):
        assert pt.similarity("a\x00b\x1fc", "a b c") == 1.0

    def test_fullwidth_digits_are_alphanumeric(self):
        assert pt.normalize("１２３") == ["  １２３ "]

    def test_mixed_scripts_in_one_word(self):
        assert pt.normalize("abcабв") == ["  abcабв "]


class TestAdversarial:
    """Repetitive inputs collapse to few distinct trigrams."""

    def test_repeated_char(self):
        assert len(pt.trigrams("a" * 10_000)) == 4

    def test_repeated_word(self):
        assert len(pt.trigrams("ab " * 1_000)) == len(pt.trigrams("ab ab"))

    def test_real_addresses_in_range(self):
        for a in ADDRESSES:
            for b in ADDRESSES:
                score = pt.similarity(a, b)
                assert 0.0 <= score <= 1.0
                assert score == pt.similarity(b, a)
