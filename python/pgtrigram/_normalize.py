"""Word splitting and padding.

Text is cut into words at every run of characters that are not letters,
combining marks or digits. Each word is lowercased with the simple
(one-to-one) Unicode case mapping and padded with two leading and one
trailing boundary marker:

    >>> normalize("Apt #4B")
    ['  apt ', '  4b ']
"""

from __future__ import annotations

from functools import lru_cache

import regex

PAD = " "
"""Boundary marker. Never part of a word, since whitespace is not alphanumeric."""

LEADING_PAD = PAD * 2
TRAILING_PAD = PAD

WORD_PATTERN = regex.compile(r"[\p{L}\p{M}\p{N}]+")


@lru_cache(maxsize=4096)
def _lower_char(ch: str) -> str:
    lowered = ch.lower()
    if len(lowered) == 1:
        return lowered
    # Full mappings that expand (U+0130 -> "i̇") start with the simple mapping.
    return lowered[0]


def simple_lower(word: str) -> str:
    """Lowercase codepoint by codepoint.

    Unlike ``str.lower`` this never changes the length of the string and
    applies no context rules, so "ΟΔΟΣ" becomes "οδοσ" and "İ" becomes "i".
    """
    if word.isascii():
        return word.lower()
    return "".join(_lower_char(ch) for ch in word)


def split_words(text: str) -> list[str]:
    """Return the raw (unpadded, original case) words of text, left to right."""
    return WORD_PATTERN.findall(text)


def pad_word(word: str) -> str:
    return f"{LEADING_PAD}{word}{TRAILING_PAD}"


def normalize(text: str) -> list[str]:
    """Split text into lowercased, padded words.

    Args:
        text: Any string. Empty strings and strings without letters or
            digits produce an empty list.

    Returns:
        Padded words in their original order.
    """
    return [pad_word(simple_lower(word)) for word in split_words(text)]


__all__ = ["PAD", "WORD_PATTERN", "normalize", "pad_word", "simple_lower", "split_words"]
