"""Trigram extraction."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator

from pgtrigram._normalize import normalize

TrigramSet = FrozenSet[str]


def iter_windows(sequence: str) -> Iterator[str]:
    """Yield every 3-codepoint window of sequence, left to right."""
    for i in range(len(sequence) - 2):
        yield sequence[i : i + 3]


def build_trigrams(padded_words: Iterable[str]) -> TrigramSet:
    """Build the set of distinct trigrams for a sequence of padded words.

    Windows never cross a word boundary: each padded word contributes its
    own windows and the result is their union, as pg_trgm does. Python
    strings index by codepoint, so a window is always exactly three
    codepoints regardless of how many bytes they take in UTF-8.
    """
    return frozenset(window for word in padded_words for window in iter_windows(word))


def trigrams(text: str) -> TrigramSet:
    """Normalize text and build its trigram set."""
    return build_trigrams(normalize(text))


def show_trgm(text: str) -> list[str]:
    """Return the trigrams of text in sorted order, like pg_trgm's ``show_trgm``.

    Example:
        >>> show_trgm("cat")
        ['  c', ' ca', 'at ', 'cat']
    """
    return sorted(trigrams(text))


__all__ = ["TrigramSet", "build_trigrams", "iter_windows", "show_trgm", "trigrams"]
