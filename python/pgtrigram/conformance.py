"""Shared conformance fixture set.

Pairs of strings that every engine must score identically, and that the
optional PostgreSQL suite compares against ``pg_trgm``'s ``similarity()``.
The set is immutable; changing it means bumping ``CONFORMANCE_VERSION``.
"""

from __future__ import annotations

from typing import Tuple

CONFORMANCE_VERSION = "1.1"

SimilarityCase = Tuple[str, str]

SIMILARITY_CASES: Tuple[SimilarityCase, ...] = (
    # Accented Latin
    ("café", "cafe"),
    ("naïve", "naive"),
    ("über", "uber"),
    ("São", "Sao"),
    ("ångström", "angstrom"),
    ("fiancé", "fiance"),
    ("résumé", "resume"),
    ("façade", "facade"),
    ("İstanbul", "istanbul"),
    ("straße", "strasse"),
    # Other scripts
    ("привет", "privet"),
    ("東京", "东 京"),
    ("東京", "東 京"),
    ("東京", "東京"),
    ("Ελλάδα", "Ellada"),
    # Punctuation heavy
    ("foo_bar", "foo bar"),
    ("foo_bar", "foobar"),
    ("hello-world", "hello world"),
    ("hello—world", "hello world"),
    ("$1,000.00", "$1000.00"),
    ("Apt #4B", "Apt 4B"),
    ("LLC", "L.L.C."),
    ("co-op", "coop"),
    ("123-456", "123456"),
    ("mid–range", "mid range"),
    # Multi-word
    ("hello world", "hullo world"),
    ("the quick brown fox", "quick brown fox"),
    # Whitespace heavy
    ("space   tabs", "space tabs"),
    ("\ttab\tseparated\t", "tab separated"),
    ("  leading and trailing  ", "leading and trailing"),
    # Degenerate
    ("", ""),
    ("abc", ""),
    ("!!!", "???"),
)
"""Version ``CONFORMANCE_VERSION`` of the fixture pairs."""


def pairs() -> Tuple[SimilarityCase, ...]:
    """Return the fixture pairs."""
    return SIMILARITY_CASES


__all__ = ["CONFORMANCE_VERSION", "SIMILARITY_CASES", "SimilarityCase", "pairs"]
