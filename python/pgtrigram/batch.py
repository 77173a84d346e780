"""List-oriented batch API for pgtrigram.

Thin wrappers over the active engine for the common shapes of batch work.

Example usage:
    >>> import pgtrigram.batch as batch

    # Similarity of a query against every string, in input order
    >>> [m.score for m in batch.similarity(["hello", "help", "world"], "hello")]
    [1.0, 0.375, 0.0]

    # Top N matches above a threshold
    >>> batch.best_matches(["hello", "hallo", "help"], "hello", limit=2)
    [Match(index=0, score=1.0), Match(index=2, score=0.375)]

    # Aligned lists
    >>> batch.pairwise(["hello", "café"], ["hello", "cafe"])
    [1.0, 0.42857142857142855]
"""

from __future__ import annotations

from pgtrigram._backend import get_engine
from pgtrigram._trigram import trigrams
from pgtrigram._similarity import similarity_from_sets
from pgtrigram._utils import ensure_text, ensure_texts
from pgtrigram.engine import Match
from pgtrigram.exceptions import ValidationError

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]


def similarity(strings: list[str], query: str) -> list[Match]:
    """Compute similarity of a query against all strings.

    Returns:
        One Match per input string, in input order. ``Match.index`` is the
        position in ``strings``.
    """
    scores = get_engine().scores(query, strings)
    return [Match(index, score) for index, score in enumerate(scores)]


def best_matches(
    strings: list[str],
    query: str,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[Match]:
    """Find the top ``limit`` matches for a query.

    Ordering follows ``score_all``: score descending, then index ascending.

    Raises:
        ValidationError: If limit is less than 1.
    """
    if limit < 1:
        raise ValidationError(f"limit must be at least 1, got {limit}")
    return get_engine().score_all(query, strings, min_similarity)[:limit]


def pairwise(left: list[str], right: list[str]) -> list[float]:
    """Compute similarity for each aligned pair (left[i], right[i]).

    Raises:
        ValidationError: If left and right have different lengths.
    """
    left = ensure_texts(left, "left")
    right = ensure_texts(right, "right")
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    return get_engine().similarity_batch(list(zip(left, right)))


def similarity_matrix(queries: list[str], choices: list[str]) -> list[list[float]]:
    """Similarity of every query against every choice.

    ``result[i][j]`` is the similarity of ``queries[i]`` and ``choices[j]``.
    Each choice is converted to trigrams once and reused across rows.
    """
    queries = ensure_texts(queries, "queries")
    choices = ensure_texts(choices, "choices")
    choice_sets = get_engine().map(trigrams, choices)

    def row(query: str) -> list[float]:
        query_set = trigrams(ensure_text(query, "query"))
        return [similarity_from_sets(query_set, choice_set) for choice_set in choice_sets]

    return [row(query) for query in queries]
