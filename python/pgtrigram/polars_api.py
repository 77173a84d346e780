"""Batch Polars API for trigram similarity.

These functions convert Series to Python lists once and make a single
engine call per operation, so the parallel backend can spread the work
over its pool. Prefer them over the ``.trgm`` expression namespace for
large columns.

Example Usage
-------------
>>> import polars as pl
>>> import pgtrigram as pt
>>>
>>> df = pl.DataFrame({"a": ["hello", "café"], "b": ["hallo", "cafe"]})
>>> df = df.with_columns(score=pt.batch_similarity(df["a"], df["b"]))
>>>
>>> categories = ["Electronics", "Clothing", "Food"]
>>> df = df.with_columns(category=pt.batch_best_match(df["a"], categories))
"""

from typing import Optional

import polars as pl

from pgtrigram._backend import get_engine
from pgtrigram._utils import ensure_texts
from pgtrigram.engine import Match, ranked


def _none_as_empty(values: list) -> list[str]:
    return [str(v) if v is not None else "" for v in values]


def batch_similarity(left: "pl.Series", right: "pl.Series") -> "pl.Series":
    """
    Similarity between aligned values of two Series.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)

    Returns:
        Float64 Series named "similarity"; null wherever either input is
        null, the same rule as ``pl.col(...).trgm.similarity``

    Raises:
        ValueError: If the Series lengths differ.

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=pt.batch_similarity(df["a"], df["b"]))
    """
    if len(left) != len(right):
        raise ValueError("Series must have equal length")

    left_list = left.to_list()
    right_list = right.to_list()

    raw_scores = get_engine().similarity_batch(
        list(zip(_none_as_empty(left_list), _none_as_empty(right_list)))
    )

    scores: list[Optional[float]] = []
    for i, (a, b) in enumerate(zip(left_list, right_list)):
        if a is None or b is None:
            scores.append(None)
        else:
            scores.append(raw_scores[i])

    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_best_match(
    queries: "pl.Series",
    targets: list[str],
    min_similarity: float = 0.0,
) -> "pl.Series":
    """
    Best matching target for each query.

    Ties go to the target with the lowest index.

    Args:
        queries: Series of query strings
        targets: List of target strings to match against
        min_similarity: Matches scoring below this are reported as null

    Returns:
        Utf8 Series named "best_match"; null for null queries, for an empty
        target list and for matches below min_similarity
    """
    targets = ensure_texts(targets, "targets")
    engine = get_engine()

    matches: list[Optional[str]] = []
    for query in queries.to_list():
        if query is None or not targets:
            matches.append(None)
            continue
        best = engine.best_match(str(query), targets)
        matches.append(targets[best.index] if best.score >= min_similarity else None)

    return pl.Series("best_match", matches, dtype=pl.Utf8)


def score_series(
    needle: str,
    series: "pl.Series",
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Score every value of a Series against needle.

    Null values are skipped.

    Returns:
        DataFrame with columns ``index`` (position in ``series``), ``text``
        and ``score``, filtered to score >= min_similarity and ordered by
        score descending, then index ascending.

    Example:
        >>> names = pl.Series(["hello", "hallo", "help", "world"])
        >>> pt.score_series("hello", names, min_similarity=0.3)
    """
    values = series.to_list()
    present = [(i, str(v)) for i, v in enumerate(values) if v is not None]
    scores = get_engine().scores(needle, [text for _, text in present])

    kept = ranked(
        Match(index, score)
        for (index, _), score in zip(present, scores)
        if score >= min_similarity
    )

    schema = {"index": pl.Int64, "text": pl.Utf8, "score": pl.Float64}
    if not kept:
        return pl.DataFrame(schema=schema)

    return pl.DataFrame(
        {
            "index": [m.index for m in kept],
            "text": [str(values[m.index]) for m in kept],
            "score": [m.score for m in kept],
        },
        schema=schema,
    )


__all__ = ["batch_similarity", "batch_best_match", "score_series"]
