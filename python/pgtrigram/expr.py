"""Polars expression namespace for trigram similarity.

Registers a ``.trgm`` namespace on Polars expressions.

Warning:
    Expressions run row by row through ``map_elements``. For large columns
    prefer the batch API in :mod:`pgtrigram.polars_api`, which scores a
    whole Series with a single engine call.

Example:
    >>> import polars as pl
    >>> import pgtrigram  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["hello", "hallo", "world"]})
    >>> df.with_columns(score=pl.col("name").trgm.similarity("hello"))
"""

from typing import Optional, Union

import polars as pl

from pgtrigram._backend import get_engine, show_limit
from pgtrigram._trigram import show_trgm
from pgtrigram.exceptions import EmptyHaystacksError


def _pair_similarity(row: dict) -> Optional[float]:
    left, right = row["_left"], row["_right"]
    if left is None or right is None:
        return None
    return get_engine().similarity(str(left), str(right))


@pl.api.register_expr_namespace("trgm")
class TrigramExprNamespace:
    """
    Trigram similarity namespace for Polars expressions.

    Access via ``.trgm`` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Similarity score between this column and a literal or another column.

        The score is null wherever either side is null, as in SQL.

        Example:
            >>> df.with_columns(score=pl.col("name").trgm.similarity("John"))
            >>> df.with_columns(score=pl.col("a").trgm.similarity(pl.col("b")))
        """
        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: get_engine().similarity(str(s), other),
                return_dtype=pl.Float64,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            _pair_similarity,
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: Optional[float] = None,
    ) -> pl.Expr:
        """
        True where the similarity reaches min_similarity (pg_trgm's ``%``).

        Null where either side is null, so ``filter`` drops those rows.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Cut-off, defaults to ``pgtrigram.show_limit()``

        Example:
            >>> df.filter(pl.col("name").trgm.is_similar("John", min_similarity=0.5))
        """
        limit = show_limit() if min_similarity is None else min_similarity
        return self.similarity(other) >= limit

    def best_match(self, choices: list[str]) -> pl.Expr:
        """
        Index and score of the most similar choice, as a struct.

        Rows are null when the input is null or choices is empty.

        Example:
            >>> df.with_columns(
            ...     m=pl.col("raw").trgm.best_match(["Electronics", "Clothing"])
            ... ).select(pl.col("m").struct.field("index"))
        """
        choices = list(choices)

        def find_best(value):
            if value is None:
                return None
            try:
                match = get_engine().best_match(str(value), choices)
            except EmptyHaystacksError:
                return None
            return {"index": match.index, "score": match.score}

        return self._expr.map_elements(
            find_best,
            return_dtype=pl.Struct({"index": pl.Int64, "score": pl.Float64}),
        )

    def trigrams(self) -> pl.Expr:
        """
        Sorted trigrams of each value, like pg_trgm's ``show_trgm``.

        Example:
            >>> df.with_columns(tg=pl.col("name").trgm.trigrams())
        """
        return self._expr.map_elements(
            lambda s: show_trgm(str(s)),
            return_dtype=pl.List(pl.Utf8),
        )
