"""
Polars integration for pgtrigram.

Levels:
    1. **Expression Namespace** (``.trgm``) - Per-row operations
       Example: ``df.with_columns(score=pl.col("name").trgm.similarity("John"))``

    2. **Batch API** - One engine call per Series
       Example: ``batch_similarity(df["a"], df["b"])``

Examples:
    >>> import polars as pl
    >>> import pgtrigram.polars as ptp  # or: from pgtrigram import polars as ptp

    >>> df = pl.DataFrame({"a": ["hello"], "b": ["hallo"]})
    >>> df.with_columns(score=ptp.batch_similarity(df["a"], df["b"]))
"""

# Expression namespace is registered on import
import pgtrigram.expr as _expr  # noqa: F401

from pgtrigram.polars_api import (
    batch_best_match,
    batch_similarity,
    score_series,
)

__all__ = [
    "batch_similarity",
    "batch_best_match",
    "score_series",
]
