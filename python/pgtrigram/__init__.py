"""
pgtrigram - PostgreSQL pg_trgm-compatible trigram similarity

Scores how alike two strings are by the share of 3-character substrings
they have in common, the way pg_trgm's ``similarity()`` does. Useful for
search ranking, fuzzy lookups and deduplication.

Example usage:
    >>> import pgtrigram as pt

    # Simple similarity
    >>> pt.similarity("hello", "hallo")
    0.3333333333333333

    # Best match among candidates (ties go to the lowest index)
    >>> pt.best_match("hello world", ["hello world", "hello world", "hullo world"])
    Match(index=0, score=1.0)

    # Everything above a threshold, best first
    >>> pt.score_all("hello", ["hello", "hallo", "help", "world"], 0.3)
    [Match(index=0, score=1.0), Match(index=2, score=0.375), Match(index=1, score=0.3333333333333333)]
"""

from importlib.metadata import version as _get_version
from typing import Iterable, Optional, Sequence

from pgtrigram import batch, conformance
from pgtrigram._backend import (
    available_backends,
    build_engine,
    current_backend,
    get_engine,
    reset_backend,
    set_limit,
    show_limit,
    use_backend,
)
from pgtrigram._normalize import normalize
from pgtrigram._similarity import similarity_from_sets
from pgtrigram._trigram import build_trigrams, show_trgm, trigrams
from pgtrigram.config import Settings, load_settings
from pgtrigram.engine import Engine, Match, ParallelEngine, PortableEngine
from pgtrigram.enums import Backend, Executor
from pgtrigram.exceptions import (
    ConfigurationError,
    EmptyHaystacksError,
    TrigramError,
    ValidationError,
)


def similarity(a: str, b: str) -> float:
    """Trigram similarity of two strings, between 0.0 and 1.0.

    Example:
        >>> similarity("café", "cafe")
        0.42857142857142855
    """
    return get_engine().similarity(a, b)


def similarity_batch(pairs: Iterable[Sequence[str]]) -> list[float]:
    """Similarity of every (a, b) pair, in input order."""
    return get_engine().similarity_batch(pairs)


def best_match(needle: str, haystacks: Iterable[str]) -> Match:
    """Index and score of the haystack most similar to needle.

    Raises:
        EmptyHaystacksError: If haystacks is empty.
    """
    return get_engine().best_match(needle, haystacks)


def score_all(needle: str, haystacks: Iterable[str], min_threshold: float) -> list[Match]:
    """All haystacks scoring at least min_threshold, best first, ties by index."""
    return get_engine().score_all(needle, haystacks, min_threshold)


def is_similar(a: str, b: str, threshold: Optional[float] = None) -> bool:
    """pg_trgm's ``%`` operator: similarity(a, b) >= threshold.

    Args:
        threshold: Cut-off to use. Defaults to :func:`show_limit`.
    """
    limit = show_limit() if threshold is None else threshold
    return similarity(a, b) >= limit


# Polars integration; importing pgtrigram.expr registers the ``.trgm`` namespace
import pgtrigram.expr  # noqa: E402,F401
from pgtrigram import polars  # noqa: E402
from pgtrigram.polars_api import batch_best_match, batch_similarity, score_series  # noqa: E402

__version__ = _get_version("pgtrigram")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "TrigramError",
    "EmptyHaystacksError",
    "ValidationError",
    "ConfigurationError",
    # Result types
    "Match",
    # Enums
    "Backend",
    "Executor",
    # Core operations
    "similarity",
    "similarity_batch",
    "best_match",
    "score_all",
    # Building blocks
    "normalize",
    "build_trigrams",
    "trigrams",
    "similarity_from_sets",
    # pg_trgm extras
    "show_trgm",
    "is_similar",
    "show_limit",
    "set_limit",
    # Engines and backend selection
    "Engine",
    "PortableEngine",
    "ParallelEngine",
    "available_backends",
    "build_engine",
    "current_backend",
    "get_engine",
    "use_backend",
    "reset_backend",
    # Configuration
    "Settings",
    "load_settings",
    # Submodules
    "batch",
    "conformance",
    "polars",
    # Polars batch API
    "batch_similarity",
    "batch_best_match",
    "score_series",
]
