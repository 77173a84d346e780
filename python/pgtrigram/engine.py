"""Similarity engines.

All ranking logic lives in :class:`Engine`. Concrete engines only decide how
a per-item function is mapped over a list of items: :class:`PortableEngine`
runs it in a plain loop, :class:`ParallelEngine` hands large lists to a
worker pool. Both feed the results back in input order, so every engine
returns bit-identical scores and the same tie-breaks for the same input.

Example:
    >>> from pgtrigram.engine import PortableEngine
    >>> engine = PortableEngine()
    >>> engine.best_match("hello world", ["hello world", "hello world", "hullo world"])
    Match(index=0, score=1.0)
"""

from __future__ import annotations

import logging
import os
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor as _Pool, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
from typing import Callable, Iterable, NamedTuple, Optional, Sequence, Tuple, TypeVar, Union

from pgtrigram._similarity import similarity_from_sets
from pgtrigram._trigram import TrigramSet, trigrams
from pgtrigram._utils import ensure_text, ensure_texts, ensure_threshold, normalize_executor
from pgtrigram.config import DEFAULT_PARALLEL_THRESHOLD
from pgtrigram.enums import Backend, Executor
from pgtrigram.exceptions import EmptyHaystacksError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Match(NamedTuple):
    """Position of a haystack in the caller's list and its similarity score."""

    index: int
    score: float


def _pair_score(pair: Tuple[str, str]) -> float:
    left, right = pair
    return similarity_from_sets(trigrams(left), trigrams(right))


def _score_against(needle_set: TrigramSet, haystack: str) -> float:
    return similarity_from_sets(needle_set, trigrams(haystack))


def _ensure_pairs(pairs: Iterable[Sequence[str]]) -> list[Tuple[str, str]]:
    checked = []
    for i, pair in enumerate(pairs):
        if isinstance(pair, str) or len(pair) != 2:
            raise TypeError(f"pairs[{i}] must be a (str, str) pair")
        left, right = pair
        checked.append(
            (ensure_text(left, f"pairs[{i}][0]"), ensure_text(right, f"pairs[{i}][1]"))
        )
    return checked


def ranked(matches: Iterable[Match]) -> list[Match]:
    """Sort by score descending, then by index ascending."""
    return sorted(matches, key=lambda m: (-m.score, m.index))


class Engine(ABC):
    """Trigram similarity operations over one mapping strategy."""

    backend: Backend

    @abstractmethod
    def map(self, func: Callable[[T], R], items: list[T]) -> list[R]:
        """Apply func to every item and return the results in input order."""

    def similarity(self, a: str, b: str) -> float:
        """Trigram similarity of two strings, in [0.0, 1.0].

        Returns 0.0 when neither string has any letters or digits.
        """
        ensure_text(a, "a")
        ensure_text(b, "b")
        return _pair_score((a, b))

    def similarity_batch(self, pairs: Iterable[Sequence[str]]) -> list[float]:
        """Similarity of each (a, b) pair, one score per pair, in input order."""
        return self.map(_pair_score, _ensure_pairs(pairs))

    def scores(self, needle: str, haystacks: Iterable[str]) -> list[float]:
        """Similarity of needle against every haystack, in input order."""
        ensure_text(needle, "needle")
        items = ensure_texts(haystacks)
        return self.map(partial(_score_against, trigrams(needle)), items)

    def best_match(self, needle: str, haystacks: Iterable[str]) -> Match:
        """Return the haystack most similar to needle.

        Ties go to the lowest index.

        Raises:
            EmptyHaystacksError: If haystacks is empty.
        """
        scores = self.scores(needle, haystacks)
        if not scores:
            raise EmptyHaystacksError()

        best = 0
        for i in range(1, len(scores)):
            if scores[i] > scores[best]:
                best = i
        return Match(best, scores[best])

    def score_all(
        self, needle: str, haystacks: Iterable[str], min_threshold: float
    ) -> list[Match]:
        """Score every haystack and keep those with score >= min_threshold.

        Results are ordered by score descending, then index ascending. An
        empty list is a valid result.
        """
        threshold = ensure_threshold(min_threshold)
        scores = self.scores(needle, haystacks)
        return ranked(
            Match(index, score) for index, score in enumerate(scores) if score >= threshold
        )

    def close(self, wait: bool = True) -> None:
        """Release any workers held by the engine."""

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PortableEngine(Engine):
    """Reference engine. Runs everything in the calling thread."""

    backend = Backend.PORTABLE

    def map(self, func: Callable[[T], R], items: list[T]) -> list[R]:
        return [func(item) for item in items]


class ParallelEngine(Engine):
    """Engine that fans large batches out to a worker pool.

    Lists shorter than ``parallel_threshold`` are processed inline. Larger
    lists are split into chunks and mapped with ``Executor.map``, which
    yields results in submission order, so scores and tie-breaks match the
    portable engine exactly.

    The pool is started on the first call that reaches the threshold and
    reused until :meth:`close`. Starting a process pool costs far more than
    scoring a small batch, so one engine should serve many calls. The engine
    may be shared between threads. Use it as a context manager, or call
    :meth:`close`, to shut the workers down.
    """

    backend = Backend.PARALLEL

    def __init__(
        self,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
        max_workers: Optional[int] = None,
        executor: Union[str, Executor] = Executor.THREAD,
    ):
        if parallel_threshold < 1:
            raise ValueError("parallel_threshold must be at least 1")
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.parallel_threshold = parallel_threshold
        self.max_workers = max_workers
        self.executor = normalize_executor(executor)
        self._pool: Optional[_Pool] = None
        self._lock = threading.Lock()

    def _workers(self) -> int:
        return self.max_workers or os.cpu_count() or 1

    def _new_pool(self) -> _Pool:
        if self.executor is Executor.PROCESS:
            return ProcessPoolExecutor(max_workers=self.max_workers)
        return ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="pgtrigram")

    def map(self, func: Callable[[T], R], items: list[T]) -> list[R]:
        if len(items) < self.parallel_threshold:
            return [func(item) for item in items]

        chunksize = max(1, len(items) // (self._workers() * 4))
        logger.debug(
            "Mapping %d items on %s pool (chunksize=%d)", len(items), self.executor.value, chunksize
        )
        # Executor.map submits every task before it returns
        with self._lock:
            if self._pool is None:
                self._pool = self._new_pool()
            results = self._pool.map(func, items, chunksize=chunksize)
        return list(results)

    def close(self, wait: bool = True) -> None:
        """Shut the worker pool down.

        Work already submitted still completes. A later call that reaches the
        threshold starts a new pool.
        """
        with self._lock:
            pool, self._pool = self._pool, None
        if pool is not None:
            logger.debug("Shutting down %s pool", self.executor.value)
            pool.shutdown(wait=wait)

    def __repr__(self) -> str:
        return (
            f"ParallelEngine(parallel_threshold={self.parallel_threshold}, "
            f"max_workers={self.max_workers}, executor={self.executor.value!r})"
        )


__all__ = ["Engine", "Match", "ParallelEngine", "PortableEngine", "ranked"]
