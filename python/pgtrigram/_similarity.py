"""Jaccard overlap of two trigram sets."""

from __future__ import annotations

from typing import AbstractSet


def similarity_from_sets(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """Return |a & b| / |a | b|, or 0.0 when both sets are empty.

    The result is a single float division of two exact integer counts, so
    every engine that counts the same sets produces the same bits.
    """
    shared = len(a & b)
    total = len(a) + len(b) - shared
    if total == 0:
        return 0.0
    return shared / total


__all__ = ["similarity_from_sets"]
