"""Tests for the list-oriented batch API.

This module tests pgtrigram.batch: similarity against a list, top-N
matches, aligned pairwise scoring and the full similarity matrix.
"""

import pytest

import pgtrigram as pt
import pgtrigram.batch as batch
from fixtures.real_data import BEST_MATCH_CASES, COMPANY_NAMES, PLACE_NAMES


class TestBatchSimilarity:
    """Query against every string, in input order."""

    def test_input_order(self):
        results = batch.similarity(["hello", "help", "world"], "hello")
        assert [m.index for m in results] == [0, 1, 2]
        assert [m.score for m in results] == [1.0, 3 / 8, 0.0]

    def test_empty_list(self):
        assert batch.similarity([], "hello") == []

    def test_empty_query(self):
        assert [m.score for m in batch.similarity(["a", "b"], "")] == [0.0, 0.0]


class TestBestMatches:
    """Top-N ranking."""

    def test_limit(self):
        results = batch.best_matches(["hello", "hallo", "help"], "hello", limit=2)
        assert results == [(0, 1.0), (2, 3 / 8)]

    def test_min_similarity(self):
        results = batch.best_matches(["hello", "hallo", "world"], "hello", min_similarity=0.5)
        assert results == [(0, 1.0)]

    def test_limit_larger_than_list(self):
        assert len(batch.best_matches(["a", "b"], "a", limit=10)) == 2

    def test_invalid_limit(self):
        with pytest.raises(pt.ValidationError, match="limit"):
            batch.best_matches(["a"], "a", limit=0)

    @pytest.mark.parametrize("query,expected", BEST_MATCH_CASES)
    def test_real_data(self, query, expected):
        candidates = COMPANY_NAMES + PLACE_NAMES
        (top,) = batch.best_matches(candidates, query, limit=1)
        assert candidates[top.index] == expected


class TestPairwise:
    """Aligned lists."""

    def test_basic(self):
        assert batch.pairwise(["hello", "café"], ["hello", "cafe"]) == [1.0, 3 / 7]

    def test_length_mismatch(self):
        with pytest.raises(pt.ValidationError):
            batch.pairwise(["a", "b"], ["x"])

    def test_empty(self):
        assert batch.pairwise([], []) == []

    def test_non_string(self):
        with pytest.raises(TypeError):
            batch.pairwise(["a"], [None])


class TestSimilarityMatrix:
    """Every query against every choice."""

    def test_shape_and_values(self):
        queries = ["hello", "world"]
        choices = ["hallo", "word", "help"]
        matrix = batch.similarity_matrix(queries, choices)
        assert len(matrix) == 2
        assert all(len(row) == 3 for row in matrix)
        for i, q in enumerate(queries):
            for j, c in enumerate(choices):
                assert matrix[i][j] == pt.similarity(q, c)

    def test_empty_choices(self):
        assert batch.similarity_matrix(["a", "b"], []) == [[], []]
