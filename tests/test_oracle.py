"""Tests for the reference (full matrix) aligner."""

import numpy as np
import pytest

from conftest import SCENARIOS
from wavealign import CostModel, apply_script, reference_align, reference_distance
from wavealign.oracle import distance_matrix


class TestDistanceMatrix:
    def test_borders(self):
        D = distance_matrix("abc", "ab")
        assert D.shape == (4, 3)
        assert list(D[:, 0]) == [0, 1, 2, 3]
        assert list(D[0, :]) == [0, 1, 2]

    def test_kitten(self):
        D = distance_matrix("kitten", "sitting")
        assert D[6, 7] == 3
        assert D.dtype == np.int64

    def test_custom_equality(self):
        cm = CostModel(equal=lambda x, y: x.lower() == y.lower())
        assert distance_matrix("AbC", "abc", cm)[3, 3] == 0


class TestReferenceAlign:
    @pytest.mark.parametrize("a,b,expected", SCENARIOS)
    def test_scenarios(self, a, b, expected):
        assert reference_distance(a, b) == expected
        result = reference_align(a, b)
        assert result.distance == expected
        assert apply_script(a, result.script) == b
        assert result.edit_count == expected

    def test_match_runs_are_merged(self):
        result = reference_align("abcdef", "abcxef")
        assert result.cigar == "3M1X2M"
        assert len(result.script) == 3
