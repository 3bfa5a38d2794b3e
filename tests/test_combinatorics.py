"""
Tests for the counting helpers.
"""

import pytest

from samplestats.combinatorics import choose, factorial, permutations


class TestFactorial:

    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (5, 120), (10, 3628800)])
    def test_values(self, n, expected):
        assert factorial(n) == expected

    def test_negative(self):
        assert factorial(-1) == -1

    def test_exact_for_large_n(self):
        assert factorial(25) == 15511210043330985984000000


class TestPermutations:

    def test_values(self):
        assert permutations(5, 2) == 20
        assert permutations(5, 0) == 1
        assert permutations(5, 5) == 120

    def test_too_many_chosen(self):
        assert permutations(3, 4) == -1

    def test_negative_chosen(self):
        assert permutations(3, -1) == -1


class TestChoose:

    def test_values(self):
        assert choose(5, 2) == 10
        assert choose(52, 5) == 2598960
        assert choose(4, 0) == 1
        assert choose(4, 4) == 1

    def test_too_many_chosen(self):
        assert choose(2, 3) == -1

    def test_symmetry(self):
        for k in range(11):
            assert choose(10, k) == choose(10, 10 - k)
