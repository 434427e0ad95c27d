"""Tests for bpd/pipes.py"""

import pytest
from bpd.enumeration import all_bpds
from bpd.errors import InvalidInputError, OutOfBoundsError
from bpd.pipes import (
    bpd2perm,
    bpd2word,
    countboxes,
    countpipes,
    coxeter_length,
    isreduced,
    istop,
    word2perm,
)
from bpd.rothe import Rothe


class TestCountPipes:
    def test_blank(self, rothe):
        assert countpipes(rothe, (1, 1)) is None

    def test_first_row(self, rothe):
        assert countpipes(rothe, (1, 3)) == 1

    def test_diagonal(self, rothe):
        """Cross at (2, 3) weighs 2, every other pipe tile 1."""
        assert countpipes(rothe, (3, 5)) == 3
        assert countpipes(rothe, (4, 5)) == 3
        assert countpipes(rothe, (5, 5)) == 4

    def test_out_of_bounds(self, rothe):
        with pytest.raises(OutOfBoundsError):
            countpipes(rothe, (6, 1))


class TestIsTop:
    def test_top_cells(self, rothe):
        assert istop(rothe, (1, 3))
        assert istop(rothe, (2, 2))
        assert istop(rothe, (4, 1))

    def test_not_top(self, rothe):
        assert not istop(rothe, (1, 1))  # blank
        assert not istop(rothe, (3, 5))


class TestWords:
    def test_rothe_word(self, rothe):
        assert bpd2word(rothe) == [1, 2, 4, 3, 1]

    def test_no_cross(self):
        assert bpd2word(Rothe([1, 2, 3])) == []

    def test_kbpd_word(self, kbpd):
        """The last letter is absorbed by the 0-Hecke product."""
        assert bpd2word(kbpd) == [1, 2, 4, 1, 3, 1]
        assert bpd2perm(kbpd) == [3, 2, 5, 1, 4]


class TestWordToPerm:
    def test_empty_word(self):
        assert word2perm([]) == [1]

    def test_simple_transposition(self):
        assert word2perm([2]) == [1, 3, 2]

    def test_reduced_word(self):
        assert word2perm([1, 2, 1]) == [3, 2, 1]

    def test_repeated_letter_is_absorbed(self):
        assert word2perm([1, 1]) == [2, 1]

    def test_non_positive_letter(self):
        with pytest.raises(InvalidInputError):
            word2perm([1, 0])


class TestPermutation:
    @pytest.mark.parametrize("w", [[1], [2, 1], [3, 2, 5, 1, 4], [1, 4, 3, 2], [4, 3, 2, 1]])
    def test_rothe_round_trip(self, w):
        assert bpd2perm(Rothe(w)) == w

    def test_droops_preserve_permutation(self, w):
        for b in all_bpds(w):
            assert bpd2perm(b) == w

    def test_trailing_fixed_points_are_dropped(self):
        """The product only spans the letters of the word."""
        assert bpd2perm(Rothe([2, 1, 3])) == [2, 1]


class TestReduced:
    def test_coxeter_length(self):
        assert coxeter_length([1, 2, 3]) == 0
        assert coxeter_length([3, 2, 5, 1, 4]) == 5
        assert coxeter_length([4, 3, 2, 1]) == 6

    def test_countboxes(self, rothe, kbpd):
        assert countboxes(rothe) == 5
        assert countboxes(kbpd) == 6

    def test_isreduced(self, rothe, droop_ne, kbpd):
        assert isreduced(rothe)
        assert isreduced(droop_ne)
        assert not isreduced(kbpd)
