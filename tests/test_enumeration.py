"""Tests for bpd/enumeration.py"""

import pytest
from bpd.enumeration import (
    all_bpds,
    all_drips,
    all_droops,
    all_Kbpds,
    all_Kdroops,
    flat_bpds,
    flat_drops,
    top_bpds,
    top_drops,
)
from bpd.errors import InvalidInputError
from bpd.flat import isflat, makeflat
from bpd.grid import BPD
from bpd.pipes import bpd2perm, isreduced
from bpd.rothe import Rothe
from utils.algorithms.search import DepthFirstEnumerator


class TestSuccessors:
    def test_all_droops(self, rothe, droop_ne, droop_sw):
        assert all_droops(rothe) == [droop_ne, droop_sw]
        assert all_droops(droop_sw) == []

    def test_all_drips(self, rothe):
        assert all_drips(rothe) == []
        assert all_drips(Rothe([1, 3, 2])) == [BPD.from_symbols(["O/-", "/%/", "|/+"])]

    def test_all_Kdroops(self, rothe, droop_ne, droop_sw, kbpd):
        assert all_Kdroops(rothe) == [droop_ne, droop_sw]
        assert all_Kdroops(droop_ne) == [kbpd]
        assert all_Kdroops(droop_sw) == [kbpd]

    def test_flat_drops(self, rothe, droop_ne, droop_sw):
        assert flat_drops(rothe) == [droop_ne, droop_sw]

    def test_skew_flat_drops(self, rothe):
        assert flat_drops(rothe, skew=True) == []

    def test_top_drops(self, rothe, droop_ne, droop_sw):
        assert top_drops(rothe) == [droop_ne, droop_sw]


class TestAllBpds:
    def test_count(self, w):
        assert len(list(all_bpds(w))) == 3

    def test_grids(self, w, rothe, droop_ne, droop_sw):
        bpds = list(all_bpds(w))
        assert bpds[0] == rothe
        assert set(bpds) == {rothe, droop_ne, droop_sw}

    def test_lazy_iterator(self, w):
        enumerator = all_bpds(w)
        assert isinstance(enumerator, DepthFirstEnumerator)
        assert next(enumerator) == Rothe(w)

    @pytest.mark.parametrize(
        "w, count",
        [
            ([1], 1),
            ([2, 1], 1),
            ([1, 3, 2], 2),
            ([2, 1, 4, 3], 3),
            ([1, 4, 3, 2], 5),
        ],
    )
    def test_small_counts(self, w, count):
        assert len(list(all_bpds(w))) == count

    @pytest.mark.parametrize("w", [[3, 2, 5, 1, 4], [1, 4, 3, 2], [2, 4, 1, 3]])
    def test_reduced_with_permutation(self, w):
        bpds = list(all_bpds(w))
        assert len(set(bpds)) == len(bpds)
        for b in bpds:
            assert isreduced(b)
            assert bpd2perm(b) == w

    def test_invalid_permutation(self):
        with pytest.raises(InvalidInputError):
            all_bpds([1, 1])


class TestAllKbpds:
    def test_count(self, w):
        assert len(list(all_Kbpds(w))) == 4

    def test_contains_reduced(self, w, kbpd):
        kbpds = set(all_Kbpds(w))
        assert set(all_bpds(w)) < kbpds
        assert kbpd in kbpds

    def test_same_permutation(self, w):
        for b in all_Kbpds(w):
            assert bpd2perm(b) == w


class TestFlatBpds:
    def test_count(self, w):
        assert len(list(flat_bpds(w))) == 3

    def test_seed_is_made_flat(self):
        assert list(flat_bpds([1, 3, 2])) == [makeflat(Rothe([1, 3, 2]))]

    @pytest.mark.parametrize("w", [[3, 2, 5, 1, 4], [1, 4, 3, 2], [2, 1, 4, 3]])
    def test_flat_reduced_unique(self, w):
        bpds = list(flat_bpds(w))
        assert len(set(bpds)) == len(bpds)
        for b in bpds:
            assert isflat(b)
            assert isreduced(b)
            assert bpd2perm(b) == w


class TestTopBpds:
    def test_count(self):
        assert len(list(top_bpds([3, 1, 5, 2, 4]))) == 5

    def test_seed_keeps_top_pipe(self):
        """The Rothe BPD of 132 is skew-flat but not flat."""
        bpds = list(top_bpds([1, 3, 2]))
        assert bpds[0] == Rothe([1, 3, 2])
        assert len(bpds) == 2

    def test_skew_flat_reduced_unique(self):
        w = [3, 1, 5, 2, 4]
        bpds = list(top_bpds(w))
        assert len(set(bpds)) == len(bpds)
        for b in bpds:
            assert isflat(b, skew=True)
            assert isreduced(b)
            assert bpd2perm(b) == w
