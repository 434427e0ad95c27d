"""Tests for bpd/flat.py"""

import logging

import pytest
from bpd.enumeration import all_bpds, all_Kbpds
from bpd.flat import isflat, makeflat
from bpd.grid import BPD
from bpd.rothe import Rothe

# Rothe BPD of 132: the blank at (2, 2) sits below and right of the r-elbow at (1, 1)
NOT_FLAT = BPD.from_symbols(["/--", "|O/", "|/+"])
FLATTENED = BPD.from_symbols(["O/-", "/%/", "|/+"])


class TestIsFlat:
    def test_rothe_of_132(self):
        assert Rothe([1, 3, 2]) == NOT_FLAT
        assert not isflat(NOT_FLAT)

    def test_flat(self, rothe, droop_ne, droop_sw):
        assert isflat(rothe)
        assert isflat(droop_ne)
        assert isflat(droop_sw)

    def test_skew_tolerates_top_pipe(self):
        """The r-elbow at (1, 1) is on the top pipe."""
        assert isflat(NOT_FLAT, skew=True)

    def test_first_row_and_column_never_violate(self):
        assert isflat(BPD.from_symbols(["O/", "/+"]))


class TestMakeFlat:
    def test_fills_blank(self):
        assert makeflat(NOT_FLAT) == FLATTENED

    def test_skew_leaves_top_pipe(self):
        assert makeflat(NOT_FLAT, skew=True) == NOT_FLAT

    def test_flat_unchanged(self, rothe):
        assert makeflat(rothe) == rothe

    @pytest.mark.parametrize("skew", [False, True])
    @pytest.mark.parametrize("w", [[3, 2, 5, 1, 4], [1, 3, 2], [1, 4, 3, 2], [2, 1, 4, 3]])
    def test_result_is_flat_and_idempotent(self, w, skew):
        for b in list(all_bpds(w)) + list(all_Kbpds(w)):
            flat = makeflat(b, skew=skew)
            assert isflat(flat, skew=skew)
            assert makeflat(flat, skew=skew) == flat

    def test_logs_steps(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="bpd.flat"):
            makeflat(NOT_FLAT)
        assert "filled blank at" in caplog.text
