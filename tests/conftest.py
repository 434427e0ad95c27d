"""Grids shared by the test modules, built from the permutation 32514."""

import pytest
from bpd.grid import BPD
from bpd.rothe import Rothe


@pytest.fixture
def w() -> list[int]:
    return [3, 2, 5, 1, 4]


@pytest.fixture
def rothe(w) -> BPD:
    return Rothe(w)


@pytest.fixture
def droop_ne() -> BPD:
    """Rothe BPD of 32514 drooped on (1, 3, 3, 4)."""
    return BPD.from_symbols(["OOO/-", "O/-+-", "O|/%/", "/++-+", "|||/+"])


@pytest.fixture
def droop_sw() -> BPD:
    """Rothe BPD of 32514 drooped on (2, 2, 3, 4)."""
    return BPD.from_symbols(["OO/--", "OO|/-", "O/+%/", "/++-+", "|||/+"])


@pytest.fixture
def kbpd() -> BPD:
    """The K-theoretic BPD of 32514 that is not reduced."""
    return BPD.from_symbols(["OOO/-", "OO/+-", "O/+%/", "/++-+", "|||/+"])
