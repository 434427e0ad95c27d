"""
Flat BPDs and the makeflat normalizer.

A cell (i, j) with i, j >= 2 violates flatness when it is blank, its north and
west neighbours are not, and an r-elbow sits diagonally NW of it at (i-1, j-1).
Such a cell can always be filled by a drip, and makeflat keeps dripping until
no violation is left.

In skew mode, violations whose r-elbow belongs to the top pipe are tolerated:
the top pipe is kept in place.
"""

import logging
from typing import Iterator

from bpd.grid import BPD
from bpd.moves import droop_rewrite
from bpd.pipes import istop
from bpd.tiles import BLANK, R_ELBOW
from localtypes import Cell

logger = logging.getLogger(__name__)


def _violations(b: BPD, skew: bool) -> Iterator[Cell]:
    """Yields violating cells in row-major order."""
    n = b.size
    m = b.padded
    for i in range(2, n + 1):
        for j in range(2, n + 1):
            if m[i, j] != BLANK or m[i - 1, j - 1] != R_ELBOW:
                continue
            if m[i - 1, j] == BLANK or m[i, j - 1] == BLANK:
                continue
            if skew and istop(b, (i - 1, j - 1)):
                continue
            yield Cell(i, j)


def isflat(b: BPD, skew: bool = False) -> bool:
    """Check if a BPD is flat (skew-flat with `skew`)."""
    return next(_violations(b, skew), None) is None


def makeflat(b: BPD, skew: bool = False) -> BPD:
    """
    Normalize a BPD to its flat (or skew-flat) representative.

    Each pass fixes the first violating cell in row-major order, until a pass
    finds none. The result is flat, and makeflat is idempotent.
    """
    steps = 0
    while (cell := next(_violations(b, skew), None)) is not None:
        i, j = cell
        b = droop_rewrite(b, i - 1, j - 1, i, j)
        steps += 1
        logger.debug(f"makeflat: filled blank at {cell}")

    if steps:
        logger.debug(f"makeflat: {steps} step(s), skew={skew}")
    return b


__all__ = ["isflat", "makeflat"]
