"""
Enumeration of the BPDs of a permutation.

Successor functions (one move away from a BPD):
    all_droops(b)             - every legal droop
    all_drips(b)              - every legal drip
    all_Kdroops(b)            - every legal droop and K-droop, without repeats
    flat_drops(b, skew)       - every legal flat drop, made flat
    top_drops(b)              - drips and flat drops of the top pipe, made skew-flat

Engines (lazy iterators, each BPD produced exactly once):
    all_bpds(w)   - reduced BPDs, from droops
    all_Kbpds(w)  - K-theoretic BPDs, from droops and K-droops
    flat_bpds(w)  - flat BPDs, from flat drops
    top_bpds(w)   - skew-flat BPDs, from moves of the top pipe

Example:
    >>> len(list(all_bpds([3, 2, 5, 1, 4])))
    3
"""

import logging
from typing import Iterator

from bpd.flat import makeflat
from bpd.grid import BPD
from bpd.moves import (
    Kdroop,
    can_drip,
    can_droop,
    can_flat_drop,
    can_Kdroop,
    droop,
    droop_rewrite,
)
from bpd.pipes import istop
from bpd.rothe import Rothe
from localtypes import Permutation, Rectangle
from utils.algorithms.search import DepthFirstEnumerator

logger = logging.getLogger(__name__)


def _rectangles(
    n: int, i1: int | None = None, j1: int | None = None
) -> Iterator[Rectangle]:
    """Proper rectangles of an n x n grid in lexicographic order.
    Fixing i1 and j1 restricts them to a given NW corner."""
    rows = range(1, n) if i1 is None else (i1,)
    cols = range(1, n) if j1 is None else (j1,)
    for r1 in rows:
        for c1 in cols:
            for r2 in range(r1 + 1, n + 1):
                for c2 in range(c1 + 1, n + 1):
                    yield Rectangle(r1, c1, r2, c2)


def _key(b: BPD):
    return b.key


# Successors
def all_droops(b: BPD) -> list[BPD]:
    """All BPDs obtained from b by one droop."""
    return [droop(b, *rect) for rect in _rectangles(b.size) if can_droop(b, *rect)]


def all_drips(b: BPD) -> list[BPD]:
    """All BPDs obtained from b by one drip."""
    n = b.size
    return [
        droop_rewrite(b, i1, j1, i1 + 1, j1 + 1)
        for i1 in range(1, n)
        for j1 in range(1, n)
        if can_drip(b, i1, j1)
    ]


def all_Kdroops(b: BPD) -> list[BPD]:
    """
    All BPDs obtained from b by one droop or one K-droop. On each rectangle
    the droop comes before the K-droop; a K-droop equal to an earlier result
    is dropped.
    """
    found: dict[BPD, None] = {}
    for rect in _rectangles(b.size):
        if can_droop(b, *rect):
            found.setdefault(droop(b, *rect))
        if can_Kdroop(b, *rect):
            found.setdefault(Kdroop(b, *rect))
    return list(found)


def flat_drops(b: BPD, skew: bool = False) -> list[BPD]:
    """All flat BPDs obtained from b by one flat drop (skew: the top pipe stays)."""
    return [
        makeflat(droop_rewrite(b, *rect), skew=skew)
        for rect in _rectangles(b.size)
        if can_flat_drop(b, *rect, skew=skew)
    ]


def top_drops(b: BPD) -> list[BPD]:
    """
    All skew-flat BPDs obtained from b by moving only the top pipe: a drip or
    a flat drop from a cell of the top pipe, followed by skew makeflat.
    """
    n = b.size
    drops: list[BPD] = []
    for i1 in range(1, n):
        for j1 in range(1, n):
            if not istop(b, (i1, j1)):
                continue
            for rect in _rectangles(n, i1, j1):
                is_drip = (rect.i2, rect.j2) == (i1 + 1, j1 + 1)
                if (is_drip and can_drip(b, i1, j1)) or can_flat_drop(b, *rect):
                    drops.append(makeflat(droop_rewrite(b, *rect), skew=True))
    return drops


# Engines
def all_bpds(w: Permutation) -> DepthFirstEnumerator[BPD]:
    """Iterate over all reduced BPDs of w, starting from its Rothe BPD."""
    logger.debug(f"Enumerating BPDs of {list(w)}")
    return DepthFirstEnumerator(Rothe(w), all_droops, key=_key)


def all_Kbpds(w: Permutation) -> DepthFirstEnumerator[BPD]:
    """Iterate over all K-theoretic BPDs of w, starting from its Rothe BPD."""
    logger.debug(f"Enumerating K-BPDs of {list(w)}")
    return DepthFirstEnumerator(Rothe(w), all_Kdroops, key=_key)


def flat_bpds(w: Permutation) -> DepthFirstEnumerator[BPD]:
    """Iterate over all flat BPDs of w, starting from its flattened Rothe BPD."""
    logger.debug(f"Enumerating flat BPDs of {list(w)}")
    return DepthFirstEnumerator(Rothe(w), flat_drops, normalize=makeflat, key=_key)


def top_bpds(w: Permutation) -> DepthFirstEnumerator[BPD]:
    """Iterate over all skew-flat BPDs of w, moving only the top pipe."""
    logger.debug(f"Enumerating skew-flat BPDs of {list(w)}")
    return DepthFirstEnumerator(
        Rothe(w), top_drops, normalize=_makeflat_skew, key=_key
    )


def _makeflat_skew(b: BPD) -> BPD:
    return makeflat(b, skew=True)


__all__ = [
    "all_droops",
    "all_drips",
    "all_Kdroops",
    "flat_drops",
    "top_drops",
    "all_bpds",
    "all_Kbpds",
    "flat_bpds",
    "top_bpds",
]
