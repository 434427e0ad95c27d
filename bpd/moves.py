"""
Droop moves and their relatives.

Every move acts on a rectangle (i1, j1, i2, j2), 1-indexed, with NW corner
(i1, j1) and SE corner (i2, j2):

    (i1, j1) NW ----- north border ----- NE (i1, j2)
       |                                   |
    west border        interior        east border
       |                                   |
    (i2, j1) SW ----- south border ----- SE (i2, j2)

Borders are taken strictly between their two corners.

Each move comes as a pair:
    can_xxx(b, ...) - pure legality predicate
    xxx(b, ...)     - applier, returning a new BPD. It raises a
                      PreconditionError if the predicate does not hold.

Moves:
    droop / undroop      - the pipe turning at NW is pulled down to turn at SE
    Kdroop / unKdroop    - K-theoretic droop onto a j-elbow
    drip                 - droop on a 1x1 rectangle between flat BPDs
    flat_drop            - droop between flat BPDs, followed by makeflat
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from bpd.errors import PreconditionError
from bpd.grid import BPD
from bpd.pipes import istop
from bpd.tiles import (
    BLANK,
    CROSS,
    ELBOWS,
    ELBOWS_OR_BLANK,
    HORIZONTAL,
    J_ELBOW,
    R_ELBOW,
    VERTICAL,
)
from localtypes import Rectangle, TileMatrix

# Tile rewrites of a droop, per part of the rectangle.
# Tiles absent from a mapping are left unchanged.
NE_DROOP: dict[int, int] = {HORIZONTAL: R_ELBOW, J_ELBOW: VERTICAL}
SW_DROOP: dict[int, int] = {VERTICAL: R_ELBOW, J_ELBOW: HORIZONTAL}
WEST_DROOP: dict[int, int] = {VERTICAL: BLANK, CROSS: HORIZONTAL}
NORTH_DROOP: dict[int, int] = {HORIZONTAL: BLANK, CROSS: VERTICAL}
EAST_DROOP: dict[int, int] = {BLANK: VERTICAL, HORIZONTAL: CROSS}
SOUTH_DROOP: dict[int, int] = {BLANK: HORIZONTAL, VERTICAL: CROSS}


def _inverse(mapping: Mapping[int, int]) -> dict[int, int]:
    return {target: source for source, target in mapping.items()}


# K-droops also straighten the r-elbow met on the east or south border
EAST_KDROOP: dict[int, int] = EAST_DROOP | {R_ELBOW: CROSS}
SOUTH_KDROOP: dict[int, int] = SOUTH_DROOP | {R_ELBOW: CROSS}


# Helpers
def _relabel(region: TileMatrix, mapping: Mapping[int, int]) -> None:
    """Rewrites in place the tiles of a matrix view according to mapping."""
    original = region.copy()
    for source, target in mapping.items():
        region[original == source] = target


def _relabel_cell(m: TileMatrix, i: int, j: int, mapping: Mapping[int, int]) -> None:
    m[i, j] = mapping.get(int(m[i, j]), m[i, j])


def _tiles(m: TileMatrix, i_min: int, i_max: int, j_min: int, j_max: int) -> set[int]:
    """Set of tiles in the closed block [i_min, i_max] x [j_min, j_max]."""
    return set(m[i_min : i_max + 1, j_min : j_max + 1].ravel().tolist())


def _interior(m: TileMatrix, i1: int, j1: int, i2: int, j2: int) -> set[int]:
    return _tiles(m, i1 + 1, i2 - 1, j1 + 1, j2 - 1)


def _without_corners(m: TileMatrix, i1: int, j1: int, i2: int, j2: int) -> set[int]:
    """Tiles of the four borders and the interior, corners excluded."""
    return (
        _tiles(m, i1, i1, j1 + 1, j2 - 1)
        | _tiles(m, i2, i2, j1 + 1, j2 - 1)
        | _tiles(m, i1 + 1, i2 - 1, j1, j2)
    )


def _first(line: TileMatrix, tile: int, offset: int, default: int) -> int:
    """Index (shifted by offset) of the first occurrence of tile in line."""
    found = np.flatnonzero(line == tile)
    return offset + int(found[0]) if found.size else default


def _is_proper(i1: int, j1: int, i2: int, j2: int) -> bool:
    return i2 >= i1 + 1 and j2 >= j1 + 1


def _require(legal: bool, move: str, b: BPD, rectangle: Rectangle) -> None:
    if not legal:
        raise PreconditionError(f"Cannot {move} on rectangle {rectangle} of\n{b}")


# Legality
def can_droop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> bool:
    """Check if a droop move can be done."""
    b.check_rectangle(i1, j1, i2, j2)
    if not _is_proper(i1, j1, i2, j2):
        return False

    m = b.padded
    if (m[i1, j1], m[i2, j2]) != (R_ELBOW, BLANK):
        return False

    # The NW r-elbow must be the only elbow of the closed rectangle
    block = m[i1 : i2 + 1, j1 : j2 + 1]
    return int(np.count_nonzero((block == R_ELBOW) | (block == J_ELBOW))) == 1


def can_flat_drop(
    b: BPD, i1: int, j1: int, i2: int, j2: int, skew: bool = False
) -> bool:
    """
    Check if a flat drop can be done: a droop on a rectangle larger than 1x1
    whose borders and interior carry no elbow and no blank.
    With skew, the top pipe is not allowed to drop.
    """
    b.check_rectangle(i1, j1, i2, j2)
    if skew and istop(b, (i1, j1)):
        return False
    if not _is_proper(i1, j1, i2, j2) or (i2, j2) == (i1 + 1, j1 + 1):
        return False

    m = b.padded
    if (m[i1, j1], m[i2, j2]) != (R_ELBOW, BLANK):
        return False

    return not _without_corners(m, i1, j1, i2, j2) & ELBOWS_OR_BLANK


def can_drip(b: BPD, i1: int, j1: int) -> bool:
    """Check if a drip (small droop) can be done."""
    b.check_rectangle(i1, j1, i1 + 1, j1 + 1)
    m = b.padded
    if (m[i1, j1], m[i1 + 1, j1 + 1]) != (R_ELBOW, BLANK):
        return False
    return m[i1, j1 + 1] in (J_ELBOW, HORIZONTAL) and m[i1 + 1, j1] in (
        J_ELBOW,
        VERTICAL,
    )


def can_Kdroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> bool:
    """Check if a K-droop move can be done."""
    b.check_rectangle(i1, j1, i2, j2)
    if not _is_proper(i1, j1, i2, j2):
        return False

    m = b.padded
    if (m[i1, j1], m[i2, j2]) != (R_ELBOW, J_ELBOW):
        return False
    if (int(m[i1, j2]), int(m[i2, j1])) not in {(CROSS, VERTICAL), (HORIZONTAL, CROSS)}:
        return False

    # N and W borders
    if not _tiles(m, i1, i1, j1 + 1, j2 - 1) <= {CROSS, HORIZONTAL}:
        return False
    if not _tiles(m, i1 + 1, i2 - 1, j1, j1) <= {CROSS, VERTICAL}:
        return False

    # S and E borders: no j-elbow, at most one r-elbow between the two
    south = m[i2, j1 + 1 : j2]
    east = m[i1 + 1 : i2, j2]
    if (south == J_ELBOW).any() or (east == J_ELBOW).any():
        return False
    if np.count_nonzero(south == R_ELBOW) + np.count_nonzero(east == R_ELBOW) > 1:
        return False

    return not _interior(m, i1, j1, i2, j2) & ELBOWS


def can_undroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> bool:
    """Check if an undroop move can be done."""
    b.check_rectangle(i1, j1, i2, j2)
    if not _is_proper(i1, j1, i2, j2):
        return False

    m = b.padded
    if (m[i1, j1], m[i2, j2]) != (BLANK, J_ELBOW):
        return False
    if m[i1, j2] not in (R_ELBOW, VERTICAL) or m[i2, j1] not in (R_ELBOW, HORIZONTAL):
        return False

    borders_ok = (
        _tiles(m, i1, i1, j1 + 1, j2 - 1) <= {BLANK, VERTICAL}
        and _tiles(m, i2, i2, j1 + 1, j2 - 1) <= {CROSS, HORIZONTAL}
        and _tiles(m, i1 + 1, i2 - 1, j1, j1) <= {BLANK, HORIZONTAL}
        and _tiles(m, i1 + 1, i2 - 1, j2, j2) <= {CROSS, VERTICAL}
    )
    return borders_ok and not _interior(m, i1, j1, i2, j2) & ELBOWS


def can_unKdroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> bool:
    """Check if an unK-droop move can be done."""
    b.check_rectangle(i1, j1, i2, j2)
    if not _is_proper(i1, j1, i2, j2):
        return False

    m = b.padded
    if (m[i1, j1], m[i2, j2]) != (BLANK, J_ELBOW):
        return False
    if (int(m[i1, j2]), int(m[i2, j1])) not in {(CROSS, R_ELBOW), (R_ELBOW, CROSS)}:
        return False

    # N and W borders: no j-elbow, at most one r-elbow between the two
    north = m[i1, j1 + 1 : j2]
    west = m[i1 + 1 : i2, j1]
    if (north == J_ELBOW).any() or (west == J_ELBOW).any():
        return False
    if np.count_nonzero(north == R_ELBOW) + np.count_nonzero(west == R_ELBOW) > 1:
        return False

    # S and E borders
    if not _tiles(m, i2, i2, j1 + 1, j2 - 1) <= {CROSS, HORIZONTAL}:
        return False
    if not _tiles(m, i1 + 1, i2 - 1, j2, j2) <= {CROSS, VERTICAL}:
        return False

    return not _interior(m, i1, j1, i2, j2) & ELBOWS


# Rewrites, assuming legality
def droop_rewrite(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    """
    The droop rewrite without any legality check.
    Shared by droop, drip, flat drops and makeflat, whose legality conditions differ.
    """
    m = b.thaw()

    # corners
    m[i1, j1] = BLANK
    m[i2, j2] = J_ELBOW
    _relabel_cell(m, i1, j2, NE_DROOP)
    _relabel_cell(m, i2, j1, SW_DROOP)

    # borders
    _relabel(m[i1 + 1 : i2, j1], WEST_DROOP)
    _relabel(m[i1, j1 + 1 : j2], NORTH_DROOP)
    _relabel(m[i1 + 1 : i2, j2], EAST_DROOP)
    _relabel(m[i2, j1 + 1 : j2], SOUTH_DROOP)

    return BPD.freeze(m)


def _Kdroop_rewrite(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    m = b.thaw()

    # The r-elbow on the east (resp. south) border, if any, acts as a second SE corner:
    # the pipe turning there is straightened along row ii (resp. column jj)
    ii = _first(m[i1 + 1 : i2, j2], R_ELBOW, i1 + 1, i2)
    jj = _first(m[i2, j1 + 1 : j2], R_ELBOW, j1 + 1, j2)

    # corners, the SE j-elbow stays
    m[i1, j1] = BLANK
    _relabel_cell(m, i1, j2, NE_DROOP)
    _relabel_cell(m, i2, j1, SW_DROOP)

    _relabel(m[i1 + 1 : i2, j2], EAST_KDROOP)
    _relabel(m[i2, j1 + 1 : j2], SOUTH_KDROOP)

    _relabel(m[i1 + 1 : ii, j1], WEST_DROOP)
    if ii < i2:
        m[ii, j1] = R_ELBOW
        _relabel(m[ii, j1 + 1 : j2], SOUTH_DROOP)

    _relabel(m[i1, j1 + 1 : jj], NORTH_DROOP)
    if jj < j2:
        m[i1, jj] = R_ELBOW
        _relabel(m[i1 + 1 : i2, jj], EAST_DROOP)

    return BPD.freeze(m)


# Appliers
def droop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    """Do a droop on the rectangle with NW corner (i1, j1) and SE corner (i2, j2)."""
    _require(can_droop(b, i1, j1, i2, j2), "droop", b, Rectangle(i1, j1, i2, j2))
    return droop_rewrite(b, i1, j1, i2, j2)


def flat_drop(
    b: BPD, i1: int, j1: int, i2: int, j2: int, skew: bool = False
) -> BPD:
    """Do a flat drop: a droop followed by makeflat."""
    from bpd.flat import makeflat

    _require(
        can_flat_drop(b, i1, j1, i2, j2, skew=skew),
        "flat drop",
        b,
        Rectangle(i1, j1, i2, j2),
    )
    return makeflat(droop_rewrite(b, i1, j1, i2, j2), skew=skew)


def drip(b: BPD, i1: int, j1: int) -> BPD:
    """Do a drip: the droop on the 1x1 rectangle with NW corner (i1, j1)."""
    _require(can_drip(b, i1, j1), "drip", b, Rectangle(i1, j1, i1 + 1, j1 + 1))
    return droop_rewrite(b, i1, j1, i1 + 1, j1 + 1)


def Kdroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    """Do a K-droop on the rectangle with NW corner (i1, j1) and SE corner (i2, j2)."""
    _require(can_Kdroop(b, i1, j1, i2, j2), "K-droop", b, Rectangle(i1, j1, i2, j2))
    return _Kdroop_rewrite(b, i1, j1, i2, j2)


def undroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    """Undo the droop on the rectangle with NW corner (i1, j1) and SE corner (i2, j2)."""
    _require(can_undroop(b, i1, j1, i2, j2), "undroop", b, Rectangle(i1, j1, i2, j2))
    m = b.thaw()

    m[i1, j1] = R_ELBOW
    m[i2, j2] = BLANK
    _relabel_cell(m, i1, j2, _inverse(NE_DROOP))
    _relabel_cell(m, i2, j1, _inverse(SW_DROOP))

    _relabel(m[i1 + 1 : i2, j1], _inverse(WEST_DROOP))
    _relabel(m[i1, j1 + 1 : j2], _inverse(NORTH_DROOP))
    _relabel(m[i1 + 1 : i2, j2], _inverse(EAST_DROOP))
    _relabel(m[i2, j1 + 1 : j2], _inverse(SOUTH_DROOP))

    return BPD.freeze(m)


def unKdroop(b: BPD, i1: int, j1: int, i2: int, j2: int) -> BPD:
    """Undo the K-droop on the rectangle with NW corner (i1, j1) and SE corner (i2, j2)."""
    _require(
        can_unKdroop(b, i1, j1, i2, j2), "unK-droop", b, Rectangle(i1, j1, i2, j2)
    )
    m = b.thaw()

    # The straightened row (resp. column) starts at the r-elbow injected on the
    # west (resp. north) border
    ii = _first(m[i1 + 1 : i2, j1], R_ELBOW, i1 + 1, i2)
    jj = _first(m[i1, j1 + 1 : j2], R_ELBOW, j1 + 1, j2)

    # corners: a cross at NE or SW was a cross, the SE j-elbow stays
    m[i1, j1] = R_ELBOW
    _relabel_cell(m, i1, j2, {R_ELBOW: HORIZONTAL})
    _relabel_cell(m, i2, j1, {R_ELBOW: VERTICAL})

    # east and south borders are only redrawn up to the second corner
    if ii < i2:
        _relabel(m[i1 + 1 : ii, j2], _inverse(EAST_DROOP))
        m[ii, j2] = R_ELBOW
    if jj < j2:
        _relabel(m[i2, j1 + 1 : jj], _inverse(SOUTH_DROOP))
        m[i2, jj] = R_ELBOW

    _relabel(m[i1 + 1 : i2, j1], _inverse(WEST_DROOP))
    if ii < i2:
        m[ii, j1] = VERTICAL
        _relabel(m[ii, j1 + 1 : j2], _inverse(SOUTH_DROOP))

    _relabel(m[i1, j1 + 1 : j2], _inverse(NORTH_DROOP))
    if jj < j2:
        m[i1, jj] = HORIZONTAL
        _relabel(m[i1 + 1 : i2, jj], _inverse(EAST_DROOP))

    return BPD.freeze(m)


__all__ = [
    "can_droop",
    "can_flat_drop",
    "can_drip",
    "can_Kdroop",
    "can_undroop",
    "can_unKdroop",
    "droop_rewrite",
    "droop",
    "flat_drop",
    "drip",
    "Kdroop",
    "undroop",
    "unKdroop",
]
