"""
The six tiles of a bumpless pipe dream.

Each tile records which of the four edge midpoints of a unit cell are joined
by a pipe:
    BLANK       -> none
    CROSS       -> north-south and east-west, without turning
    R_ELBOW     -> south-east (the pipe turns from going up to going right)
    J_ELBOW     -> north-west (the pipe turns from going right to going up)
    VERTICAL    -> north-south
    HORIZONTAL  -> east-west
"""

from enum import IntEnum
from typing import Final


class Tile(IntEnum):
    """Tile codes, as stored in the int8 matrix of a BPD."""

    BLANK = 0
    CROSS = 1
    R_ELBOW = 2
    J_ELBOW = 3
    VERTICAL = 4
    HORIZONTAL = 5


BLANK: Final = Tile.BLANK
CROSS: Final = Tile.CROSS
R_ELBOW: Final = Tile.R_ELBOW
J_ELBOW: Final = Tile.J_ELBOW
VERTICAL: Final = Tile.VERTICAL
HORIZONTAL: Final = Tile.HORIZONTAL

# Tile classes
ELBOWS: Final[frozenset[int]] = frozenset({R_ELBOW, J_ELBOW})
ELBOWS_OR_BLANK: Final[frozenset[int]] = frozenset({R_ELBOW, J_ELBOW, BLANK})
EAST_EXIT: Final[frozenset[int]] = frozenset({R_ELBOW, CROSS, HORIZONTAL})
NORTH_EXIT: Final[frozenset[int]] = frozenset({J_ELBOW, CROSS, VERTICAL})
SOUTH_EXIT: Final[frozenset[int]] = frozenset({R_ELBOW, CROSS, VERTICAL})


__all__ = [
    "Tile",
    "BLANK",
    "CROSS",
    "R_ELBOW",
    "J_ELBOW",
    "VERTICAL",
    "HORIZONTAL",
    "ELBOWS",
    "ELBOWS_OR_BLANK",
    "EAST_EXIT",
    "NORTH_EXIT",
    "SOUTH_EXIT",
]
