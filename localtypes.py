"""
Type definitions for bumpless pipe dream operations.

This module contains the custom types used throughout the bpd package,
organized by their primary use cases.

Coordinates are 1-indexed (row, column) pairs, following the usual
matrix convention for BPDs: (1, 1) is the north-west cell.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, TypeAlias

import numpy as np
import numpy.typing as npt


# Coordinate systems
class Cell(NamedTuple):
    row: int
    col: int


class Rectangle(NamedTuple):
    """Footprint of a move: NW corner (i1, j1) and SE corner (i2, j2)."""

    i1: int
    j1: int
    i2: int
    j2: int


# Tile grids
TileCode: TypeAlias = int  # 0-5, see bpd.tiles.Tile
TileMatrix: TypeAlias = npt.NDArray[np.int8]  # mtx[row-1, col-1] -> tile code
Key: TypeAlias = tuple[int, bytes]  # Canonical serialization of a grid

# Cells as consumed by the display layer: a plain tile or a (label, highlight) pair
Annotated: TypeAlias = tuple[str, int]
TileLike: TypeAlias = TileCode | Annotated
AnnotatedGrid: TypeAlias = Sequence[Sequence[TileLike]]

# Permutations and words
Permutation: TypeAlias = Sequence[int]  # One-line notation, any contiguous range
Word: TypeAlias = list[int]  # Letters k standing for simple transpositions s_k

# Alternating sign matrices
AsmMatrix: TypeAlias = npt.NDArray[np.int8]


__all__ = [
    # Coordinate types
    "Cell",
    "Rectangle",
    # Grid types
    "TileCode",
    "TileMatrix",
    "Key",
    # Display types
    "Annotated",
    "TileLike",
    "AnnotatedGrid",
    # Combinatorial types
    "Permutation",
    "Word",
    "AsmMatrix",
]
