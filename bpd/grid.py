"""
The BPD value type.

A bumpless pipe dream is stored as an n x n numpy matrix of int8 tile codes
(see bpd.tiles). Instances are immutable: the matrix is read-only and every
move builds a new BPD from a copy.

Indexing conventions:
    - mtx: the plain n x n matrix, 0-indexed, mtx[row - 1, col - 1]
    - padded: an (n + 1) x (n + 1) matrix whose row 0 and column 0 are unused,
      so that padded[i, j] is the tile of the 1-indexed cell (i, j).
      Move code works on padded copies (see `thaw` and `freeze`).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from bpd.errors import InvalidInputError, OutOfBoundsError
from bpd.tiles import Tile
from constants import GLYPHS, SYMBOLS
from localtypes import Key, Rectangle, TileMatrix

NUM_TILES = len(Tile)


@dataclass(frozen=True, eq=False)
class BPD:
    """
    A bumpless pipe dream.

    Equality is structural (cell by cell) and the canonical key `(n, bytes)`
    is used for hashing, so BPDs can be stored in sets and used as dict keys.

    Example:
        >>> b = BPD([[0, 0, 2], [0, 2, 1], [2, 1, 1]])
        >>> b == BPD.from_symbols(["OO/", "O/+", "/++"])
        True
        >>> b[1, 3]
        <Tile.R_ELBOW: 2>
    """

    mtx: TileMatrix
    _padded: TileMatrix = field(init=False, repr=False)

    def __post_init__(self) -> None:
        matrix = np.asarray(self.mtx)

        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.size == 0:
            raise InvalidInputError(
                f"A BPD needs a non-empty square matrix, got shape {matrix.shape}"
            )
        if matrix.dtype.kind not in "iu":
            raise InvalidInputError(
                f"A BPD needs integer tile codes, got dtype {matrix.dtype}"
                " (use BPD.from_symbols for symbol grids)"
            )
        if matrix.min() < 0 or matrix.max() >= NUM_TILES:
            raise InvalidInputError(
                f"Tile codes must lie in [0, {NUM_TILES - 1}], got {matrix.tolist()}"
            )

        mtx = matrix.astype(np.int8)  # astype copies: the caller's array stays writable
        mtx.setflags(write=False)
        object.__setattr__(self, "mtx", mtx)
        object.__setattr__(self, "_padded", _pad(mtx))

    # Constructors
    @classmethod
    def from_symbols(cls, rows: Sequence[str] | Sequence[Sequence[str]]) -> BPD:
        """
        Build a BPD from ASCII symbols: O (blank), + (cross), / (r-elbow),
        % (j-elbow), | (vertical), - (horizontal).
        Rows can be strings ("OO/") or sequences of one-character strings.
        """
        try:
            codes = [[SYMBOLS[symbol] for symbol in row] for row in rows]
        except KeyError as e:
            raise InvalidInputError(
                f"Unknown tile symbol {e.args[0]!r}, expected one of {''.join(SYMBOLS)}"
            ) from e
        if any(len(row) != len(codes) for row in codes):
            raise InvalidInputError(f"A BPD needs a square grid of symbols: {rows}")
        return cls(np.array(codes, dtype=np.int8))

    @classmethod
    def freeze(cls, padded: TileMatrix) -> BPD:
        """Build a BPD from a padded work matrix (see `thaw`)."""
        return cls(padded[1:, 1:])

    # Accessors
    @property
    def size(self) -> int:
        return self.mtx.shape[0]

    @property
    def padded(self) -> TileMatrix:
        """Read-only 1-indexed view: padded[i, j] is the tile at cell (i, j)."""
        return self._padded

    @property
    def key(self) -> Key:
        """Canonical serialization, used as the node identity during enumeration."""
        return (self.size, self.mtx.tobytes())

    def thaw(self) -> TileMatrix:
        """Writable 1-indexed copy of the grid, to be turned back with `freeze`."""
        return self._padded.copy()

    def cells(self) -> tuple[tuple[Tile, ...], ...]:
        """Raw cell contents, row by row."""
        return tuple(tuple(Tile(code) for code in row) for row in self.mtx.tolist())

    def __getitem__(self, cell: tuple[int, int]) -> Tile:
        i, j = cell
        self.check_cell(i, j)
        return Tile(int(self._padded[i, j]))

    def check_cell(self, i: int, j: int) -> None:
        n = self.size
        if not (1 <= i <= n and 1 <= j <= n):
            raise OutOfBoundsError(f"Cell {(i, j)} is outside of the {n}x{n} grid")

    def check_rectangle(self, i1: int, j1: int, i2: int, j2: int) -> None:
        n = self.size
        if not all(1 <= index <= n for index in (i1, j1, i2, j2)):
            raise OutOfBoundsError(
                f"Rectangle {Rectangle(i1, j1, i2, j2)} is outside of the {n}x{n} grid"
            )

    # Value semantics
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BPD):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return "\n".join(
            " " + "".join(GLYPHS[code] for code in row) for row in self.mtx.tolist()
        )

    def __repr__(self) -> str:
        return f"BPD({self.mtx.tolist()})"


def _pad(mtx: TileMatrix) -> TileMatrix:
    n = mtx.shape[0]
    padded = np.zeros((n + 1, n + 1), dtype=np.int8)
    padded[1:, 1:] = mtx
    padded.setflags(write=False)
    return padded


__all__ = ["BPD", "NUM_TILES"]
