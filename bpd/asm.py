"""
Bridge between BPDs and alternating sign matrices (ASMs).

An r-elbow reads as 1, a j-elbow as -1, every other tile as 0. Conversely, the
tiles of a BPD are determined by its elbows: pipes enter from the south border
of the grid and exit through its east border.
"""

import numpy as np
import numpy.typing as npt

from bpd.errors import InvalidInputError
from bpd.grid import BPD
from bpd.tiles import (
    BLANK,
    CROSS,
    EAST_EXIT,
    HORIZONTAL,
    J_ELBOW,
    NORTH_EXIT,
    R_ELBOW,
    VERTICAL,
)
from localtypes import AsmMatrix


def bpd2asm(b: BPD) -> AsmMatrix:
    """Convert a BPD to its ASM."""
    return np.select(
        [b.mtx == R_ELBOW, b.mtx == J_ELBOW], [1, -1], default=0
    ).astype(np.int8)


def is_asm(a: npt.ArrayLike) -> bool:
    """
    Check that a matrix is a partial ASM, i.e. a NW block of an ASM: entries
    lie in {-1, 0, 1} and every prefix sum of its rows and of its columns is
    0 or 1. The matrix need not be square.
    """
    matrix = np.asarray(a)
    if matrix.ndim != 2 or matrix.size == 0:
        return False
    if not np.isin(matrix, (-1, 0, 1)).all():
        return False

    for axis in (0, 1):
        prefix_sums = np.cumsum(matrix, axis=axis)
        if not np.isin(prefix_sums, (0, 1)).all():
            return False
    return True


def asm2bpd(a: npt.ArrayLike) -> BPD:
    """
    Convert an ASM to a BPD.

    Rows are rebuilt from the bottom up. A 0 entry is resolved from its
    neighbours: a pipe comes in from the west if the west tile exits east, and
    from the south if the south tile exits north. Below the last row every
    column carries a pipe, and nothing comes in west of the first column.

    Example:
        >>> print(asm2bpd([[0, 1], [1, 0]]))
         □ ╭─
         ╭─┼─
    """
    if not is_asm(a):
        raise InvalidInputError(
            f"Not an alternating sign matrix: {np.asarray(a).tolist()}"
        )
    asm = np.asarray(a).astype(np.int8)
    if asm.shape[0] != asm.shape[1]:
        raise InvalidInputError(f"A BPD needs a square ASM, got shape {asm.shape}")
    n = asm.shape[0]

    # Rows 1..n are the grid, row n + 1 and column 0 are the boundary
    m = np.zeros((n + 2, n + 1), dtype=np.int8)
    m[n + 1, :] = VERTICAL

    for i in range(n, 0, -1):
        for j in range(1, n + 1):
            entry = asm[i - 1, j - 1]
            if entry == 1:
                m[i, j] = R_ELBOW
            elif entry == -1:
                m[i, j] = J_ELBOW
            else:
                from_west = j > 1 and m[i, j - 1] in EAST_EXIT
                from_south = m[i + 1, j] in NORTH_EXIT
                if from_west and from_south:
                    m[i, j] = CROSS
                elif from_west:
                    m[i, j] = HORIZONTAL
                elif from_south:
                    m[i, j] = VERTICAL
                else:
                    m[i, j] = BLANK

    return BPD(m[1 : n + 1, 1:])


__all__ = ["bpd2asm", "asm2bpd", "is_asm"]
