"""
Rothe BPDs: the canonical seed of every enumeration.
"""

import numpy as np

from bpd.errors import InvalidInputError
from bpd.grid import BPD
from bpd.tiles import BLANK, CROSS, HORIZONTAL, R_ELBOW, SOUTH_EXIT, VERTICAL
from localtypes import Permutation


def check_permutation(w: Permutation) -> None:
    """
    Rejects anything but n pairwise distinct integers forming a contiguous range.
    The range may start anywhere: [2, 4, 3] is a valid (shifted) permutation.
    """
    if len(w) == 0:
        raise InvalidInputError("A permutation needs at least one entry")
    if not all(isinstance(value, (int, np.integer)) for value in w):
        raise InvalidInputError(f"A permutation needs integer entries, got {w}")
    if len(set(w)) != len(w):
        raise InvalidInputError(f"Permutation entries must be pairwise distinct: {w}")
    if max(w) - min(w) != len(w) - 1:
        raise InvalidInputError(
            f"Permutation entries must form a contiguous range of integers: {w}"
        )


def Rothe(w: Permutation) -> BPD:
    """
    Construct the Rothe BPD for a permutation `w`.

    Row i has its r-elbow in the column of w[i] (shifted by min(w)), blanks or
    verticals to its west, and crosses or horizontals to its east, depending
    on whether a pipe comes down from the row above.

    Example:
        >>> print(Rothe([3, 2, 5, 1, 4]))
         □ □ ╭─────
         □ ╭─┼─────
         □ │ │ □ ╭─
         ╭─┼─┼───┼─
         │ │ │ ╭─┼─
    """
    check_permutation(w)
    n = len(w)
    m = min(w)
    padded = np.zeros((n + 1, n + 1), dtype=np.int8)

    # The virtual row 0 is blank, so row 1 falls out of the general rule
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            value = j + m - 1
            from_above = padded[i - 1, j] in SOUTH_EXIT
            if value < w[i - 1]:
                padded[i, j] = VERTICAL if from_above else BLANK
            elif value == w[i - 1]:
                padded[i, j] = R_ELBOW
            else:
                padded[i, j] = CROSS if from_above else HORIZONTAL

    return BPD.freeze(padded)


def dominant_part(b: BPD) -> list[int]:
    """
    Extract the partition in the NW corner of a BPD: the number of leading
    blanks of each row, down to the first row that starts with a pipe.
    """
    partition: list[int] = []
    for row in b.mtx[:-1].tolist():
        part = 0
        while part < len(row) and row[part] == BLANK:
            part += 1
        if part == 0:
            break
        partition.append(part)
    return partition


__all__ = ["Rothe", "check_permutation", "dominant_part"]
