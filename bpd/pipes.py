"""
Pipes, words and permutations of a BPD.

Functions:
    countpipes(b, cell)  - Pipe count along the NW diagonal of a non-blank cell
    istop(b, cell)       - Whether a cell belongs to the top pipe
    bpd2word(b)          - Word in simple transpositions, read off the crosses
    word2perm(word)      - 0-Hecke (Demazure) product of a word
    bpd2perm(b)          - Permutation of a BPD
    coxeter_length(w)    - Number of inversions of a permutation
    countboxes(b)        - Number of blank tiles
    isreduced(b)         - Whether the blanks of b match the length of its permutation
"""

import numpy as np

from bpd.errors import InvalidInputError
from bpd.grid import BPD
from bpd.tiles import BLANK, CROSS
from localtypes import Permutation, TileMatrix, Word


def countpipes(b: BPD, cell: tuple[int, int]) -> int | None:
    """
    Counts the pipes met on the diagonal strictly NW of a non-blank cell,
    starting from 1: a cross adds 2, any other non-blank tile adds 1.
    Returns None on a blank cell.
    """
    i, j = cell
    b.check_cell(i, j)
    if b.padded[i, j] == BLANK:
        return None
    return _diagonal_count(b.padded, i, j)


def _diagonal_count(m: TileMatrix, i: int, j: int) -> int:
    k = 1
    for s in range(1, min(i, j)):
        tile = m[i - s, j - s]
        if tile == CROSS:
            k += 2
        elif tile != BLANK:
            k += 1
    return k


def istop(b: BPD, cell: tuple[int, int]) -> bool:
    """A non-blank cell is on the top pipe when nothing lies NW of it."""
    return countpipes(b, cell) == 1


def bpd2word(b: BPD) -> Word:
    """
    Extract the word of a BPD: for each cross, the index k of the simple
    transposition s_k it stands for.

    Crosses are read diagonal by diagonal, from the SW corner of the grid to
    its NE corner, each diagonal from its SE end to its NW end.
    """
    n = b.size
    m = b.padded
    word: Word = []
    for offset in range(1 - n, n):  # offset = j - i
        i_max = min(n, n - offset)
        for i in range(i_max, max(1, 1 - offset) - 1, -1):
            j = i + offset
            if m[i, j] == CROSS:
                word.append(_diagonal_count(m, i, j))
    return word


def word2perm(word: Word) -> list[int]:
    """
    The 0-Hecke (Demazure) product of a word, in one-line notation on
    {1, ..., max(word) + 1}: letters are applied left to right, and a letter
    k swaps the entries at positions k and k + 1 only if they are increasing.
    """
    if any(k < 1 for k in word):
        raise InvalidInputError(f"Letters of a word must be positive, got {word}")

    perm = list(range(1, max(word, default=0) + 2))
    for k in word:
        if perm[k - 1] < perm[k]:
            perm[k - 1], perm[k] = perm[k], perm[k - 1]
    return perm


def bpd2perm(b: BPD) -> list[int]:
    """Get the permutation associated to a BPD."""
    return word2perm(bpd2word(b))


def coxeter_length(w: Permutation) -> int:
    """Length of a permutation: its number of inversions."""
    values = np.asarray(w)
    inversions = np.triu(values[:, None] > values[None, :], k=1)
    return int(np.count_nonzero(inversions))


def countboxes(b: BPD) -> int:
    """Number of blank tiles."""
    return int(np.count_nonzero(b.mtx == BLANK))


def isreduced(b: BPD) -> bool:
    """Decide if a BPD is reduced."""
    return coxeter_length(bpd2perm(b)) == countboxes(b)


__all__ = [
    "countpipes",
    "istop",
    "bpd2word",
    "word2perm",
    "bpd2perm",
    "coxeter_length",
    "countboxes",
    "isreduced",
]
