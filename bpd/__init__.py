"""
Bumpless pipe dreams: enumeration by droop moves.

A bumpless pipe dream (BPD) of size n is an n x n grid of tiles carrying n
pipes, entering from the south border and exiting through the east border,
which cross but never bump. The BPDs of a permutation are all reached from its
Rothe BPD by sequences of droops, and their K-theoretic, flat and skew-flat
variants by the corresponding moves.

The package provides:
- The BPD value type, backed by a read-only numpy matrix of tile codes
- The Rothe BPD of a permutation
- Droop, drip, flat drop and K-droop moves, with legality predicates and inverses
- The makeflat normalizer
- Words and permutations read off the crosses of a BPD
- The bridge to alternating sign matrices
- Lazy enumeration engines deduplicating on the grid contents

Example Usage:
    >>> from bpd import Rothe, all_bpds, bpd2perm
    >>> w = [3, 2, 5, 1, 4]
    >>> bpds = list(all_bpds(w))
    >>> len(bpds), all(bpd2perm(b) == w for b in bpds)
    (3, True)
"""

from __future__ import annotations

# Tiles and the grid value type
from bpd.tiles import (
    BLANK,
    CROSS,
    HORIZONTAL,
    J_ELBOW,
    R_ELBOW,
    VERTICAL,
    Tile,
)
from bpd.grid import BPD
from bpd.errors import InvalidInputError, OutOfBoundsError, PreconditionError

# Seed
from bpd.rothe import Rothe, check_permutation, dominant_part

# Moves
from bpd.moves import (
    Kdroop,
    can_drip,
    can_droop,
    can_flat_drop,
    can_Kdroop,
    can_undroop,
    can_unKdroop,
    drip,
    droop,
    droop_rewrite,
    flat_drop,
    undroop,
    unKdroop,
)

# Normalizer
from bpd.flat import isflat, makeflat

# Pipes, words and permutations
from bpd.pipes import (
    bpd2perm,
    bpd2word,
    countboxes,
    countpipes,
    coxeter_length,
    isreduced,
    istop,
    word2perm,
)

# Alternating sign matrices
from bpd.asm import asm2bpd, bpd2asm, is_asm

# Enumeration
from bpd.enumeration import (
    all_bpds,
    all_drips,
    all_droops,
    all_Kbpds,
    all_Kdroops,
    flat_bpds,
    flat_drops,
    top_bpds,
    top_drops,
)

__all__ = [
    # Tiles
    "Tile",
    "BLANK",
    "CROSS",
    "R_ELBOW",
    "J_ELBOW",
    "VERTICAL",
    "HORIZONTAL",
    # Grid
    "BPD",
    # Errors
    "PreconditionError",
    "InvalidInputError",
    "OutOfBoundsError",
    # Seed
    "Rothe",
    "check_permutation",
    "dominant_part",
    # Moves
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
    # Normalizer
    "isflat",
    "makeflat",
    # Pipes
    "countpipes",
    "istop",
    "bpd2word",
    "word2perm",
    "bpd2perm",
    "coxeter_length",
    "countboxes",
    "isreduced",
    # ASM
    "bpd2asm",
    "asm2bpd",
    "is_asm",
    # Enumeration
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
