"""
Terminal rendering of BPDs and annotated grids.

A grid cell is either a tile code, drawn with its unicode glyph, or an
annotated cell (label, highlight): the label is drawn over the background
colour of the highlight (0 for none, see constants.HIGHLIGHTS).

Functions:
    format_cell(cell)   - Two-character rendering of one cell
    format_grid(grid)   - Multi-line rendering of a BPD or an annotated grid
    print_grid(grid)    - Print a grid
    print_bpds(bpds)    - Print a sequence of BPDs, numbered
"""

from collections.abc import Iterable

from bpd.grid import BPD
from constants import GLYPHS, HIGHLIGHTS
from localtypes import AnnotatedGrid, TileLike
from utils.io.tui import FALLBACK_BG, highlighted, supports_true_color


def _background(highlight: int) -> str:
    if highlight not in HIGHLIGHTS:
        raise ValueError(
            f"Unknown highlight {highlight}, expected one of {sorted(HIGHLIGHTS)}"
        )
    if highlight == 0 or supports_true_color():
        return HIGHLIGHTS[highlight]
    return FALLBACK_BG[highlight]


def format_cell(cell: TileLike) -> str:
    if isinstance(cell, tuple):
        label, highlight = cell
        return highlighted(f"{label:<2.2}", _background(highlight))
    return GLYPHS[int(cell)]


def format_grid(grid: BPD | AnnotatedGrid) -> str:
    rows = grid.mtx.tolist() if isinstance(grid, BPD) else grid
    return "\n".join(" " + "".join(format_cell(cell) for cell in row) for row in rows)


def print_grid(grid: BPD | AnnotatedGrid):
    print(format_grid(grid))


def print_bpds(bpds: Iterable[BPD]):
    for i, b in enumerate(bpds):
        print(f"BPD n°{i}")
        print_grid(b)
        print()
