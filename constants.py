"""
Global constants used throughout the project
"""
from typing import Final

from utils.io.tui import bg_color_24b


# ASCII codes accepted by BPD.from_symbols, indexed by tile code
SYMBOLS: Final[dict[str, int]] = {
    "O": 0,  # blank
    "+": 1,  # cross
    "/": 2,  # r-elbow
    "%": 3,  # j-elbow
    "|": 4,  # vertical
    "-": 5,  # horizontal
}

# Two characters per tile so that horizontal pipes join up when printed
GLYPHS: Final[dict[int, str]] = {
    0: "\u25A1 ",  # blank
    1: "\u253C\u2500",  # cross
    2: "\u256D\u2500",  # r-elbow
    3: "\u256F ",  # j-elbow
    4: "\u2502 ",  # vertical
    5: "\u2500\u2500",  # horizontal
}

# Highlights for annotated cells (label, highlight)
HIGHLIGHTS: Final[dict[int, str]] = {
    0: "",  # no highlight
    1: bg_color_24b(30, 147, 255),  # Blue (#1E93FF)
    2: bg_color_24b(249, 60, 49),  # Red (#F93C31)
    3: bg_color_24b(79, 204, 48),  # Green (#4FCC30)
    4: bg_color_24b(255, 220, 0),  # Yellow (#FFDC00)
}
