"""Terminal rendering of simulation grids using ANSI background colours."""

import sys

CLEAR_SCREEN = "\033[2J"
REPLACE_CURSOR = "\033[H"
RESET = "\033[0m"

BLACK_BG = "\033[40m"
RED_BG = "\033[41m"
GREEN_BG = "\033[42m"
YELLOW_BG = "\033[43m"
BLUE_BG = "\033[44m"
MAGENTA_BG = "\033[45m"
CYAN_BG = "\033[46m"
WHITE_BG = "\033[47m"

_CELL_COLOURS = {
    "A": BLACK_BG,
    "O": BLUE_BG,
    "T": MAGENTA_BG,
}


def _cell(character):
    return f"{_CELL_COLOURS.get(character, GREEN_BG)} {RESET}"


def render(grid):
    """Return the coloured text for a grid, one line per row."""
    return "".join("".join(_cell(c) for c in row) + "\n" for row in grid)


def colorful_display(grid, out=None):
    """Write the coloured rendering of a grid to ``out`` (stdout by default)."""
    stream = sys.stdout if out is None else out
    stream.write(render(grid))
    stream.flush()