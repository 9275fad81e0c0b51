# formatting.py
from types_sudoku import Grid

from .solver_core import BOX
from .validator import check_sudoku

BORDER = "+-------+-------+-------+\n"
ILLEGAL = "illegal sudoku"


def sudoku_to_string(grid: Grid, debug: bool = False) -> str:
    """Boxed text rendering of the grid; with ``debug`` an invalid grid renders as 'illegal sudoku'."""
    if debug and not check_sudoku(grid, report_errors=True):
        return ILLEGAL
    out = []
    for i, row in enumerate(grid):
        if i % BOX == 0:
            out.append(BORDER)
        for j, v in enumerate(row):
            if j % BOX == 0:
                out.append("| ")
            out.append("  " if v == 0 else f"{v} ")
        out.append("|\n")
    out.append(BORDER)
    return "".join(out)
