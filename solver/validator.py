"""Rule checking for 9x9 grids: shape, value range, and row/column/box uniqueness. Blank cells are ignored."""

# validator.py
import logging
from typing import Optional

from types_sudoku import Grid, Violation

from .solver_core import BOX, SIZE, box_origin

log = logging.getLogger(__name__)


def _violation(kind: str, message: str, row=None, col=None, value=None, other=None) -> Violation:
    return {"kind": kind, "message": message, "row": row, "col": col, "value": value, "other": other}


def _shape_violation(grid: Grid) -> Optional[Violation]:
    if len(grid) != SIZE:
        return _violation("shape", f"sudoku has {len(grid)} rows, should have {SIZE}")
    for i, row in enumerate(grid):
        if len(row) != SIZE:
            return _violation(
                "shape", f"sudoku row {i} has {len(row)} cells, should have {SIZE}", row=i
            )
    return None


def _cell_violation(grid: Grid, i: int, j: int) -> Optional[Violation]:
    cell = grid[i][j]
    if cell < 1 or cell > SIZE:
        return _violation(
            "illegal_value", f"sudoku row {i} column {j} has illegal value {cell}", i, j, cell
        )
    # same row
    for m in range(SIZE):
        if m != j and grid[i][m] == cell:
            return _violation(
                "row", f"sudoku row {i} has {cell} at both positions {j} and {m}", i, j, cell, (i, m)
            )
    # same column
    for k in range(SIZE):
        if k != i and grid[k][j] == cell:
            return _violation(
                "column", f"sudoku column {j} has {cell} at both positions {i} and {k}", i, j, cell, (k, j)
            )
    # same box; positions sharing the row or column were covered above
    r0, c0 = box_origin(i, j)
    for k in range(BOX):
        for m in range(BOX):
            tr, tc = r0 + k, c0 + m
            if tr != i and tc != j and grid[tr][tc] == cell:
                return _violation(
                    "box",
                    f"sudoku character {cell} at row {i}, column {j} "
                    f"matches character at row {tr}, column {tc}",
                    i, j, cell, (tr, tc),
                )
    return None


def find_violation(grid: Grid) -> Optional[Violation]:
    """Return the first violation in row-major order, or None for a legal grid.

    A shape problem is reported before any cell is looked at.
    """
    found = _shape_violation(grid)
    if found:
        return found
    for i in range(SIZE):
        for j in range(SIZE):
            if grid[i][j] == 0:
                continue  # blanks are always OK
            found = _cell_violation(grid, i, j)
            if found:
                return found
    return None


def check_sudoku(grid: Grid, report_errors: bool = False) -> bool:
    """True if the grid obeys every Sudoku rule (blanks are not checked).

    With ``report_errors`` the first problem found is logged as a warning.
    """
    found = find_violation(grid)
    if found is None:
        return True
    if report_errors:
        log.warning("%s", found["message"])
    return False
