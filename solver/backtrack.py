"""Chronological backtracking over the cells in row-major order."""

# backtrack.py
import logging

from types_sudoku import Grid

from .solver_core import SIZE, clone_grid, legal_values, next_cell

log = logging.getLogger(__name__)


def solve_sudoku(grid: Grid) -> bool:
    """Fill in ``grid`` in place with a solution.

    Returns False when there is none, in which case the grid is left exactly
    as it was passed in. The grid is not validated first.
    """
    original = clone_grid(grid)
    solved = fill_cell(original, grid, 0, 0)
    log.debug("solve finished: %s", "solved" if solved else "no solution")
    return solved


def fill_cell(original: Grid, grid: Grid, r: int, c: int) -> bool:
    """Assign the cell at (r, c) and every cell after it.

    ``original`` is the untouched input; only cells blank there are cleared
    again when no candidate works out.
    """
    if r == SIZE:
        return True

    nr, nc = next_cell(r, c)
    if grid[r][c] != 0:
        return fill_cell(original, grid, nr, nc)

    for d in legal_values(grid, r, c):
        grid[r][c] = d
        if fill_cell(original, grid, nr, nc):
            return True

    if original[r][c] == 0:
        grid[r][c] = 0
    return False
