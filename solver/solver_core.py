"""Core Sudoku utilities shared by the solver and validator: index math, cell keys, grid copies and candidate computation."""

# solver_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Rows and columns are 0-based here; cell keys ("r1c1") are 1-based for display.

from types_sudoku import Candidates, Cell, Grid

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def clone_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def box_origin(r: int, c: int) -> Cell:
    return (r // BOX * BOX, c // BOX * BOX)


def next_cell(r: int, c: int) -> Cell:
    """Row-major successor of (r, c); (9, 0) follows the last cell."""
    nc = (c + 1) % SIZE
    nr = r + 1 if nc == 0 else r
    return (nr, nc)


def has_shape(grid: Grid) -> bool:
    return len(grid) == SIZE and all(len(row) == SIZE for row in grid)


def legal_values(grid: Grid, r: int, c: int) -> list[int]:
    """Digits that appear nowhere in the row, column or 3x3 box of (r, c), ascending.

    The target cell takes part in the comparison; it is expected to be blank,
    so it never matches a digit.
    """
    r0, c0 = box_origin(r, c)
    opts = []
    for d in DIGITS:
        ok = True
        for j in range(SIZE):
            if (
                grid[r][j] == d
                or grid[j][c] == d
                or grid[r0 + j % BOX][c0 + j // BOX] == d
            ):
                ok = False
                break
        if ok:
            opts.append(d)
    return opts


def compute_candidates(grid: Grid) -> Candidates:
    cand = {}
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                cand[rc_to_key(r, c)] = legal_values(grid, r, c)
    return cand
