# types_sudoku.py
from __future__ import annotations

from typing import Optional, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""A (row, col) position, both 0-based."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Violation(TypedDict, total=False):
    """The first rule (or shape) violation found by the validator."""

    kind: str  # 'shape', 'illegal_value', 'row', 'column' or 'box'
    message: str  # human-readable diagnostic
    row: Optional[int]  # 0-based row of the offending cell
    col: Optional[int]  # 0-based column of the offending cell
    value: Optional[int]  # the offending value
    other: Optional[Cell]  # the conflicting peer, for duplicates
    cells: list[str]  # 1-based keys of the cells involved (tool layer only)
