"""Tool-friendly wrappers around the solver: validation issues, candidates, solving and rendering, all returning plain dicts and never mutating their input. Used by the demo CLI and the HTTP API."""

# sudoku_tools.py
from __future__ import annotations
from typing import Dict, List
from types_sudoku import Grid, Violation

from .backtrack import solve_sudoku
from .formatting import sudoku_to_string
from .solver_core import SIZE, clone_grid, compute_candidates, has_shape, rc_to_key
from .validator import check_sudoku, find_violation

def _issue(v:Violation)->Dict:
    issue = dict(v)
    cells = []
    if v.get("row") is not None and v.get("col") is not None:
        cells.append(rc_to_key(v["row"], v["col"]))
    if v.get("other") is not None:
        cells.append(rc_to_key(*v["other"]))
        issue["other"] = list(v["other"])
    issue["cells"] = cells
    return issue

def sanity_check(current:Grid)->Dict:
    """Check the grid and report the first problem found, e.g. {'ok': False, 'issues': [{'kind': 'row', 'cells': ['r1c2','r1c6'], ...}]}."""
    found = find_violation(current)
    issues = [_issue(found)] if found else []
    return {"ok": len(issues)==0, "issues": issues}

def compute_candidates_tool(current:Grid)->Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'r1c2':[1,2,5], ...}. Grids that are not 9x9 get no candidates and a shape issue."""
    if not has_shape(current):
        return {"candidates": {}, "issues": [_issue(find_violation(current))]}
    return {"candidates": compute_candidates(current), "issues": []}

def solve_tool(current:Grid)->Dict:
    """Solve a copy of the grid. Grids that are not 9x9 are turned away before the search starts."""
    if not has_shape(current):
        return {"solved": False, "grid": clone_grid(current), "filled": [],
                "issues": [_issue(find_violation(current))]}
    work = clone_grid(current)
    solved = solve_sudoku(work)
    filled: List[str] = [rc_to_key(r,c) for r in range(SIZE) for c in range(SIZE)
                         if current[r][c]==0 and work[r][c]!=0]
    return {"solved": solved, "grid": work, "filled": filled, "issues": []}

def format_tool(current:Grid, debug:bool=True)->Dict:
    return {"text": sudoku_to_string(current, debug=debug), "ok": check_sudoku(current)}
