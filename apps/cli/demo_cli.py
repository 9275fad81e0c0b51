"""Demo entry point: solve one of the built-in grids and print the result as JSON."""

# demo_cli.py
# - Picks a built-in grid ('demo', 'blank' or 'unsolvable')
# - Solves a copy with the backtracking solver
# - Prints original, solved grid, and the boxed rendering
#
# Usage:
#   python -m apps.cli.demo_cli --mode demo --log-level DEBUG

import argparse
import json
import logging

from solver.config import load_config
from solver.sudoku_tools import format_tool, solve_tool
from solver.validator import check_sudoku

log = logging.getLogger(__name__)

DEMO = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

# Legal as given, but r1c1 and r1c2 both need a 1 or a 2 that column 2 already holds.
UNSOLVABLE = [
    [0, 0, 3, 4, 5, 6, 7, 8, 9],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
]


def builtin_grid(mode="demo"):
    """Return a fresh copy of the named built-in grid."""
    if mode == "blank":
        return [[0] * 9 for _ in range(9)]
    if mode == "unsolvable":
        return [row[:] for row in UNSOLVABLE]
    return [row[:] for row in DEMO]


def run(mode, cfg):
    original = builtin_grid(mode)
    valid = check_sudoku(original, report_errors=cfg.report_errors)
    result = solve_tool(original)
    if not result["solved"]:
        log.info("no solution for the %s grid", mode)
    rendered = format_tool(result["grid"], debug=cfg.debug_format)
    return {
        "mode": mode,
        "original": original,
        "valid": valid,
        "solved": result["solved"],
        "grid": result["grid"],
        "filled_count": len(result["filled"]),
        "text": rendered["text"],
    }


def main(args):
    cfg = load_config(args.config, log_level=args.log_level)
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    payload = run(args.mode, cfg)
    if args.pretty:
        print(payload["text"])
    else:
        print(json.dumps(payload, indent=cfg.indent))
    return 0 if payload["solved"] else 1


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--mode", type=str, default="demo", choices=["demo", "blank", "unsolvable"])
    ap.add_argument("--config", type=str, default=None, help="YAML file with solver settings")
    ap.add_argument("--log-level", type=str, default=None)
    ap.add_argument("--pretty", action="store_true", help="print only the boxed grid")
    args = ap.parse_args()
    raise SystemExit(main(args))
