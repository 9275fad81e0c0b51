# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI
from pydantic import BaseModel
from typing import List

from solver.sudoku_tools import sanity_check, compute_candidates_tool, solve_tool, format_tool

app = FastAPI(title="Sudoku Backtracking Solver API")

class GridModel(BaseModel):
    grid: List[List[int]]

class FormatRequest(BaseModel):
    grid: List[List[int]]
    debug: bool = True

@app.post("/sanity_check")
def api_sanity(payload: GridModel):
    return sanity_check(payload.grid)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)

@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid)

@app.post("/format")
def api_format(req: FormatRequest):
    return format_tool(req.grid, debug=req.debug)
