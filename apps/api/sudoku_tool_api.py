# sudoku_tool_api.py
# Optional FastAPI wrapper for the puzzle engine, standing in for a UI front-end.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from solver.generator import generate_puzzle
from solver.sudoku_tools import (
    clear_user_inputs,
    clone_board,
    get_empty_cells,
    is_puzzle_complete,
    is_valid_move,
    place_digit,
    sanity_check,
    solve_puzzle,
)

app = FastAPI(title="Sudoku Puzzle Engine API")


class CellModel(BaseModel):
    value: int = Field(0, ge=0, le=9)
    is_fixed: bool = False
    has_error: bool = False


class BoardModel(BaseModel):
    board: list[list[CellModel]] = Field(..., min_length=9, max_length=9)

    def cells(self):
        return [[cell.model_dump() for cell in row] for row in self.board]


class GenerateRequest(BaseModel):
    difficulty: Literal["easy", "medium", "hard"] = "easy"


class MoveRequest(BoardModel):
    row: int = Field(..., ge=0, le=8)
    col: int = Field(..., ge=0, le=8)
    digit: int = Field(..., ge=1, le=9)


def _check_rows(req: BoardModel):
    # 9 rows are enforced by the model; row width is checked here
    if any(len(row) != 9 for row in req.board):
        raise HTTPException(status_code=422, detail="board must be 9x9")
    return req.cells()


@app.post("/generate")
def api_generate(req: GenerateRequest):
    return {"board": generate_puzzle(req.difficulty)}


@app.post("/is_valid_move")
def api_is_valid_move(req: MoveRequest):
    return {"valid": is_valid_move(_check_rows(req), req.row, req.col, req.digit)}


@app.post("/place_digit")
def api_place_digit(req: MoveRequest):
    return {"board": place_digit(_check_rows(req), req.row, req.col, req.digit)}


@app.post("/is_complete")
def api_is_complete(req: BoardModel):
    return {"complete": is_puzzle_complete(_check_rows(req))}


@app.post("/solve")
def api_solve(req: BoardModel):
    board = _check_rows(req)
    solution = solve_puzzle(board)
    if solution is None:
        raise HTTPException(status_code=404, detail="no solution from the current state")
    return {"board": solution, "reveal": get_empty_cells(board)}


@app.post("/empty_cells")
def api_empty_cells(req: BoardModel):
    return {"cells": get_empty_cells(_check_rows(req))}


@app.post("/clone")
def api_clone(req: BoardModel):
    return {"board": clone_board(_check_rows(req))}


@app.post("/clear_user_inputs")
def api_clear(req: BoardModel):
    return {"board": clear_user_inputs(_check_rows(req))}


@app.post("/sanity_check")
def api_sanity(req: BoardModel):
    return sanity_check(_check_rows(req))
