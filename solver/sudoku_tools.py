"""Board-level helpers over cells (value / is_fixed / has_error): move checks, completion, solving, reset and the step-by-step reveal used by the auto-solve animation. Every function returns a new board and leaves its input untouched."""

# sudoku_tools.py
from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from types_sudoku import Board, Grid, Issue, Position

from .solver_core import (
    BOX,
    SIZE,
    box_origin,
    in_bounds,
    make_cell,
    rc_to_key,
    solve,
    unit_cells_box,
)

logger = logging.getLogger(__name__)


def board_from_grid(grid: Grid, fixed: Grid | None = None) -> Board:
    """Wrap a raw grid as cells. Without `fixed`, every non-zero digit becomes a given."""
    return [
        [
            make_cell(v, bool(fixed[r][c]) if fixed is not None else v != 0)
            for c, v in enumerate(row)
        ]
        for r, row in enumerate(grid)
    ]


def board_to_grid(board: Board) -> Grid:
    return [[cell["value"] for cell in row] for row in board]


def clone_board(board: Board) -> Board:
    return [[dict(cell) for cell in row] for row in board]


def is_valid_move(board: Board, row: int, col: int, digit: int) -> bool:
    """True iff `digit` does not occur elsewhere in the row, column or box of (row, col).

    The cell's own position is skipped, so re-checking a cell against its
    current content never reports a conflict.
    """
    assert in_bounds(row, col), f"position out of range: ({row}, {col})"
    for x in range(SIZE):
        if x != col and board[row][x]["value"] == digit:
            return False
    for x in range(SIZE):
        if x != row and board[x][col]["value"] == digit:
            return False
    r0, c0 = box_origin(row, col)
    for i in range(BOX):
        for j in range(BOX):
            r, c = r0 + i, c0 + j
            if (r, c) != (row, col) and board[r][c]["value"] == digit:
                return False
    return True


def is_puzzle_complete(board: Board) -> bool:
    for row in board:
        for cell in row:
            if cell["value"] == 0 or cell["has_error"]:
                return False
    return True


def get_empty_cells(board: Board) -> list[Position]:
    """Non-fixed empty positions in row-major order (the auto-solve reveal order)."""
    return [
        (r, c)
        for r in range(SIZE)
        for c in range(SIZE)
        if not board[r][c]["is_fixed"] and board[r][c]["value"] == 0
    ]


def clear_user_inputs(board: Board) -> Board:
    """Reset every non-fixed cell to empty and clear all error flags. Givens are kept."""
    return [
        [
            {**cell, "value": cell["value"] if cell["is_fixed"] else 0, "has_error": False}
            for cell in row
        ]
        for row in board
    ]


def place_digit(board: Board, row: int, col: int, digit: int) -> Board:
    """Write a user digit and flag it when it clashes with a peer. Givens are left alone."""
    assert in_bounds(row, col), f"position out of range: ({row}, {col})"
    new_board = clone_board(board)
    cell = new_board[row][col]
    if cell["is_fixed"]:
        return new_board
    cell["value"] = digit
    cell["has_error"] = not is_valid_move(new_board, row, col, digit)
    return new_board


def erase_digit(board: Board, row: int, col: int) -> Board:
    assert in_bounds(row, col), f"position out of range: ({row}, {col})"
    new_board = clone_board(board)
    cell = new_board[row][col]
    if not cell["is_fixed"]:
        cell["value"] = 0
        cell["has_error"] = False
    return new_board


def clear_error(board: Board, row: int, col: int) -> Board:
    """Drop the transient error flag of one cell. Scheduling this is up to the caller."""
    assert in_bounds(row, col), f"position out of range: ({row}, {col})"
    new_board = clone_board(board)
    new_board[row][col]["has_error"] = False
    return new_board


def sanity_check(board: Board) -> dict:
    """Report digits repeated inside a row, column or box. Returns {'ok': bool, 'issues': [...]}."""
    current = board_to_grid(board)
    issues: list[Issue] = []

    def duplicates_in_unit(vals):
        seen = set()
        dups = set()
        for v in vals:
            if v == 0:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        return dups

    def report(unit, positions):
        vals = [current[r][c] for r, c in positions]
        dups = duplicates_in_unit(vals)
        if dups:
            issues.append(
                {
                    "type": "duplicate",
                    "unit": unit,
                    "digits": sorted(dups),
                    "cells": [rc_to_key(r, c) for r, c in positions if current[r][c] in dups],
                }
            )

    # rows
    for r in range(SIZE):
        report(f"r{r + 1}", [(r, c) for c in range(SIZE)])
    # cols
    for c in range(SIZE):
        report(f"c{c + 1}", [(r, c) for r in range(SIZE)])
    # boxes
    for b in range(1, SIZE + 1):
        report(f"b{b}", unit_cells_box(b))
    return {"ok": len(issues) == 0, "issues": issues}


def solve_puzzle(board: Board, rng: random.Random | None = None) -> Board | None:
    """Complete the board, keeping every cell's is_fixed flag and clearing has_error.

    Returns None when the current entries admit no valid completion, including
    when filled cells already repeat a digit within a row, column or box.
    """
    check = sanity_check(board)
    if not check["ok"]:
        logger.debug("board is inconsistent: %d issue(s)", len(check["issues"]))
        return None
    solved = solve(board_to_grid(board), rng)
    if solved is None:
        return None
    return [
        [make_cell(value, board[r][c]["is_fixed"]) for c, value in enumerate(row)]
        for r, row in enumerate(solved)
    ]


def iter_reveal(board: Board, solution: Board) -> Iterator[tuple[Position, Board]]:
    """Yield (position, snapshot) once per empty cell, each snapshot revealing one more
    solved value than the last. Pacing and cancellation belong to the caller: stop
    iterating to abandon the reveal.
    """
    current = board
    for r, c in get_empty_cells(board):
        current = clone_board(current)
        current[r][c]["value"] = solution[r][c]["value"]
        yield (r, c), current
