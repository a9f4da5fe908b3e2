"""Puzzle generation: seed the diagonal boxes, complete the grid with the backtracking solver, then blank a difficulty-determined number of cells."""

# generator.py
# The three diagonal boxes (0,0), (3,3), (6,6) share no row, column or box,
# so each is filled with an independent permutation before the search runs.
# Removal does not check that the resulting puzzle has a unique solution.

import logging
import random

from types_sudoku import Board, Difficulty, Grid

from .solver_core import BOX, SIZE, empty_grid, make_cell, shuffled_digits, solve

logger = logging.getLogger(__name__)

# Number of cells blanked out of 81 for each difficulty.
DIFFICULTY_REMOVALS: dict[str, int] = {
    "easy": 20,
    "medium": 40,
    "hard": 55,
}

DIFFICULTIES = tuple(DIFFICULTY_REMOVALS)


def removals_for(difficulty: Difficulty) -> int:
    try:
        return DIFFICULTY_REMOVALS[difficulty]
    except KeyError:
        raise ValueError(
            f"unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}"
        ) from None


def fill_diagonal_box(grid: Grid, box_row: int, box_col: int, rng=None) -> None:
    """Write a random permutation of 1-9 into the 3x3 box whose origin is (box_row, box_col)."""
    nums = shuffled_digits(rng)
    idx = 0
    for i in range(BOX):
        for j in range(BOX):
            grid[box_row + i][box_col + j] = nums[idx]
            idx += 1


def generate_complete_grid(rng: random.Random | None = None) -> Grid:
    grid = empty_grid()
    for k in range(0, SIZE, BOX):
        fill_diagonal_box(grid, k, k, rng)
    solved = solve(grid, rng)
    # diagonal seeding never blocks a completion
    assert solved is not None
    return solved


def generate_puzzle_with_solution(
    difficulty: Difficulty = "easy", rng: random.Random | None = None
) -> tuple[Board, Grid]:
    """Generate a playable board together with the solved grid it was carved from."""
    removals = removals_for(difficulty)
    solution = generate_complete_grid(rng)

    positions = [(r, c) for r in range(SIZE) for c in range(SIZE)]
    (rng or random).shuffle(positions)

    board: Board = [[make_cell(v, is_fixed=True) for v in row] for row in solution]
    for r, c in positions[:removals]:
        board[r][c]["value"] = 0
        board[r][c]["is_fixed"] = False

    logger.debug("generated %s puzzle with %d empty cells", difficulty, removals)
    return board, solution


def generate_puzzle(difficulty: Difficulty = "easy", rng: random.Random | None = None) -> Board:
    """Generate a new puzzle. Exactly DIFFICULTY_REMOVALS[difficulty] cells are empty and
    non-fixed; every other cell is a given. A solution exists but need not be unique.
    """
    board, _ = generate_puzzle_with_solution(difficulty, rng)
    return board
