"""Core Sudoku utilities: index math, house scans, the placement check and the randomized backtracking solver over raw grids."""

# solver_core.py
# Raw-grid layer of the puzzle engine:
# - cell builder, house scans and 1-based display keys (r1c1 .. r9c9)
# - is_safe: may a digit go in a cell given its row/column/box
# - solve: randomized depth-first backtracking with an explicit choice-point stack
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Positions are 0-based.

import logging
import random

from types_sudoku import Cell, Grid, Position

logger = logging.getLogger(__name__)

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, 10))


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def rc_to_key(r: int, c: int) -> str:
    """Display key for a 0-based position, e.g. (0, 0) -> 'r1c1'."""
    return f"r{r + 1}c{c + 1}"


def make_cell(value: int = 0, is_fixed: bool = False, has_error: bool = False) -> Cell:
    return {"value": value, "is_fixed": is_fixed, "has_error": has_error}


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(r: int, c: int) -> Position:
    return (r // BOX * BOX, c // BOX * BOX)


def unit_cells_box(b: int) -> list[Position]:
    br = (b - 1) // BOX
    bc = (b - 1) % BOX
    return [(BOX * br + i, BOX * bc + j) for i in range(BOX) for j in range(BOX)]


def row_values(grid: Grid, r: int) -> set:
    return set(grid[r]) - {0}


def col_values(grid: Grid, c: int) -> set:
    return {grid[i][c] for i in range(SIZE)} - {0}


def box_values(grid: Grid, r: int, c: int) -> set:
    r0, c0 = box_origin(r, c)
    return {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} - {0}


def is_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    """True iff `digit` is absent from the row, the column and the 3x3 box of (row, col).

    The cell itself is scanned too, so callers check an empty cell.
    """
    return not (
        digit in row_values(grid, row)
        or digit in col_values(grid, col)
        or digit in box_values(grid, row, col)
    )


def find_empty(grid: Grid) -> Position | None:
    """First empty cell in row-major order, or None when the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return (r, c)
    return None


def shuffled_digits(rng=None) -> list[int]:
    nums = list(DIGITS)
    (rng or random).shuffle(nums)
    return nums


def solve(grid: Grid, rng: random.Random | None = None) -> Grid | None:
    """Complete `grid` by randomized depth-first backtracking.

    Each choice point is the first empty cell in row-major order and tries
    digits 1-9 in a freshly shuffled order. The first full completion wins.
    Returns a new solved grid, or None when no completion exists. The input
    grid is never mutated. A grid without empty cells is returned as is
    (copied), without validation.
    """
    g = clone_grid(grid)
    first = find_empty(g)
    if first is None:
        return g

    # frame: [position, candidate order, index of next candidate to try]
    stack = [[first, shuffled_digits(rng), 0]]
    placements = 0
    while stack:
        frame = stack[-1]
        (r, c), digits, i = frame
        g[r][c] = 0
        placed = False
        while i < len(digits):
            d = digits[i]
            i += 1
            if is_safe(g, r, c, d):
                g[r][c] = d
                placed = True
                break
        frame[2] = i
        if not placed:
            stack.pop()
            continue
        placements += 1
        nxt = find_empty(g)
        if nxt is None:
            logger.debug("solved after %d placements", placements)
            return g
        stack.append([nxt, shuffled_digits(rng), 0])

    logger.debug("no solution after %d placements", placements)
    return None
