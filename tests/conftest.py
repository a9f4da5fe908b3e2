# tests/conftest.py
import random
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

PUZZLE = [
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


def is_valid_solution(grid):
    """Every row, column and box is a permutation of 1..9."""
    full = set(range(1, 10))
    for i in range(9):
        if set(grid[i]) != full:
            return False
        if {grid[r][i] for r in range(9)} != full:
            return False
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            if {grid[br + i][bc + j] for i in range(3) for j in range(3)} != full:
                return False
    return True


def has_no_duplicates(grid):
    units = [grid[i] for i in range(9)]
    units += [[grid[r][c] for r in range(9)] for c in range(9)]
    units += [
        [grid[br + i][bc + j] for i in range(3) for j in range(3)]
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    ]
    for unit in units:
        vals = [v for v in unit if v != 0]
        if len(vals) != len(set(vals)):
            return False
    return True


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def solved_grid():
    return [row[:] for row in SOLVED]


@pytest.fixture
def puzzle_grid():
    return [row[:] for row in PUZZLE]
