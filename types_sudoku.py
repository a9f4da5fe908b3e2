# types_sudoku.py
from __future__ import annotations

from typing import Literal, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Position = tuple[int, int]
"""A 0-based (row, col) coordinate."""

Difficulty = Literal["easy", "medium", "hard"]
"""Named tier controlling how many cells are blanked from a solved grid."""


class Cell(TypedDict):
    """One square of a playable board."""

    value: int  # 0 means empty
    is_fixed: bool  # True for givens, never changes after generation
    has_error: bool  # transient UI feedback, set and cleared by the caller


Board = list[list[Cell]]
"""A 9x9 board of cells. Treated as a value: operations return new boards."""


class Issue(TypedDict, total=False):
    """A consistency problem found on a board (see sanity_check)."""

    type: str  # 'duplicate'
    unit: str  # e.g. 'r4', 'c7', 'b5'
    digits: list[int]  # the repeated digits
    cells: list[str]  # offending cells (e.g. 'r4c7')
