# tests/test_render.py
import json
import random
import subprocess
import sys

from PIL import Image

import apps.cli.board_renderer as board_renderer
import solver.sudoku_tools as sudoku_tools
from conftest import ROOT
from apps.cli.animate_gif import animate, reveal_frames
from apps.cli.board_renderer import H, W, render_board, save_board
from apps.cli.demo_cli import build_payload
from solver.generator import generate_puzzle
from solver.sudoku_tools import board_from_grid, get_empty_cells, place_digit, solve_puzzle


def test_render_board_size_and_colors(puzzle_grid):
    board = place_digit(board_from_grid(puzzle_grid), 0, 2, 5)
    im = render_board(board, highlight=(8, 0))
    assert im.size == (W, H)
    assert im.mode == "RGB"
    # corner pixel of the error cell is tinted, an untouched empty cell stays white
    assert im.getpixel((2 * 100 + 10, 10)) == (255, 200, 200)
    assert im.getpixel((8 * 100 + 10, 2 * 100 + 10)) == (255, 255, 255)
    assert im.getpixel((10, 8 * 100 + 10)) == (144, 238, 144)


def test_save_board(tmp_path, puzzle_grid):
    out = save_board(board_from_grid(puzzle_grid), str(tmp_path / "board.png"))
    with Image.open(out) as im:
        assert im.size == (W, H)


def test_reveal_frames_count():
    rng = random.Random(11)
    board = generate_puzzle("easy", rng)
    solution = solve_puzzle(board, rng)
    frames, durations = reveal_frames(board, solution, size=90, step_ms=50)
    assert len(frames) == len(get_empty_cells(board)) + 2
    assert len(durations) == len(frames)
    assert durations[1:-1] == [50] * 20
    assert frames[0].size == (90, 90)


def test_animate_writes_gif(tmp_path):
    rng = random.Random(3)
    board = generate_puzzle("easy", rng)
    out = animate(board, str(tmp_path / "gif" / "solve.gif"), size=90, rng=rng)
    assert out is not None
    with Image.open(out) as im:
        assert im.n_frames >= 2


def test_animate_skips_unsolvable(tmp_path, puzzle_grid):
    board = place_digit(board_from_grid(puzzle_grid), 0, 2, 5)
    assert animate(board, str(tmp_path / "x.gif")) is None
    assert not (tmp_path / "x.gif").exists()


def test_demo_payload():
    _, solution, payload = build_payload("medium", seed=5)
    assert solution is not None
    assert payload["removals"] == 40
    assert payload["complete"] is True
    assert len(payload["reveal"]) == 40
    assert sum(v == 0 for row in payload["puzzle"] for v in row) == 40


def test_modules_carry_docstrings():
    assert board_renderer.__doc__ and "900x900" in board_renderer.__doc__
    assert sudoku_tools.__doc__ and "Board-level" in sudoku_tools.__doc__


def test_demo_cli_runs_as_module():
    res = subprocess.run(
        [sys.executable, "-m", "apps.cli.demo_cli", "--difficulty", "easy", "--seed", "4"],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=True,
    )
    payload = json.loads(res.stdout)
    assert payload["removals"] == 20
    assert payload["complete"] is True
