"""End-to-end demo of the engine: generate a puzzle, solve it, and print a JSON payload with the board, the solution and the reveal order."""

# demo_cli.py
# - Generates a puzzle at the requested difficulty
# - Solves it and lists the cells an animated reveal would fill, in order
# - Optionally saves PNG renders of the puzzle and the solution
#
# Usage:
#   python -m apps.cli.demo_cli --difficulty medium --seed 123 --out demo_export

import argparse
import json
import random
from pathlib import Path

from apps.cli.board_renderer import save_board
from solver.generator import DIFFICULTIES, DIFFICULTY_REMOVALS, generate_puzzle
from solver.sudoku_tools import board_to_grid, get_empty_cells, is_puzzle_complete, solve_puzzle


def build_payload(difficulty, seed=None):
    rng = random.Random(seed)
    board = generate_puzzle(difficulty, rng)
    solution = solve_puzzle(board, rng)
    return board, solution, {
        "difficulty": difficulty,
        "removals": DIFFICULTY_REMOVALS[difficulty],
        "puzzle": board_to_grid(board),
        "solution": board_to_grid(solution) if solution else None,
        "complete": bool(solution) and is_puzzle_complete(solution),
        "reveal": get_empty_cells(board),
    }


def main(args):
    board, solution, payload = build_payload(args.difficulty, args.seed)
    if args.out:
        export_dir = Path(args.out)
        export_dir.mkdir(parents=True, exist_ok=True)
        payload["puzzle_png"] = save_board(board, str(export_dir / "puzzle.png"))
        if solution:
            payload["solution_png"] = save_board(solution, str(export_dir / "solution.png"))
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--difficulty", type=str, default="easy", choices=list(DIFFICULTIES))
    ap.add_argument("--out", type=str, default=None)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()
    main(args)
