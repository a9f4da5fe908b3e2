"""Create an animated GIF of the auto-solve reveal: the puzzle, then one solved cell per frame, then the full solution."""

# animate_gif.py
# Build an animated GIF that reveals a generated puzzle's solution cell by cell.
# Usage:
#   python -m apps.cli.animate_gif --difficulty easy --out demo_export/solve.gif \
#     --size 600 --step_ms 120 --start_ms 1000 --end_ms 1500 --seed 7

import argparse
import random
from pathlib import Path

from PIL import Image, ImageOps

from apps.cli.board_renderer import render_board
from solver.generator import DIFFICULTIES, generate_puzzle
from solver.sudoku_tools import iter_reveal, solve_puzzle


def fit(im, size=None):
    if size:
        im = ImageOps.fit(im, (size, size), method=Image.BICUBIC)
    return im


def reveal_frames(board, solution, size=None, step_ms=120, start_ms=800, end_ms=1200):
    """Return (frames, durations) for the reveal of `solution` over `board`."""
    frames = [fit(render_board(board, title="puzzle"), size)]
    durations = [start_ms]
    for pos, snapshot in iter_reveal(board, solution):
        frames.append(fit(render_board(snapshot, highlight=pos), size))
        durations.append(step_ms)
    frames.append(fit(render_board(solution, title="solved"), size))
    durations.append(end_ms)
    return frames, durations


def animate(board, out_path, size=None, step_ms=120, start_ms=800, end_ms=1200, rng=None):
    solution = solve_puzzle(board, rng)
    if solution is None:
        print("Puzzle has no solution from its current state; nothing to animate.")
        return None

    frames, durations = reveal_frames(
        board, solution, size=size, step_ms=step_ms, start_ms=start_ms, end_ms=end_ms
    )
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=0,
        optimize=False,
        disposal=2,
    )
    print(f"Wrote {out_path} with {len(frames)} frames.")
    return out_path


def main():
    """CLI entrypoint. Generates a puzzle at --difficulty, solves it and encodes the reveal into --out."""
    ap = argparse.ArgumentParser()
    ap.add_argument("--difficulty", type=str, default="easy", choices=list(DIFFICULTIES))
    ap.add_argument("--out", type=str, default="demo_export/solve.gif")
    ap.add_argument("--size", type=int, default=600, help="final square size in px")
    ap.add_argument("--step_ms", type=int, default=120)
    ap.add_argument("--start_ms", type=int, default=800)
    ap.add_argument("--end_ms", type=int, default=1500)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()

    rng = random.Random(args.seed)
    board = generate_puzzle(args.difficulty, rng)
    animate(
        board,
        args.out,
        size=args.size,
        step_ms=args.step_ms,
        start_ms=args.start_ms,
        end_ms=args.end_ms,
        rng=rng,
    )


if __name__ == "__main__":
    main()
