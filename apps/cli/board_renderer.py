"""Rendering utilities that draw a board (givens, user entries, error cells, the cell being revealed) onto a 900x900 image. Frames are used by the auto-solve animation."""

# board_renderer.py
# Render a Board to a PIL image. Givens are black, user entries blue, cells
# flagged with has_error get a red fill, the highlighted cell a green one.
from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from types_sudoku import Board, Position

CELL = 100  # 900/9
W = H = 900

BACKGROUND = (255, 255, 255)
GRID_COLOR = (0, 0, 0)
GIVEN_COLOR = (0, 0, 0)
ENTRY_COLOR = (30, 90, 200)
ERROR_FILL = (255, 200, 200)
HIGHLIGHT_FILL = (144, 238, 144)


def cell_rect(r, c, pad=2):
    x0 = c * CELL + pad
    y0 = r * CELL + pad
    x1 = (c + 1) * CELL - pad
    y1 = (r + 1) * CELL - pad
    return (x0, y0, x1, y1)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def draw_grid_lines(d, thin_th=2, heavy_th=5):
    d.rectangle((0, 0, W - 1, H - 1), outline=GRID_COLOR, width=heavy_th)
    for i in range(1, 9):
        th = heavy_th if i % 3 == 0 else thin_th
        d.line([(i * CELL, 0), (i * CELL, H)], fill=GRID_COLOR, width=th)
        d.line([(0, i * CELL), (W, i * CELL)], fill=GRID_COLOR, width=th)


def render_board(board: Board, highlight: Position | None = None, title: str | None = None):
    """Draw the board and return an RGB image of size W x H."""
    im = Image.new("RGB", (W, H), BACKGROUND)
    d = ImageDraw.Draw(im)

    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if highlight == (r, c):
                d.rectangle(cell_rect(r, c), fill=HIGHLIGHT_FILL)
            elif cell["has_error"]:
                d.rectangle(cell_rect(r, c), fill=ERROR_FILL)

    draw_grid_lines(d)

    f = load_font(64)
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell["value"] == 0:
                continue
            x0, y0, x1, y1 = cell_rect(r, c)
            color = GIVEN_COLOR if cell["is_fixed"] else ENTRY_COLOR
            d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(cell["value"]), fill=color, font=f, anchor="mm")

    if title:
        ftitle = load_font(28)
        pad = 10
        tw, th = d.textbbox((0, 0), title, font=ftitle)[2:]
        d.rectangle((pad, pad, pad + tw + 20, pad + th + 20), fill=(0, 0, 0))
        d.text((pad + 10, pad + 10), title, fill=(255, 255, 255), font=ftitle)
    return im


def save_board(board: Board, out_path: str, highlight: Position | None = None) -> str:
    render_board(board, highlight=highlight).save(out_path)
    return out_path
