# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG


@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    screen_w: int
    screen_h: int
    total_w: int
    total_h: int


def compute_dims(board_width=None, board_height=None) -> Dims:
    """Glyph screen is 2W+2 columns by H+2 rows; one glyph column is cell//2 px wide."""
    width = CONFIG["BOARD_WIDTH"] if board_width is None else board_width
    height = CONFIG["BOARD_HEIGHT"] if board_height is None else board_height
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16

    cols = width * 2 + 2
    rows = height + 2

    screen_w = cols * (cell // 2)
    screen_h = rows * cell

    return Dims(
        cols=cols, rows=rows, cell=cell, margin=margin,
        screen_w=screen_w, screen_h=screen_h,
        total_w=margin + screen_w + margin,
        total_h=margin + screen_h + margin,
    )
